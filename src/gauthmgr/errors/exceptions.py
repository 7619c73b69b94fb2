"""Exception hierarchy for gauthmgr."""

from __future__ import annotations

from typing import Any, Optional


class GAuthMgrError(Exception):
    """
    Base exception for gauthmgr.

    Attributes:
        details: Optional structured information (e.g., variable name, keys).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigError(GAuthMgrError):
    """Base for problems with the client credentials configuration."""


class ConfigMissingError(ConfigError):
    """Raised when the credentials environment variable is not set."""


class ConfigMalformedError(ConfigError):
    """Raised when the credentials value is not base64-encoded JSON."""


class ConfigInvalidShapeError(ConfigError):
    """Raised when the credentials contain neither 'web' nor 'installed'."""


class ConfigIncompleteError(ConfigError):
    """Raised when client_id, client_secret or redirect_uris is missing."""


class TokenMalformedError(GAuthMgrError):
    """Raised when the token value is not a base64-encoded JSON object."""


class NotInitializedError(GAuthMgrError):
    """Raised when the authorized client is requested before initialize()."""


class AuthError(GAuthMgrError):
    """Raised when the Google auth libraries fail or are unavailable."""
