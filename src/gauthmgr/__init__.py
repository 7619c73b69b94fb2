"""gauthmgr public API."""

from __future__ import annotations

from gauthmgr.auth import AuthInfo, OAuth2Client
from gauthmgr.errors import (
    AuthError,
    ConfigError,
    ConfigIncompleteError,
    ConfigInvalidShapeError,
    ConfigMalformedError,
    ConfigMissingError,
    GAuthMgrError,
    NotInitializedError,
    TokenMalformedError,
)
from gauthmgr.manager import CredentialManager
from gauthmgr.models import ClientConfig, TokenConfig

__all__ = [
    # High-level
    "CredentialManager",
    # Auth
    "AuthInfo",
    "OAuth2Client",
    # Models
    "ClientConfig",
    "TokenConfig",
    # Errors
    "GAuthMgrError",
    "ConfigError",
    "ConfigMissingError",
    "ConfigMalformedError",
    "ConfigInvalidShapeError",
    "ConfigIncompleteError",
    "TokenMalformedError",
    "NotInitializedError",
    "AuthError",
]
