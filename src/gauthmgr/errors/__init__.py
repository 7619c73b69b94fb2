"""Public error exports for gauthmgr."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
