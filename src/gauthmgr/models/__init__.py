"""Public model exports for gauthmgr."""

from __future__ import annotations

from .client_config import (
    DEFAULT_AUTH_URI,
    DEFAULT_TOKEN_URI,
    ClientConfig,
    ClientKind,
    TokenConfig,
)

__all__ = [
    "ClientConfig",
    "ClientKind",
    "TokenConfig",
    "DEFAULT_AUTH_URI",
    "DEFAULT_TOKEN_URI",
]
