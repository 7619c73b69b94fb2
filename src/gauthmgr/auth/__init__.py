"""Public auth exports for gauthmgr."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import OAuth2Client

__all__ = ["AuthInfo", "OAuth2Client"]
