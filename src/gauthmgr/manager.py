"""CredentialManager: loads Google OAuth credentials from the environment."""

from __future__ import annotations

import logging
import os
import threading
from typing import Mapping, Optional

from gauthmgr.auth import AuthInfo, OAuth2Client
from gauthmgr.errors import (
    ConfigMalformedError,
    ConfigMissingError,
    GAuthMgrError,
    NotInitializedError,
    TokenMalformedError,
)
from gauthmgr.models import ClientConfig
from gauthmgr.util.encoding import decode_base64_json

logger = logging.getLogger(__name__)


class CredentialManager:
    """
    Owns the application's authorized OAuth2 client.

    Construct one instance at startup and pass it to the code that calls
    Google APIs. initialize() is serialized; readers of the handle see either
    the previous client, no client, or the fully built new one.
    """

    def __init__(
        self,
        auth_info: Optional[AuthInfo] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._auth_info = auth_info or AuthInfo()
        self._environ = environ
        self._client: Optional[OAuth2Client] = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def initialize(self) -> OAuth2Client:
        """
        Read, decode and validate credentials and publish a new client.

        Any failure leaves the manager not initialized.

        Raises:
            ConfigMissingError: credentials variable not set.
            ConfigMalformedError: credentials are not base64 JSON.
            ConfigInvalidShapeError: neither 'web' nor 'installed' present.
            ConfigIncompleteError: client_id/client_secret/redirect_uris missing.
            TokenMalformedError: token is set but not a base64 JSON object.
        """
        with self._lock:
            try:
                client = self._build_client()
            except GAuthMgrError as exc:
                self._client = None
                logger.error("Error loading Google credentials: %s", exc)
                raise
            self._client = client

        logger.info(
            "Google OAuth client initialized (kind=%s, token=%s)",
            client.kind,
            "attached" if client.credentials is not None else "absent",
        )
        return client

    def get_authorized_client(self) -> OAuth2Client:
        """Return the shared client. Requires a successful initialize() first."""
        client = self._client
        if client is None:
            raise NotInitializedError("OAuth2 client not initialized. Call initialize() first.")
        return client

    def _build_client(self) -> OAuth2Client:
        environ = self._environ if self._environ is not None else os.environ
        cred_var = self._auth_info.credentials_var
        token_var = self._auth_info.token_var

        encoded = (environ.get(cred_var) or "").strip()
        if not encoded:
            raise ConfigMissingError(
                f"{cred_var} environment variable is not set",
                details={"variable": cred_var},
            )

        try:
            data = decode_base64_json(encoded)
        except ValueError as exc:
            raise ConfigMalformedError(
                f"{cred_var} is not base64-encoded JSON",
                details={"variable": cred_var},
                cause=exc,
            ) from exc

        config = ClientConfig.from_dict(data)
        client = OAuth2Client.from_client_config(config)

        encoded_token = (environ.get(token_var) or "").strip()
        if encoded_token:
            try:
                token = decode_base64_json(encoded_token)
            except ValueError as exc:
                raise TokenMalformedError(
                    f"Error parsing token from {token_var}",
                    details={"variable": token_var},
                    cause=exc,
                ) from exc
            if not isinstance(token, dict):
                raise TokenMalformedError(
                    f"{token_var} must decode to a JSON object",
                    details={"variable": token_var, "type": type(token).__name__},
                )
            client.set_credentials(token)

        return client
