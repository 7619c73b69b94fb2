"""Authorized OAuth2 client handle for gauthmgr."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from gauthmgr.errors import AuthError, TokenMalformedError
from gauthmgr.models import (
    DEFAULT_AUTH_URI,
    DEFAULT_TOKEN_URI,
    ClientConfig,
    ClientKind,
    TokenConfig,
)
from gauthmgr.util.time import from_epoch_millis, parse_rfc3339, to_naive_utc


class OAuth2Client:
    """
    Client identity plus the user token attached to it.

    The handle is shared: the attached token may be replaced by
    set_credentials(), callers must not assume exclusive ownership of it.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        *,
        kind: ClientKind = "web",
        auth_uri: str = DEFAULT_AUTH_URI,
        token_uri: str = DEFAULT_TOKEN_URI,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri
        self._kind = kind
        self._auth_uri = auth_uri
        self._token_uri = token_uri
        self._credentials: Optional[TokenConfig] = None

    @classmethod
    def from_client_config(cls, config: ClientConfig) -> "OAuth2Client":
        """Create a client for the first redirect URI of config."""
        return cls(
            config.client_id,
            config.client_secret,
            config.redirect_uri,
            kind=config.kind,
            auth_uri=config.auth_uri,
            token_uri=config.token_uri,
        )

    @property
    def kind(self) -> ClientKind:
        """Client section the handle was loaded from ("web" or "installed")."""
        return self._kind

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def client_secret(self) -> str:
        return self._client_secret

    @property
    def redirect_uri(self) -> str:
        return self._redirect_uri

    @property
    def auth_uri(self) -> str:
        return self._auth_uri

    @property
    def token_uri(self) -> str:
        return self._token_uri

    def client_config(self) -> ClientConfig:
        """The client registration as used by this handle (single redirect URI)."""
        return ClientConfig(
            kind=self._kind,
            client_id=self._client_id,
            client_secret=self._client_secret,
            redirect_uris=(self._redirect_uri,),
            auth_uri=self._auth_uri,
            token_uri=self._token_uri,
        )

    @property
    def credentials(self) -> Optional[TokenConfig]:
        """The attached token, or None when no token has been set."""
        return self._credentials

    def set_credentials(self, token: TokenConfig) -> None:
        """Attach a previously obtained token (opaque JSON object)."""
        if not isinstance(token, dict):
            raise TokenMalformedError("token must be a JSON object (dict)")
        self._credentials = token

    def __repr__(self) -> str:
        return (
            f"OAuth2Client(client_id={self._client_id!r}, "
            f"redirect_uri={self._redirect_uri!r}, "
            f"has_token={self._credentials is not None})"
        )

    # ----------------------------
    # Google library bridges
    # ----------------------------
    def to_google_credentials(self, scopes: Optional[Sequence[str]] = None):
        """
        Convert the attached token into google-auth credentials.

        Both token layouts are understood:
            - Node style: access_token, refresh_token, scope, expiry_date (ms)
            - Python style: token, refresh_token, scopes, expiry (RFC3339)

        Args:
            scopes: Override the scopes recorded in the token.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: if no token is attached or it cannot be converted.
        """
        if self._credentials is None:
            raise AuthError("No token attached. Set GOOGLE_TOKEN or call set_credentials().")

        try:
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        token = self._credentials
        use_scopes = list(scopes) if scopes is not None else _token_scopes(token)

        try:
            expiry = _token_expiry(token)
        except (TypeError, ValueError) as exc:
            raise AuthError(
                "Failed to read token expiry",
                details={"keys": sorted(token.keys())},
                cause=exc,
            ) from exc

        return Credentials(
            token=token.get("access_token") or token.get("token"),
            refresh_token=token.get("refresh_token"),
            id_token=token.get("id_token"),
            token_uri=token.get("token_uri") or self._token_uri,
            client_id=self._client_id,
            client_secret=self._client_secret,
            scopes=use_scopes,
            expiry=expiry,
        )

    def authorization_url(self, scopes: Sequence[str], **kwargs: Any) -> tuple[str, str]:
        """
        Build the consent-screen URL for a fresh authorization.

        Only the URL is produced; exchanging the returned code is left to the
        caller (google_auth_oauthlib Flow.fetch_token).

        Returns:
            (url, state)
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise AuthError("scopes must be a non-empty sequence of strings")

        try:
            from google_auth_oauthlib.flow import Flow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-auth-oauthlib is not available",
                details={"hint": "Install google-auth-oauthlib"},
                cause=exc,
            ) from exc

        kwargs.setdefault("access_type", "offline")
        kwargs.setdefault("prompt", "consent")

        flow = Flow.from_client_config(
            self.client_config().to_client_config(),
            scopes=list(scopes),
            redirect_uri=self._redirect_uri,
        )
        return flow.authorization_url(**kwargs)

    def build_service(
        self,
        service_name: str,
        version: str,
        scopes: Optional[Sequence[str]] = None,
    ):
        """
        Build a Google API service resource authorized with the attached token.

        Returns:
            googleapiclient.discovery.Resource
        """
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        creds = self.to_google_credentials(scopes=scopes)
        try:
            return build(service_name, version, credentials=creds, cache_discovery=False)
        except Exception as exc:
            raise AuthError(
                "Failed to build Google API service",
                details={"service": service_name, "version": version},
                cause=exc,
            ) from exc


def _token_scopes(token: TokenConfig) -> Optional[list[str]]:
    scopes = token.get("scopes")
    if isinstance(scopes, list):
        return [str(s) for s in scopes]
    scope = token.get("scope")
    if isinstance(scope, str) and scope.strip():
        return scope.split()
    return None


def _token_expiry(token: TokenConfig):
    if token.get("expiry_date") is not None:
        return to_naive_utc(from_epoch_millis(token["expiry_date"]))
    if token.get("expiry"):
        return to_naive_utc(parse_rfc3339(token["expiry"]))
    return None
