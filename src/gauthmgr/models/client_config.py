"""Data model for OAuth client credentials (client_secret.json layout)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from gauthmgr.errors import ConfigIncompleteError, ConfigInvalidShapeError

ClientKind = Literal["web", "installed"]

# Opaque token payload, passed through to google-auth unvalidated.
TokenConfig = dict[str, Any]

DEFAULT_AUTH_URI: str = "https://accounts.google.com/o/oauth2/auth"
DEFAULT_TOKEN_URI: str = "https://oauth2.googleapis.com/token"

_KINDS: tuple[ClientKind, ...] = ("web", "installed")


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """
    OAuth client registration issued by Google.

    Notes:
        - Exactly one of the "web"/"installed" sections is used; "web" wins
          when both are present.
        - Only the first redirect URI is used by the authorized client.
    """

    kind: ClientKind
    client_id: str
    client_secret: str
    redirect_uris: tuple[str, ...]
    auth_uri: str = DEFAULT_AUTH_URI
    token_uri: str = DEFAULT_TOKEN_URI

    @property
    def redirect_uri(self) -> str:
        return self.redirect_uris[0]

    @classmethod
    def from_dict(cls, data: Any) -> "ClientConfig":
        """
        Build a ClientConfig from decoded credentials JSON.

        Raises:
            ConfigInvalidShapeError: if neither "web" nor "installed" is present.
            ConfigIncompleteError: if a required field is missing or empty.
        """
        received = list(data.keys()) if isinstance(data, dict) else []

        kind: ClientKind | None = None
        section: Any = None
        for candidate in _KINDS:
            if isinstance(data, dict) and data.get(candidate):
                kind, section = candidate, data[candidate]
                break

        if kind is None or not isinstance(section, dict):
            raise ConfigInvalidShapeError(
                "Invalid credentials format: credentials must contain either "
                "'web' or 'installed' configuration. "
                f"Received keys: {', '.join(received)}",
                details={"received_keys": received},
            )

        client_id = section.get("client_id")
        client_secret = section.get("client_secret")
        redirect_uris = section.get("redirect_uris")

        missing = [
            name
            for name, value in (("client_id", client_id), ("client_secret", client_secret))
            if not isinstance(value, str) or not value
        ]
        if (
            not isinstance(redirect_uris, (list, tuple))
            or not redirect_uris
            or not all(isinstance(u, str) and u for u in redirect_uris)
        ):
            missing.append("redirect_uris")

        if missing:
            raise ConfigIncompleteError(
                "Invalid credentials: missing required fields "
                "(client_secret, client_id, or redirect_uris)",
                details={"kind": kind, "missing": missing},
            )

        return cls(
            kind=kind,
            client_id=client_id,
            client_secret=client_secret,
            redirect_uris=tuple(redirect_uris),
            auth_uri=section.get("auth_uri") or DEFAULT_AUTH_URI,
            token_uri=section.get("token_uri") or DEFAULT_TOKEN_URI,
        )

    def to_client_config(self) -> dict[str, dict[str, Any]]:
        """Return the mapping accepted by google_auth_oauthlib Flow.from_client_config."""
        return {
            self.kind: {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uris": list(self.redirect_uris),
                "auth_uri": self.auth_uri,
                "token_uri": self.token_uri,
            }
        }
