"""Where gauthmgr reads its credentials from."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Names of the environment variables holding the credentials.

        credentials_var: base64 JSON client secrets (required at initialize)
        token_var: base64 JSON authorized user token (optional)
    """

    credentials_var: str = "GOOGLE_CREDENTIALS"
    token_var: str = "GOOGLE_TOKEN"

    def __post_init__(self) -> None:
        for key in ("credentials_var", "token_var"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{key} must be a non-empty string")
