from __future__ import annotations

import base64
import json
from typing import Any

_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def decode_base64_json(value: str) -> Any:
    """
    Decode a base64-encoded UTF-8 JSON document.

    Accepted input:
        - whitespace anywhere (output wrapped by the `base64` tool)
        - missing "=" padding
        - the URL-safe alphabet ("-" and "_")

    Raises:
        ValueError: if the value is not valid base64, UTF-8 or JSON.
    """
    if not isinstance(value, str):
        raise TypeError("value must be a str")

    compact = "".join(value.split()).translate(_URLSAFE_TO_STANDARD).rstrip("=")
    compact += "=" * (-len(compact) % 4)
    raw = base64.b64decode(compact, validate=True)  # binascii.Error is a ValueError
    text = raw.decode("utf-8")
    try:
        return json.loads(text)
    except RecursionError as exc:
        raise ValueError("JSON document is nested too deeply") from exc


def encode_base64_json(obj: Any) -> str:
    """Encode obj as JSON and return it base64-encoded (inverse of decode_base64_json)."""
    data = json.dumps(obj, separators=(",", ":")).encode("utf-8")
    return base64.b64encode(data).decode("ascii")
