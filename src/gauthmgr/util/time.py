from __future__ import annotations

from datetime import datetime, timezone


def parse_rfc3339(value: str) -> datetime:
    """
    Parse RFC3339 timestamp string into tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123Z
      - 2025-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # Python's fromisoformat doesn't accept 'Z' in 3.9/3.10, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    if dt.tzinfo is None:
        # google-auth writes naive UTC timestamps in authorized user files.
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def from_epoch_millis(value: int | float) -> datetime:
    """Convert milliseconds since the epoch into a tz-aware UTC datetime."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("epoch millis must be a number")
    return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)


def to_naive_utc(dt: datetime) -> datetime:
    """Return dt as a naive UTC datetime, the form google-auth expects for expiry."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt.astimezone(timezone.utc).replace(tzinfo=None)
