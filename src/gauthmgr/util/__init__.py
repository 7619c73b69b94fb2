from .encoding import decode_base64_json, encode_base64_json
from .time import from_epoch_millis, parse_rfc3339, to_naive_utc

__all__ = [
    "decode_base64_json",
    "encode_base64_json",
    "parse_rfc3339",
    "from_epoch_millis",
    "to_naive_utc",
]
