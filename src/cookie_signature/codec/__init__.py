"""Text codecs for the signed-cookie wire format."""

from __future__ import annotations

from cookie_signature.codec.base64url import decode_base64url, encode_base64url
from cookie_signature.codec.cookie_value import (
    COOKIE_VALUE_DELIMITER,
    SplitCookieValue,
    join_cookie_value,
    split_cookie_value,
)

__all__ = [
    "COOKIE_VALUE_DELIMITER",
    "SplitCookieValue",
    "decode_base64url",
    "encode_base64url",
    "join_cookie_value",
    "split_cookie_value",
]
