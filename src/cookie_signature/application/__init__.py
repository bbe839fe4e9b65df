from __future__ import annotations

from cookie_signature.application.accessors import (
    encode_signed_value,
    read_signed_cookie,
    read_verified_cookie,
    write_signed_cookie,
)
from cookie_signature.application.verify_cookies import (
    CookieSignatureOptions,
    verify_cookie,
    verify_cookies,
)

__all__ = [
    "CookieSignatureOptions",
    "encode_signed_value",
    "read_signed_cookie",
    "read_verified_cookie",
    "verify_cookie",
    "verify_cookies",
    "write_signed_cookie",
]
