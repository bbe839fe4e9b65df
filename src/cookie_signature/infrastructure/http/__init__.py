from __future__ import annotations

from cookie_signature.infrastructure.http.accessors import (
    get_cookie,
    get_verified_cookie,
    middleware_was_used,
    set_cookie_with_signature,
)
from cookie_signature.infrastructure.http.middleware import (
    CookieRejectedError,
    cookie_signature_middleware,
    install_cookie_signature_handlers,
    require_signed_cookies,
)

__all__ = [
    "CookieRejectedError",
    "cookie_signature_middleware",
    "get_cookie",
    "get_verified_cookie",
    "install_cookie_signature_handlers",
    "middleware_was_used",
    "require_signed_cookies",
    "set_cookie_with_signature",
]
