"""Tamper-evident HMAC-SHA256 signed cookies for FastAPI/Starlette."""

from __future__ import annotations

from cookie_signature.application.verify_cookies import CookieSignatureOptions
from cookie_signature.domain.cookie import CookieCheck, CookieOptions, CookieState
from cookie_signature.errors import (
    AlreadyVerifiedError,
    CookieSignatureError,
    DuplicateVerificationError,
    FormatError,
    MiddlewareRequiredError,
)
from cookie_signature.infrastructure.http import (
    CookieRejectedError,
    cookie_signature_middleware,
    get_cookie,
    get_verified_cookie,
    install_cookie_signature_handlers,
    middleware_was_used,
    require_signed_cookies,
    set_cookie_with_signature,
)
from cookie_signature.signature import SecretKey, import_key

__all__ = [
    "AlreadyVerifiedError",
    "CookieCheck",
    "CookieOptions",
    "CookieRejectedError",
    "CookieSignatureError",
    "CookieSignatureOptions",
    "CookieState",
    "DuplicateVerificationError",
    "FormatError",
    "MiddlewareRequiredError",
    "SecretKey",
    "cookie_signature_middleware",
    "get_cookie",
    "get_verified_cookie",
    "import_key",
    "install_cookie_signature_handlers",
    "middleware_was_used",
    "require_signed_cookies",
    "set_cookie_with_signature",
]
