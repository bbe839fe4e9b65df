"""Exceptions raised for incorrect use of the signed-cookie API."""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when a string is not valid unpadded base64url."""


class CookieSignatureError(Exception):
    """Base class for signed-cookie misuse failures."""


class MiddlewareRequiredError(CookieSignatureError):
    """Raised when verified cookies are read without running the verification middleware."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"cookie {name!r} was requested but the cookie signature middleware did not run for this request"
        )
        self.name = name


class AlreadyVerifiedError(CookieSignatureError):
    """Raised when a cookie the middleware already verified is verified again manually."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"cookie {name!r} was already verified by the middleware; use get_verified_cookie instead"
        )
        self.name = name


class DuplicateVerificationError(CookieSignatureError):
    """Raised when two gates verify the same cookie within one request."""

    def __init__(self, name: str) -> None:
        super().__init__(f"cookie {name!r} was already verified for this request")
        self.name = name


__all__ = [
    "AlreadyVerifiedError",
    "CookieSignatureError",
    "DuplicateVerificationError",
    "FormatError",
    "MiddlewareRequiredError",
]
