"""Verification pipeline for signed cookies."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cookie_signature.application.ports.cookies import CookieReader
from cookie_signature.codec.base64url import decode_base64url
from cookie_signature.codec.cookie_value import split_cookie_value
from cookie_signature.domain.cookie import CookieCheck, CookieState
from cookie_signature.domain.store import VerifiedCookieStore
from cookie_signature.errors import FormatError
from cookie_signature.signature import SecretKey, verify

if TYPE_CHECKING:
    from cookie_signature.config.settings import CookieSignatureSettings

logger = logging.getLogger("cookie_signature.middleware")


@dataclass(frozen=True, slots=True)
class CookieSignatureOptions:
    """Key and ordered cookie names guarded by the verification middleware."""

    secret: SecretKey
    cookies: Iterable[str]

    def __post_init__(self) -> None:
        if isinstance(self.cookies, str):
            raise TypeError("cookies must be a sequence of names, not a str")
        names = tuple(self.cookies)
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate cookie names: {', '.join(duplicates)}")
        if any(not name for name in names):
            raise ValueError("cookie names must not be empty")
        object.__setattr__(self, "cookies", names)

    @classmethod
    def from_settings(cls, settings: CookieSignatureSettings) -> CookieSignatureOptions:
        return cls(secret=settings.secret_key(), cookies=settings.cookies)


async def verify_cookie(name: str, raw: str | None, key: SecretKey) -> CookieCheck:
    """Run split, decode and MAC verification on one raw cookie value."""

    if not raw:
        return CookieCheck.rejected(name, CookieState.MISSING)

    segments = split_cookie_value(raw)
    if segments.value is None or segments.signature is None:
        return CookieCheck.rejected(name, CookieState.MALFORMED)

    try:
        signature = decode_base64url(segments.signature)
        value = decode_base64url(segments.value)
    except FormatError:
        return CookieCheck.rejected(name, CookieState.MALFORMED)

    if not await verify(key, signature, value):
        return CookieCheck.rejected(name, CookieState.SIGNATURE_INVALID)

    return CookieCheck.verified(name, value.decode("utf-8", errors="replace"))


async def verify_cookies(
    options: CookieSignatureOptions,
    reader: CookieReader,
    store: VerifiedCookieStore,
) -> CookieCheck | None:
    """Verify every configured cookie in order.

    Returns the first rejection, leaving later names unchecked, or ``None``
    once all names are verified and recorded in ``store``.
    """

    for name in options.cookies:
        check = await verify_cookie(name, reader.read_cookie(name), options.secret)
        if check.value is None:
            logger.info(
                "cookie_rejected",
                extra={"data": {"cookie": name, "state": check.state.value, "status_code": check.status_code}},
            )
            return check
        store.record(name, check.value)

    store.mark_middleware_executed()
    logger.debug("cookies_verified", extra={"data": {"cookies": list(options.cookies)}})
    return None


__all__ = ["CookieSignatureOptions", "verify_cookie", "verify_cookies"]
