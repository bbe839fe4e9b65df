"""Framework-independent read/write operations for signed cookies."""

from __future__ import annotations

import logging

from cookie_signature.application.ports.cookies import CookieReader, CookieWriter
from cookie_signature.application.verify_cookies import verify_cookie
from cookie_signature.codec.base64url import encode_base64url
from cookie_signature.codec.cookie_value import join_cookie_value
from cookie_signature.domain.cookie import CookieOptions
from cookie_signature.domain.store import VerifiedCookieStore
from cookie_signature.errors import AlreadyVerifiedError, MiddlewareRequiredError
from cookie_signature.signature import SecretKey, sign

logger = logging.getLogger("cookie_signature.accessors")


def read_verified_cookie(store: VerifiedCookieStore, name: str) -> str | None:
    """Return the value the middleware verified for ``name``.

    Raises ``MiddlewareRequiredError`` when the middleware did not run for
    this request. Returns ``None`` for names outside its configured list.
    """

    value = store.get(name)
    if value is not None:
        return value
    if not store.middleware_executed:
        raise MiddlewareRequiredError(name)
    return None


async def read_signed_cookie(
    reader: CookieReader,
    store: VerifiedCookieStore,
    key: SecretKey,
    name: str,
    *,
    ignore_middleware: bool = False,
) -> str | None:
    """Verify ``name`` with ``key`` independently of the middleware.

    Missing, malformed or forged cookies yield ``None``. The result is never
    written to ``store``.
    """

    if not ignore_middleware and name in store:
        raise AlreadyVerifiedError(name)

    check = await verify_cookie(name, reader.read_cookie(name), key)
    if check.value is None:
        logger.debug("signed_cookie_unavailable", extra={"data": {"cookie": name, "state": check.state.value}})
    return check.value


async def encode_signed_value(key: SecretKey, value: str) -> tuple[str, bytes]:
    """Return the wire-format cookie value for ``value`` and its raw signature."""

    value_bytes = value.encode("utf-8")
    signature = await sign(value_bytes, key)
    return join_cookie_value(encode_base64url(value_bytes), encode_base64url(signature)), signature


async def write_signed_cookie(
    writer: CookieWriter,
    key: SecretKey,
    name: str,
    value: str,
    options: CookieOptions | None = None,
) -> bytes:
    raw_value, signature = await encode_signed_value(key, value)
    writer.write_cookie(name, raw_value, options or CookieOptions())
    logger.debug("cookie_written", extra={"data": {"cookie": name}})
    return signature


__all__ = ["encode_signed_value", "read_signed_cookie", "read_verified_cookie", "write_signed_cookie"]
