"""Signed-cookie accessors for FastAPI handlers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from cookie_signature.application.accessors import (
    read_signed_cookie,
    read_verified_cookie,
    write_signed_cookie,
)
from cookie_signature.domain.cookie import CookieOptions
from cookie_signature.infrastructure.http.cookies import (
    RequestCookieReader,
    ResponseCookieWriter,
    request_store,
)
from cookie_signature.signature import SecretKey

SignedCookieSetter = Callable[[Response, str, str, CookieOptions | None], Awaitable[bytes]]


def middleware_was_used(request: Request) -> bool:
    return request_store(request).middleware_executed


def get_verified_cookie(request: Request, name: str) -> str | None:
    """Return a cookie value already verified by the middleware (no cryptography)."""

    return read_verified_cookie(request_store(request), name)


async def get_cookie(
    request: Request,
    key: SecretKey,
    name: str,
    ignore_middleware: bool = False,
) -> str | None:
    """Verify cookie ``name`` with ``key``; ``None`` when missing, malformed or forged."""

    return await read_signed_cookie(
        RequestCookieReader(request),
        request_store(request),
        key,
        name,
        ignore_middleware=ignore_middleware,
    )


def set_cookie_with_signature(key: SecretKey) -> SignedCookieSetter:
    """Return a setter that signs values with ``key`` before writing them.

    The setter returns the raw signature bytes.
    """

    async def set_cookie(
        response: Response,
        name: str,
        value: str,
        options: CookieOptions | None = None,
    ) -> bytes:
        return await write_signed_cookie(ResponseCookieWriter(response), key, name, value, options)

    return set_cookie


__all__ = [
    "SignedCookieSetter",
    "get_cookie",
    "get_verified_cookie",
    "middleware_was_used",
    "set_cookie_with_signature",
]
