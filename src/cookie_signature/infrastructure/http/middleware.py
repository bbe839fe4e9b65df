"""FastAPI gates that verify signed cookies before a handler runs."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request, Response

from cookie_signature.application.verify_cookies import CookieSignatureOptions, verify_cookies
from cookie_signature.domain.cookie import CookieCheck
from cookie_signature.infrastructure.http.cookies import (
    JsonResponseBuilder,
    RequestCookieReader,
    request_store,
)

_responses = JsonResponseBuilder()


class CookieRejectedError(Exception):
    """Raised by the route dependency when a protected cookie fails verification."""

    def __init__(self, check: CookieCheck) -> None:
        super().__init__(check.message)
        self.check = check


def _rejection_response(check: CookieCheck) -> Response:
    return _responses.build_json_response({"message": check.message}, check.status_code)


def cookie_signature_middleware(
    options: CookieSignatureOptions,
) -> Callable[[Request, Callable[[Request], Awaitable[Any]]], Awaitable[Any]]:
    """Return an ``http`` middleware verifying ``options.cookies`` on every request.

    Example::

        secret = import_key(b"THIS_IS_ULTRA_HYPER_SECRET_KEY")
        app.middleware("http")(
            cookie_signature_middleware(CookieSignatureOptions(secret=secret, cookies=["session_id"]))
        )
    """

    async def middleware(request: Request, call_next: Callable[[Request], Awaitable[Any]]) -> Any:
        rejection = await verify_cookies(options, RequestCookieReader(request), request_store(request))
        if rejection is not None:
            return _rejection_response(rejection)
        return await call_next(request)

    return middleware


def require_signed_cookies(options: CookieSignatureOptions) -> Callable[[Request], Awaitable[None]]:
    """Return a route dependency performing the middleware's checks for one route."""

    async def dependency(request: Request) -> None:
        rejection = await verify_cookies(options, RequestCookieReader(request), request_store(request))
        if rejection is not None:
            raise CookieRejectedError(rejection)

    return dependency


async def _handle_cookie_rejected(request: Request, exc: Exception) -> Response:
    del request
    if not isinstance(exc, CookieRejectedError):  # pragma: no cover - registered for this type only
        raise exc
    return _rejection_response(exc.check)


def install_cookie_signature_handlers(app: FastAPI) -> None:
    """Render ``CookieRejectedError`` with the same JSON bodies the middleware returns."""

    app.add_exception_handler(CookieRejectedError, _handle_cookie_rejected)


__all__ = [
    "CookieRejectedError",
    "cookie_signature_middleware",
    "install_cookie_signature_handlers",
    "require_signed_cookies",
]
