"""Starlette adapters for the cookie and response ports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from cookie_signature.domain.cookie import CookieOptions
from cookie_signature.domain.store import VerifiedCookieStore

STORE_STATE_ATTR = "signed_cookies"


def request_store(request: Request) -> VerifiedCookieStore:
    """Return the verified-cookie store bound to ``request``, creating it on first use."""

    store = getattr(request.state, STORE_STATE_ATTR, None)
    if store is None:
        store = VerifiedCookieStore()
        setattr(request.state, STORE_STATE_ATTR, store)
    return store


def serialize_set_cookie(name: str, value: str, options: CookieOptions) -> str:
    parts = [f"{name}={value}"]
    if options.max_age is not None:
        parts.append(f"Max-Age={options.max_age}")
    if options.domain:
        parts.append(f"Domain={options.domain}")
    if options.path:
        parts.append(f"Path={options.path}")
    if options.expires:
        parts.append(f"Expires={options.expires}")
    if options.httponly:
        parts.append("HttpOnly")
    if options.secure:
        parts.append("Secure")
    if options.samesite:
        parts.append(f"SameSite={options.samesite.capitalize()}")
    if options.partitioned:
        parts.append("Partitioned")
    return "; ".join(parts)


@dataclass(slots=True)
class RequestCookieReader:
    request: Request

    def read_cookie(self, name: str) -> str | None:
        return self.request.cookies.get(name)


@dataclass(slots=True)
class ResponseCookieWriter:
    response: Response

    def write_cookie(self, name: str, raw_value: str, options: CookieOptions) -> None:
        self.response.headers.append("set-cookie", serialize_set_cookie(name, raw_value, options))


class JsonResponseBuilder:
    def build_json_response(self, body: Mapping[str, Any], status: int) -> JSONResponse:
        return JSONResponse(content=dict(body), status_code=status)


__all__ = [
    "JsonResponseBuilder",
    "RequestCookieReader",
    "ResponseCookieWriter",
    "STORE_STATE_ATTR",
    "request_store",
    "serialize_set_cookie",
]
