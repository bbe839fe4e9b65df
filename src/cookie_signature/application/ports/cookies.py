"""Ports describing the host framework's cookie and response capabilities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from cookie_signature.domain.cookie import CookieOptions


class CookieReader(Protocol):
    """Reads raw cookie values sent by the client."""

    def read_cookie(self, name: str) -> str | None:
        """Return the raw value of cookie ``name`` or ``None`` when absent."""


class CookieWriter(Protocol):
    """Emits ``Set-Cookie`` directives on the outgoing response."""

    def write_cookie(self, name: str, raw_value: str, options: CookieOptions) -> None:
        """Attach cookie ``name`` with ``raw_value`` and ``options``."""


class ResponseBuilder(Protocol):
    """Builds the host's JSON error response."""

    def build_json_response(self, body: Mapping[str, Any], status: int) -> Any:
        """Return a response carrying ``body`` as JSON with ``status``."""


__all__ = ["CookieReader", "CookieWriter", "ResponseBuilder"]
