from __future__ import annotations

from cookie_signature.application.ports.cookies import CookieReader, CookieWriter, ResponseBuilder

__all__ = ["CookieReader", "CookieWriter", "ResponseBuilder"]
