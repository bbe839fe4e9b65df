from __future__ import annotations

from cookie_signature.config.settings import CookieSignatureSettings

__all__ = ["CookieSignatureSettings"]
