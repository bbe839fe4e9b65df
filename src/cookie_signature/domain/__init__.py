from __future__ import annotations

from cookie_signature.domain.cookie import CookieCheck, CookieOptions, CookieState, SameSite
from cookie_signature.domain.store import VerifiedCookieStore

__all__ = ["CookieCheck", "CookieOptions", "CookieState", "SameSite", "VerifiedCookieStore"]
