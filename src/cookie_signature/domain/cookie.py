"""Verification outcomes and cookie attributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

SameSite = Literal["strict", "lax", "none"]


class CookieState(str, Enum):
    """Where a single protected cookie ended up after verification."""

    UNCHECKED = "unchecked"
    MISSING = "missing"
    MALFORMED = "malformed"
    SIGNATURE_INVALID = "signature_invalid"
    VERIFIED = "verified"


_REJECTION_STATUS: dict[CookieState, int] = {
    CookieState.MISSING: 400,
    CookieState.MALFORMED: 400,
    CookieState.SIGNATURE_INVALID: 401,
}


@dataclass(frozen=True, slots=True)
class CookieCheck:
    """Result of verifying one cookie; ``value`` is set only when verified."""

    name: str
    state: CookieState
    value: str | None = None

    @classmethod
    def verified(cls, name: str, value: str) -> CookieCheck:
        return cls(name=name, state=CookieState.VERIFIED, value=value)

    @classmethod
    def rejected(cls, name: str, state: CookieState) -> CookieCheck:
        if state not in _REJECTION_STATUS:
            raise ValueError(f"{state.value} is not a rejection state")
        return cls(name=name, state=state)

    @property
    def is_verified(self) -> bool:
        return self.state is CookieState.VERIFIED

    @property
    def status_code(self) -> int:
        if self.is_verified:
            return 200
        return _REJECTION_STATUS[self.state]

    @property
    def message(self) -> str:
        if self.state is CookieState.MISSING:
            return f"Cookie({self.name}) is required."
        if self.state is CookieState.MALFORMED:
            return "Invalid cookie value"
        if self.state is CookieState.SIGNATURE_INVALID:
            return "Invalid signature"
        return "ok"


@dataclass(frozen=True, slots=True)
class CookieOptions:
    """Attributes forwarded verbatim to ``Set-Cookie``; ``None``/``False`` are omitted."""

    max_age: int | None = None
    expires: str | None = None
    path: str | None = None
    domain: str | None = None
    secure: bool = False
    httponly: bool = False
    samesite: SameSite | None = None
    partitioned: bool = False


__all__ = ["CookieCheck", "CookieOptions", "CookieState", "SameSite"]
