"""Request-scoped cache of verified cookie values."""

from __future__ import annotations

from dataclasses import dataclass, field

from cookie_signature.errors import DuplicateVerificationError


@dataclass(slots=True)
class VerifiedCookieStore:
    """Verified values for one request.

    Created empty for every request and discarded with it. Each name is
    written at most once, and only by the verification middleware.
    """

    _values: dict[str, str] = field(default_factory=dict)
    middleware_executed: bool = False

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def record(self, name: str, value: str) -> None:
        if name in self._values:
            raise DuplicateVerificationError(name)
        self._values[name] = value

    def mark_middleware_executed(self) -> None:
        self.middleware_executed = True

    def names(self) -> tuple[str, ...]:
        return tuple(self._values)


__all__ = ["VerifiedCookieStore"]
