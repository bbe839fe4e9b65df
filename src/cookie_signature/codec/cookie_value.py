"""Join and split the ``<value>.<signature>`` cookie wire format."""

from __future__ import annotations

from dataclasses import dataclass

COOKIE_VALUE_DELIMITER = "."


@dataclass(frozen=True, slots=True)
class SplitCookieValue:
    """Segments of a raw cookie value; an empty segment is reported as ``None``."""

    value: str | None
    signature: str | None

    @property
    def is_complete(self) -> bool:
        return self.value is not None and self.signature is not None


def join_cookie_value(value: str, signature: str) -> str:
    return f"{value}{COOKIE_VALUE_DELIMITER}{signature}"


def split_cookie_value(raw: str) -> SplitCookieValue:
    """Split ``raw`` on the delimiter.

    Only the first two tokens are consulted; anything after a second
    delimiter is ignored.
    """

    tokens = raw.split(COOKIE_VALUE_DELIMITER)
    value = tokens[0] or None
    signature = (tokens[1] if len(tokens) > 1 else "") or None
    return SplitCookieValue(value=value, signature=signature)


__all__ = [
    "COOKIE_VALUE_DELIMITER",
    "SplitCookieValue",
    "join_cookie_value",
    "split_cookie_value",
]
