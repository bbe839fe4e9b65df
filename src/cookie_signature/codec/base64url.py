"""Unpadded URL-safe base64 used for both cookie segments."""

from __future__ import annotations

import base64
import re

from cookie_signature.errors import FormatError

_BASE64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


def encode_base64url(data: bytes) -> str:
    """Return ``data`` as base64url text without ``=`` padding."""

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_base64url(text: str) -> bytes:
    """Decode unpadded base64url text, rejecting any character outside ``[A-Za-z0-9_-]``."""

    if not _BASE64URL_PATTERN.fullmatch(text):
        raise FormatError("invalid base64url format")

    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except ValueError as exc:
        # a single trailing character (length % 4 == 1) can never be decoded
        raise FormatError("invalid base64url length") from exc


__all__ = ["decode_base64url", "encode_base64url"]
