"""HMAC-SHA256 signing and verification over cookie value bytes."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field

HASH_NAME = "HMAC"
HASH_ALGORITHM = "SHA-256"
SIGNATURE_LENGTH = hashlib.sha256().digest_size


@dataclass(frozen=True, slots=True)
class SecretKey:
    """Non-extractable HMAC/SHA-256 key usable only for ``sign`` and ``verify``."""

    _material: bytes = field(repr=False)
    algorithm: str = field(default=HASH_NAME, init=False)
    hash: str = field(default=HASH_ALGORITHM, init=False)
    type: str = field(default="secret", init=False)
    extractable: bool = field(default=False, init=False)
    usages: tuple[str, ...] = field(default=("sign", "verify"), init=False)

    def __post_init__(self) -> None:
        if not self._material:
            raise ValueError("key material must not be empty")

    def mac(self, message: bytes) -> bytes:
        return hmac.new(self._material, message, hashlib.sha256).digest()


def import_key(raw: bytes) -> SecretKey:
    """Bind raw key bytes to HMAC/SHA-256.

    The returned key is immutable and safe to share across concurrent requests.
    """

    return SecretKey(bytes(raw))


async def sign(message: bytes, key: SecretKey) -> bytes:
    """Return the 32-byte HMAC-SHA256 of ``message``."""

    return key.mac(message)


async def verify(key: SecretKey, signature: bytes, message: bytes) -> bool:
    """Return ``True`` when ``signature`` is the MAC of ``message`` under ``key``."""

    return hmac.compare_digest(key.mac(message), signature)


__all__ = [
    "HASH_ALGORITHM",
    "HASH_NAME",
    "SIGNATURE_LENGTH",
    "SecretKey",
    "import_key",
    "sign",
    "verify",
]
