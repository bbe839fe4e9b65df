from __future__ import annotations

import pytest

from cookie_signature.signature import SecretKey, import_key

TEST_SECRET = b"THIS_IS_SECRET_KEY"


@pytest.fixture
def anyio_backend() -> str:
    # Force AnyIO-managed tests to use asyncio only
    return "asyncio"


@pytest.fixture
def secret() -> SecretKey:
    return import_key(TEST_SECRET)
