"""Environment configuration for signed-cookie verification."""

from __future__ import annotations

import json
import logging
from typing import Annotated

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from cookie_signature.application.verify_cookies import CookieSignatureOptions
from cookie_signature.signature import SecretKey, import_key


class CookieSignatureSettings(BaseSettings):
    """Secret and protected cookie names resolved from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    secret: SecretStr | None = Field(default=None, alias="COOKIE_SIGNATURE_SECRET")
    cookies: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(),
        alias="COOKIE_SIGNATURE_COOKIES",
        description="Cookie names verified by the middleware, in order (JSON list or comma-separated).",
    )
    log_level: str = Field(default="INFO", alias="COOKIE_SIGNATURE_LOG_LEVEL")

    @field_validator("cookies", mode="before")
    @classmethod
    def _normalize_cookies(cls, value: object) -> object:
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                try:
                    value = json.loads(stripped)
                except json.JSONDecodeError as exc:
                    raise ValueError("COOKIE_SIGNATURE_COOKIES must be a JSON list or comma-separated names") from exc
                if not isinstance(value, list):
                    raise ValueError("COOKIE_SIGNATURE_COOKIES JSON value must be a list")
            else:
                value = stripped.split(",")
        if isinstance(value, (list, tuple)):
            names = [name.strip() if isinstance(name, str) else name for name in value]
            return tuple(name for name in names if name != "")
        return value

    @property
    def secret_value(self) -> str:
        if self.secret is None:
            raise RuntimeError("COOKIE_SIGNATURE_SECRET must be set")
        value = self.secret.get_secret_value()
        if not value:
            raise RuntimeError("COOKIE_SIGNATURE_SECRET must not be empty")
        return value

    def secret_key(self) -> SecretKey:
        return import_key(self.secret_value.encode("utf-8"))

    def middleware_options(self) -> CookieSignatureOptions:
        return CookieSignatureOptions.from_settings(self)

    # --- Loader ---
    @classmethod
    def load(cls) -> CookieSignatureSettings:
        instance = cls()
        logger = logging.getLogger("cookie_signature.settings")
        logger.info("cookie signature settings loaded: %r", instance)
        return instance


__all__ = ["CookieSignatureSettings"]
