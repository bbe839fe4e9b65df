"""Logging formatter and dictConfig builder for services using signed cookies."""

from __future__ import annotations

import json
import logging
import os
import time
import traceback
from collections.abc import Mapping
from logging.config import dictConfig
from typing import Any

from opentelemetry import baggage, trace

_PACKAGE_LOGGER = "cookie_signature"


def _level(env_var: str, default: str) -> str:
    return os.getenv(env_var, default).upper()


def _should_emit_json_payload() -> bool:
    # Managed runtimes parse JSON log lines into structured payloads.
    return bool(os.getenv("K_SERVICE") or os.getenv("KUBERNETES_SERVICE_HOST"))


def _encode_data(data: Any) -> str:
    try:
        return json.dumps(data, sort_keys=True, separators=(",", ":"))
    except TypeError:
        return str(data)


def _structured_payload(record: logging.LogRecord) -> dict[str, Any]:
    record_dict = record.__dict__
    payload: dict[str, Any] = {
        "message": record.getMessage(),
        "severity": record.levelname,
        "logger": record.name,
        "timestamp": (
            f"{time.strftime('%Y-%m-%dT%H:%M:%S', time.gmtime(record.created))}"
            f".{int(record.msecs):03d}Z"
        ),
    }
    if record.exc_info:
        payload["exception"] = "".join(traceback.format_exception(*record.exc_info)).rstrip("\n")
    record_data = record_dict.get("data")
    if record_data:
        payload["data"] = record_data if _is_json(record_data) else str(record_data)
    otel = record_dict.get("otel")
    if otel:
        payload["otel"] = otel
    return payload


def _is_json(value: Any) -> bool:
    try:
        json.dumps(value)
    except TypeError:
        return False
    return True


class ExtrasFormatter(logging.Formatter):
    """Append structured `data` payloads when present."""

    def format(self, record: logging.LogRecord) -> str:
        if _should_emit_json_payload():
            return json.dumps(_structured_payload(record), sort_keys=True, separators=(",", ":"))

        formatted = super().format(record)
        record_data = record.__dict__.get("data")
        if record_data:
            return f"{formatted} | data={_encode_data(record_data)}"
        return formatted


class OtelContextLogFilter(logging.Filter):
    """Attach the current OpenTelemetry trace/span ids and baggage as ``record.otel``."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - thin wrapper
        otel: dict[str, Any] = {}
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            otel["trace_id"] = f"{span_context.trace_id:032x}"
            otel["span_id"] = f"{span_context.span_id:016x}"
        baggage_values = baggage.get_all()
        if baggage_values:
            otel["baggage"] = {key: str(value) for key, value in baggage_values.items()}
        if otel:
            record.__dict__["otel"] = otel
        return True


def build_log_config(
    *,
    root_level_env: str = "COOKIE_SIGNATURE_LOG_LEVEL",
    root_default: str = "INFO",
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""

    loggers: dict[str, dict[str, Any]] = {
        _PACKAGE_LOGGER: {
            "level": _level(root_level_env, root_default),
            "handlers": ["console"],
            "propagate": False,
        },
        "uvicorn.access": {
            "level": _level("UVICORN_ACCESS_LOG_LEVEL", "WARNING"),
            "handlers": ["console"],
            "propagate": False,
        },
    }
    if extra_loggers:
        loggers.update(extra_loggers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": ExtrasFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            }
        },
        "filters": {"otel_context": {"()": OtelContextLogFilter}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stdout",
                "filters": ["otel_context"],
            }
        },
        "root": {"level": _level(root_level_env, root_default), "handlers": ["console"]},
        "loggers": loggers,
    }


def configure_logging(
    *,
    root_level_env: str = "COOKIE_SIGNATURE_LOG_LEVEL",
    root_default: str = "INFO",
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> None:
    """Apply the shared logging config."""

    dictConfig(
        build_log_config(
            root_level_env=root_level_env,
            root_default=root_default,
            extra_loggers=extra_loggers,
        )
    )
    logging.getLogger("cookie_signature.observability").debug(
        "configured logging",
        extra={"data": {"root_level_env": root_level_env}},
    )


__all__ = ["ExtrasFormatter", "OtelContextLogFilter", "build_log_config", "configure_logging"]
