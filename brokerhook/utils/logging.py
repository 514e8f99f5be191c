"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import re
import sys

import structlog


_SENSITIVE_PATTERNS = [
    re.compile(r"(password|secret|token|authorization)[\"']?\s*[:=]\s*[\"']?(basic\s+|bearer\s+)?[\w\-\.+/=]+", re.IGNORECASE),
]


PASSWORD_MASK = "*" * 10

# Response and request bodies beyond this are cut in log entries
MAX_LOGGED_BODY = 2000

_SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})
_SENSITIVE_HEADER_FRAGMENTS = ("token", "secret", "password", "api-key", "apikey")


def is_sensitive_header(name: str) -> bool:
    lowered = name.lower()
    if lowered in _SENSITIVE_HEADERS:
        return True
    return any(fragment in lowered for fragment in _SENSITIVE_HEADER_FRAGMENTS)


def truncate_for_logging(text: str, limit: int = MAX_LOGGED_BODY) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... [{len(text) - limit} more chars]"


def _redact_webhook_fields(
    _logger: structlog.types.WrappedLogger,
    _method: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    """Mask credentials and cap bodies on ``webhook_*`` events.

    Applies whichever module emitted the event, so a caller logging raw
    headers or a real password still gets them masked.
    """
    event = event_dict.get("event")
    if not isinstance(event, str) or not event.startswith("webhook_"):
        return event_dict

    headers = event_dict.get("headers")
    if isinstance(headers, dict):
        event_dict["headers"] = {
            name: PASSWORD_MASK if is_sensitive_header(str(name)) else value
            for name, value in headers.items()
        }
    if event_dict.get("password") is not None:
        event_dict["password"] = PASSWORD_MASK
    body = event_dict.get("body")
    if isinstance(body, str):
        event_dict["body"] = truncate_for_logging(body)
    return event_dict


def _filter_sensitive(
    _logger: structlog.types.WrappedLogger,
    _method: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    # Webhook bodies are free text and may carry credentials of their own
    for key, value in list(event_dict.items()):
        if not isinstance(value, str):
            continue
        for pattern in _SENSITIVE_PATTERNS:
            if pattern.search(value):
                event_dict[key] = pattern.sub(r"\1=***REDACTED***", value)
    return event_dict


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog with optional JSON output."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _redact_webhook_fields,
        _filter_sensitive,
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
