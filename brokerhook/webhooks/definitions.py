"""Loading webhook definitions from YAML documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from brokerhook.webhooks.errors import ConfigurationError
from brokerhook.webhooks.models import WebhookRequest

_OPTIONAL_STRINGS = ("username", "password", "body")


def _require_string(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Webhook definition needs a string '{key}'")
    return value


def webhook_from_dict(data: dict[str, Any]) -> WebhookRequest:
    """Build a WebhookRequest from a parsed definition.

    The request fields may sit at the top level or under a ``request`` key.
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Webhook definition must be a mapping")
    if "request" in data:
        data = data["request"]
        if not isinstance(data, dict):
            raise ConfigurationError("Webhook definition 'request' must be a mapping")

    headers = data.get("headers") or {}
    if not isinstance(headers, dict):
        raise ConfigurationError("Webhook definition 'headers' must be a mapping")

    optional: dict[str, str | None] = {}
    for key in _OPTIONAL_STRINGS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(f"Webhook definition '{key}' must be a string")
        optional[key] = value

    return WebhookRequest(
        method=_require_string(data, "method"),
        url=_require_string(data, "url"),
        headers={str(k): str(v) for k, v in headers.items()},
        **optional,
    )


def load_webhook(path: str | Path) -> WebhookRequest:
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read webhook definition {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in webhook definition {path}: {exc}") from exc
    return webhook_from_dict(data)
