"""Webhook error taxonomy."""

from __future__ import annotations


class WebhookError(Exception):
    """Base class for webhook errors."""


class ConfigurationError(WebhookError):
    """Raised when a webhook definition cannot be executed as configured.

    Covers malformed URLs, unsupported schemes and malformed definition
    documents. Always raised before any network I/O.
    """
