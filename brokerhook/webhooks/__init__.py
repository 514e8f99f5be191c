"""Outbound webhook execution."""

from brokerhook.webhooks.errors import ConfigurationError, WebhookError
from brokerhook.webhooks.executor import WebhookExecutor
from brokerhook.webhooks.models import (
    TransportFailure,
    WebhookExecutionResult,
    WebhookRequest,
    WebhookResponse,
)
from brokerhook.webhooks.template import DEFAULT_PLACEHOLDER, SubstitutionContext, substitute
from brokerhook.webhooks.transport import WebhookTransport

__all__ = [
    "ConfigurationError",
    "WebhookError",
    "WebhookExecutor",
    "TransportFailure",
    "WebhookExecutionResult",
    "WebhookRequest",
    "WebhookResponse",
    "DEFAULT_PLACEHOLDER",
    "SubstitutionContext",
    "substitute",
    "WebhookTransport",
]
