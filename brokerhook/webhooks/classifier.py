"""Classification of transport outcomes into execution results."""

from __future__ import annotations

from brokerhook.webhooks.models import TransportFailure, WebhookExecutionResult, WebhookResponse
from brokerhook.webhooks.transport import TransportOutcome

# Anything below this counts as delivered: the endpoint was reached and
# answered, even with a redirect or a client error.
SERVER_ERROR_THRESHOLD = 500


def is_delivered(status_code: int) -> bool:
    return status_code < SERVER_ERROR_THRESHOLD


def classify(outcome: TransportOutcome) -> WebhookExecutionResult:
    if isinstance(outcome, WebhookResponse):
        return WebhookExecutionResult(
            success=is_delivered(outcome.status_code),
            response=outcome,
        )
    if isinstance(outcome, TransportFailure):
        return WebhookExecutionResult(success=False, error=outcome.error)
    raise TypeError(f"Cannot classify {type(outcome).__name__}")
