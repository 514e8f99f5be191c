"""Webhook execution: substitute, build, send, classify, log."""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING, Any, Protocol

import httpx

from brokerhook.utils.logging import get_logger
from brokerhook.webhooks.builder import build_request
from brokerhook.webhooks.classifier import classify
from brokerhook.webhooks.models import TransportFailure, WebhookExecutionResult, WebhookRequest
from brokerhook.webhooks.template import DEFAULT_PLACEHOLDER, SubstitutionContext, substitute
from brokerhook.webhooks.transport import TransportOutcome, WebhookTransport

if TYPE_CHECKING:
    from brokerhook.config import Settings


class Logger(Protocol):
    def info(self, event: str, **fields: Any) -> Any: ...

    def error(self, event: str, **fields: Any) -> Any: ...


class Transport(Protocol):
    def send(self, request: httpx.Request) -> TransportOutcome: ...


class WebhookExecutor:
    """Fires webhook requests and reports each attempt as a result.

    ``execute`` never raises for delivery problems. The only exception that
    escapes is ConfigurationError, raised before anything is sent.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        logger: Logger | None = None,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        self._owns_transport = transport is None
        self._transport: Transport = transport or WebhookTransport()
        self._log: Logger = logger or get_logger(__name__)
        self._placeholder = placeholder

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        logger: Logger | None = None,
    ) -> WebhookExecutor:
        from brokerhook.config import load_settings

        settings = settings or load_settings()
        cfg = settings.webhook
        executor = cls(
            transport=WebhookTransport(
                timeout=cfg.timeout,
                connect_timeout=cfg.connect_timeout,
                ca_bundle=cfg.ca_bundle,
            ),
            logger=logger,
            placeholder=cfg.placeholder,
        )
        executor._owns_transport = True
        return executor

    def execute(self, request: WebhookRequest, value: str) -> WebhookExecutionResult:
        url = substitute(request.url, self._placeholder, value, SubstitutionContext.URL)
        body = substitute(request.body, self._placeholder, value, SubstitutionContext.BODY)
        http_request = build_request(
            request.method,
            url,
            headers=request.headers,
            body=body,
            username=request.username,
            password=request.password,
        )

        self._log.info(
            "webhook_request",
            method=request.method,
            host=http_request.url.host,
            path=http_request.url.raw_path.decode("ascii"),
            headers=request.redacted_headers(),
            body=body,
            username=request.username,
            password=request.display_password(),
        )

        try:
            outcome = self._transport.send(http_request)
        except Exception as exc:
            outcome = TransportFailure(exc)

        result = classify(outcome)
        self._log_result(result)
        return result

    def _log_result(self, result: WebhookExecutionResult) -> None:
        if result.response is not None:
            self._log.info(
                "webhook_response",
                status=result.response.status_code,
                body=result.response.body,
                success=result.success,
            )
        else:
            self._log.error(
                "webhook_error",
                error_type=type(result.error).__name__,
                message=str(result.error),
            )

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, WebhookTransport):
            self._transport.close()

    def __enter__(self) -> WebhookExecutor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
