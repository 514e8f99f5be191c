"""Synchronous HTTP transport for webhook delivery."""

from __future__ import annotations

import ssl
from types import TracebackType

import httpx

from brokerhook.utils.logging import get_logger
from brokerhook.webhooks.errors import ConfigurationError
from brokerhook.webhooks.models import TransportFailure, WebhookResponse

log = get_logger(__name__)

TransportOutcome = WebhookResponse | TransportFailure


class WebhookTransport:
    """Sends built requests and turns transport faults into values.

    ``https`` URLs are sent over TLS with certificate validation against the
    platform trust store, or against ``ca_bundle`` when one is given.
    Redirects are returned as responses, never followed.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        connect_timeout: float = 5.0,
        ca_bundle: str = "",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        verify: ssl.SSLContext | bool = True
        if ca_bundle:
            try:
                verify = ssl.create_default_context(cafile=ca_bundle)
            except (OSError, ssl.SSLError) as exc:
                raise ConfigurationError(f"Cannot load CA bundle {ca_bundle}: {exc}") from exc
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            verify=verify,
            follow_redirects=False,
            transport=transport,
        )

    def send(self, request: httpx.Request) -> TransportOutcome:
        try:
            response = self._client.send(request)
        except httpx.TransportError as exc:
            log.debug(
                "webhook_transport_failed",
                host=request.url.host,
                error_type=type(exc).__name__,
            )
            return TransportFailure(exc)
        return WebhookResponse.from_httpx(response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> WebhookTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
