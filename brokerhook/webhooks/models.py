"""Webhook request and execution result models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import httpx

from brokerhook.utils.logging import PASSWORD_MASK, is_sensitive_header
from brokerhook.webhooks.builder import build_headers, parse_url

if TYPE_CHECKING:
    from brokerhook.webhooks.executor import WebhookExecutor


@dataclass(frozen=True)
class WebhookRequest:
    """A stored webhook configuration, ready to be fired.

    Headers are held in a read-only mapping, so requests are hashable and
    can be shared between threads.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    username: str | None = None
    password: str | None = None
    body: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))
        # Rejects bad configuration before anything is sent
        parse_url(self.url)
        build_headers(self.headers)

    def __hash__(self) -> int:
        return hash((
            self.method,
            self.url,
            frozenset(self.headers.items()),
            self.username,
            self.password,
            self.body,
        ))

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def description(self) -> str:
        """Brief description for logs and audit trails, e.g. ``POST example.org``."""
        return f"{self.method} {httpx.URL(self.url).host}"

    def display_password(self) -> str | None:
        return None if self.password is None else PASSWORD_MASK

    def redacted_headers(self) -> dict[str, str]:
        return {
            name: PASSWORD_MASK if is_sensitive_header(name) else value
            for name, value in self.headers.items()
        }

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(
        self, value: str, executor: WebhookExecutor | None = None
    ) -> WebhookExecutionResult:
        """Fire the webhook once with ``value`` substituted into the placeholder.

        Without an explicit executor a short-lived one is created from the
        loaded settings and closed afterwards.
        """
        from brokerhook.webhooks.executor import WebhookExecutor

        if executor is not None:
            return executor.execute(self, value)
        with WebhookExecutor.from_settings() as default_executor:
            return default_executor.execute(self, value)


@dataclass(frozen=True)
class WebhookResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> WebhookResponse:
        return cls(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )


@dataclass(frozen=True)
class TransportFailure:
    """A round trip that did not complete, carrying the originating exception."""

    error: BaseException

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class WebhookExecutionResult:
    """Outcome of one delivery attempt.

    Exactly one of ``response`` and ``error`` is set: a completed round trip
    carries the response whatever its status, an incomplete one carries the
    exception that stopped it.
    """

    success: bool
    response: WebhookResponse | None = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if (self.response is None) == (self.error is None):
            raise ValueError("exactly one of response or error must be set")

    def to_dict(self) -> dict[str, Any]:
        response: dict[str, Any] | None = None
        if self.response is not None:
            response = {
                "status_code": self.response.status_code,
                "headers": dict(self.response.headers),
                "body": self.response.body,
            }
        error: dict[str, str] | None = None
        if self.error is not None:
            error = {"kind": type(self.error).__name__, "message": str(self.error)}
        return {"success": self.success, "response": response, "error": error}
