"""Construction of transport-ready webhook requests."""

from __future__ import annotations

import base64
from collections.abc import Mapping

import httpx

from brokerhook.webhooks.errors import ConfigurationError

SUPPORTED_SCHEMES = ("http", "https")


def parse_url(url: str) -> httpx.URL:
    """Parse ``url`` and check it can be dispatched.

    Raises ConfigurationError for unparseable URLs, unsupported schemes and
    URLs without a host.
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"Invalid webhook URL {url!r}: {exc}") from exc
    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise ConfigurationError(
            f"Unsupported scheme {parsed.scheme!r} in webhook URL {url!r}"
        )
    if not parsed.host:
        raise ConfigurationError(f"Webhook URL {url!r} has no host")
    return parsed


def basic_auth_header(username: str, password: str | None) -> str:
    credentials = f"{username}:{password or ''}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def build_headers(headers: Mapping[str, str] | None) -> httpx.Headers:
    """Copy configured headers into transport form.

    Raises ConfigurationError for names or values that cannot be sent, such
    as non-ASCII text or non-string values.
    """
    copied = dict(headers or {})
    for name, value in copied.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise ConfigurationError(f"Webhook header {name!r} must map a string to a string")
    try:
        return httpx.Headers(copied)
    except UnicodeEncodeError as exc:
        raise ConfigurationError(f"Invalid webhook header: {exc}") from exc


def build_request(
    method: str,
    url: str,
    headers: Mapping[str, str] | None = None,
    body: str | None = None,
    username: str | None = None,
    password: str | None = None,
) -> httpx.Request:
    """Assemble the request to send.

    Configured headers are copied verbatim; no Content-Type is inferred from
    the body. A username switches on basic auth, with an empty password when
    none is set.
    """
    parsed = parse_url(url)
    request_headers = build_headers(headers)
    if username is not None:
        request_headers["Authorization"] = basic_auth_header(username, password)

    content = body.encode("utf-8") if body is not None else None
    return httpx.Request(
        method.upper(),
        parsed,
        headers=request_headers,
        content=content,
    )
