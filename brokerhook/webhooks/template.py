"""Placeholder substitution for webhook URLs and bodies."""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

DEFAULT_PLACEHOLDER = "${PACT_VERSION_URL}"


class SubstitutionContext(str, Enum):
    URL = "url"
    BODY = "body"


def substitute(
    text: str | None,
    token: str,
    value: str,
    context: SubstitutionContext,
) -> str | None:
    """Replace every occurrence of ``token`` in ``text`` with ``value``.

    In a URL the value is percent-encoded as a single component, so slashes,
    colons and query delimiters in it cannot change the URL's structure. In a
    body it is inserted as-is. A missing body stays missing.
    """
    if text is None:
        return None
    if not token or token not in text:
        return text
    if context is SubstitutionContext.URL:
        value = quote(value, safe="")
    return text.replace(token, value)
