"""Utility modules for brokerhook."""

from brokerhook.utils.logging import (
    PASSWORD_MASK,
    get_logger,
    is_sensitive_header,
    setup_logging,
    truncate_for_logging,
)

__all__ = [
    "PASSWORD_MASK",
    "get_logger",
    "is_sensitive_header",
    "setup_logging",
    "truncate_for_logging",
]
