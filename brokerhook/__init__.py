"""brokerhook - outbound webhook execution for broker events."""

__version__ = "0.1.0"
