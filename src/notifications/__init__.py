"""Human-readable reporting for address book operations."""

from .message_formatter import OperationMessageFormatter

__all__ = ["OperationMessageFormatter"]
