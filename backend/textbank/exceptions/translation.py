"""
Translation resolution and fallback persistence errors
"""

from collections.abc import Sized
from typing import Any, Iterable, Optional

from .base import DomainException


class InvalidArgumentError(DomainException):
    """Empty language or key on a resolution call"""

    def __init__(self, argument: str, value: Any = None):
        super().__init__(
            message=f"Argument '{argument}' must not be empty",
            code="INVALID_ARGUMENT",
            details={"argument": argument, "value": value},
        )
        self.argument = argument


class InvalidDocumentError(DomainException):
    """A language file exists but is not shaped like a language document"""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"'{path}' is not a language file"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            code="INVALID_DOCUMENT",
            details={"path": path, "reason": reason} if reason else {"path": path},
        )
        self.path = path


class FormatMismatchError(DomainException):
    """Format arguments do not satisfy the placeholders of a text"""

    def __init__(self, text: str, args: Iterable[Any], reason: Optional[str] = None):
        arg_count = len(args) if isinstance(args, Sized) else None
        super().__init__(
            message=f"Cannot format '{text}' with the given arguments",
            code="FORMAT_MISMATCH",
            details={"text": text, "arg_count": arg_count, "reason": reason},
        )
        self.text = text


class PersistenceFailureError(DomainException):
    """Writing a language document to durable storage failed"""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Failed to persist language file '{path}': {reason}",
            code="PERSISTENCE_FAILURE",
            details={"path": path, "reason": reason},
        )
        self.path = path
