"""
Domain exceptions for textbank
"""

from .base import DomainException
from .translation import (
    FormatMismatchError,
    InvalidArgumentError,
    InvalidDocumentError,
    PersistenceFailureError,
)

__all__ = [
    # Base
    "DomainException",

    # Translation
    "InvalidArgumentError",
    "InvalidDocumentError",
    "FormatMismatchError",
    "PersistenceFailureError",
]
