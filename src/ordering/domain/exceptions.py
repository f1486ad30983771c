"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class IncorrectItemError(ValidationError):
    """An item was refused admission into an order.

    ``reason`` is one of ``NEGATIVE_PRICE`` or ``NON_POSITIVE_QUANTITY``.
    """

    NEGATIVE_PRICE = "negative price"
    NON_POSITIVE_QUANTITY = "non-positive quantity"

    def __init__(self, reason: str, item: Any = None, value: Any = None) -> None:
        self.reason = reason
        self.item = item
        detail = f" ({value})" if value is not None else ""
        super().__init__(f"Incorrect item: {reason}{detail}")
