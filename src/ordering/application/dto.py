"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ItemSpec:
    """Input: one item the caller wants added (product id, price, quantity)."""

    product_id: int
    price: Decimal
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single consolidated line as displayed to the user."""

    product_id: int
    quantity: int
    unit_price: str  # formatted, e.g. "10.00"


@dataclass(frozen=True)
class OrderDTO:
    """Output: the order's lines in insertion order."""

    lines: list[OrderLineDTO]

    @property
    def line_count(self) -> int:
        return len(self.lines)
