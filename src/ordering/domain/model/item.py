"""Line items and the capability set an Order relies on."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, Union, runtime_checkable

from ordering.domain.model.product import Product

Price = Union[int, float, Decimal]


@runtime_checkable
class Item(Protocol):
    """Anything an Order can hold.

    The order reads ``product`` and ``price`` and rewrites ``quantity``
    when it consolidates lines, so any object exposing those three
    attributes qualifies.
    """

    @property
    def product(self) -> Product: ...

    @property
    def price(self) -> Price: ...

    quantity: int


@dataclass
class LineItem:
    """Default Item implementation.

    No business rules are checked here; ``Order.add_item`` is the
    admission boundary.
    """

    product: Product
    price: Price
    quantity: int


def merge_key(item: Item) -> tuple[int, Price]:
    """Return the (product id, price) pair two lines must share to merge."""
    return item.product.id, item.price
