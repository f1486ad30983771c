"""Product reference.

Products live in a catalog outside this package. An order only needs to
know which product an item refers to, so a Product here is nothing more
than its identifier.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """Identity-bearing reference to a catalog entry.

    Compared by ``id`` value, never by object identity: two
    ``Product(id=1)`` instances are the same product.
    """

    id: int
