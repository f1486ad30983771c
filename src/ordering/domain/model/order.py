"""Order aggregate — the core of the domain.

The Order owns its line items and is the only place they are validated
and consolidated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ordering.domain.exceptions import IncorrectItemError
from ordering.domain.model.item import Item, Price, merge_key

logger = logging.getLogger(__name__)


@dataclass
class Order:
    """Aggregate root for an order being assembled.

    Invariant: at most one stored item per (product id, price). Items keep
    the position of the first add for their pair.
    """

    items: list[Item] = field(default_factory=list)

    # --- Commands -------------------------------------------------------------

    def add_item(self, item: Item) -> None:
        """Admit *item* into the order.

        Raises IncorrectItemError for a negative price or a quantity that
        is not strictly positive. Validation runs before any mutation, so
        a rejected item leaves the order untouched.

        If a stored item has the same product id and exactly the same
        price, its quantity absorbs the incoming one and *item* itself is
        discarded. Otherwise *item* is appended as a new line.
        """
        self._validate(item)

        existing = self.find_item(*merge_key(item))
        if existing is not None:
            existing.quantity += item.quantity
            logger.debug(
                "Merged %s units into product #%s @ %s (now %s)",
                item.quantity, item.product.id, item.price, existing.quantity,
            )
            return

        self.items.append(item)
        logger.debug(
            "Added line %d: product #%s @ %s x %s",
            len(self.items), item.product.id, item.price, item.quantity,
        )

    # --- Queries --------------------------------------------------------------

    def get_items(self) -> list[Item]:
        """Return the live list of stored items."""
        return self.items

    def find_item(self, product_id: int, price: Price) -> Item | None:
        # exact equality on price, no tolerance
        for stored in self.items:
            if merge_key(stored) == (product_id, price):
                return stored
        return None

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate(item: Item) -> None:
        if item.price < 0:
            logger.debug("Rejected item for product #%s: negative price", item.product.id)
            raise IncorrectItemError(
                IncorrectItemError.NEGATIVE_PRICE, item=item, value=item.price
            )
        if item.quantity <= 0:
            logger.debug(
                "Rejected item for product #%s: non-positive quantity", item.product.id
            )
            raise IncorrectItemError(
                IncorrectItemError.NON_POSITIVE_QUANTITY, item=item, value=item.quantity
            )
