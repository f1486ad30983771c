"""Application service: Build Order use case.

Turns a list of item specs into domain items and feeds them, in order,
through ``Order.add_item``. All admission and merge rules stay in the
Order aggregate.
"""

from __future__ import annotations

import logging

from ordering.application.dto import ItemSpec, OrderDTO, OrderLineDTO
from ordering.domain.model.item import LineItem
from ordering.domain.model.order import Order
from ordering.domain.model.product import Product

logger = logging.getLogger(__name__)


class BuildOrderHandler:

    def __init__(self, order: Order | None = None) -> None:
        self._order = order if order is not None else Order()

    @property
    def order(self) -> Order:
        return self._order

    def handle(self, item_specs: list[ItemSpec]) -> OrderDTO:
        """Add every spec to the order and return the resulting lines.

        Stops at the first IncorrectItemError; items added before the
        failing one stay in the order.
        """
        for spec in item_specs:
            self._order.add_item(
                LineItem(
                    product=Product(id=spec.product_id),
                    price=spec.price,
                    quantity=spec.quantity,
                )
            )

        logger.info(
            "Order holds %d line(s) after %d item(s)", len(self._order), len(item_specs)
        )
        return self._to_dto(self._order)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            lines=[
                OrderLineDTO(
                    product_id=item.product.id,
                    quantity=item.quantity,
                    unit_price=str(item.price),
                )
                for item in order.get_items()
            ]
        )
