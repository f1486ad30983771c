"""CLI commands for the Order aggregate."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from ordering.application.build_order import BuildOrderHandler
from ordering.application.dto import ItemSpec, OrderDTO
from ordering.domain.exceptions import DomainException


def _parse_item(raw: str) -> ItemSpec:
    """Parse '1:10.00:2' (ProductId:Price:Qty) into an ItemSpec."""
    parts = [part.strip() for part in raw.split(":")]
    if len(parts) != 3:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ProductId:Price:Qty'."
        )
    id_str, price_str, qty_str = parts
    try:
        product_id = int(id_str)
    except ValueError:
        raise click.BadParameter(f"Invalid product id '{id_str}' in '{raw}'.")
    try:
        price = Decimal(price_str)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{price_str}' in '{raw}'.")
    if not price.is_finite():
        raise click.BadParameter(f"Invalid price '{price_str}' in '{raw}'.")
    try:
        quantity = int(qty_str)
    except ValueError:
        raise click.BadParameter(f"Invalid quantity '{qty_str}' in '{raw}'.")
    return ItemSpec(product_id=product_id, price=price, quantity=quantity)


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*27}")
    for line in dto.lines:
        click.echo(f"  {line.product_id:<10} {line.quantity:>5} {line.unit_price:>10}")
    click.echo(f"  {'-'*27}")
    click.echo(f"  {dto.line_count} line(s)")


@click.command("build")
@click.option(
    "--item",
    "items",
    multiple=True,
    required=True,
    help="Item as 'ProductId:Price:Qty'. Repeat to add more.",
)
def order_build(items: tuple[str, ...]) -> None:
    """Build an order, merging items with the same product and price."""
    specs = [_parse_item(raw) for raw in items]

    handler = BuildOrderHandler()

    try:
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
