import logging

import click

from ordering.infrastructure.cli.order_commands import order_build

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="ORDERING_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """ordering — consolidate line items into an order"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Work with orders."""


# Register subcommands
order.add_command(order_build)
