"""CLI commands for stock movements."""

from __future__ import annotations

import click

from stockmaster.application.commands import AdjustStock
from stockmaster.domain.exceptions import StockMasterError
from stockmaster.infrastructure.bootstrap import controller
from stockmaster.infrastructure.cli.product_commands import require_active_project


def _adjust(product_id: str, delta: int) -> None:
    ctl = controller()
    project = require_active_project(ctl)
    if project.find_product(product_id) is None:
        raise click.ClickException(f"Product '{product_id}' not found")

    try:
        state = ctl.dispatch(AdjustStock(project.id, product_id, delta))
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    product = state.find_project(project.id).find_product(product_id)
    click.echo(f"'{product.title}' stock is now {product.stock}")


@click.command("in")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", type=click.IntRange(min=1), default=1, show_default=True)
def stock_in(product_id: str, quantity: int) -> None:
    """Record incoming stock."""
    _adjust(product_id, quantity)


@click.command("out")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", type=click.IntRange(min=1), default=1, show_default=True)
def stock_out(product_id: str, quantity: int) -> None:
    """Record outgoing stock (stock never drops below zero)."""
    _adjust(product_id, -quantity)


@click.command("history")
def stock_history() -> None:
    """Show stock movements of the active project, newest first."""
    ctl = controller()
    require_active_project(ctl)
    lines = ctl.history()

    if not lines:
        click.echo("No stock movements yet.")
        return

    click.echo(f"{'When':<22} {'Product':<24} {'Qty':>6}")
    click.echo("-" * 54)
    for line in lines:
        click.echo(f"{line.timestamp:<22} {line.product_title:<24} {line.signed_quantity:>6}")
