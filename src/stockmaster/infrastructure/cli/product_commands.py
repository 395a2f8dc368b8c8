"""CLI commands for products of the active project."""

from __future__ import annotations

import click

from stockmaster.application.commands import AddProduct, DeleteProduct, EditProduct
from stockmaster.application.controller import InventoryController
from stockmaster.domain.exceptions import StockMasterError
from stockmaster.domain.model.project import Project
from stockmaster.infrastructure.bootstrap import controller


def require_active_project(ctl: InventoryController) -> Project:
    project = ctl.active_project
    if project is None:
        raise click.ClickException("No active project. Create or select one first.")
    return project


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Unit price (MRP), e.g. 15.00.")
@click.option("--stock", default="0", show_default=True, help="Opening stock.")
@click.option("--image", default=None, help="Image URI.")
@click.option("--category", default=None, help="Category label.")
def product_add(
    title: str, price: str, stock: str, image: str | None, category: str | None
) -> None:
    """Add a product to the active project."""
    ctl = controller()
    project = require_active_project(ctl)

    try:
        state = ctl.dispatch(
            AddProduct(project.id, title, price, stock, image=image, category=category)
        )
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    product = state.find_project(project.id).products[0]
    click.echo(
        f"Product '{product.title}' added  (id={product.id}, "
        f"price={product.mrp:,.2f}, stock={product.stock})"
    )


@click.command("list")
@click.option("--search", "query", default="", help="Case-insensitive title filter.")
def product_list(query: str) -> None:
    """List products of the active project."""
    ctl = controller()
    require_active_project(ctl)
    lines = ctl.inventory(query)

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<32} {'Title':<20} {'Category':<12} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 84)
    for line in lines:
        flag = "  LOW" if line.low_stock else ""
        click.echo(
            f"{line.id:<32} {line.title:<20} {line.category:<12} "
            f"{line.mrp:>10} {line.stock:>6}{flag}"
        )


@click.command("edit")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--title", default=None, help="New title (unchanged if omitted).")
@click.option("--price", default=None, help="New price (unchanged if omitted).")
def product_edit(product_id: str, title: str | None, price: str | None) -> None:
    """Change a product's title and/or price."""
    ctl = controller()
    project = require_active_project(ctl)
    product = project.find_product(product_id)
    if product is None:
        raise click.ClickException(f"Product '{product_id}' not found")

    command = EditProduct(
        project_id=project.id,
        product_id=product_id,
        new_title=title if title is not None else product.title,
        new_mrp=price if price is not None else product.mrp,
    )
    try:
        ctl.dispatch(command)
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product_id}' updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product.  Its stock history is kept."""
    ctl = controller()
    project = require_active_project(ctl)

    try:
        ctl.dispatch(DeleteProduct(project.id, product_id))
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product_id}' deleted.")
