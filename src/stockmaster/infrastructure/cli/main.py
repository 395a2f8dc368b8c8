import logging

import click

from stockmaster.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
)
from stockmaster.infrastructure.cli.project_commands import (
    project_create,
    project_delete,
    project_export,
    project_import,
    project_list,
    project_rename,
    project_select,
)
from stockmaster.infrastructure.cli.stock_commands import stock_history, stock_in, stock_out
from stockmaster.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """StockMaster — multi-project inventory tracker"""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.group()
def project() -> None:
    """Manage projects."""


@cli.group()
def product() -> None:
    """Manage products of the active project."""


@cli.group()
def stock() -> None:
    """Record and review stock movements."""


# Register subcommands
project.add_command(project_create)
project.add_command(project_delete)
project.add_command(project_export)
project.add_command(project_import)
project.add_command(project_list)
project.add_command(project_rename)
project.add_command(project_select)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
stock.add_command(stock_history)
stock.add_command(stock_in)
stock.add_command(stock_out)
