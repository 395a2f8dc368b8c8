"""Domain service: Derived View Calculator.

Pure aggregate and lookup functions over a Project.  None of them mutate
state, so they are safe to call on every display refresh.
"""

from __future__ import annotations

from decimal import Decimal

from stockmaster.domain.model.product import Product
from stockmaster.domain.model.project import Project
from stockmaster.domain.model.stock_log import StockLog

UNKNOWN_PRODUCT = "Unknown Product"

# Products at or below this level are flagged in listings.
LOW_STOCK_THRESHOLD = 5


def total_inventory_value(project: Project) -> Decimal:
    return sum((p.value for p in project.products), Decimal("0"))


def out_of_stock_count(project: Project) -> int:
    return sum(1 for p in project.products if p.stock == 0)


def product_count(project: Project) -> int:
    return len(project.products)


def is_low_stock(product: Product) -> bool:
    return product.stock <= LOW_STOCK_THRESHOLD


def low_stock_count(project: Project) -> int:
    return sum(1 for p in project.products if is_low_stock(p))


def search_products(project: Project, query: str) -> list[Product]:
    """Case-insensitive substring match on title, preserving order."""
    needle = (query or "").lower()
    return [p for p in project.products if needle in p.title.lower()]


def resolve_log_product_title(project: Project, log: StockLog) -> str:
    """Title of the product a log refers to.

    Logs outlive deleted products; those resolve to ``UNKNOWN_PRODUCT``.
    """
    product = project.find_product(log.product_id)
    return product.title if product is not None else UNKNOWN_PRODUCT
