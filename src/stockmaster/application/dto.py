"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry precomputed view data from the controller to the CLI without
exposing domain internals to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectSummaryDTO:
    """Output: one row of the project list."""

    id: str
    name: str
    is_active: bool
    item_count: int
    inventory_value: str  # formatted, e.g. "1,250.00"
    out_of_stock: int
    low_stock: int


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: a product as listed in the inventory view."""

    id: str
    title: str
    category: str
    mrp: str
    stock: int
    low_stock: bool


@dataclass(frozen=True)
class HistoryLineDTO:
    """Output: a stock movement with its product title resolved."""

    product_title: str
    type: str
    quantity: int
    timestamp: str

    @property
    def signed_quantity(self) -> str:
        return f"{'+' if self.type == 'IN' else '-'}{self.quantity}"
