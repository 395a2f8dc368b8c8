"""Project aggregate — a named inventory workspace.

A Project exclusively owns its products and their movement history.
Deleting the project discards both.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from stockmaster.domain.model.product import Product
from stockmaster.domain.model.stock_log import StockLog

DEFAULT_PROJECT_NAME = "New Project"


@dataclass(frozen=True)
class Project:
    """Aggregate root for one inventory workspace.

    ``products`` and ``history`` are both ordered newest-first.
    """

    id: str
    name: str
    description: str = ""
    products: tuple[Product, ...] = ()
    history: tuple[StockLog, ...] = ()
    created_at: int = 0  # epoch milliseconds

    def find_product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    # --- Copy-on-write helpers ------------------------------------------------

    def with_product_added(self, product: Product) -> Project:
        return replace(self, products=(product, *self.products))

    def with_product_replaced(self, product: Product) -> Project:
        return replace(
            self,
            products=tuple(product if p.id == product.id else p for p in self.products),
        )

    def with_product_removed(self, product_id: str) -> Project:
        # History is kept as-is: logs may outlive the product they reference.
        return replace(
            self,
            products=tuple(p for p in self.products if p.id != product_id),
        )

    def with_log(self, log: StockLog) -> Project:
        return replace(self, history=(log, *self.history))
