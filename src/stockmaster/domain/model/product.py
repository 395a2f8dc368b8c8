"""Product — a tracked item within a project.

Products are immutable values.  Every change produces a new Product via
``dataclasses.replace`` so earlier AppState values are never disturbed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from stockmaster.domain.model.value_objects import coerce_price

DEFAULT_CATEGORY = "General"
DEFAULT_IMAGE = "https://picsum.photos/400/400"


@dataclass(frozen=True)
class Product:
    """A sellable item with a unit price and an on-hand quantity.

    Invariants:
    - ``stock`` is never negative
    - ``id`` and ``created_at`` never change after creation
    """

    id: str
    title: str
    mrp: Decimal
    stock: int
    image: str = DEFAULT_IMAGE
    category: str = DEFAULT_CATEGORY
    created_at: int = 0  # epoch milliseconds

    @property
    def value(self) -> Decimal:
        """Stock value at the current unit price."""
        return self.mrp * self.stock

    def edited(self, title: str, mrp: object) -> Product:
        """Return a copy with a new title and price.  Stock is untouched."""
        return replace(self, title=title, mrp=coerce_price(mrp))

    def adjusted(self, delta: int) -> Product:
        """Return a copy with ``delta`` applied, clamped at zero."""
        return replace(self, stock=max(0, self.stock + delta))
