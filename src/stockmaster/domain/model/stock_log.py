"""StockLog — one entry in a project's audit trail."""

from __future__ import annotations

from dataclasses import dataclass

from stockmaster.domain.model.value_objects import MovementType


@dataclass(frozen=True)
class StockLog:
    """Immutable record of a single stock movement.

    ``product_id`` is a non-owning reference: the product may since have
    been deleted, so readers must check that it still exists.
    """

    id: str
    product_id: str
    type: MovementType
    quantity: int
    timestamp: int  # epoch milliseconds
