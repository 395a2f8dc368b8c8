"""Domain service: State Mutation Engine.

Every operation takes the current AppState plus command parameters and
returns a new AppState.  Inputs are never modified in place.

Commands that reference an unknown project or product return the state
unchanged.  This keeps replaying a command against stale ids harmless,
so absence is not reported as an error.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import replace
from typing import Callable

from stockmaster.domain.model.app_state import AppState
from stockmaster.domain.model.product import DEFAULT_CATEGORY, DEFAULT_IMAGE, Product
from stockmaster.domain.model.project import DEFAULT_PROJECT_NAME, Project
from stockmaster.domain.model.stock_log import StockLog
from stockmaster.domain.model.value_objects import (
    MovementType,
    coerce_price,
    coerce_stock,
)

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


def now_ms() -> int:
    return time.time_ns() // 1_000_000


class StateMutationService:

    def __init__(
        self,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._new_id = id_factory
        self._now = clock

    # --- Projects -------------------------------------------------------------

    def create_project(self, state: AppState, name: str) -> AppState:
        """Append a new empty project and make it the active one."""
        project = Project(
            id=self._new_id(),
            name=(name or "").strip() or DEFAULT_PROJECT_NAME,
            created_at=self._now(),
        )
        logger.debug("Created project %s (%r)", project.id, project.name)
        return replace(
            state,
            projects=(*state.projects, project),
            active_project_id=project.id,
        )

    def rename_project(self, state: AppState, project_id: str, new_name: str) -> AppState:
        project = state.find_project(project_id)
        if project is None:
            return state
        return state.with_project_replaced(replace(project, name=new_name))

    def delete_project(self, state: AppState, project_id: str) -> AppState:
        """Remove a project together with its products and history."""
        if state.find_project(project_id) is None:
            return state
        active = state.active_project_id
        return AppState(
            projects=tuple(p for p in state.projects if p.id != project_id),
            active_project_id=None if active == project_id else active,
        )

    def select_project(self, state: AppState, project_id: str) -> AppState:
        if state.find_project(project_id) is None:
            return state
        return replace(state, active_project_id=project_id)

    def import_project(self, state: AppState, project: Project) -> AppState:
        """Append an imported project under a fresh id.

        The source id is discarded so the copy can never collide with an
        existing project.  The active project is left unchanged.
        """
        imported = replace(project, id=self._new_id())
        logger.debug("Imported project %r as %s", project.name, imported.id)
        return replace(state, projects=(*state.projects, imported))

    # --- Products -------------------------------------------------------------

    def add_product(
        self,
        state: AppState,
        project_id: str,
        title: str,
        mrp: object,
        stock: object,
        image: str | None = None,
        category: str | None = None,
    ) -> AppState:
        """Prepend a new product to the project's product list."""
        project = state.find_project(project_id)
        if project is None:
            return state
        product = Product(
            id=self._new_id(),
            title=title,
            mrp=coerce_price(mrp),
            stock=coerce_stock(stock),
            image=image or DEFAULT_IMAGE,
            category=category or DEFAULT_CATEGORY,
            created_at=self._now(),
        )
        return state.with_project_replaced(project.with_product_added(product))

    def edit_product(
        self,
        state: AppState,
        project_id: str,
        product_id: str,
        new_title: str,
        new_mrp: object,
    ) -> AppState:
        project = state.find_project(project_id)
        product = project.find_product(product_id) if project else None
        if project is None or product is None:
            return state
        return state.with_project_replaced(
            project.with_product_replaced(product.edited(new_title, new_mrp))
        )

    def delete_product(self, state: AppState, project_id: str, product_id: str) -> AppState:
        project = state.find_project(project_id)
        if project is None or project.find_product(product_id) is None:
            return state
        return state.with_project_replaced(project.with_product_removed(product_id))

    # --- Stock ----------------------------------------------------------------

    def adjust_stock(
        self,
        state: AppState,
        project_id: str,
        product_id: str,
        delta: int,
    ) -> AppState:
        """Apply ``delta`` to a product's stock and record the movement.

        The new stock is ``max(0, stock + delta)``.  The log records the
        requested ``abs(delta)`` even when clamping absorbed part of it.
        A zero delta has no direction, so it changes nothing.
        """
        if delta == 0:
            return state
        project = state.find_project(project_id)
        product = project.find_product(product_id) if project else None
        if project is None or product is None:
            return state

        log = StockLog(
            id=self._new_id(),
            product_id=product_id,
            type=MovementType.for_delta(delta),
            quantity=abs(delta),
            timestamp=self._now(),
        )
        updated = project.with_product_replaced(product.adjusted(delta)).with_log(log)
        logger.debug(
            "Stock %s x%d for product %s in project %s",
            log.type.value, log.quantity, product_id, project.id,
        )
        return state.with_project_replaced(updated)
