"""Application service: the process-wide state container.

The controller is the only owner of the in-memory AppState.  Each
dispatched command runs to completion: compute the new state with the
mutation engine, swap it in, then persist it.  Nothing else replaces
the state.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from stockmaster.application.commands import (
    AddProduct,
    AdjustStock,
    Command,
    CreateProject,
    DeleteProduct,
    DeleteProject,
    EditProduct,
    ImportProject,
    RenameProject,
    SelectProject,
)
from stockmaster.application.dto import HistoryLineDTO, ProductLineDTO, ProjectSummaryDTO
from stockmaster.domain.model.app_state import AppState
from stockmaster.domain.model.project import Project
from stockmaster.domain.repository.state_repository import ExportFile, StateRepository
from stockmaster.domain.service import views
from stockmaster.domain.service.state_mutations import StateMutationService

logger = logging.getLogger(__name__)


class InventoryController:

    def __init__(
        self,
        state_repo: StateRepository,
        mutations: StateMutationService | None = None,
    ) -> None:
        self._state_repo = state_repo
        self._mutations = mutations or StateMutationService()
        self._state = state_repo.load()
        self._handlers: dict[type, Callable[[AppState, Command], AppState]] = {
            CreateProject: lambda s, c: self._mutations.create_project(s, c.name),
            RenameProject: lambda s, c: self._mutations.rename_project(
                s, c.project_id, c.new_name
            ),
            DeleteProject: lambda s, c: self._mutations.delete_project(s, c.project_id),
            SelectProject: lambda s, c: self._mutations.select_project(s, c.project_id),
            ImportProject: lambda s, c: self._mutations.import_project(s, c.project),
            AddProduct: lambda s, c: self._mutations.add_product(
                s, c.project_id, c.title, c.mrp, c.stock, c.image, c.category
            ),
            EditProduct: lambda s, c: self._mutations.edit_product(
                s, c.project_id, c.product_id, c.new_title, c.new_mrp
            ),
            DeleteProduct: lambda s, c: self._mutations.delete_product(
                s, c.project_id, c.product_id
            ),
            AdjustStock: lambda s, c: self._mutations.adjust_stock(
                s, c.project_id, c.product_id, c.delta
            ),
        }

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def active_project(self) -> Project | None:
        return self._state.active_project

    # --- Commands -------------------------------------------------------------

    def dispatch(self, command: Command) -> AppState:
        """Apply *command* and persist the result.

        If the store rejects the write, StorageWriteError propagates but
        the new state stays in memory for the rest of the session.
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")

        new_state = handler(self._state, command)
        if new_state is self._state:
            logger.debug("%s matched nothing; state unchanged", type(command).__name__)
            return self._state

        self._state = new_state
        self._state_repo.save(new_state)
        return new_state

    def import_project(self, contents: str) -> AppState:
        """Parse a project file and merge it under a fresh id.

        Raises MalformedImportFileError and leaves state untouched if the
        contents are not a project document.
        """
        project = self._state_repo.import_project(contents)
        return self.dispatch(ImportProject(project))

    def export_project(self, project_id: str) -> ExportFile | None:
        project = self._state.find_project(project_id)
        if project is None:
            return None
        return self._state_repo.export_project(project)

    # --- Queries --------------------------------------------------------------

    def project_summaries(self) -> list[ProjectSummaryDTO]:
        return [
            ProjectSummaryDTO(
                id=p.id,
                name=p.name,
                is_active=p.id == self._state.active_project_id,
                item_count=views.product_count(p),
                inventory_value=f"{views.total_inventory_value(p):,.2f}",
                out_of_stock=views.out_of_stock_count(p),
                low_stock=views.low_stock_count(p),
            )
            for p in self._state.projects
        ]

    def inventory(self, query: str = "") -> list[ProductLineDTO]:
        """Products of the active project matching *query*."""
        project = self.active_project
        if project is None:
            return []
        return [
            ProductLineDTO(
                id=p.id,
                title=p.title,
                category=p.category,
                mrp=f"{p.mrp:,.2f}",
                stock=p.stock,
                low_stock=views.is_low_stock(p),
            )
            for p in views.search_products(project, query)
        ]

    def history(self) -> list[HistoryLineDTO]:
        """Stock movements of the active project, newest first."""
        project = self.active_project
        if project is None:
            return []
        return [
            HistoryLineDTO(
                product_title=views.resolve_log_product_title(project, log),
                type=log.type.value,
                quantity=log.quantity,
                timestamp=_format_ms(log.timestamp),
            )
            for log in project.history
        ]


def _format_ms(epoch_ms: int) -> str:
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M UTC"
    )
