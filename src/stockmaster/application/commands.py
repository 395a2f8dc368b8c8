"""Commands — named mutation requests accepted by the controller.

Presentation code builds one of these and hands it to
``InventoryController.dispatch``; it never touches AppState directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockmaster.domain.model.project import Project


@dataclass(frozen=True)
class CreateProject:
    name: str = ""


@dataclass(frozen=True)
class RenameProject:
    project_id: str
    new_name: str


@dataclass(frozen=True)
class DeleteProject:
    project_id: str


@dataclass(frozen=True)
class SelectProject:
    project_id: str


@dataclass(frozen=True)
class ImportProject:
    """Merge a parsed project file; a fresh id is assigned on merge."""

    project: Project


@dataclass(frozen=True)
class AddProduct:
    project_id: str
    title: str
    mrp: object  # raw user input, coerced by the domain
    stock: object = 0
    image: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class EditProduct:
    project_id: str
    product_id: str
    new_title: str
    new_mrp: object


@dataclass(frozen=True)
class DeleteProduct:
    project_id: str
    product_id: str


@dataclass(frozen=True)
class AdjustStock:
    """Positive ``delta`` records stock IN, negative records stock OUT."""

    project_id: str
    product_id: str
    delta: int


Command = (
    CreateProject
    | RenameProject
    | DeleteProject
    | SelectProject
    | ImportProject
    | AddProduct
    | EditProduct
    | DeleteProduct
    | AdjustStock
)
