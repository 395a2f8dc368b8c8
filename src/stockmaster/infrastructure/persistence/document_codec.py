"""Mapping between domain values and the JSON document shape.

The persisted document and export files use camelCase keys, epoch
millisecond timestamps and plain JSON numbers for prices::

    AppState := {projects: [Project...], activeProjectId: str | null}
    Project  := {id, name, description, products, history, createdAt}
    Product  := {id, image, title, mrp, stock, category, createdAt}
    StockLog := {id, productId, type: "IN"|"OUT", quantity, timestamp}

Parsing is strict about shape (required keys, value types) but fills in
defaults for the optional descriptive fields.  Any mismatch raises
DocumentFormatError; callers translate it into the matching domain error.
"""

from __future__ import annotations

import json
from decimal import Decimal

from stockmaster.domain.model.app_state import AppState
from stockmaster.domain.model.product import DEFAULT_CATEGORY, DEFAULT_IMAGE, Product
from stockmaster.domain.model.project import Project
from stockmaster.domain.model.stock_log import StockLog
from stockmaster.domain.model.value_objects import MovementType


class DocumentFormatError(ValueError):
    """Raised when a document does not have the expected shape."""


# --- Encoding -----------------------------------------------------------------


def _number(amount: Decimal) -> int | float:
    return int(amount) if amount == amount.to_integral_value() else float(amount)


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "image": product.image,
        "title": product.title,
        "mrp": _number(product.mrp),
        "stock": product.stock,
        "category": product.category,
        "createdAt": product.created_at,
    }


def log_to_raw(log: StockLog) -> dict:
    return {
        "id": log.id,
        "productId": log.product_id,
        "type": log.type.value,
        "quantity": log.quantity,
        "timestamp": log.timestamp,
    }


def project_to_raw(project: Project) -> dict:
    return {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "products": [product_to_raw(p) for p in project.products],
        "history": [log_to_raw(log) for log in project.history],
        "createdAt": project.created_at,
    }


def state_to_raw(state: AppState) -> dict:
    return {
        "projects": [project_to_raw(p) for p in state.projects],
        "activeProjectId": state.active_project_id,
    }


def dumps_state(state: AppState) -> str:
    return json.dumps(state_to_raw(state))


def dumps_project(project: Project) -> str:
    return json.dumps(project_to_raw(project), indent=2)


# --- Decoding -----------------------------------------------------------------


def _require(raw: dict, key: str, kind: type | tuple[type, ...]):
    if key not in raw:
        raise DocumentFormatError(f"Missing field '{key}'")
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise DocumentFormatError(f"Field '{key}' has unexpected type {type(value).__name__}")
    return value


def _optional(raw: dict, key: str, kind: type | tuple[type, ...], default):
    if raw.get(key) is None:
        return default
    return _require(raw, key, kind)


def _whole(raw: dict, key: str, default: int | None = None) -> int:
    if default is None:
        value = _require(raw, key, (int, float))
    else:
        value = _optional(raw, key, (int, float), default)
    try:
        whole = int(value)
    except (OverflowError, ValueError) as exc:
        raise DocumentFormatError(f"Field '{key}' must be finite, got {value}") from exc
    if value != whole:
        raise DocumentFormatError(f"Field '{key}' must be a whole number, got {value}")
    return whole


def _object(raw: object, what: str) -> dict:
    if not isinstance(raw, dict):
        raise DocumentFormatError(f"{what} must be a JSON object")
    return raw


def product_from_raw(raw: object) -> Product:
    raw = _object(raw, "Product")
    mrp = Decimal(str(_require(raw, "mrp", (int, float))))
    if not mrp.is_finite():
        raise DocumentFormatError(f"Field 'mrp' must be finite, got {mrp}")
    return Product(
        id=_require(raw, "id", str),
        title=_require(raw, "title", str),
        mrp=mrp,
        stock=max(0, _whole(raw, "stock")),
        image=_optional(raw, "image", str, DEFAULT_IMAGE),
        category=_optional(raw, "category", str, DEFAULT_CATEGORY),
        created_at=_whole(raw, "createdAt", default=0),
    )


def log_from_raw(raw: object) -> StockLog:
    raw = _object(raw, "StockLog")
    kind = _require(raw, "type", str)
    try:
        movement = MovementType(kind)
    except ValueError as exc:
        raise DocumentFormatError(f"Unknown movement type {kind!r}") from exc
    return StockLog(
        id=_require(raw, "id", str),
        product_id=_require(raw, "productId", str),
        type=movement,
        quantity=_whole(raw, "quantity"),
        timestamp=_whole(raw, "timestamp"),
    )


def project_from_raw(raw: object) -> Project:
    raw = _object(raw, "Project")
    return Project(
        id=_require(raw, "id", str),
        name=_require(raw, "name", str),
        description=_optional(raw, "description", str, ""),
        products=tuple(product_from_raw(p) for p in _require(raw, "products", list)),
        history=tuple(log_from_raw(log) for log in _require(raw, "history", list)),
        created_at=_whole(raw, "createdAt", default=0),
    )


def state_from_raw(raw: object) -> AppState:
    raw = _object(raw, "AppState")
    projects = tuple(project_from_raw(p) for p in _require(raw, "projects", list))
    active = _optional(raw, "activeProjectId", str, None)
    if active is not None and all(p.id != active for p in projects):
        # A dangling active reference would break the AppState invariant.
        active = None
    return AppState(projects=projects, active_project_id=active)


def _parse_json(text: str) -> object:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        raise DocumentFormatError(f"Not valid JSON: {exc}") from exc


def loads_state(text: str) -> AppState:
    return state_from_raw(_parse_json(text))


def loads_project(text: str) -> Project:
    return project_from_raw(_parse_json(text))
