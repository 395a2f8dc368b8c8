"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from stockmaster.application.controller import InventoryController
from stockmaster.infrastructure.persistence.json_file_store import JsonFileKeyValueStore
from stockmaster.infrastructure.persistence.state_persistence import StatePersistence

DATA_DIR_ENV = "STOCKMASTER_DATA_DIR"

# Default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def state_repository() -> StatePersistence:
    return StatePersistence(JsonFileKeyValueStore(data_dir() / "store.json"))


def controller() -> InventoryController:
    return InventoryController(state_repo=state_repository())
