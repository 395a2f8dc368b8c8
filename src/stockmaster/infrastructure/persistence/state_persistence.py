"""Persistence Adapter: whole-state save/load plus project export/import.

The entire AppState is stored as one JSON string under a fixed key.
Parsing failures are recovered here and surfaced as typed errors (import)
or as a logged fallback to the empty state (load).
"""

from __future__ import annotations

import logging
import re

from stockmaster.domain.exceptions import (
    MalformedImportFileError,
    MalformedPersistedStateError,
    StorageWriteError,
)
from stockmaster.domain.model.app_state import AppState
from stockmaster.domain.model.project import Project
from stockmaster.domain.repository.key_value_store import KeyValueStore
from stockmaster.domain.repository.state_repository import ExportFile, StateRepository
from stockmaster.infrastructure.persistence import document_codec
from stockmaster.infrastructure.persistence.document_codec import DocumentFormatError

logger = logging.getLogger(__name__)

STORAGE_KEY = "stockmaster_pro_data"
EXPORT_SUFFIX = "_stock_data.json"

_WHITESPACE = re.compile(r"\s+")


def export_filename(project_name: str) -> str:
    """``"My Shop"`` -> ``"My_Shop_stock_data.json"``."""
    return _WHITESPACE.sub("_", project_name) + EXPORT_SUFFIX


class StatePersistence(StateRepository):

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def corrupt_key(self) -> str:
        return f"{self._key}.corrupt"

    def save(self, state: AppState) -> None:
        """Overwrite the stored document with *state*.

        Raises StorageWriteError if the store rejects the write.
        """
        self._store.set(self._key, document_codec.dumps_state(state))
        logger.debug("Saved %d project(s) under '%s'", len(state.projects), self._key)

    def read(self) -> AppState:
        """Parse the stored document.

        Returns the empty state when nothing is stored yet; raises
        MalformedPersistedStateError when the stored value does not parse.
        """
        raw = self._store.get(self._key)
        if raw is None:
            return AppState.empty()
        try:
            return document_codec.loads_state(raw)
        except DocumentFormatError as exc:
            raise MalformedPersistedStateError(
                f"Stored state under '{self._key}' is malformed: {exc}"
            ) from exc

    def load(self) -> AppState:
        """Load the stored state, falling back to empty if it is malformed.

        A malformed document is copied to ``<key>.corrupt`` before the
        fallback so that the next save does not destroy it.
        """
        try:
            return self.read()
        except MalformedPersistedStateError as exc:
            logger.error("%s; starting with an empty state", exc)
            raw = self._store.get(self._key)
            if raw is not None:
                try:
                    self._store.set(self.corrupt_key, raw)
                except StorageWriteError as write_exc:
                    logger.error("Could not back up malformed state: %s", write_exc)
                else:
                    logger.warning("Previous document kept under '%s'", self.corrupt_key)
            return AppState.empty()

    # --- Single-project files -------------------------------------------------

    def export_project(self, project: Project) -> ExportFile:
        return ExportFile(
            filename=export_filename(project.name),
            contents=document_codec.dumps_project(project),
        )

    def import_project(self, contents: str) -> Project:
        """Parse an exported project file.

        The returned project still carries its original id; the caller
        must assign a fresh one before merging it into AppState.
        """
        try:
            return document_codec.loads_project(contents)
        except DocumentFormatError as exc:
            raise MalformedImportFileError(f"Invalid file format: {exc}") from exc
