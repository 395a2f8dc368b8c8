"""JSON-file-backed implementation of KeyValueStore.

All keys live in one JSON object on disk.  Writes go to a temporary file
in the same directory which then replaces the original, so a failed write
leaves the previous contents intact.  A damaged file is copied aside
before it is ever overwritten.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

from stockmaster.domain.exceptions import StorageWriteError
from stockmaster.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- KeyValueStore interface ----------------------------------------------

    @property
    def backup_path(self) -> Path:
        return self._file_path.with_name(self._file_path.name + ".corrupt")

    def get(self, key: str) -> str | None:
        try:
            records = self._load_raw()
        except StorageWriteError as exc:
            logger.error("%s", exc)
            return None
        value = records.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        # A damaged file that could not be backed up raises here, so it is
        # never replaced without a copy.
        records = self._load_raw()
        records[key] = value
        try:
            self._persist_raw(records)
        except OSError as exc:
            raise StorageWriteError(
                f"Could not write '{key}' to {self._file_path}: {exc}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, object]:
        """Read all records.

        A file that is not a JSON object is copied to ``backup_path`` and
        read as empty.  Raises StorageWriteError if that copy fails.
        """
        if not self._file_path.exists():
            return {}
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except ValueError:
            records = None
        if isinstance(records, dict):
            return records

        try:
            shutil.copyfile(self._file_path, self.backup_path)
        except OSError as exc:
            raise StorageWriteError(
                f"Store file {self._file_path} is damaged and could not be backed up: {exc}"
            ) from exc
        logger.error(
            "Store file %s is damaged; copied to %s and treating it as empty",
            self._file_path, self.backup_path,
        )
        return {}

    def _persist_raw(self, records: dict[str, object]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
