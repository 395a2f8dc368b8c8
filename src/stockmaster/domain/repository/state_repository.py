"""Abstract repository for the AppState document and project files.

The application layer depends on this interface only; the concrete
adapter lives in ``stockmaster.infrastructure.persistence``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from stockmaster.domain.model.app_state import AppState
from stockmaster.domain.model.project import Project


@dataclass(frozen=True)
class ExportFile:
    """A single serialized project and the file name it is offered under."""

    filename: str
    contents: str

    def write_to(self, directory: Path) -> Path:
        """Write the file into *directory*, creating it if needed."""
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / self.filename
        target.write_text(self.contents, encoding="utf-8")
        return target


class StateRepository(ABC):

    @abstractmethod
    def load(self) -> AppState:
        """Return the persisted state, or the empty state if none is usable."""

    @abstractmethod
    def save(self, state: AppState) -> None:
        """Durably replace the persisted state."""

    @abstractmethod
    def export_project(self, project: Project) -> ExportFile:
        """Serialize one project as a standalone file."""

    @abstractmethod
    def import_project(self, contents: str) -> Project:
        """Parse a project file.  The original id is still attached."""
