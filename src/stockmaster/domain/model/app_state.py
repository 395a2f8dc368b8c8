"""AppState — the complete persisted application document."""

from __future__ import annotations

from dataclasses import dataclass, replace

from stockmaster.domain.model.project import Project


@dataclass(frozen=True)
class AppState:
    """All projects plus which one is active.

    Invariants:
    - project ids are unique
    - ``active_project_id`` is None or the id of a project in ``projects``
    """

    projects: tuple[Project, ...] = ()
    active_project_id: str | None = None

    @staticmethod
    def empty() -> AppState:
        return AppState()

    @property
    def active_project(self) -> Project | None:
        if self.active_project_id is None:
            return None
        return self.find_project(self.active_project_id)

    def find_project(self, project_id: str) -> Project | None:
        for project in self.projects:
            if project.id == project_id:
                return project
        return None

    def with_project_replaced(self, project: Project) -> AppState:
        return replace(
            self,
            projects=tuple(project if p.id == project.id else p for p in self.projects),
        )
