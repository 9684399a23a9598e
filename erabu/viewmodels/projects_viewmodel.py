# Rev 0.1.0
# erabu/viewmodels/projects_viewmodel.py
from __future__ import annotations
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from ..models.entities import Project
from ..services.project_store import ProjectStore, RandomSource
from ..utils.logging_setup import get_logger
from .project_form_viewmodel import ProjectFormViewModel
from .random_pick_viewmodel import RandomPickViewModel


class ProjectsViewModel(QObject):
    projectsChanged = Signal(object)  # list[Project]
    pickChanged = Signal(object)  # Project | None

    def __init__(self, store: ProjectStore, rng: RandomSource):
        super().__init__()
        self._store = store
        self._log = get_logger("ProjectsViewModel")
        self._filter = ""
        self._pending_delete: Optional[str] = None
        self.form = ProjectFormViewModel(store)
        self.picker = RandomPickViewModel(store, rng)

    @property
    def store(self) -> ProjectStore:
        return self._store

    # ---- filters
    @property
    def filter_text(self) -> str:
        return self._filter

    def set_filter(self, text: str) -> None:
        if text == self._filter:
            return
        self._filter = text
        self.reload()

    # ---- queries
    def visible(self) -> List[Project]:
        return self._store.filter(self._filter)

    def reload(self) -> None:
        self.projectsChanged.emit(self.visible())
        if self.picker.is_open:
            self.pickChanged.emit(self.picker.current(self._filter))

    # ---- commands
    def add_from_form(self) -> Optional[Project]:
        project = self.form.confirm()
        if project is not None:
            self.reload()
        return project

    def delete_title(self, title: str) -> int:
        removed = self._store.delete(title)
        if removed:
            self.reload()
        return removed

    def delete_project(self, project_id: int) -> bool:
        ok = self._store.delete_by_id(project_id)
        if ok:
            self.reload()
        return ok

    # ---- pending delete request
    @property
    def pending_delete(self) -> Optional[str]:
        return self._pending_delete

    def request_delete(self, title: str) -> None:
        self._pending_delete = title

    def cancel_pending(self) -> None:
        self._pending_delete = None

    def apply_pending(self) -> int:
        title, self._pending_delete = self._pending_delete, None
        if title is None:
            return 0
        return self.delete_title(title)

    # ---- random pick
    def pick_open(self) -> Optional[Project]:
        project = self.picker.open(self._filter)
        if project is None:
            self._log.info("Nothing to pick for filter %r", self._filter)
        self.pickChanged.emit(project)
        return project

    def pick_current(self) -> Optional[Project]:
        return self.picker.current(self._filter)

    def pick_close(self) -> None:
        self.picker.close()
