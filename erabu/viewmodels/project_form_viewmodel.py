# Rev 0.1.0
# erabu/viewmodels/project_form_viewmodel.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from ..models.entities import Project
from ..models.errors import EmptyTitle
from ..services.project_store import ProjectStore
from ..utils.logging_setup import get_logger


class FormState(str, Enum):
    IDLE = "idle"
    COMPOSING = "composing"
    COMMITTED = "committed"


class ProjectFormViewModel:
    """Draft state for the "new project" form.

    IDLE -> COMPOSING on open(); COMPOSING -> COMMITTED -> IDLE on a
    successful confirm(); abandon() drops the draft and returns to IDLE.
    """

    def __init__(self, store: ProjectStore):
        self._store = store
        self._log = get_logger("ProjectForm")
        self.state = FormState.IDLE
        self.title = ""
        self.tags = ""
        self.last_error: Optional[str] = None

    @property
    def composing(self) -> bool:
        return self.state is FormState.COMPOSING

    def open(self) -> None:
        if self.composing:
            return
        self._clear()
        self.state = FormState.COMPOSING

    def set_title(self, text: str) -> None:
        if self.composing:
            self.title = text

    def set_tags(self, text: str) -> None:
        if self.composing:
            self.tags = text

    def confirm(self) -> Optional[Project]:
        if not self.composing:
            return None
        try:
            project = self._store.add(self.title, self.tags)
        except EmptyTitle as e:
            self.last_error = str(e)
            self._log.info("Rejected draft: %s", e)
            return None
        self.state = FormState.COMMITTED
        self._reset()
        return project

    def abandon(self) -> None:
        if self.state is not FormState.IDLE:
            self._log.debug("Draft abandoned")
        self._reset()

    # ---- internals
    def _clear(self) -> None:
        self.title = ""
        self.tags = ""
        self.last_error = None

    def _reset(self) -> None:
        self._clear()
        self.state = FormState.IDLE
