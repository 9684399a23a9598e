# Rev 0.1.1

"""Project store service (Rev 0.1.1)
In-memory ordered project list: add, delete, filter and random pick.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Protocol

from ..models.entities import Project
from ..models.errors import EmptyTitle, NothingToPick
from ..utils.logging_setup import get_logger

DRAW_BITS = 32


class RandomSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


class ProjectStore:
    def __init__(self):
        self._log = get_logger("ProjectStore")
        self._projects: List[Project] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(list(self._projects))

    def get(self, project_id: int) -> Optional[Project]:
        for p in self._projects:
            if p.id == project_id:
                return p
        return None

    # ---- commands
    def add(self, title: str, raw_tags: str = "") -> Project:
        return self.append(title, raw_tags.split())

    def append(self, title: str, tags: Iterable[str]) -> Project:
        """Append a project with an already split tag list."""
        clean = title.strip()
        if not clean:
            raise EmptyTitle(title)
        project = Project(id=self._next_id, title=clean, tags=[t for t in tags if t])
        self._next_id += 1
        self._projects.append(project)
        self._log.info("Added project id=%s title=%r tags=%s", project.id, project.title, project.tags)
        return project

    def delete(self, title: str) -> int:
        """Remove every project whose title equals ``title`` exactly."""
        before = len(self._projects)
        self._projects = [p for p in self._projects if p.title != title]
        removed = before - len(self._projects)
        if removed:
            self._log.info("Deleted %d project(s) titled %r", removed, title)
        return removed

    def delete_by_id(self, project_id: int) -> bool:
        for i, p in enumerate(self._projects):
            if p.id == project_id:
                del self._projects[i]
                self._log.info("Deleted project id=%s title=%r", p.id, p.title)
                return True
        return False

    # ---- queries
    def filter(self, query: str = "") -> List[Project]:
        if not query:
            return list(self._projects)
        return [p for p in self._projects if p.matches(query)]

    def pick_index(self, query: str, draw: int) -> Project:
        if draw < 0:
            raise ValueError("draw must be non-negative")
        visible = self.filter(query)
        if not visible:
            raise NothingToPick(query)
        return visible[draw % len(visible)]

    def pick_random(self, query: str, rng: RandomSource) -> Project:
        # check first so an empty view does not consume a draw
        if not self.filter(query):
            raise NothingToPick(query)
        return self.pick_index(query, rng.getrandbits(DRAW_BITS))

    # ---- serializable record
    def to_records(self) -> List[Dict[str, Any]]:
        return [p.to_record() for p in self._projects]

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "ProjectStore":
        store = cls()
        for rec in records:
            tags = rec.get("tags") or []
            if isinstance(tags, str):
                tags = tags.split()
            try:
                store.append(str(rec.get("title") or ""), (str(t) for t in tags))
            except EmptyTitle:
                store._log.warning("Skipping record with blank title: %r", rec)
        return store
