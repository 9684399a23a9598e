# Rev 0.1.0
"""Lightweight entities for the project list."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Project:
    id: int
    title: str
    tags: List[str] = field(default_factory=list)

    def matches(self, query: str) -> bool:
        """Case-sensitive substring match over the title or any tag."""
        return query in self.title or any(query in tag for tag in self.tags)

    def to_record(self) -> Dict[str, Any]:
        # id is session-local; only title + tags are persisted
        return {"title": self.title, "tags": list(self.tags)}
