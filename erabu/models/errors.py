# Rev 0.1.0
from __future__ import annotations


class ErabuError(Exception):
    """Base class for recoverable project list errors."""


class EmptyTitle(ErabuError, ValueError):
    def __init__(self, raw_title: str = ""):
        super().__init__("project title is empty")
        self.raw_title = raw_title


class NothingToPick(ErabuError, LookupError):
    def __init__(self, query: str = ""):
        super().__init__(f"no project matches filter {query!r}")
        self.query = query
