# Rev 0.1.0
# erabu/viewmodels/random_pick_viewmodel.py
from __future__ import annotations
from typing import Optional

from ..models.entities import Project
from ..models.errors import NothingToPick
from ..services.project_store import DRAW_BITS, ProjectStore, RandomSource
from ..utils.logging_setup import get_logger


class RandomPickViewModel:
    """Holds one random draw for as long as the pick surface is open.

    The draw is taken on open() and reused by every current() call until
    close(); opening again after close() draws a fresh value.
    """

    def __init__(self, store: ProjectStore, rng: RandomSource):
        self._store = store
        self._rng = rng
        self._log = get_logger("RandomPick")
        self.is_open = False
        self.draw: Optional[int] = None

    def open(self, query: str) -> Optional[Project]:
        if not self.is_open:
            self.is_open = True
            self.draw = None
        return self.current(query)

    def current(self, query: str) -> Optional[Project]:
        if not self.is_open:
            return None
        if self.draw is None:
            # defer the draw until something is visible
            if not self._store.filter(query):
                return None
            self.draw = self._rng.getrandbits(DRAW_BITS)
            self._log.debug("Drew %s for filter %r", self.draw, query)
        try:
            return self._store.pick_index(query, self.draw)
        except NothingToPick:
            return None

    def close(self) -> None:
        self.is_open = False
        self.draw = None
