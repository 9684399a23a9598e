# Rev 0.1.1

"""Pytest fixtures for erabu (Rev 0.1.1)"""
from __future__ import annotations
import os
import random
import pytest
from pathlib import Path

from erabu.services.project_store import ProjectStore


class FixedDraws:
    """Random source that replays a fixed list of draws."""

    def __init__(self, *draws: int):
        self._draws = list(draws)
        self.calls = 0

    def getrandbits(self, k: int) -> int:
        self.calls += 1
        return self._draws.pop(0)


@pytest.fixture()
def store() -> ProjectStore:
    s = ProjectStore()
    s.add("Build shed", "diy outdoor")
    s.add("Read book", "leisure")
    return s


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def fixed_draws():
    return FixedDraws


@pytest.fixture()
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "config" / "settings.json"


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
