# erabu application context
# Rev 0.1.0

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .dev_seed import seed_examples
from .services.project_store import ProjectStore, RandomSource
from .utils.config import load_settings
from .utils.logging_setup import get_logger
from .viewmodels.projects_viewmodel import ProjectsViewModel


@dataclass
class AppContext:
    """Central container for shared app resources."""
    settings: Dict[str, Any]
    store: ProjectStore
    rng: RandomSource
    projects_vm: ProjectsViewModel

    @classmethod
    def create(cls, settings: Optional[Dict[str, Any]] = None, rng: Optional[RandomSource] = None) -> "AppContext":
        log = get_logger("AppContext")
        settings = settings if settings is not None else load_settings()
        store = ProjectStore()
        if settings.get("ui", {}).get("seed_examples", False):
            seed_examples(store)
        if rng is None:
            rng = random.Random(settings.get("random_seed"))
        vm = ProjectsViewModel(store, rng)
        log.info("AppContext initialized with %d project(s)", len(store))
        return cls(settings=settings, store=store, rng=rng, projects_vm=vm)
