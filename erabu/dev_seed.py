# Rev 0.1.0
"""
Developer seed: fills a fresh store with example projects so the list,
filter and pick can be exercised without typing anything in.

Usage:
    python -m erabu.dev_seed
"""
from __future__ import annotations

from .services.project_store import ProjectStore

EXAMPLE_COUNT = 99
EXAMPLE_TAGS = ("an tag", "an other tag")


def seed_examples(store: ProjectStore, count: int = EXAMPLE_COUNT) -> ProjectStore:
    for i in range(count):
        store.append(f"a kinda long project title example {i}", EXAMPLE_TAGS)
    return store


def run_seed() -> None:
    store = seed_examples(ProjectStore())
    print(f"=== Seeded {len(store)} projects ===")
    for p in store.filter("")[:5]:
        print(f"  {p.id:>3}  {p.title}  {p.tags}")


if __name__ == "__main__":
    run_seed()
