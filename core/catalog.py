"""QUOTE API FILE PURPOSE
Purpose: immutable in-memory quote catalog (random pick, tag filter, full listing, process stats).
Hot path: yes (every quote request reads the catalog; bounded linear scan, no I/O).
Public interfaces:
  - Quote (frozen pydantic model)
  - Catalog.random_quote() / quotes_by_tag(tag) / all_quotes() / stats()
  - TagNotFound
  - get_catalog(), set_catalog(catalog), build_catalog(seed)
Reads/Writes: none (seed list is hardcoded; memory reading via psutil).
Feature flags: QUOTE_RANDOM_SEED (optional deterministic random pick).
Failure mode: empty catalog or malformed seed => fail fast at startup; tag miss => TagNotFound.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

import psutil
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.config import env_int


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(min_length=1)
    author: str = Field(min_length=1)
    tags: tuple[str, ...] = ()

    @field_validator("tags")
    @classmethod
    def _tags_lowercase(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        for tag in tags:
            if tag != tag.lower():
                raise ValueError(f"tag must be lowercase: {tag!r}")
        return tags


class TagNotFound(LookupError):
    """No quote carries the requested tag."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"No quotes found with tag '{tag}'")


SEED_QUOTES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("The only way to do great work is to love what you do.", "Steve Jobs", ("motivation", "work")),
    ("Innovation distinguishes between a leader and a follower.", "Steve Jobs", ("innovation", "leadership")),
    ("Code is like humor. When you have to explain it, it's bad.", "Cory House", ("programming", "humor")),
    ("First, solve the problem. Then, write the code.", "John Johnson", ("programming", "problem-solving")),
    ("Simplicity is the soul of efficiency.", "Austin Freeman", ("simplicity", "efficiency")),
    ("Make it work, make it right, make it fast.", "Kent Beck", ("programming", "best-practices")),
    (
        "Any fool can write code that a computer can understand. "
        "Good programmers write code that humans can understand.",
        "Martin Fowler",
        ("programming", "clean-code"),
    ),
    ("Premature optimization is the root of all evil.", "Donald Knuth", ("optimization", "programming")),
    ("The best error message is the one that never shows up.", "Thomas Fuchs", ("user-experience", "programming")),
    (
        "Walking on water and developing software from a specification are easy if both are frozen.",
        "Edward V. Berard",
        ("humor", "software-development"),
    ),
)


def working_set_bytes() -> int:
    return int(psutil.Process().memory_info().rss)


class Catalog:
    """Fixed, ordered quote collection.

    Never mutated after construction, so concurrent readers need no locking.
    ``rng`` replaces the process-wide ``random`` generator (tests pass a seeded
    ``random.Random``).
    """

    def __init__(self, quotes: Iterable[Quote], rng: random.Random | None = None) -> None:
        self._quotes: tuple[Quote, ...] = tuple(quotes)
        if not self._quotes:
            raise ValueError("catalog must contain at least one quote")
        self._rng = rng

    def __len__(self) -> int:
        return len(self._quotes)

    def random_quote(self) -> Quote:
        chooser = self._rng if self._rng is not None else random
        return chooser.choice(self._quotes)

    def quotes_by_tag(self, tag: str) -> tuple[Quote, ...]:
        wanted = tag.lower()
        found = tuple(q for q in self._quotes if wanted in q.tags)
        if not found:
            raise TagNotFound(tag)
        return found

    def all_quotes(self) -> tuple[Quote, ...]:
        return self._quotes

    def stats(self) -> str:
        # live reading on every call
        return f"{working_set_bytes() // 1024 // 1024} MB"


def build_catalog(seed: int | None = None) -> Catalog:
    if seed is None:
        seed = env_int("QUOTE_RANDOM_SEED")
    rng = random.Random(seed) if seed is not None else None
    quotes = [Quote(text=text, author=author, tags=tags) for text, author, tags in SEED_QUOTES]
    return Catalog(quotes, rng=rng)


_CATALOG: Catalog | None = None


def get_catalog() -> Catalog:
    global _CATALOG
    if _CATALOG is None:
        _CATALOG = build_catalog()
    return _CATALOG


def set_catalog(catalog: Catalog | None) -> None:
    global _CATALOG
    _CATALOG = catalog
