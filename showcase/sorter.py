"""
sorter.py

Responsibility: Display ordering of showcase entries.

Favorites come first; within each group entries are alphabetical by title
(case-insensitive). This relies on two *stable* sorts applied in order: by
title first, then by the favorite flag.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, TypeVar

from showcase.validator import TAG_FAVORITE


class Sortable(Protocol):
    @property
    def title(self) -> str: ...

    @property
    def tags(self) -> Sequence[str]: ...


T = TypeVar("T", bound=Sortable)


def sort_showcases(entries: Iterable[T]) -> tuple[T, ...]:
    """Return a new sorted tuple; the input is left untouched."""
    result = sorted(entries, key=lambda e: e.title.lower())
    result = sorted(result, key=lambda e: TAG_FAVORITE not in e.tags)
    return tuple(result)
