"""List helpers shared by the slice reducers.

Each helper returns a new list, or the original list unchanged when no item
matches, so reducers can detect no-ops by identity.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence, TypeVar


class _HasId(Protocol):
    id: str


T = TypeVar("T", bound=_HasId)


def find_by_id(items: Sequence[T], item_id: str) -> Optional[T]:
    return next((item for item in items if item.id == item_id), None)


def replace_by_id(items: list[T], item: T) -> list[T]:
    for index, existing in enumerate(items):
        if existing.id == item.id:
            updated = list(items)
            updated[index] = item
            return updated
    return items


def update_by_id(items: list[T], item_id: str, change: Callable[[T], T]) -> list[T]:
    existing = find_by_id(items, item_id)
    if existing is None:
        return items
    return replace_by_id(items, change(existing))


def remove_by_id(items: list[T], item_id: str) -> list[T]:
    remaining = [item for item in items if item.id != item_id]
    return items if len(remaining) == len(items) else remaining
