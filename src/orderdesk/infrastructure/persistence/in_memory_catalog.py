"""List-backed catalog shared by the three in-memory repositories.

Entries are kept in insertion order. Duplicate ids are not checked;
lookups return the first match. Not thread-safe.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class InMemoryCatalog(Generic[T]):

    def __init__(self, entities: list[T] | None = None) -> None:
        self._entities: list[T] = list(entities or [])

    def add(self, entity: T) -> None:
        self._entities.append(entity)

    def get_by_id(self, entity_id: int) -> T | None:
        for entity in self._entities:
            if entity.id == entity_id:  # type: ignore[attr-defined]
                return entity
        return None

    def list_all(self) -> list[T]:
        return list(self._entities)
