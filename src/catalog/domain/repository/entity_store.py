"""Generic persistence contract shared by every entity repository.

Defined in the domain layer so the domain never depends on
infrastructure. One EntityStore handles exactly one entity type and
knows nothing about cross-entity rules; those belong to domain services.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class EntityStore(ABC, Generic[T]):

    @abstractmethod
    def get(self, entity_id: str) -> T | None:
        """Return the entity without its relations, or None."""

    @abstractmethod
    def get_with_relations(self, entity_id: str) -> T | None:
        """Return the entity with its relations loaded, or None."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every entity, relations not loaded."""

    @abstractmethod
    def list_with_relations(self) -> list[T]:
        """Return every entity with its relations loaded."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist a new or updated entity and return it.

        An id is assigned when the entity does not have one yet.
        """

    @abstractmethod
    def remove(self, entity: T) -> None:
        """Delete the entity."""
