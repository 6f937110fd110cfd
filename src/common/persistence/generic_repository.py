# src/common/persistence/generic_repository.py
"""Generic CRUD repository interface."""
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class IGenericRepository(ABC, Generic[T, ID]):
    """CRUD contract shared by every entity repository.

    ``find_by_id`` returns None when nothing matches; storage failures are
    raised as ``DatabaseError`` and never reported as a missing row.
    """

    @abstractmethod
    def create(self, entity: T) -> bool:
        """Inserts a new row. Returns True when exactly one row was written."""
        pass

    @abstractmethod
    def update(self, entity: T) -> bool:
        """Replaces all mutable fields of the row matching the entity id."""
        pass

    @abstractmethod
    def delete(self, entity_id: ID) -> bool:
        """Removes the row with the given id."""
        pass

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> Optional[T]:
        """Retrieves the entity with the given id, or None."""
        pass

    @abstractmethod
    def find_all(self) -> list[T]:
        """Retrieves all entities in a deterministic order."""
        pass

    @abstractmethod
    def exists(self, table_name: str, entity_id: ID) -> bool:
        """Checks whether a row with the given id exists in ``table_name``."""
        pass
