"""
Generic repository contract.

Services depend on these abstractions; the Django ORM implementations
live next to each app's models.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar('T')

# Primary keys are BigAutoField; ids outside this range match no row.
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def is_storable_id(id) -> bool:
    """True if ``id`` fits the signed 64-bit primary key column."""
    return id is not None and MIN_ID <= id <= MAX_ID


class Repository(ABC, Generic[T]):
    """CRUD contract shared by every repository."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by primary key, or None."""

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Remove an entity by primary key."""
