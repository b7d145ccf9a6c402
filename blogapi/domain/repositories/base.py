"""Base repository interface shared by users and blogs."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Identity-based persistence for one aggregate type.

    Identifiers are opaque strings owned by the store. Passing an id the
    store could never have produced is not an error: lookups return None,
    deletes return False.
    """

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[T]:
        """Return the entity, or None when no entity has this id."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Store a new entity and return it carrying its generated id."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Write back the mutable fields of a stored entity.

        Raises:
            ValueError: If the entity is not stored
        """
        pass

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """Remove the entity; False when there was nothing to remove."""
        pass

    @abstractmethod
    async def exists(self, id: str) -> bool:
        pass
