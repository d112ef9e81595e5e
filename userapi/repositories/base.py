"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List

T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Abstracts data access keyed by integer id. Implementations own their
    storage outright; callers only ever receive immutable entities.
    """

    @abstractmethod
    def get(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""
        pass

    @abstractmethod
    def create(self, entity: T) -> T:
        """Store entity under a freshly allocated ID."""
        pass

    @abstractmethod
    def update(self, id: int, entity: T) -> Optional[T]:
        """Replace entity by ID. Returns None if not found."""
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Delete entity by ID. Returns True if deleted, False if not found."""
        pass

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Check whether an entity with ID is stored."""
        pass
