"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

The contract is deliberately narrow: only the operations the services
actually use (list, look-up by id, save) are declared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    @abstractmethod
    def list(self) -> List[T]:
        """List every entity in store-defined order."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist an entity and return it with its identifier populated."""
