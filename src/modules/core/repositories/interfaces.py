"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Product``).  Implementations raise ``StoreError`` on
    infrastructure failures and never validate business fields.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None`` if absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return every stored entity in the store's natural order."""

    @abstractmethod
    def create(self, **fields: Any) -> T:
        """Persist a new entity; the store assigns its id."""

    @abstractmethod
    def delete(self, id: str) -> None:
        """Remove an entity by ID.  Missing ids are not an error."""
