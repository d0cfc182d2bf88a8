"""Domain events for the Products bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ProductCreated(DomainEvent):
    """Raised when a product is stored."""

    product_id: str


@dataclass(frozen=True, kw_only=True)
class ProductDeleted(DomainEvent):
    """Raised when a delete was requested for a product id.

    Published whether or not a record existed for the id.
    """

    product_id: str
