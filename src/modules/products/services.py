"""Product service layer (Use Cases).

Orchestrates the Product use cases, delegating persistence to the injected
``IProductRepository`` and announcing changes on the event bus.  The service
performs no existence checks of its own and never retries a store call:
``StoreError`` propagates to the API layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.events import ProductCreated, ProductDeleted
from shared.infrastructure.bus import event_bus as default_event_bus

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._repo = repository
        self._bus = event_bus or default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Store a new product built from an already validated DTO."""
        product = self._repo.create(**dto.to_fields())
        logger.info("product.created", product_id=str(product.id), name=product.name)
        self._bus.publish(ProductCreated(product_id=str(product.id)))
        return product

    def delete_product(self, id: str) -> None:
        """Delete a product by ID, whether or not it exists."""
        self._repo.delete(id)
        logger.info("product.delete_requested", product_id=str(id))
        self._bus.publish(ProductDeleted(product_id=str(id)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product in the catalog."""
        return self._repo.list()

    def get_product(self, id: str) -> Optional[Product]:
        """Retrieve a single product by ID, or ``None`` when absent."""
        product = self._repo.get_by_id(id)
        logger.info("product.retrieved", product_id=str(id), found=product is not None)
        return product
