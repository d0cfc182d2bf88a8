"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API against the
store alias carried by a ``StoreConnection`` handle.  Missing records follow
the Null Object pattern (``None`` / no-op); driver failures are re-raised as
``ProductStoreError`` so the API layer can map them to a 500 response.
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import DatabaseError

from modules.core.store import StoreConnection
from modules.products.exceptions import ProductStoreError
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def __init__(self, store: Optional[StoreConnection] = None) -> None:
        self._store = store or StoreConnection()

    @property
    def _objects(self):
        return Product.objects.using(self._store.alias)

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return self._objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None
        except DatabaseError as exc:
            raise ProductStoreError(f"Failed to load product {id}: {exc}") from exc

    def list(self) -> List[Product]:
        """List every product in the store's natural order."""
        try:
            return list(self._objects.all())
        except DatabaseError as exc:
            raise ProductStoreError(f"Failed to list products: {exc}") from exc

    def create(self, **fields: Any) -> Product:
        """Insert a new product; the store assigns its id."""
        try:
            product = self._objects.create(**fields)
        except DatabaseError as exc:
            raise ProductStoreError(f"Failed to create product: {exc}") from exc
        logger.info("product.saved", product_id=str(product.id))
        return product

    def delete(self, id: str) -> None:
        """Hard-delete a product by ID.

        A missing or malformed ID is a no-op, so repeated deletes of the
        same ID all succeed.
        """
        try:
            deleted, _ = self._objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            deleted = 0
        except DatabaseError as exc:
            raise ProductStoreError(f"Failed to delete product {id}: {exc}") from exc
        logger.info("product.deleted", product_id=str(id), deleted=deleted)
