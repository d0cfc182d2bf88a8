"""Product repository interface.

Extends ``IRepository[Product]`` with nothing beyond the generic CRUD
contract: the catalog has no product-specific look-ups.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
