"""Product model, the single entity of the catalog.

A product is either fully present (all four business fields set) or does
not exist.  Field presence is enforced by ``CreateProductDTO`` before a
record reaches the store; the model itself carries no business validation.
Deletes are physical.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Catalog product.

    ``media_url`` is exposed on the wire as ``mediaUrl``.
    """

    name = models.CharField(max_length=255)
    price = models.FloatField()
    description = models.TextField()
    media_url = models.CharField(max_length=2048)

    class Meta:
        db_table = "products"

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
