"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).  Input is
validated by ``CreateProductDTO``; this serializer only renders stored
products into the wire representation.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    mediaUrl = serializers.CharField(source="media_url")

    class Meta:
        model = Product
        fields = ["id", "name", "price", "description", "mediaUrl"]
        read_only_fields = fields
