"""Unit tests for the abstract BaseModel."""

from __future__ import annotations

import pytest
from django.db import models

from modules.core.models import BaseModel
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestBaseModel:
    def test_ids_are_uuid7(self):
        product = Product.objects.create(
            name="Chair", price=49.99, description="Oak", media_url="m"
        )
        assert product.id.version == 7

    def test_timestamps_set_on_create(self):
        product = Product.objects.create(
            name="Chair", price=49.99, description="Oak", media_url="m"
        )
        assert product.created_at is not None
        assert product.updated_at >= product.created_at

    def test_save_is_plain_model_save(self):
        assert BaseModel.save is models.Model.save
