"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: valid payloads, alias handling, frozen immutability.
- Falsy-as-missing validation, including a zero price.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.products.dtos import MISSING_FIELDS_MESSAGE, CreateProductDTO

pytestmark = pytest.mark.unit


def _payload(**overrides):
    data = {
        "name": "Chair",
        "price": 49.99,
        "description": "Oak chair",
        "mediaUrl": "http://x/chair.png",
    }
    data.update(overrides)
    return data


# ===========================================================================
# Valid payloads
# ===========================================================================


class TestCreateProductDTOValid:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(**_payload())
        assert dto.name == "Chair"
        assert dto.price == 49.99
        assert dto.description == "Oak chair"
        assert dto.media_url == "http://x/chair.png"

    def test_accepts_field_name_for_media_url(self):
        data = _payload()
        data["media_url"] = data.pop("mediaUrl")
        dto = CreateProductDTO(**data)
        assert dto.media_url == "http://x/chair.png"

    def test_string_price_is_parsed(self):
        dto = CreateProductDTO(**_payload(price="12.50"))
        assert dto.price == 12.5

    def test_negative_price_is_accepted(self):
        dto = CreateProductDTO(**_payload(price=-5))
        assert dto.price == -5.0

    @pytest.mark.parametrize("price", [49.999, 1e12, "19.995"])
    def test_price_precision_is_not_restricted(self, price):
        dto = CreateProductDTO(**_payload(price=price))
        assert dto.price == float(price)

    def test_numeric_name_becomes_string(self):
        dto = CreateProductDTO(**_payload(name=5))
        assert dto.name == "5"

    def test_to_fields_uses_model_field_names(self):
        dto = CreateProductDTO(**_payload())
        assert dto.to_fields() == {
            "name": "Chair",
            "price": 49.99,
            "description": "Oak chair",
            "media_url": "http://x/chair.png",
        }

    def test_dto_is_frozen(self):
        dto = CreateProductDTO(**_payload())
        with pytest.raises(ValidationError):
            dto.name = "Sofa"


# ===========================================================================
# Falsy-as-missing validation
# ===========================================================================


class TestCreateProductDTOValidation:
    def test_zero_price_raises(self):
        with pytest.raises(ValidationError, match=MISSING_FIELDS_MESSAGE):
            CreateProductDTO(**_payload(price=0))

    def test_zero_float_price_raises(self):
        with pytest.raises(ValidationError, match=MISSING_FIELDS_MESSAGE):
            CreateProductDTO(**_payload(price=0.0))

    @pytest.mark.parametrize("field", ["name", "price", "description", "mediaUrl"])
    def test_none_field_raises(self, field):
        with pytest.raises(ValidationError, match=MISSING_FIELDS_MESSAGE):
            CreateProductDTO(**_payload(**{field: None}))

    @pytest.mark.parametrize("field", ["name", "description", "mediaUrl"])
    def test_empty_string_raises(self, field):
        with pytest.raises(ValidationError, match=MISSING_FIELDS_MESSAGE):
            CreateProductDTO(**_payload(**{field: ""}))

    def test_missing_key_raises(self):
        data = _payload()
        del data["description"]
        with pytest.raises(ValidationError, match=MISSING_FIELDS_MESSAGE):
            CreateProductDTO(**data)

    def test_non_numeric_price_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(**_payload(price="cheap"))

    def test_infinite_price_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(**_payload(price="inf"))

    def test_non_mapping_input_raises(self):
        with pytest.raises(ValidationError, match=MISSING_FIELDS_MESSAGE):
            CreateProductDTO.model_validate(["Chair", 49.99])
