"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
contract between the API layer and the Service layer and are immutable
(``frozen=True``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

REQUIRED_FIELDS = ("name", "price", "description", "mediaUrl")

MISSING_FIELDS_MESSAGE = "Product missing one or more fields"


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Every field must be present **and truthy**.  A price of ``0`` counts as
    missing and is rejected along with empty strings and ``None``.  Any other
    number is stored as given; numeric names and descriptions become strings.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    name: str
    price: float = Field(allow_inf_nan=False)
    description: str
    media_url: str = Field(alias="mediaUrl")

    @model_validator(mode="before")
    @classmethod
    def require_truthy_fields(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise ValueError(MISSING_FIELDS_MESSAGE)
        values = [data.get(field) for field in REQUIRED_FIELDS[:3]]
        values.append(data.get("mediaUrl", data.get("media_url")))
        if not all(values):
            raise ValueError(MISSING_FIELDS_MESSAGE)
        return data

    def to_fields(self) -> dict[str, Any]:
        """Return the model field values to hand to the repository."""
        return self.model_dump(by_alias=False)
