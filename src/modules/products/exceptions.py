"""Product domain exceptions.

Creation payloads are rejected through ``pydantic.ValidationError`` raised
by ``CreateProductDTO``; store failures surface as
``modules.core.exceptions.StoreError``.  The API layer translates both into
HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import StoreError


class ProductStoreError(StoreError):
    """A product repository call failed at the store level."""
