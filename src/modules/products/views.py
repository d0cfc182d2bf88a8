"""Product API views.

``ProductView`` serves the single product resource and dispatches by HTTP
method: GET (by id), POST (create), DELETE (by id).  Every other method is
answered with a plain-text 405.  ``ProductListView`` serves the read-only
listing.  Store failures are caught at this boundary and answered with a
plain-text 500 instead of escaping as an unhandled fault.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from django.http import HttpResponse
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.exceptions import StoreError
from modules.core.store import StoreConnection, connect_store
from modules.products.dtos import MISSING_FIELDS_MESSAGE, REQUIRED_FIELDS, CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

STORE_FAILURE_MESSAGE = "Product store unavailable"


def _plain_text(message: str, status_code: int) -> HttpResponse:
    return HttpResponse(message, status=status_code, content_type="text/plain; charset=utf-8")


class ProductServiceMixin:
    """Builds a ``ProductService`` over the process-wide store handle.

    ``store`` may be injected through ``as_view(store=...)``; otherwise the
    handle returned by ``connect_store()`` is used.
    """

    store: Optional[StoreConnection] = None

    def get_service(self) -> ProductService:
        store = self.store or connect_store()
        return ProductService(repository=ProductDjangoRepository(store=store))

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, StoreError):
            logger.exception("product.store_failure", error=str(exc))
            return _plain_text(STORE_FAILURE_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return super().handle_exception(exc)

    def http_method_not_allowed(self, request: Request, *args: Any, **kwargs: Any) -> HttpResponse:
        logger.warning("product.method_not_allowed", method=request.method)
        return _plain_text(
            f"Method {request.method} not allowed",
            status.HTTP_405_METHOD_NOT_ALLOWED,
        )


def _product_id(request: Request) -> Optional[str]:
    # ``_id`` is accepted for storefront clients that send the document key.
    return request.query_params.get("id") or request.query_params.get("_id")


class ProductView(ProductServiceMixin, APIView):
    """Single product resource at ``/api/product``."""

    http_method_names = ["get", "post", "delete"]

    def get(self, request: Request) -> Response:
        """GET /api/product?id=<id>

        Answers 200 in both cases: the product, or an empty body when no
        product matches.
        """
        product_id = _product_id(request)
        product = self.get_service().get_product(product_id) if product_id else None
        data = ProductSerializer(product).data if product is not None else None
        return Response(data, status=status.HTTP_200_OK)

    def post(self, request: Request) -> Response:
        """POST /api/product"""
        data = request.data if hasattr(request.data, "get") else {}
        payload = {field: data.get(field) for field in REQUIRED_FIELDS}

        try:
            dto = CreateProductDTO(**payload)
        except (PydanticValidationError, ValueError) as exc:
            logger.info("product.rejected", errors=str(exc))
            return _plain_text(MISSING_FIELDS_MESSAGE, status.HTTP_422_UNPROCESSABLE_ENTITY)

        product = self.get_service().create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def delete(self, request: Request) -> Response:
        """DELETE /api/product?id=<id>

        Always 204: deleting an unknown id is accepted.
        """
        product_id = _product_id(request)
        if product_id:
            self.get_service().delete_product(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProductListView(ProductServiceMixin, APIView):
    """Read-only product listing at ``/api/products``."""

    http_method_names = ["get"]

    def get(self, request: Request) -> Response:
        """GET /api/products"""
        products = self.get_service().list_products()
        return Response(ProductSerializer(products, many=True).data)
