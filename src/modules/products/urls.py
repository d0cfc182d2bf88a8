"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductListView, ProductView

urlpatterns = [
    path("product", ProductView.as_view(), name="product"),
    path("products", ProductListView.as_view(), name="product-list"),
]
