from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Catalog resource paths consumed by the storefront
    path("api/", include("modules.products.urls")),
    # OpenAPI schema & docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
