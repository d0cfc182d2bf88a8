from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.products.events import ProductCreated, ProductDeleted
        from modules.products.handlers import (
            product_created_handler,
            product_deleted_handler,
        )
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(ProductCreated, product_created_handler)
        event_bus.subscribe(ProductDeleted, product_deleted_handler)
