"""Event handlers for Products domain events."""

from __future__ import annotations

import structlog

from modules.products.events import ProductCreated, ProductDeleted
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class ProductCreatedHandler(IEventHandler[ProductCreated]):
    def handle(self, event: ProductCreated) -> None:
        logger.info("product.created.handled", product_id=event.product_id)


class ProductDeletedHandler(IEventHandler[ProductDeleted]):
    def handle(self, event: ProductDeleted) -> None:
        logger.info("product.deleted.handled", product_id=event.product_id)


product_created_handler = ProductCreatedHandler()
product_deleted_handler = ProductDeletedHandler()
