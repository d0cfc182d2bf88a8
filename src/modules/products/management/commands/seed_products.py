from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.core.store import connect_store
from modules.products.models import Product

SEED_PRODUCTS = [
    (
        "Oak Dining Chair",
        49.99,
        "Solid oak chair with a curved backrest.",
        "/static/products/oak-chair.png",
    ),
    (
        "Walnut Coffee Table",
        189.00,
        "Low walnut table with a lower shelf.",
        "/static/products/walnut-table.png",
    ),
    (
        "Linen Sofa",
        749.50,
        "Three-seat sofa upholstered in washed linen.",
        "/static/products/linen-sofa.png",
    ),
    (
        "Brass Floor Lamp",
        129.90,
        "Adjustable floor lamp with a brushed brass finish.",
        "/static/products/brass-lamp.png",
    ),
    (
        "Pine Bookshelf",
        95.00,
        "Five-shelf bookcase in natural pine.",
        "/static/products/pine-bookshelf.png",
    ),
]


class Command(BaseCommand):
    help = "Seed the catalog with development furniture products."

    def handle(self, *args, **options):
        store = connect_store()
        self.stdout.write(f"Seeding products into '{store.alias}'...")

        created = 0
        for name, price, description, media_url in SEED_PRODUCTS:
            _, was_created = Product.objects.using(store.alias).get_or_create(
                name=name,
                defaults={
                    "price": price,
                    "description": description,
                    "media_url": media_url,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={len(SEED_PRODUCTS)}, created={created}"
            )
        )
