from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from menu.models import Category, MenuItem
from menu.services import CatalogService


CATEGORIES = ["Appetizers", "Main Dishes", "Drinks"]

MENU_ITEMS = [
    {
        "name": "Cheese Burger",
        "price": Decimal("12.00"),
        "category": "Main Dishes",
        "description": "Beef, cheddar, and brioche.",
        "image_url": "picture/burger.jpg",
    },
    {
        "name": "French Fries",
        "price": Decimal("5.00"),
        "category": "Appetizers",
        "description": "Sea salt and rosemary.",
        "image_url": "picture/fries.jpg",
    },
    {
        "name": "Iced Cola",
        "price": Decimal("2.50"),
        "category": "Drinks",
        "description": "Chilled with lemon slice.",
        "image_url": "picture/cola.webp",
    },
    {
        "name": "Orange Juice",
        "price": Decimal("4.00"),
        "category": "Drinks",
        "description": "100% freshly squeezed.",
        "image_url": "picture/orange.jpg",
    },
]


class Command(BaseCommand):
    help = "Seed the default menu categories and items"

    @transaction.atomic
    def handle(self, *args, **options):
        categories = {}
        for name in CATEGORIES:
            categories[name], _ = Category.objects.get_or_create(name=name)

        created = 0
        updated = 0
        for data in MENU_ITEMS:
            fields = {**data, "category": categories[data["category"]]}
            existing = MenuItem.all_objects.filter(name=data["name"]).first()
            if existing is None:
                CatalogService.create_item(**fields)
                created += 1
            else:
                CatalogService.update_item(existing.id, **fields)
                updated += 1

        self.stdout.write(self.style.SUCCESS(
            f"Menu seeded. Categories: {len(categories)}, Items created: {created}, Updated: {updated}"
        ))
