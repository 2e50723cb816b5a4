from decimal import Decimal
from django.db import transaction
import logging

from orders.exceptions import NotFound, ItemUnavailable
from .models import MenuItem, Category

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Read side of the menu catalog as seen by the order engine, plus the few
    write paths (update, archive, delete) whose side effects reach orders.
    """

    UPDATABLE_FIELDS = ("name", "price", "description", "image_url", "available", "category")

    @staticmethod
    def get_item(item_id) -> MenuItem:
        """
        Look up a menu item by id, including archived items.

        Raises:
            NotFound: If no menu item with this id exists
        """
        try:
            return MenuItem.all_objects.get(id=item_id)
        except (MenuItem.DoesNotExist, ValueError, TypeError):
            raise NotFound(f"Menu item {item_id} does not exist.")

    @staticmethod
    def get_orderable_items(item_ids) -> dict:
        """
        Resolve a batch of menu item ids for a new order line set.

        Returns:
            Dict of id -> MenuItem for every requested id

        Raises:
            NotFound: If any id does not exist
            ItemUnavailable: If any item is switched off or archived
        """
        wanted = set(item_ids)
        items = MenuItem.all_objects.in_bulk(list(wanted))

        missing = sorted(wanted - set(items))
        if missing:
            raise NotFound(
                f"Menu item {missing[0]} does not exist."
                if len(missing) == 1
                else f"Menu items {missing} do not exist."
            )

        for item in items.values():
            if not item.can_be_ordered:
                raise ItemUnavailable(f"'{item.name}' is not currently available.")

        return items

    @staticmethod
    def list_available_items():
        return (
            MenuItem.objects.filter(available=True)
            .select_related("category")
            .order_by("category__name", "name")
        )

    @staticmethod
    @transaction.atomic
    def create_item(category: Category, name: str, price: Decimal, **extra) -> MenuItem:
        item = MenuItem(category=category, name=name, price=price, **extra)
        item.full_clean()
        item.touch()
        logger.info(f"Added menu item '{item.name}' at {item.price}")
        return item

    @staticmethod
    @transaction.atomic
    def update_item(item_id, **changes) -> MenuItem:
        """
        Updates catalog fields of a menu item. Price changes only affect
        orders placed afterwards; existing lines keep their captured price.
        """
        unknown = set(changes) - set(CatalogService.UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update menu item fields: {', '.join(sorted(unknown))}")

        item = CatalogService.get_item(item_id)
        for field, value in changes.items():
            setattr(item, field, value)
        item.full_clean()
        item.touch(*changes.keys())
        return item

    @staticmethod
    def set_availability(item_id, available: bool) -> MenuItem:
        return CatalogService.update_item(item_id, available=available)

    @staticmethod
    @transaction.atomic
    def archive_item(item_id) -> MenuItem:
        """Withdraws an item from the menu while keeping its order history."""
        item = CatalogService.get_item(item_id)
        item.archive()
        logger.info(f"Archived menu item '{item.name}' (id={item.id})")
        return item

    @staticmethod
    @transaction.atomic
    def delete_item(item_id) -> None:
        """
        Permanently deletes a menu item. Order lines referencing it are
        deleted too and the affected order totals are recomputed.
        """
        item = CatalogService.get_item(item_id)
        line_count = item.order_lines.count()
        item.delete()
        logger.warning(
            f"Deleted menu item '{item.name}' (id={item_id}); "
            f"{line_count} historical order lines removed with it"
        )
