from django.db import transaction
import logging

from menu.services import CatalogService
from orders.exceptions import EmptyCart, InvalidQuantity, InvalidTransition, NotFound
from orders.models import Order, OrderItem
from orders.services.calculation_service import OrderCalculationService
from orders.services.order_service import OrderService

logger = logging.getLogger(__name__)


class OrderItemService:
    """Service for adding line items to orders."""

    @staticmethod
    def normalize_lines(lines) -> list:
        """
        Validates a cart before anything is written.

        Args:
            lines: Iterable of mappings with "menu_item_id" and "quantity"

        Returns:
            List of (menu_item_id, quantity) tuples in submission order

        Raises:
            EmptyCart: If there are no lines
            InvalidQuantity: If a quantity is not a positive integer
            NotFound: If a line does not name a menu item
        """
        normalized = []
        for line in lines or []:
            menu_item_id = line.get("menu_item_id")
            quantity = line.get("quantity")

            if isinstance(menu_item_id, bool) or not isinstance(menu_item_id, int):
                raise NotFound(f"Cart line does not reference a valid menu item: {menu_item_id!r}.")
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                raise InvalidQuantity(
                    f"Quantity for menu item {menu_item_id} must be a positive integer, got {quantity!r}."
                )
            normalized.append((menu_item_id, quantity))

        if not normalized:
            raise EmptyCart("An order needs at least one line item.")
        return normalized

    @staticmethod
    @transaction.atomic
    def append_line_items(order_id, lines) -> Order:
        """
        Adds line items to an existing New order and recomputes its total in
        the same transaction. Either every line is added or none is.

        Each line captures the menu item's current price; later catalog
        price changes do not affect it.

        Raises:
            NotFound: If the order or any menu item does not exist
            InvalidQuantity: If any quantity is not a positive integer
            ItemUnavailable: If any menu item is not currently offered
            EmptyCart: If no lines are given
            InvalidTransition: If the order is no longer New
        """
        order = OrderService.lock_order(order_id)
        return OrderItemService.append_to_locked_order(order, lines)

    @staticmethod
    def append_to_locked_order(order: Order, lines) -> Order:
        """
        Core of append_line_items for callers that already hold the order's
        row lock inside an open transaction.
        """
        # Adding lines puts the order back to New. Only a New order may
        # receive them, or the kitchen would see a started order move backward.
        if order.status != Order.OrderStatus.NEW:
            raise InvalidTransition(
                f"Cannot add items to order {order.id}: it is {order.status}, not {Order.OrderStatus.NEW}."
            )

        normalized = OrderItemService.normalize_lines(lines)
        menu_items = CatalogService.get_orderable_items(
            menu_item_id for menu_item_id, _ in normalized
        )

        for menu_item_id, quantity in normalized:
            menu_item = menu_items[menu_item_id]
            OrderItem.objects.create(
                order=order,
                menu_item=menu_item,
                quantity=quantity,
                item_price=menu_item.price,
            )

        order.status = Order.OrderStatus.NEW
        OrderCalculationService.recalculate_order_totals(order, "status")

        logger.info(
            f"Added {len(normalized)} line items to order {order.id} "
            f"(table {order.table_number}); total is now {order.total_amount}"
        )
        return order
