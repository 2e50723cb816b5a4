from typing import NamedTuple

from django.db import transaction
import logging

from orders.models import Order
from orders.services.item_service import OrderItemService
from orders.services.order_service import OrderService

logger = logging.getLogger(__name__)


class PlacementResult(NamedTuple):
    order: Order
    created: bool


class OrderPlacementService:
    """
    Customer-facing "place or add to an order" operation.

    A table's successive carts accumulate into its New order. Once the kitchen
    has started an order (In Progress) or finished it (Fulfilled), the next
    cart starts a fresh order instead, so items are never silently added to
    something that is already being prepared.
    """

    @staticmethod
    def place_or_merge(table_number, lines) -> PlacementResult:
        """
        Args:
            table_number: Positive table number submitting the cart
            lines: Iterable of {"menu_item_id": int, "quantity": int}

        Returns:
            PlacementResult(order, created) - created is True when a new order
            was opened for the cart

        Raises:
            InvalidTableNumber, EmptyCart, InvalidQuantity, NotFound,
            ItemUnavailable: Nothing is written when any of these is raised
        """
        OrderService.validate_table_number(table_number)
        lines = [
            {"menu_item_id": menu_item_id, "quantity": quantity}
            for menu_item_id, quantity in OrderItemService.normalize_lines(lines)
        ]
        return OrderPlacementService._place(table_number, lines)

    @staticmethod
    @transaction.atomic
    def _place(table_number: int, lines) -> PlacementResult:
        # Concurrent carts for this table wait here until this one commits,
        # then see the order it opened.
        OrderService.lock_table(table_number)

        target = OrderPlacementService._lock_new_order_for_table(table_number)

        created = target is None
        if created:
            target = OrderService.create_order(table_number)

        OrderItemService.append_to_locked_order(target, lines)

        logger.info(
            f"{'Placed new' if created else 'Merged cart into'} order {target.id} "
            f"for table {table_number}"
        )
        return PlacementResult(order=target, created=created)

    @staticmethod
    def _lock_new_order_for_table(table_number: int):
        """
        Returns the table's most recently updated New order locked for update,
        or None when the cart has to start a new order.
        """
        new_order = (
            Order.objects.filter(table_number=table_number, status=Order.OrderStatus.NEW)
            .order_by("-updated_at", "-id")
            .first()
        )
        if new_order is None:
            return None

        locked = OrderService.lock_order(new_order.id)
        # The kitchen may have picked it up between the lookup and the lock
        if locked.status != Order.OrderStatus.NEW:
            return None
        return locked
