from django.db import IntegrityError, transaction
from django.utils import timezone
import logging

from orders.exceptions import NotFound, InvalidTableNumber
from orders.models import DiningTable, Order

logger = logging.getLogger(__name__)


class OrderService:
    """Core repository operations for orders - creating, finding, deleting."""

    @staticmethod
    def validate_table_number(table_number) -> int:
        """
        Raises:
            InvalidTableNumber: If table_number is not a positive integer
        """
        if isinstance(table_number, bool) or not isinstance(table_number, int) or table_number <= 0:
            raise InvalidTableNumber(
                f"Table number must be a positive integer, got {table_number!r}."
            )
        return table_number

    @staticmethod
    @transaction.atomic
    def create_order(table_number: int) -> Order:
        """
        Creates a new, empty order for a table.

        The order starts in status New with a zero total and no line items.
        Any number of orders may exist for a table; only place-or-merge
        decides whether a cart opens a new one.

        Raises:
            InvalidTableNumber: If table_number is not a positive integer
        """
        OrderService.validate_table_number(table_number)

        order = Order(table_number=table_number)
        order.touch()
        logger.info(f"Created order {order.id} for table {table_number}")
        return order

    @staticmethod
    def get_order(order_id) -> Order:
        """
        Raises:
            NotFound: If the order does not exist
        """
        try:
            return Order.objects.get(pk=order_id)
        except (Order.DoesNotExist, ValueError, TypeError):
            raise NotFound(f"Order {order_id} does not exist.")

    @staticmethod
    def lock_order(order_id) -> Order:
        """
        Fetches an order with a row lock held until the surrounding
        transaction ends. Every write to an order goes through here so that
        concurrent writers to the same order are serialized.

        Must be called inside transaction.atomic().

        Raises:
            NotFound: If the order does not exist
        """
        try:
            return Order.objects.select_for_update().get(pk=order_id)
        except (Order.DoesNotExist, ValueError, TypeError):
            raise NotFound(f"Order {order_id} does not exist.")

    @staticmethod
    def lock_table(table_number: int) -> None:
        """
        Takes the table's placement lock until the surrounding transaction
        ends. The lock is a write to the table's DiningTable row, which holds
        a row lock on PostgreSQL and the write lock on SQLite, so it must come
        before the table's orders are read.

        Must be called inside transaction.atomic().
        """
        now = timezone.now()
        if DiningTable.objects.filter(table_number=table_number).update(last_placement_at=now):
            return

        try:
            with transaction.atomic():
                DiningTable.objects.create(table_number=table_number, last_placement_at=now)
        except IntegrityError:
            # A concurrent placement created the row first; wait for its lock
            DiningTable.objects.filter(table_number=table_number).update(last_placement_at=now)

    @staticmethod
    def get_line_items(order_id):
        order = OrderService.get_order(order_id)
        return order.items.select_related("menu_item").order_by("id")

    @staticmethod
    def find_open_order_for_table(table_number: int):
        """
        Returns the most recently updated order for the table that is not
        Fulfilled, or None.
        """
        OrderService.validate_table_number(table_number)
        return (
            Order.objects.filter(table_number=table_number)
            .exclude(status=Order.OrderStatus.FULFILLED)
            .order_by("-updated_at", "-id")
            .first()
        )

    @staticmethod
    def orders_for_table(table_number: int):
        """Order history for a table, newest first, with line items prefetched."""
        OrderService.validate_table_number(table_number)
        return (
            Order.objects.filter(table_number=table_number)
            .prefetch_related("items__menu_item")
            .order_by("-order_time", "-id")
        )

    @staticmethod
    @transaction.atomic
    def delete_order(order_id) -> None:
        """
        Deletes an order together with all of its line items.

        Raises:
            NotFound: If the order does not exist
        """
        order = OrderService.lock_order(order_id)
        table_number = order.table_number
        _, deleted = order.delete()
        logger.info(
            f"Deleted order {order_id} for table {table_number} "
            f"({deleted.get('orders.OrderItem', 0)} line items)"
        )

    @staticmethod
    @transaction.atomic
    def reset_all_orders() -> int:
        """
        Deletes every order and, by cascade, every line item. Used to close out
        a sales period; cannot be undone.

        Returns:
            Number of orders deleted
        """
        _, deleted = Order.objects.all().delete()
        order_count = deleted.get("orders.Order", 0)
        logger.warning(
            f"Sales data reset: deleted {order_count} orders and "
            f"{deleted.get('orders.OrderItem', 0)} line items"
        )
        return order_count
