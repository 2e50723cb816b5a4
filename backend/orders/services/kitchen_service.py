from django.db import transaction
import logging

from orders.exceptions import InvalidTransition
from orders.models import Order
from orders.services.order_service import OrderService

logger = logging.getLogger(__name__)


class KitchenService:
    """Service for kitchen-side operations - status changes, queue, tickets."""

    # Linear state machine: New -> In Progress -> Fulfilled
    VALID_STATUS_TRANSITIONS = {
        Order.OrderStatus.NEW: [Order.OrderStatus.IN_PROGRESS],
        Order.OrderStatus.IN_PROGRESS: [Order.OrderStatus.FULFILLED],
        Order.OrderStatus.FULFILLED: [],
    }

    # Accepted spellings besides the stored values ("New", "In Progress", "Fulfilled")
    STATUS_ALIASES = {
        "NEW": Order.OrderStatus.NEW,
        "INPROGRESS": Order.OrderStatus.IN_PROGRESS,
        "IN_PROGRESS": Order.OrderStatus.IN_PROGRESS,
        "FULFILLED": Order.OrderStatus.FULFILLED,
    }

    @staticmethod
    def parse_status(value) -> str:
        """
        Raises:
            InvalidTransition: If value names no known status
        """
        if value in Order.OrderStatus.values:
            return Order.OrderStatus(value)
        key = str(value).strip().upper().replace(" ", "_")
        if key in KitchenService.STATUS_ALIASES:
            return KitchenService.STATUS_ALIASES[key]
        raise InvalidTransition(f"'{value}' is not a valid order status.")

    @staticmethod
    def can_transition(current_status, new_status) -> bool:
        return new_status in KitchenService.VALID_STATUS_TRANSITIONS.get(current_status, [])

    @staticmethod
    @transaction.atomic
    def set_status(order_id, new_status) -> Order:
        """
        Moves an order one step along New -> In Progress -> Fulfilled.

        Raises:
            NotFound: If the order does not exist
            InvalidTransition: For unknown statuses, skipped steps, backward
                moves and any move out of Fulfilled. The order is left unchanged.
        """
        new_status = KitchenService.parse_status(new_status)
        order = OrderService.lock_order(order_id)

        if not KitchenService.can_transition(order.status, new_status):
            raise InvalidTransition(
                f"Cannot transition order {order.id} from {order.status} to {new_status}."
            )

        previous_status = order.status
        order.status = new_status
        order.touch("status")

        logger.info(
            f"Order {order.id} (table {order.table_number}): {previous_status} -> {new_status}"
        )
        return order

    @staticmethod
    def start_preparation(order_id) -> Order:
        return KitchenService.set_status(order_id, Order.OrderStatus.IN_PROGRESS)

    @staticmethod
    def mark_ready(order_id) -> Order:
        return KitchenService.set_status(order_id, Order.OrderStatus.FULFILLED)

    @staticmethod
    def active_queue():
        """
        Orders the kitchen still has to deal with, oldest first.
        """
        return (
            Order.objects.exclude(status=Order.OrderStatus.FULFILLED)
            .prefetch_related("items__menu_item")
            .order_by("order_time", "id")
        )

    @staticmethod
    def group_items_for_kitchen(order_items):
        """
        Collapse order lines by menu item so that lines merged in from several
        carts print as one quantity. Returns an ordered dict of
        menu item name -> total quantity, in first-seen order.
        """
        grouped = {}
        # Expects order_items with select_related/prefetch of menu_item
        for item in order_items:
            name = item.menu_item.name
            grouped[name] = grouped.get(name, 0) + item.quantity
        return grouped

    @staticmethod
    def format_kitchen_ticket(order: Order) -> str:
        """
        Generate kitchen-optimized ticket text
        """
        # Reuses items__menu_item when the caller prefetched it (see active_queue)
        grouped_items = KitchenService.group_items_for_kitchen(order.items.all())

        ticket_lines = [
            f"ORDER #{order.id}",
            f"Table {order.table_number}",
            f"Status: {order.status}",
            "=" * 32,
            "",
        ]

        for name, quantity in grouped_items.items():
            ticket_lines.append(f"{quantity}x {name.upper()}")

        ticket_lines.append("")
        ticket_lines.append("=" * 32)
        return "\n".join(ticket_lines)
