from django.db import transaction
from django.db.models import Sum, Count
import logging

from core_backend.utils.money import to_money
from orders.models import Order

logger = logging.getLogger(__name__)


class OrderCalculationService:
    """Service for keeping order totals equal to the sum of their line items."""

    @staticmethod
    def recalculate_order_totals(order: Order, *extra_fields) -> Order:
        """
        Recomputes total_amount from the persisted line items and writes it,
        together with any other changed fields, through the touch hook.

        The caller must hold the order's row lock (see OrderService.lock_order)
        inside the transaction that changed the line items, so the new total
        becomes visible in the same commit as the lines.
        """
        previous_total = order.total_amount
        order.total_amount = order.calculate_items_total()
        order.touch("total_amount", *extra_fields)

        if to_money(previous_total) != order.total_amount:
            logger.debug(
                f"Order {order.id} total recalculated: {previous_total} -> {order.total_amount}"
            )
        return order

    @staticmethod
    @transaction.atomic
    def recalculate_orders(order_ids) -> int:
        """
        Recomputes totals for a batch of orders, e.g. after a catalog delete
        removed some of their lines. Rows are locked in id order.

        Returns:
            Number of orders recalculated
        """
        order_ids = sorted(set(order_ids))
        if not order_ids:
            return 0

        orders = Order.objects.select_for_update().filter(id__in=order_ids).order_by("id")
        count = 0
        for order in orders:
            OrderCalculationService.recalculate_order_totals(order)
            count += 1

        logger.info(f"Recalculated totals for {count} orders")
        return count

    @staticmethod
    def find_inconsistent_orders():
        """
        Integrity audit: orders whose stored total differs from the sum of
        their line item subtotals.

        Returns:
            List of (order, recorded_total, calculated_total) tuples
        """
        mismatches = []
        orders = Order.objects.annotate(items_total=Sum("items__subtotal")).order_by("id")
        for order in orders:
            calculated = to_money(order.items_total)
            recorded = to_money(order.total_amount)
            if recorded != calculated:
                mismatches.append((order, recorded, calculated))

        if mismatches:
            logger.error(
                f"Integrity audit found {len(mismatches)} orders with totals that "
                f"disagree with their line items: {[order.id for order, _, _ in mismatches]}"
            )
        return mismatches

    @staticmethod
    def find_empty_orders():
        """Integrity audit: orders without any line items."""
        return (
            Order.objects.annotate(line_count=Count("items"))
            .filter(line_count=0)
            .order_by("id")
        )
