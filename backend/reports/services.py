"""
Read-only sales reporting over orders and line items.

Nothing here writes. Every figure is derived from stored totals and line item
subtotals, which the order services keep consistent with each other.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from django.db.models import Avg, Count, Max, Min, Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from core_backend.utils.money import to_money
from menu.models import MenuItem
from orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


class SalesReportService:
    """Service for generating sales reports."""

    @staticmethod
    def _orders(start_date: Optional[datetime] = None, end_date: Optional[datetime] = None):
        """Orders placed within the optional [start_date, end_date] window."""
        queryset = Order.objects.all()
        if start_date:
            queryset = queryset.filter(order_time__gte=start_date)
        if end_date:
            queryset = queryset.filter(order_time__lte=end_date)
        return queryset

    @staticmethod
    def total_revenue(start_date=None, end_date=None):
        """Sum of all order totals, whatever their status."""
        total = SalesReportService._orders(start_date, end_date).aggregate(
            total=Sum("total_amount")
        )["total"]
        return to_money(total)

    @staticmethod
    def revenue_by_status(start_date=None, end_date=None) -> List[Dict[str, Any]]:
        rows = (
            SalesReportService._orders(start_date, end_date)
            .values("status")
            .annotate(order_count=Count("id"), revenue=Sum("total_amount"))
            .order_by("status")
        )
        return [
            {
                "status": row["status"],
                "order_count": row["order_count"],
                "revenue": to_money(row["revenue"]),
            }
            for row in rows
        ]

    @staticmethod
    def top_selling_items(limit: int = 10, start_date=None, end_date=None) -> List[Dict[str, Any]]:
        """Menu items ranked by units sold, with the revenue their lines brought in."""
        lines = OrderItem.objects.all()
        if start_date:
            lines = lines.filter(order__order_time__gte=start_date)
        if end_date:
            lines = lines.filter(order__order_time__lte=end_date)

        rows = (
            lines.values("menu_item_id", "menu_item__name")
            .annotate(total_sold=Sum("quantity"), revenue=Sum("subtotal"))
            .order_by("-total_sold", "menu_item__name")[:limit]
        )
        return [
            {
                "menu_item_id": row["menu_item_id"],
                "name": row["menu_item__name"],
                "total_sold": row["total_sold"],
                "revenue": to_money(row["revenue"]),
            }
            for row in rows
        ]

    @staticmethod
    def daily_sales(start_date=None, end_date=None) -> List[Dict[str, Any]]:
        """Fulfilled revenue per calendar day, newest first."""
        rows = (
            SalesReportService._orders(start_date, end_date)
            .filter(status=Order.OrderStatus.FULFILLED)
            .annotate(sale_date=TruncDate("order_time"))
            .values("sale_date")
            .annotate(total_orders=Count("id"), daily_revenue=Sum("total_amount"))
            .order_by("-sale_date")
        )
        return [
            {
                "sale_date": row["sale_date"],
                "total_orders": row["total_orders"],
                "daily_revenue": to_money(row["daily_revenue"]),
            }
            for row in rows
        ]

    @staticmethod
    def order_value_stats(start_date=None, end_date=None) -> Dict[str, Any]:
        stats = SalesReportService._orders(start_date, end_date).aggregate(
            order_count=Count("id"),
            average=Avg("total_amount"),
            minimum=Min("total_amount"),
            maximum=Max("total_amount"),
        )
        return {
            "order_count": stats["order_count"],
            "average_order_value": to_money(stats["average"]),
            "min_order_value": to_money(stats["minimum"]),
            "max_order_value": to_money(stats["maximum"]),
        }

    @staticmethod
    def table_activity() -> List[Dict[str, Any]]:
        """Open orders per table and status, for the floor overview."""
        rows = (
            Order.objects.exclude(status=Order.OrderStatus.FULFILLED)
            .values("table_number", "status")
            .annotate(active_orders=Count("id"), table_total=Sum("total_amount"))
            .order_by("table_number", "status")
        )
        return [
            {
                "table_number": row["table_number"],
                "status": row["status"],
                "active_orders": row["active_orders"],
                "table_total": to_money(row["table_total"]),
            }
            for row in rows
        ]

    @staticmethod
    def menu_item_popularity() -> List[Dict[str, Any]]:
        """Every active menu item with how often it was ordered, including never."""
        rows = (
            MenuItem.objects.values("id", "name", "price")
            .annotate(times_ordered=Count("order_lines"), total_quantity_sold=Sum("order_lines__quantity"))
            .order_by("name")
        )
        results = [
            {
                "menu_item_id": row["id"],
                "name": row["name"],
                "price": to_money(row["price"]),
                "times_ordered": row["times_ordered"],
                "total_quantity_sold": row["total_quantity_sold"] or 0,
            }
            for row in rows
        ]
        # Stable sort keeps name order among equal quantities
        results.sort(key=lambda row: row["total_quantity_sold"], reverse=True)
        return results

    @staticmethod
    def generate_sales_report(start_date=None, end_date=None, limit: int = 10) -> Dict[str, Any]:
        """Combined sales report for the admin dashboard."""
        logger.info(
            f"Generating sales report for {start_date or 'beginning'} to {end_date or 'now'}"
        )
        return {
            "total_revenue": SalesReportService.total_revenue(start_date, end_date),
            "revenue_by_status": SalesReportService.revenue_by_status(start_date, end_date),
            "top_selling_items": SalesReportService.top_selling_items(limit, start_date, end_date),
            "daily_sales": SalesReportService.daily_sales(start_date, end_date),
            "order_value_stats": SalesReportService.order_value_stats(start_date, end_date),
            "generated_at": timezone.now(),
        }
