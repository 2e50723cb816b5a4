from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Sum
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core_backend.utils.money import to_money
from core_backend.utils.timestamps import touch
from menu.models import MenuItem
from .exceptions import ConstraintViolation


class Order(models.Model):
    class OrderStatus(models.TextChoices):
        NEW = "New", _("New")  # Placed, not yet acknowledged by the kitchen
        IN_PROGRESS = "In Progress", _("In Progress")  # Kitchen is preparing it
        FULFILLED = "Fulfilled", _("Fulfilled")  # Ready; terminal

    table_number = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text=_("Table that placed the order. A table has many orders over time."),
    )
    total_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Always equal to the sum of the line item subtotals."),
    )
    status = models.CharField(
        max_length=20, choices=OrderStatus.choices, default=OrderStatus.NEW
    )

    order_time = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = "orders"
        ordering = ["-order_time", "-id"]
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        indexes = [
            models.Index(fields=["table_number"], name="order_table_idx"),
            models.Index(fields=["status"], name="order_status_idx"),
            models.Index(fields=["table_number", "status", "updated_at"], name="order_table_stat_upd_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(table_number__gt=0),
                name="order_table_number_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(total_amount__gte=0),
                name="order_total_non_negative",
            ),
        ]

    def __str__(self):
        return f"Order {self.pk} (Table {self.table_number}) - {self.status}"

    @property
    def is_open(self):
        return self.status != Order.OrderStatus.FULFILLED

    def calculate_items_total(self) -> Decimal:
        """Sum of the persisted line item subtotals."""
        if self._state.adding:
            return to_money(None)
        total = self.items.aggregate(total=Sum("subtotal"))["total"]
        return to_money(total)

    def touch(self, *fields):
        return touch(self, *fields)

    def save(self, *args, **kwargs):
        update_fields = kwargs.get("update_fields")
        if update_fields is None or "total_amount" in update_fields:
            self._check_total_matches_items()
        super().save(*args, **kwargs)

    def _check_total_matches_items(self):
        expected = self.calculate_items_total()
        if to_money(self.total_amount) != expected:
            raise ConstraintViolation(
                f"Refusing to store total {self.total_amount} for order {self.pk or '(new)'}: "
                f"its line items add up to {expected}."
            )


class DiningTable(models.Model):
    """
    One row per table that has placed a cart. Place-or-merge writes to this
    row before reading the table's orders, so carts for the same table are
    applied one at a time while other tables proceed independently.
    """

    table_number = models.PositiveIntegerField(unique=True)
    last_placement_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "dining_tables"
        verbose_name = _("Dining Table")
        verbose_name_plural = _("Dining Tables")
        constraints = [
            models.CheckConstraint(
                condition=models.Q(table_number__gt=0),
                name="dining_table_number_positive",
            ),
        ]

    def __str__(self):
        return f"Table {self.table_number}"


class OrderItem(models.Model):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    menu_item = models.ForeignKey(
        MenuItem, on_delete=models.CASCADE, related_name="order_lines"
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    # Price snapshot
    item_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Unit price of the menu item at the time of sale."),
    )
    subtotal = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        editable=False,
        help_text=_("quantity x item_price; recomputed on every save."),
    )

    class Meta:
        db_table = "order_line_items"
        ordering = ["id"]
        verbose_name = _("Order Item")
        verbose_name_plural = _("Order Items")
        indexes = [
            models.Index(fields=["order"], name="line_item_order_idx"),
            models.Index(fields=["menu_item"], name="line_item_menu_item_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="line_item_quantity_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(item_price__gte=0),
                name="line_item_price_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.menu_item.name} in Order {self.order_id}"

    def calculate_subtotal(self) -> Decimal:
        return to_money(Decimal(self.quantity) * to_money(self.item_price))

    def save(self, *args, **kwargs):
        self.subtotal = self.calculate_subtotal()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and (
            "quantity" in update_fields or "item_price" in update_fields
        ):
            kwargs["update_fields"] = list(dict.fromkeys([*update_fields, "subtotal"]))
        super().save(*args, **kwargs)
