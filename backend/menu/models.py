from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models, transaction
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from core_backend.utils.archiving import SoftDeleteManager, SoftDeleteMixin, SoftDeleteQuerySet


def _recalculate_orders_after(delete_callable, line_items):
    """
    Run a hard delete that cascades into order lines, then bring the totals of
    every order that lost lines back in line with what remains.
    """
    from orders.services import OrderCalculationService

    with transaction.atomic():
        affected_order_ids = list(
            line_items.values_list("order_id", flat=True).distinct()
        )
        result = delete_callable()
        OrderCalculationService.recalculate_orders(affected_order_ids)
    return result


class CategoryQuerySet(models.QuerySet):
    def delete(self):
        """Bulk delete with the same order total recalculation as Category.delete()."""
        from orders.models import OrderItem

        return _recalculate_orders_after(
            lambda: super(CategoryQuerySet, self).delete(),
            OrderItem.objects.filter(menu_item__category__in=self),
        )


class MenuItemQuerySet(SoftDeleteQuerySet):
    def delete(self):
        """Bulk delete with the same order total recalculation as MenuItem.delete()."""
        from orders.models import OrderItem

        return _recalculate_orders_after(
            lambda: super(MenuItemQuerySet, self).delete(),
            OrderItem.objects.filter(menu_item__in=self),
        )


class MenuItemManager(SoftDeleteManager):
    queryset_class = MenuItemQuerySet


class Category(models.Model):
    name = models.CharField(
        max_length=50, unique=True, help_text=_("Name of the menu category.")
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    objects = CategoryQuerySet.as_manager()

    class Meta:
        db_table = "categories"
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ["name"]

    def __str__(self):
        return self.name

    def delete(self, using=None, keep_parents=False):
        """
        Deletes the category, its menu items and every order line that
        references them, then recomputes the affected order totals.
        """
        from orders.models import OrderItem

        return _recalculate_orders_after(
            lambda: super(Category, self).delete(using=using, keep_parents=keep_parents),
            OrderItem.objects.filter(menu_item__category=self),
        )


class MenuItem(SoftDeleteMixin):
    name = models.CharField(max_length=100, help_text=_("Name shown on the menu."))
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Current unit price. Orders capture this at the time of sale."),
    )
    category = models.ForeignKey(
        Category, on_delete=models.CASCADE, related_name="menu_items"
    )
    description = models.TextField(blank=True)
    image_url = models.CharField(
        max_length=500,
        blank=True,
        help_text=_("Path or URL of the item picture; assets are stored elsewhere."),
    )
    available = models.BooleanField(
        default=True,
        help_text=_("Whether the kitchen is currently offering this item."),
    )

    objects = MenuItemManager()
    all_objects = MenuItemQuerySet.as_manager()

    class Meta:
        db_table = "menu_items"
        verbose_name = _("Menu Item")
        verbose_name_plural = _("Menu Items")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category"], name="menu_item_category_idx"),
            models.Index(fields=["available", "is_active"], name="menu_item_avail_active_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="menu_item_price_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.price})"

    @property
    def can_be_ordered(self):
        return self.available and self.is_active

    def delete(self, using=None, keep_parents=False):
        """
        Hard delete. Historical order lines that reference this item are
        removed with it, and the totals of their orders are recomputed.
        Use archive() to withdraw an item without touching order history.
        """
        from orders.models import OrderItem

        return _recalculate_orders_after(
            lambda: super(MenuItem, self).delete(using=using, keep_parents=keep_parents),
            OrderItem.objects.filter(menu_item=self),
        )
