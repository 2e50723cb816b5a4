from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("menu_item", "quantity", "item_price", "subtotal")
    fields = ("menu_item", "quantity", "item_price", "subtotal")
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Order model.

    Read-mostly: lines and totals only change through the order services.
    """

    list_display = (
        "id",
        "table_number",
        "status",
        "get_total_formatted",
        "order_time",
        "updated_at",
    )
    list_filter = ("status", "order_time")
    search_fields = ("id", "table_number")
    ordering = ("-order_time",)
    readonly_fields = ("table_number", "total_amount", "status", "order_time", "updated_at")
    inlines = [OrderItemInline]

    def get_total_formatted(self, obj):
        return f"${obj.total_amount:,.2f}"

    get_total_formatted.short_description = "Total"
    get_total_formatted.admin_order_field = "total_amount"

    def has_add_permission(self, request):
        return False


@admin.register(OrderItem)
class OrderItemAdmin(admin.ModelAdmin):
    list_display = ("id", "order", "menu_item", "quantity", "item_price", "subtotal")
    list_select_related = ("order", "menu_item")
    search_fields = ("menu_item__name",)
    readonly_fields = ("order", "menu_item", "quantity", "item_price", "subtotal")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        # Removing a line would leave its order's total stale
        return False
