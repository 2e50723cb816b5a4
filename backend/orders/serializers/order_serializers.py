from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from orders.models import Order
from orders.services import OrderPlacementService

from .order_item_serializers import CartLineSerializer, OrderItemSerializer


class OrderSerializer(BaseModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "table_number",
            "status",
            "total_amount",
            "order_time",
            "updated_at",
            "item_count",
            "items",
        ]
        read_only_fields = fields
        prefetch_related_fields = ["items__menu_item"]

    def get_item_count(self, obj):
        # Uses the prefetched items when available
        return sum(item.quantity for item in obj.items.all())


class OrderListSerializer(BaseModelSerializer):
    """Lightweight serializer for order lists, without line items."""

    class Meta:
        model = Order
        fields = ["id", "table_number", "status", "total_amount", "order_time", "updated_at"]
        read_only_fields = fields


class PlaceOrderSerializer(serializers.Serializer):
    """
    Input for the place-or-merge action: a table number and its cart.
    """

    table_number = serializers.IntegerField()
    items = CartLineSerializer(many=True)

    def save(self, **kwargs):
        """
        Delegates to OrderPlacementService. Domain errors (EmptyCart,
        InvalidQuantity, NotFound, ...) propagate to the view.
        """
        return OrderPlacementService.place_or_merge(
            self.validated_data["table_number"],
            [dict(line) for line in self.validated_data["items"]],
        )
