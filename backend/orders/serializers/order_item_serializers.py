from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from orders.models import OrderItem


class OrderItemSerializer(BaseModelSerializer):
    """Read-only representation of a line item with its captured price."""

    menu_item_name = serializers.CharField(source="menu_item.name", read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "order",
            "menu_item",
            "menu_item_name",
            "quantity",
            "item_price",
            "subtotal",
        ]
        read_only_fields = fields
        select_related_fields = ["menu_item"]


class CartLineSerializer(serializers.Serializer):
    """
    One requested line of a cart. Quantity is range-checked by the service
    layer so that it surfaces as InvalidQuantity.
    """

    menu_item_id = serializers.IntegerField()
    quantity = serializers.IntegerField()
