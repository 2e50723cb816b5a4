"""
Orders serializers package.
"""

# Order item serializers
from .order_item_serializers import CartLineSerializer, OrderItemSerializer

# Order serializers
from .order_serializers import OrderListSerializer, OrderSerializer, PlaceOrderSerializer

# Status serializers
from .status_serializers import UpdateOrderStatusSerializer

__all__ = [
    # Order items
    'CartLineSerializer',
    'OrderItemSerializer',
    # Orders
    'OrderListSerializer',
    'OrderSerializer',
    'PlaceOrderSerializer',
    # Status
    'UpdateOrderStatusSerializer',
]
