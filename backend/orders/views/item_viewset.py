from core_backend.base import ReadOnlyBaseViewSet
from orders.models import OrderItem
from orders.serializers import OrderItemSerializer


class OrderItemViewSet(ReadOnlyBaseViewSet):
    """
    Read-only line items of one order. Items are only ever added through
    the place action.
    """

    queryset = OrderItem.objects.all()
    serializer_class = OrderItemSerializer
    ordering_fields = ["id", "subtotal", "quantity"]
    ordering = ["id"]

    def get_queryset(self):
        """
        Filter items based on the order_pk provided in the URL.
        """
        queryset = super().get_queryset()
        return queryset.filter(order__pk=self.kwargs["order_pk"])
