from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
import logging

from core_backend.base import BaseViewSet
from orders.filters import OrderFilter
from orders.models import Order
from orders.serializers import OrderListSerializer, OrderSerializer
from orders.services import OrderService

from .cart_actions import CartActionsMixin
from .errors import HANDLED_ERRORS, error_response
from .status_actions import StatusActionsMixin

logger = logging.getLogger(__name__)


class OrderViewSet(CartActionsMixin, StatusActionsMixin, BaseViewSet):
    """
    ViewSet for orders.

    This viewset combines multiple mixins to provide:
    - Cart placement and open-order lookup (CartActionsMixin)
    - Status transitions and the kitchen queue (StatusActionsMixin)

    Orders are never edited directly; every write goes through the service
    layer so totals and timestamps stay consistent.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    ordering_fields = ["order_time", "updated_at", "total_amount", "table_number"]
    ordering = ["-order_time", "-id"]
    http_method_names = ["get", "post", "delete", "head", "options"]

    def get_serializer_class(self):
        if self.action == "list":
            return OrderListSerializer
        return OrderSerializer

    def create(self, request, *args, **kwargs):
        """POST /orders/ is an alias of the place action."""
        return self.place(request)

    def destroy(self, request, *args, **kwargs):
        try:
            OrderService.delete_order(kwargs["pk"])
        except HANDLED_ERRORS as e:
            return error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["post"], url_path="reset")
    def reset(self, request: Request) -> Response:
        """
        Deletes every order and line item to close out a sales period.
        Requires {"confirm": true}; cannot be undone.
        """
        if request.data.get("confirm") is not True:
            return Response(
                {"error": 'Resetting sales data requires {"confirm": true}.'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        deleted = OrderService.reset_all_orders()
        return Response({"deleted_orders": deleted}, status=status.HTTP_200_OK)
