from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from orders.serializers import OrderSerializer, UpdateOrderStatusSerializer
from orders.services import KitchenService

from .errors import HANDLED_ERRORS, error_response


class StatusActionsMixin:
    """
    Mixin for kitchen-facing actions: status transitions and the kitchen queue.

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=True, methods=["post"], url_path="status")
    def update_status(self, request: Request, pk=None) -> Response:
        """
        Moves the order to the requested status. Only New -> In Progress and
        In Progress -> Fulfilled are accepted; anything else is 409.
        """
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._handle_status_change(
            request, KitchenService.set_status, pk, serializer.validated_data["status"]
        )

    @action(detail=True, methods=["post"], url_path="start")
    def start(self, request: Request, pk=None) -> Response:
        """Kitchen begins preparation (New -> In Progress)."""
        return self._handle_status_change(request, KitchenService.start_preparation, pk)

    @action(detail=True, methods=["post"], url_path="ready")
    def ready(self, request: Request, pk=None) -> Response:
        """Kitchen marks the order ready (In Progress -> Fulfilled)."""
        return self._handle_status_change(request, KitchenService.mark_ready, pk)

    @action(detail=False, methods=["get"], url_path="kitchen")
    def kitchen(self, request: Request) -> Response:
        """
        Orders the kitchen still has to deal with, oldest first, each with
        its printable ticket.
        """
        queue = KitchenService.active_queue()
        data = []
        for order in queue:
            entry = OrderSerializer(order, context={"request": request}).data
            entry["ticket"] = KitchenService.format_kitchen_ticket(order)
            data.append(entry)
        return Response(data)

    def _handle_status_change(self, request: Request, service_method, pk, *args) -> Response:
        """Generic handler for status-changing actions."""
        try:
            order = service_method(pk, *args)
        except HANDLED_ERRORS as e:
            return error_response(e)
        return Response(OrderSerializer(order, context={"request": request}).data)
