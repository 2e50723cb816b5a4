from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from orders.exceptions import InvalidTableNumber
from orders.serializers import OrderSerializer, PlaceOrderSerializer
from orders.services import OrderService

from .errors import HANDLED_ERRORS, error_response


def parse_table_number(raw) -> int:
    """Query parameters arrive as strings; the service layer wants an int."""
    try:
        return OrderService.validate_table_number(int(raw))
    except (TypeError, ValueError):
        raise InvalidTableNumber(f"Table number must be a positive integer, got {raw!r}.")


class CartActionsMixin:
    """
    Mixin for customer-facing actions: placing a cart and finding a table's
    open order.

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=False, methods=["post"], url_path="place")
    def place(self, request: Request) -> Response:
        """
        Places a table's cart. Merges into the table's New order when there is
        one, otherwise opens a new order.

        Required POST data:
            - table_number: positive integer
            - items: list of {"menu_item_id": int, "quantity": int}

        Returns 201 when a new order was opened, 200 when the cart was merged.
        """
        serializer = PlaceOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = serializer.save()
        except HANDLED_ERRORS as e:
            return error_response(e)

        response_serializer = OrderSerializer(result.order, context={"request": request})
        return Response(
            {**response_serializer.data, "created": result.created},
            status=status.HTTP_201_CREATED if result.created else status.HTTP_200_OK,
        )

    @action(detail=False, methods=["get"], url_path="open")
    def open_order(self, request: Request) -> Response:
        """
        Returns the table's most recently updated order that is not
        Fulfilled, or null.

        Query params:
            - table_number (required)
        """
        try:
            table_number = parse_table_number(request.query_params.get("table_number"))
        except HANDLED_ERRORS as e:
            return error_response(e)

        order = OrderService.find_open_order_for_table(table_number)
        if order is None:
            return Response(None, status=status.HTTP_200_OK)
        return Response(OrderSerializer(order, context={"request": request}).data)

    @action(detail=False, methods=["get"], url_path="history")
    def table_history(self, request: Request) -> Response:
        """Every order a table has placed, newest first."""
        try:
            table_number = parse_table_number(request.query_params.get("table_number"))
        except HANDLED_ERRORS as e:
            return error_response(e)

        orders = OrderService.orders_for_table(table_number)
        page = self.paginate_queryset(orders)
        if page is not None:
            serializer = OrderSerializer(page, many=True, context={"request": request})
            return self.get_paginated_response(serializer.data)
        return Response(OrderSerializer(orders, many=True, context={"request": request}).data)
