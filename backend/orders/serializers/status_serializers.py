from rest_framework import serializers


class UpdateOrderStatusSerializer(serializers.Serializer):
    """
    Serializer for the requested status of an order.

    Only the shape is checked here. Whether the status exists and whether the
    transition is allowed is decided by KitchenService, which raises
    InvalidTransition otherwise.
    """

    status = serializers.CharField(max_length=20)
