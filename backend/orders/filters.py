import django_filters
from core_backend.base.filters import BaseFilterSet, FlexibleDateTimeFilter
from .models import Order


class OrderFilter(BaseFilterSet):
    """
    Filter for Orders.

    Date-only values for the order_time range cover the whole day, e.g.
    ?ordered_before=2025-11-11 includes every order placed on the 11th.
    """

    ordered_after = FlexibleDateTimeFilter(field_name='order_time', lookup_expr='gte')
    ordered_before = FlexibleDateTimeFilter(field_name='order_time', lookup_expr='lte')
    open = django_filters.BooleanFilter(method='filter_open')

    def filter_open(self, queryset, name, value):
        """open=true keeps orders that are not Fulfilled; open=false only Fulfilled ones"""
        if value is None:
            return queryset
        if value:
            return queryset.exclude(status=Order.OrderStatus.FULFILLED)
        return queryset.filter(status=Order.OrderStatus.FULFILLED)

    class Meta:
        model = Order
        fields = {
            'status': ['exact'],
            'table_number': ['exact'],
        }
