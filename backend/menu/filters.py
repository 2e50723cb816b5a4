from django_filters import rest_framework as filters
from core_backend.base.filters import ArchivingFilterSet
from .models import MenuItem


class MenuItemFilter(ArchivingFilterSet):
    min_price = filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = filters.NumberFilter(field_name="price", lookup_expr="lte")

    class Meta:
        model = MenuItem
        fields = ["category", "available"]
