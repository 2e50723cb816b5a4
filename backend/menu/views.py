from django.db.models import Count, Q

from core_backend.base import ReadOnlyBaseViewSet
from .filters import MenuItemFilter
from .models import Category, MenuItem
from .serializers import CategorySerializer, MenuItemSerializer


class CategoryViewSet(ReadOnlyBaseViewSet):
    """
    Read-only menu categories with the number of active items in each.
    """

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    search_fields = ["name"]
    ordering_fields = ["name", "created_at"]
    ordering = ["name"]

    def get_queryset(self):
        return super().get_queryset().annotate(
            item_count=Count("menu_items", filter=Q(menu_items__is_active=True))
        )


class MenuItemViewSet(ReadOnlyBaseViewSet):
    """
    Read-only menu. Archived items are hidden unless ?include_archived=true.
    """

    queryset = MenuItem.objects.all()
    serializer_class = MenuItemSerializer
    filterset_class = MenuItemFilter
    search_fields = ["name", "description", "category__name"]
    ordering_fields = ["name", "price", "updated_at"]
    ordering = ["category__name", "name"]
