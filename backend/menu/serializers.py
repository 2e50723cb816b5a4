from rest_framework import serializers

from core_backend.base.serializers import BaseModelSerializer, TimestampedSerializer
from .models import Category, MenuItem


class CategorySerializer(BaseModelSerializer):
    item_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Category
        fields = ["id", "name", "created_at", "item_count"]
        read_only_fields = fields


class MenuItemSerializer(TimestampedSerializer):
    category_name = serializers.CharField(source="category.name", read_only=True)
    can_be_ordered = serializers.BooleanField(read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            "id",
            "name",
            "price",
            "category",
            "category_name",
            "description",
            "image_url",
            "available",
            "is_active",
            "can_be_ordered",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
        select_related_fields = ["category"]
