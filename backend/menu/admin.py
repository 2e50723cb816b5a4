from django.contrib import admin
from core_backend.admin_mixins import ArchivingAdminMixin
from .models import Category, MenuItem


class MenuItemInline(admin.TabularInline):
    model = MenuItem
    extra = 0
    fields = ("name", "price", "available")
    show_change_link = True


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "item_count", "created_at")
    search_fields = ("name",)
    inlines = [MenuItemInline]

    @admin.display(description="Items")
    def item_count(self, obj):
        return obj.menu_items.count()


@admin.register(MenuItem)
class MenuItemAdmin(ArchivingAdminMixin, admin.ModelAdmin):
    list_display = ("name", "category", "price", "available", "is_active", "updated_at")
    list_filter = ("available", "category")
    list_editable = ("available",)
    search_fields = ("name", "description")
    list_select_related = ("category",)
    readonly_fields = ("created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        # Admin edits go through the same write hook as the services
        obj.touch(*form.changed_data)
