"""
Admin mixins for archiving functionality.

Provides reusable admin components for models using the SoftDeleteMixin.
"""

from django.contrib import admin
from django.contrib import messages


class ArchivingAdminMixin:
    """
    Admin mixin for models using SoftDeleteMixin.

    Features:
    - Shows archived records alongside active ones
    - Replaces the bulk delete action with archive/unarchive
    - Keeps a hard delete action that goes through Model.delete(), so
      cascades into order history recompute the affected order totals
    """

    actions = ['archive_selected', 'unarchive_selected', 'force_delete_selected']

    def get_list_filter(self, request):
        """Add is_active filter if not already present."""
        list_filter = list(super().get_list_filter(request))
        if 'is_active' not in list_filter:
            list_filter.insert(0, 'is_active')
        return list_filter

    def get_actions(self, request):
        """Replace delete action with archive actions."""
        actions = super().get_actions(request)
        actions.pop('delete_selected', None)
        return actions

    def get_queryset(self, request):
        """Include archived records in admin by default (admins should see everything)."""
        return self.model.all_objects.all()

    def get_readonly_fields(self, request, obj=None):
        readonly_fields = list(super().get_readonly_fields(request, obj))
        if 'archived_at' not in readonly_fields:
            readonly_fields.append('archived_at')
        return readonly_fields

    @admin.action(description='Archive selected items')
    def archive_selected(self, request, queryset):
        """Archive selected records."""
        count = queryset.filter(is_active=True).count()
        if count == 0:
            self.message_user(request, "No active records selected.", level=messages.WARNING)
            return

        for obj in queryset.filter(is_active=True):
            obj.archive()

        self.message_user(
            request,
            f"Successfully archived {count} {queryset.model._meta.verbose_name_plural}.",
            level=messages.SUCCESS
        )

    @admin.action(description='Unarchive selected items')
    def unarchive_selected(self, request, queryset):
        """Unarchive selected records."""
        count = queryset.filter(is_active=False).count()
        if count == 0:
            self.message_user(request, "No archived records selected.", level=messages.WARNING)
            return

        for obj in queryset.filter(is_active=False):
            obj.unarchive()

        self.message_user(
            request,
            f"Successfully unarchived {count} {queryset.model._meta.verbose_name_plural}.",
            level=messages.SUCCESS
        )

    @admin.action(description='Permanently delete selected items (DANGER)')
    def force_delete_selected(self, request, queryset):
        """Hard delete; order lines referencing these records are removed too."""
        count = queryset.count()
        if count == 0:
            self.message_user(request, "No records selected.", level=messages.WARNING)
            return

        for obj in queryset:
            obj.delete()

        self.message_user(
            request,
            f"Permanently deleted {count} {queryset.model._meta.verbose_name_plural}.",
            level=messages.WARNING
        )
