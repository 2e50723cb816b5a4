"""
Order Admin Tests

Lines and totals only change through the order services, so the admin must
not offer any way to edit or remove a line item.
"""
import pytest
from django.contrib import admin

from orders.admin import OrderAdmin, OrderItemAdmin, OrderItemInline
from orders.models import Order, OrderItem


@pytest.fixture
def admin_request(rf, admin_user):
    request = rf.get('/admin/')
    request.user = admin_user
    return request


@pytest.mark.django_db
class TestOrderItemAdmin:

    def test_line_items_cannot_be_deleted(self, admin_request, table_one_order):
        model_admin = OrderItemAdmin(OrderItem, admin.site)
        line = table_one_order.items.first()

        assert model_admin.has_delete_permission(admin_request) is False
        assert model_admin.has_delete_permission(admin_request, line) is False

    def test_bulk_delete_action_not_offered(self, admin_request, table_one_order):
        model_admin = OrderItemAdmin(OrderItem, admin.site)

        assert 'delete_selected' not in model_admin.get_actions(admin_request)

    def test_line_items_cannot_be_edited_or_added(self, admin_request, table_one_order):
        model_admin = OrderItemAdmin(OrderItem, admin.site)
        line = table_one_order.items.first()

        assert model_admin.has_change_permission(admin_request, line) is False
        assert model_admin.has_add_permission(admin_request) is False
        # Viewing stays available to staff
        assert model_admin.has_view_permission(admin_request, line) is True

    def test_order_inline_cannot_remove_lines(self, admin_request, table_one_order):
        inline = OrderItemInline(Order, admin.site)

        assert inline.can_delete is False
        assert inline.has_add_permission(admin_request, table_one_order) is False

    def test_orders_cannot_be_added(self, admin_request, db):
        assert OrderAdmin(Order, admin.site).has_add_permission(admin_request) is False
