"""
Management command tests for the totals audit and the sales reset.
"""
import pytest
from decimal import Decimal
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError

from core_backend.tests.fixtures import assert_total_matches_items
from orders.models import Order, OrderItem


@pytest.mark.django_db
class TestAuditOrderTotals:

    def test_clean_database(self, table_one_order):
        out = StringIO()
        call_command('audit_order_totals', stdout=out)

        assert 'All order totals match their line items.' in out.getvalue()

    def test_reports_mismatch_without_fixing(self, table_one_order):
        Order.objects.filter(pk=table_one_order.pk).update(total_amount=Decimal('50.00'))

        out = StringIO()
        call_command('audit_order_totals', stdout=out)

        output = out.getvalue()
        assert '1 orders with inconsistent totals' in output
        assert '$50.00' in output
        assert '$19.50' in output
        assert Order.objects.get(pk=table_one_order.pk).total_amount == Decimal('50.00')

    def test_fix_recalculates(self, table_one_order):
        Order.objects.filter(pk=table_one_order.pk).update(total_amount=Decimal('50.00'))

        out = StringIO()
        call_command('audit_order_totals', '--fix', stdout=out)

        assert 'Recalculated totals for 1 orders.' in out.getvalue()
        assert_total_matches_items(table_one_order)

    def test_lists_empty_orders(self, empty_order):
        out = StringIO()
        call_command('audit_order_totals', stdout=out)

        assert '1 orders without line items' in out.getvalue()


@pytest.mark.django_db
class TestResetSales:

    def test_requires_confirmation(self, table_one_order):
        with pytest.raises(CommandError):
            call_command('reset_sales', stdout=StringIO())

        assert Order.objects.count() == 1

    def test_deletes_orders_and_lines(self, table_one_order, empty_order):
        out = StringIO()
        call_command('reset_sales', '--yes', stdout=out)

        assert 'Deleted 2 orders.' in out.getvalue()
        assert Order.objects.count() == 0
        assert OrderItem.objects.count() == 0
