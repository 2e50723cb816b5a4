"""
Order Error Handling Tests

This module tests how the order system handles failure scenarios, invalid
inputs, and edge cases. These tests are critical for order system robustness.

Test Categories:
1. Input Validation (quantities, table numbers, empty carts)
2. Catalog Failures (missing and unavailable items)
3. Order State Validation (appending to started orders)
4. Total Invariant Protection

Run with: pytest backend/orders/tests/test_order_error_handling.py -v
"""
import pytest
from decimal import Decimal

from orders.exceptions import (
    ConstraintViolation,
    EmptyCart,
    InvalidQuantity,
    InvalidTableNumber,
    InvalidTransition,
    ItemUnavailable,
    NotFound,
    OrderError,
)
from orders.models import Order, OrderItem
from orders.services import OrderItemService, OrderService


# ============================================================================
# INPUT VALIDATION TESTS
# ============================================================================

@pytest.mark.django_db
class TestInputValidation:

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, '2', None, True])
    def test_invalid_quantity_rejected(self, empty_order, cheese_burger, quantity):
        with pytest.raises(InvalidQuantity):
            OrderItemService.append_line_items(empty_order.id, [
                {'menu_item_id': cheese_burger.id, 'quantity': quantity},
            ])
        assert empty_order.items.count() == 0

    def test_one_bad_line_rejects_whole_cart(self, empty_order, cheese_burger, iced_cola):
        """
        CRITICAL: A multi-line append either fully succeeds or fully fails
        """
        with pytest.raises(InvalidQuantity):
            OrderItemService.append_line_items(empty_order.id, [
                {'menu_item_id': cheese_burger.id, 'quantity': 2},
                {'menu_item_id': iced_cola.id, 'quantity': 0},
            ])

        empty_order.refresh_from_db()
        assert empty_order.items.count() == 0
        assert empty_order.total_amount == Decimal('0.00')

    def test_empty_cart_rejected(self, empty_order):
        with pytest.raises(EmptyCart):
            OrderItemService.append_line_items(empty_order.id, [])

    @pytest.mark.parametrize('table_number', [0, -1, '3', None, False])
    def test_invalid_table_number_rejected(self, db, table_number):
        with pytest.raises(InvalidTableNumber):
            OrderService.create_order(table_number)
        assert Order.objects.count() == 0

    def test_all_errors_share_base_class(self):
        for error in (NotFound, InvalidQuantity, ItemUnavailable, InvalidTransition,
                      ConstraintViolation, EmptyCart, InvalidTableNumber):
            assert issubclass(error, OrderError)


# ============================================================================
# CATALOG FAILURE TESTS
# ============================================================================

@pytest.mark.django_db
class TestCatalogFailures:

    def test_missing_order(self, cheese_burger):
        with pytest.raises(NotFound):
            OrderItemService.append_line_items(987654, [
                {'menu_item_id': cheese_burger.id, 'quantity': 1},
            ])

    def test_missing_menu_item(self, empty_order):
        with pytest.raises(NotFound):
            OrderItemService.append_line_items(empty_order.id, [
                {'menu_item_id': 987654, 'quantity': 1},
            ])

    def test_line_without_menu_item(self, empty_order):
        with pytest.raises(NotFound):
            OrderItemService.append_line_items(empty_order.id, [{'quantity': 1}])

    def test_unavailable_item_rolls_back_other_lines(self, empty_order, cheese_burger, unavailable_item):
        with pytest.raises(ItemUnavailable):
            OrderItemService.append_line_items(empty_order.id, [
                {'menu_item_id': cheese_burger.id, 'quantity': 1},
                {'menu_item_id': unavailable_item.id, 'quantity': 1},
            ])

        assert OrderItem.objects.filter(order=empty_order).count() == 0

    def test_get_missing_order(self, db):
        with pytest.raises(NotFound):
            OrderService.get_order(123456)

    def test_delete_missing_order(self, db):
        with pytest.raises(NotFound):
            OrderService.delete_order(123456)


# ============================================================================
# ORDER STATE VALIDATION TESTS
# ============================================================================

@pytest.mark.django_db
class TestOrderStateValidation:

    def test_cannot_append_to_in_progress_order(self, in_progress_order, french_fries):
        """
        CRITICAL: The kitchen never sees items silently added to an order it
        has already begun preparing
        """
        with pytest.raises(InvalidTransition):
            OrderItemService.append_line_items(in_progress_order.id, [
                {'menu_item_id': french_fries.id, 'quantity': 1},
            ])

        in_progress_order.refresh_from_db()
        assert in_progress_order.status == Order.OrderStatus.IN_PROGRESS
        assert in_progress_order.items.count() == 2

    def test_cannot_append_to_fulfilled_order(self, in_progress_order, french_fries):
        from orders.services import KitchenService
        KitchenService.mark_ready(in_progress_order.id)

        with pytest.raises(InvalidTransition):
            OrderItemService.append_line_items(in_progress_order.id, [
                {'menu_item_id': french_fries.id, 'quantity': 1},
            ])


# ============================================================================
# TOTAL INVARIANT TESTS
# ============================================================================

@pytest.mark.django_db
class TestTotalInvariant:
    """
    Writing a total that disagrees with the line items is a programming
    defect and is refused.
    """

    def test_saving_wrong_total_raises(self, table_one_order):
        table_one_order.total_amount = Decimal('1.00')

        with pytest.raises(ConstraintViolation):
            table_one_order.save()

        table_one_order.refresh_from_db()
        assert table_one_order.total_amount == Decimal('19.50')

    def test_saving_wrong_total_via_update_fields_raises(self, table_one_order):
        table_one_order.total_amount = Decimal('0.00')

        with pytest.raises(ConstraintViolation):
            table_one_order.touch('total_amount')

    def test_new_order_with_nonzero_total_raises(self, db):
        with pytest.raises(ConstraintViolation):
            Order(table_number=8, total_amount=Decimal('5.00')).save()
        assert Order.objects.count() == 0

    def test_saving_other_fields_skips_total_check(self, table_one_order):
        table_one_order.touch()
        assert Order.objects.get(pk=table_one_order.pk).total_amount == Decimal('19.50')
