"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like menu categories, menu items and orders.
"""
import pytest
from decimal import Decimal

from menu.models import Category, MenuItem
from orders.models import Order, OrderItem
from orders.services import OrderPlacementService, OrderService


# ============================================================================
# MENU FIXTURES
# ============================================================================

@pytest.fixture
def appetizers(db):
    """Create the Appetizers category"""
    return Category.objects.create(name='Appetizers')


@pytest.fixture
def main_dishes(db):
    """Create the Main Dishes category"""
    return Category.objects.create(name='Main Dishes')


@pytest.fixture
def drinks(db):
    """Create the Drinks category"""
    return Category.objects.create(name='Drinks')


@pytest.fixture
def cheese_burger(main_dishes):
    """Create Cheese Burger ($12.00)"""
    return MenuItem.objects.create(
        name='Cheese Burger',
        price=Decimal('12.00'),
        category=main_dishes,
        description='Beef, cheddar, and brioche.',
        image_url='picture/burger.jpg',
    )


@pytest.fixture
def french_fries(appetizers):
    """Create French Fries ($5.00)"""
    return MenuItem.objects.create(
        name='French Fries',
        price=Decimal('5.00'),
        category=appetizers,
        description='Sea salt and rosemary.',
        image_url='picture/fries.jpg',
    )


@pytest.fixture
def iced_cola(drinks):
    """Create Iced Cola ($2.50)"""
    return MenuItem.objects.create(
        name='Iced Cola',
        price=Decimal('2.50'),
        category=drinks,
        description='Chilled with lemon slice.',
        image_url='picture/cola.webp',
    )


@pytest.fixture
def orange_juice(drinks):
    """Create Orange Juice ($4.00)"""
    return MenuItem.objects.create(
        name='Orange Juice',
        price=Decimal('4.00'),
        category=drinks,
        description='100% freshly squeezed.',
        image_url='picture/orange.jpg',
    )


@pytest.fixture
def unavailable_item(drinks):
    """Create a menu item the kitchen has switched off"""
    return MenuItem.objects.create(
        name='Seasonal Lemonade',
        price=Decimal('3.50'),
        category=drinks,
        available=False,
    )


@pytest.fixture
def full_menu(cheese_burger, french_fries, iced_cola, orange_juice):
    """
    Create the full default menu.

    Usage:
        def test_menu(full_menu):
            assert full_menu['cheese_burger'].price == Decimal('12.00')
    """
    return {
        'cheese_burger': cheese_burger,
        'french_fries': french_fries,
        'iced_cola': iced_cola,
        'orange_juice': orange_juice,
    }


# ============================================================================
# ORDER FIXTURES
# ============================================================================

@pytest.fixture
def empty_order(db):
    """Create an order for table 5 with no line items"""
    return OrderService.create_order(5)


@pytest.fixture
def table_one_order(cheese_burger, iced_cola):
    """
    Place the reference order for table 1:
    1 x Cheese Burger ($12.00) + 3 x Iced Cola ($2.50) = $19.50

    Usage:
        def test_total(table_one_order):
            assert table_one_order.total_amount == Decimal('19.50')
    """
    result = OrderPlacementService.place_or_merge(1, [
        {'menu_item_id': cheese_burger.id, 'quantity': 1},
        {'menu_item_id': iced_cola.id, 'quantity': 3},
    ])
    return result.order


@pytest.fixture
def in_progress_order(table_one_order):
    """The table 1 reference order after the kitchen started it"""
    from orders.services import KitchenService
    return KitchenService.start_preparation(table_one_order.id)


def assert_total_matches_items(order):
    """Assert the stored total equals the sum of the persisted line subtotals."""
    order = Order.objects.get(pk=order.pk)
    expected = sum(
        (item.subtotal for item in OrderItem.objects.filter(order=order)),
        Decimal('0.00'),
    )
    assert order.total_amount == expected, (
        f"Order {order.pk} total {order.total_amount} != sum of line items {expected}"
    )
