"""
Menu Catalog Tests

Tests for menu item creation, updates, availability, archiving and the
seed_menu management command.
"""
import pytest
from datetime import timedelta
from decimal import Decimal
from io import StringIO
from django.utils import timezone
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.management import call_command

from menu.models import Category, MenuItem
from menu.services import CatalogService
from orders.exceptions import ItemUnavailable, NotFound


@pytest.mark.django_db
class TestCatalogService:
    """Test catalog reads and writes"""

    def test_create_item(self, drinks):
        item = CatalogService.create_item(drinks, 'Lemon Tea', Decimal('3.25'), description='Iced.')

        assert item.pk is not None
        assert item.category == drinks
        assert item.available is True
        assert item.is_active is True
        assert item.can_be_ordered is True

    def test_create_item_rejects_negative_price(self, drinks):
        with pytest.raises(DjangoValidationError):
            CatalogService.create_item(drinks, 'Refund Soda', Decimal('-1.00'))
        assert not MenuItem.all_objects.filter(name='Refund Soda').exists()

    def test_get_item_includes_archived(self, cheese_burger):
        cheese_burger.archive()
        assert CatalogService.get_item(cheese_burger.id) == cheese_burger

    @pytest.mark.parametrize('item_id', [424242, 'abc', None])
    def test_get_missing_item(self, db, item_id):
        with pytest.raises(NotFound):
            CatalogService.get_item(item_id)

    def test_update_item_price(self, cheese_burger):
        updated = CatalogService.update_item(cheese_burger.id, price=Decimal('13.50'))

        assert updated.price == Decimal('13.50')
        assert MenuItem.objects.get(pk=cheese_burger.pk).price == Decimal('13.50')

    def test_update_item_stamps_updated_at(self, cheese_burger):
        stale = timezone.now() - timedelta(days=1)
        MenuItem.objects.filter(pk=cheese_burger.pk).update(updated_at=stale)

        CatalogService.update_item(cheese_burger.id, description='Now with pickles.')

        assert MenuItem.objects.get(pk=cheese_burger.pk).updated_at > stale

    def test_update_unknown_field_rejected(self, cheese_burger):
        with pytest.raises(ValueError):
            CatalogService.update_item(cheese_burger.id, is_active=False)

    def test_set_availability(self, cheese_burger):
        CatalogService.set_availability(cheese_burger.id, False)

        with pytest.raises(ItemUnavailable):
            CatalogService.get_orderable_items([cheese_burger.id])

    def test_get_orderable_items(self, cheese_burger, iced_cola):
        items = CatalogService.get_orderable_items([cheese_burger.id, iced_cola.id, iced_cola.id])
        assert items == {cheese_burger.id: cheese_burger, iced_cola.id: iced_cola}

    def test_get_orderable_items_reports_missing(self, cheese_burger):
        with pytest.raises(NotFound) as exc:
            CatalogService.get_orderable_items([cheese_burger.id, 777777])
        assert '777777' in str(exc.value)

    def test_list_available_items(self, full_menu, unavailable_item):
        full_menu['orange_juice'].archive()

        names = [item.name for item in CatalogService.list_available_items()]

        assert names == ['French Fries', 'Iced Cola', 'Cheese Burger']


@pytest.mark.django_db
class TestWithdrawingItems:
    """Archive keeps order history; hard delete removes it and fixes totals"""

    def test_archive_hides_item_from_default_manager(self, cheese_burger):
        CatalogService.archive_item(cheese_burger.id)

        assert not MenuItem.objects.filter(pk=cheese_burger.pk).exists()
        assert MenuItem.all_objects.get(pk=cheese_burger.pk).is_archived
        assert MenuItem.objects.with_archived().filter(pk=cheese_burger.pk).exists()

    def test_delete_item_removes_lines(self, table_one_order, iced_cola):
        CatalogService.delete_item(iced_cola.id)

        assert not MenuItem.all_objects.filter(pk=iced_cola.pk).exists()
        table_one_order.refresh_from_db()
        assert table_one_order.total_amount == Decimal('12.00')

    def test_delete_missing_item(self, db):
        with pytest.raises(NotFound):
            CatalogService.delete_item(515151)


@pytest.mark.django_db
class TestSeedMenuCommand:

    def test_seed_creates_default_menu(self, db):
        out = StringIO()
        call_command('seed_menu', stdout=out)

        assert Category.objects.count() == 3
        assert MenuItem.objects.count() == 4
        assert MenuItem.objects.get(name='Cheese Burger').price == Decimal('12.00')
        assert MenuItem.objects.get(name='Iced Cola').category.name == 'Drinks'
        assert 'Items created: 4' in out.getvalue()

    def test_seed_is_idempotent(self, db):
        call_command('seed_menu', stdout=StringIO())
        CatalogService.update_item(MenuItem.objects.get(name='French Fries').id, price=Decimal('9.99'))

        out = StringIO()
        call_command('seed_menu', stdout=out)

        assert MenuItem.objects.count() == 4
        assert MenuItem.objects.get(name='French Fries').price == Decimal('5.00')
        assert 'Updated: 4' in out.getvalue()
