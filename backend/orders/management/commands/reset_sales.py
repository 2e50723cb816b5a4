from django.core.management.base import BaseCommand, CommandError

from orders.models import Order
from orders.services import OrderService


class Command(BaseCommand):
    help = "Delete all orders and line items to close out a sales period (irreversible)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Confirm that every order should be deleted",
        )

    def handle(self, *args, **options):
        if not options["yes"]:
            count = Order.objects.count()
            raise CommandError(
                f"This would delete {count} orders and all of their line items. "
                "Re-run with --yes to confirm."
            )

        deleted = OrderService.reset_all_orders()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} orders."))
