from django.core.management.base import BaseCommand
from django.utils import timezone
from tabulate import tabulate

from orders.services import OrderCalculationService


class Command(BaseCommand):
    help = "Find orders whose stored total disagrees with their line items, and orders without lines"

    def add_arguments(self, parser):
        parser.add_argument(
            "--fix",
            action="store_true",
            help="Recompute the totals of inconsistent orders from their line items",
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("=" * 60))
        self.stdout.write(self.style.SUCCESS("ORDER TOTALS AUDIT"))
        self.stdout.write(self.style.SUCCESS("=" * 60))
        self.stdout.write(f"Generated at: {timezone.now()}")
        self.stdout.write("")

        mismatches = OrderCalculationService.find_inconsistent_orders()
        if mismatches:
            rows = [
                [order.id, order.table_number, order.status, f"${recorded:.2f}", f"${calculated:.2f}"]
                for order, recorded, calculated in mismatches
            ]
            self.stdout.write(self.style.WARNING(f"{len(mismatches)} orders with inconsistent totals:"))
            self.stdout.write(
                tabulate(rows, headers=["Order", "Table", "Status", "Recorded", "Calculated"], tablefmt="grid")
            )
        else:
            self.stdout.write(self.style.SUCCESS("All order totals match their line items."))

        empty_orders = list(OrderCalculationService.find_empty_orders())
        if empty_orders:
            rows = [[order.id, order.table_number, order.status, order.order_time] for order in empty_orders]
            self.stdout.write("")
            self.stdout.write(self.style.WARNING(f"{len(empty_orders)} orders without line items:"))
            self.stdout.write(
                tabulate(rows, headers=["Order", "Table", "Status", "Ordered at"], tablefmt="grid")
            )

        if options["fix"] and mismatches:
            fixed = OrderCalculationService.recalculate_orders(order.id for order, _, _ in mismatches)
            self.stdout.write("")
            self.stdout.write(self.style.SUCCESS(f"Recalculated totals for {fixed} orders."))
