from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("menu", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "table_number",
                    models.PositiveIntegerField(
                        help_text="Table that placed the order. A table has many orders over time.",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "total_amount",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Always equal to the sum of the line item subtotals.",
                        max_digits=10,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("New", "New"), ("In Progress", "In Progress"), ("Fulfilled", "Fulfilled")],
                        default="New",
                        max_length=20,
                    ),
                ),
                ("order_time", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
            ],
            options={
                "verbose_name": "Order",
                "verbose_name_plural": "Orders",
                "db_table": "orders",
                "ordering": ["-order_time", "-id"],
                "indexes": [
                    models.Index(fields=["table_number"], name="order_table_idx"),
                    models.Index(fields=["status"], name="order_status_idx"),
                    models.Index(fields=["table_number", "status", "updated_at"], name="order_table_stat_upd_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("table_number__gt", 0)), name="order_table_number_positive"),
                    models.CheckConstraint(condition=models.Q(("total_amount__gte", 0)), name="order_total_non_negative"),
                ],
            },
        ),
        migrations.CreateModel(
            name="DiningTable",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("table_number", models.PositiveIntegerField(unique=True)),
                ("last_placement_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "verbose_name": "Dining Table",
                "verbose_name_plural": "Dining Tables",
                "db_table": "dining_tables",
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("table_number__gt", 0)), name="dining_table_number_positive"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quantity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                (
                    "item_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Unit price of the menu item at the time of sale.",
                        max_digits=10,
                    ),
                ),
                (
                    "subtotal",
                    models.DecimalField(
                        decimal_places=2,
                        editable=False,
                        help_text="quantity x item_price; recomputed on every save.",
                        max_digits=10,
                    ),
                ),
                (
                    "menu_item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="order_lines",
                        to="menu.menuitem",
                    ),
                ),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="orders.order",
                    ),
                ),
            ],
            options={
                "verbose_name": "Order Item",
                "verbose_name_plural": "Order Items",
                "db_table": "order_line_items",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["order"], name="line_item_order_idx"),
                    models.Index(fields=["menu_item"], name="line_item_menu_item_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("quantity__gt", 0)), name="line_item_quantity_positive"),
                    models.CheckConstraint(condition=models.Q(("item_price__gte", 0)), name="line_item_price_non_negative"),
                ],
            },
        ),
    ]
