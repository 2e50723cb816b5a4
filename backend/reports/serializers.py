from rest_framework import serializers


class ReportParameterSerializer(serializers.Serializer):
    """Validate report parameters. Both ends of the range are optional."""

    start_date = serializers.DateTimeField(required=False)
    end_date = serializers.DateTimeField(required=False)
    limit = serializers.IntegerField(default=10, min_value=1, max_value=100)

    def validate(self, data):
        """Validate date range parameters"""
        start_date = data.get("start_date")
        end_date = data.get("end_date")

        if start_date and end_date and start_date >= end_date:
            raise serializers.ValidationError("Start date must be before end date")

        return data


class StatusRevenueSerializer(serializers.Serializer):
    status = serializers.CharField()
    order_count = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=12, decimal_places=2)


class TopSellingItemSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField()
    name = serializers.CharField()
    total_sold = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=12, decimal_places=2)


class DailySalesSerializer(serializers.Serializer):
    sale_date = serializers.DateField()
    total_orders = serializers.IntegerField()
    daily_revenue = serializers.DecimalField(max_digits=12, decimal_places=2)


class OrderValueStatsSerializer(serializers.Serializer):
    order_count = serializers.IntegerField()
    average_order_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    min_order_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    max_order_value = serializers.DecimalField(max_digits=12, decimal_places=2)


class SalesReportSerializer(serializers.Serializer):
    total_revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    revenue_by_status = StatusRevenueSerializer(many=True)
    top_selling_items = TopSellingItemSerializer(many=True)
    daily_sales = DailySalesSerializer(many=True)
    order_value_stats = OrderValueStatsSerializer()
    generated_at = serializers.DateTimeField()


class TableActivitySerializer(serializers.Serializer):
    table_number = serializers.IntegerField()
    status = serializers.CharField()
    active_orders = serializers.IntegerField()
    table_total = serializers.DecimalField(max_digits=12, decimal_places=2)


class MenuItemPopularitySerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    times_ordered = serializers.IntegerField()
    total_quantity_sold = serializers.IntegerField()
