from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
import logging

from .serializers import (
    MenuItemPopularitySerializer,
    ReportParameterSerializer,
    SalesReportSerializer,
    TableActivitySerializer,
)
from .services import SalesReportService

logger = logging.getLogger(__name__)


class ReportViewSet(viewsets.ViewSet):
    """
    Read-only sales reports for the admin dashboard.
    """

    @action(detail=False, methods=["get"], url_path="sales")
    def sales(self, request):
        """Revenue totals, status breakdown, top sellers and daily sales"""
        serializer = ReportParameterSerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        report_data = SalesReportService.generate_sales_report(
            start_date=serializer.validated_data.get("start_date"),
            end_date=serializer.validated_data.get("end_date"),
            limit=serializer.validated_data["limit"],
        )
        return Response(SalesReportSerializer(report_data).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], url_path="tables")
    def tables(self, request):
        """Open orders per table"""
        rows = SalesReportService.table_activity()
        return Response(TableActivitySerializer(rows, many=True).data)

    @action(detail=False, methods=["get"], url_path="menu-items")
    def menu_items(self, request):
        """How often each menu item has been ordered"""
        rows = SalesReportService.menu_item_popularity()
        return Response(MenuItemPopularitySerializer(rows, many=True).data)
