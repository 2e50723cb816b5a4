from django.urls import path
from . import views

app_name = "reports"

urlpatterns = [
    path("sales/", views.ReportViewSet.as_view({"get": "sales"}), name="sales-report"),
    path("tables/", views.ReportViewSet.as_view({"get": "tables"}), name="table-activity"),
    path("menu-items/", views.ReportViewSet.as_view({"get": "menu_items"}), name="menu-item-popularity"),
]

# URL patterns reference:
#
# GET /api/reports/sales/?start_date=2024-01-01T00:00:00Z&end_date=2024-01-31T23:59:59Z&limit=10
# GET /api/reports/tables/
# GET /api/reports/menu-items/
