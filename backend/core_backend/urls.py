"""
URL configuration for core_backend project.

The orders app registers its base endpoint as ``orders``, so it is mounted at
``api/`` to produce ``/api/orders/``.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/menu/", include("menu.urls")),
    path("api/", include("orders.urls")),
    path("api/reports/", include("reports.urls")),
]
