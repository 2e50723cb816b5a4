"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/orders/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
def is_postgresql():
    """
    True when tests run against PostgreSQL.

    Row locks and the partial unique index only serialize concurrent writers
    on a real server database; SQLite serializes whole-database writes instead.
    """
    from django.db import connection
    return connection.vendor == 'postgresql'


# ============================================================================
# IMPORT ALL FIXTURES FROM core_backend/tests/fixtures.py
# ============================================================================
from core_backend.tests.fixtures import *  # noqa
