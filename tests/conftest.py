from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.employees.models import Employee


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_customer():
    """Factory persisting a Customer with sane defaults."""

    def _make(**overrides) -> Customer:
        defaults = {
            "first_name": "Jane",
            "last_name": "Doe",
            "email": "jane.doe@example.com",
            "phone": "512-555-0100",
            "address": "100 Congress Ave",
            "city": "Austin",
            "state": "TX",
            "zip_code": "73301",
        }
        defaults.update(overrides)
        return Customer.objects.create(**defaults)

    return _make


@pytest.fixture()
def make_employee():
    """Factory persisting an Employee with sane defaults."""

    def _make(**overrides) -> Employee:
        defaults = {
            "first_name": "John",
            "last_name": "Smith",
            "email": "john.smith@example.com",
            "phone": "555-0100",
            "department": "Engineering",
            "salary": Decimal("85000.00"),
        }
        defaults.update(overrides)
        return Employee.objects.create(**defaults)

    return _make
