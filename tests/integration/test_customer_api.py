"""Integration tests for Customer API endpoints.

Covers:
- CRUD operations via /api/customers.
- Envelope shape and camelCase wire format.
- Domain error mapping (404 not found, 400 duplicate email / invalid body).
"""

from __future__ import annotations

import pytest

from modules.customers.models import Customer

pytestmark = pytest.mark.integration

URL = "/api/customers"


def _payload(**overrides):
    payload = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "a@x.com",
        "phone": "512-555-0100",
        "address": "100 Congress Ave",
        "city": "Austin",
        "state": "TX",
        "zipCode": "73301",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def sample_customer(make_customer):
    return make_customer()


# ===========================================================================
# LIST
# ===========================================================================


class TestCustomerList:
    def test_list_empty(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Customers retrieved successfully",
            "data": [],
            "count": 0,
        }

    def test_list_returns_customers(self, api_client, make_customer):
        make_customer(email="one@example.com")
        make_customer(email="two@example.com")

        body = api_client.get(URL).json()

        assert body["count"] == len(body["data"]) == 2
        assert body["data"][0]["email"] == "one@example.com"
        assert body["data"][0]["firstName"] == "Jane"

    def test_list_with_filter(self, api_client, make_customer):
        make_customer(email="tx@example.com", state="TX")
        make_customer(email="wa@example.com", state="WA")

        body = api_client.get(URL, {"state": "wa"}).json()

        assert body["count"] == 1
        assert body["data"][0]["email"] == "wa@example.com"


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestCustomerRetrieve:
    def test_retrieve_success(self, api_client, sample_customer):
        response = api_client.get(f"{URL}/{sample_customer.id}")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Customer retrieved successfully"
        assert body["data"]["id"] == sample_customer.id
        assert body["data"]["zipCode"] == "73301"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get(f"{URL}/999")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Customer not found with id: 999",
        }

    def test_retrieve_malformed_id_is_not_found(self, api_client):
        response = api_client.get(f"{URL}/abc")
        assert response.status_code == 404
        assert response.json()["success"] is False


# ===========================================================================
# CREATE
# ===========================================================================


class TestCustomerCreate:
    def test_create_then_get_returns_same_values(self, api_client):
        response = api_client.post(URL, _payload(), format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Customer created successfully"
        created = body["data"]
        assert isinstance(created["id"], int)
        assert created["createdAt"] and created["updatedAt"]

        fetched = api_client.get(f"{URL}/{created['id']}").json()["data"]
        for key, value in _payload().items():
            assert fetched[key] == value

    def test_create_accepts_snake_case(self, api_client):
        payload = {"first_name": "Sam", "last_name": "Lee", "email": "sam@example.com", "zip_code": "1"}
        response = api_client.post(URL, payload, format="json")
        assert response.status_code == 201
        assert response.json()["data"]["zipCode"] == "1"

    def test_create_duplicate_email_returns_400(self, api_client, sample_customer):
        response = api_client.post(URL, _payload(email=sample_customer.email), format="json")

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": f"Customer with email {sample_customer.email} already exists",
        }
        assert Customer.objects.count() == 1

    def test_create_missing_fields_returns_400(self, api_client):
        response = api_client.post(URL, {"firstName": "Incomplete"}, format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert {e["field"] for e in body["errors"]} == {"lastName", "email"}
        assert Customer.objects.count() == 0

    def test_create_ignores_client_supplied_id(self, api_client):
        response = api_client.post(URL, _payload(id=777), format="json")
        assert response.status_code == 201
        assert response.json()["data"]["id"] != 777

    def test_email_case_preserved_and_distinct(self, api_client):
        response = api_client.post(URL, _payload(email="Jane@Example.COM"), format="json")

        assert response.status_code == 201
        customer_id = response.json()["data"]["id"]
        fetched = api_client.get(f"{URL}/{customer_id}").json()["data"]
        assert fetched["email"] == "Jane@Example.COM"

        other = api_client.post(URL, _payload(email="Jane@example.com"), format="json")
        assert other.status_code == 201
        assert Customer.objects.count() == 2

    def test_create_accepts_null_optional_fields(self, api_client):
        payload = _payload(phone=None, address=None, city=None, state=None, zipCode=None)

        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["phone"] == data["zipCode"] == ""


# ===========================================================================
# UPDATE
# ===========================================================================


class TestCustomerUpdate:
    def test_update_success(self, api_client, sample_customer):
        response = api_client.put(
            f"{URL}/{sample_customer.id}",
            _payload(email=sample_customer.email, city="Dallas", firstName="Janet"),
            format="json",
        )
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Customer updated successfully"
        assert body["data"]["firstName"] == "Janet"
        assert body["data"]["city"] == "Dallas"
        assert body["data"]["id"] == sample_customer.id

    def test_update_not_found(self, api_client):
        response = api_client.put(f"{URL}/999", _payload(), format="json")
        assert response.status_code == 404
        assert response.json()["message"] == "Customer not found with id: 999"

    def test_update_to_other_customers_email_returns_400(self, api_client, make_customer):
        first = make_customer(email="first@example.com")
        make_customer(email="second@example.com")

        response = api_client.put(
            f"{URL}/{first.id}",
            _payload(email="second@example.com", city="Nowhere"),
            format="json",
        )

        assert response.status_code == 400
        first.refresh_from_db()
        assert first.email == "first@example.com"
        assert first.city == "Austin"

    def test_update_invalid_body_returns_400(self, api_client, sample_customer):
        response = api_client.put(
            f"{URL}/{sample_customer.id}", {"email": "nope"}, format="json"
        )
        assert response.status_code == 400
        assert "errors" in response.json()

    def test_patch_not_allowed(self, api_client, sample_customer):
        response = api_client.patch(
            f"{URL}/{sample_customer.id}", {"city": "X"}, format="json"
        )
        assert response.status_code == 405
        assert response.json()["success"] is False


# ===========================================================================
# DESTROY
# ===========================================================================


class TestCustomerDestroy:
    def test_destroy_success(self, api_client, sample_customer):
        response = api_client.delete(f"{URL}/{sample_customer.id}")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Customer deleted successfully",
        }
        assert not Customer.objects.filter(id=sample_customer.id).exists()

        follow_up = api_client.get(f"{URL}/{sample_customer.id}")
        assert follow_up.status_code == 404

    def test_destroy_not_found(self, api_client):
        response = api_client.delete(f"{URL}/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Customer not found with id: 999"


# ===========================================================================
# Email lifecycle
# ===========================================================================


class TestEmailLifecycle:
    def test_email_freed_after_change(self, api_client):
        created = api_client.post(URL, _payload(email="a@x.com"), format="json")
        assert created.status_code == 201
        customer_id = created.json()["data"]["id"]

        duplicate = api_client.post(URL, _payload(email="a@x.com"), format="json")
        assert duplicate.status_code == 400
        assert Customer.objects.count() == 1

        moved = api_client.put(f"{URL}/{customer_id}", _payload(email="b@x.com"), format="json")
        assert moved.status_code == 200

        reused = api_client.post(URL, _payload(email="a@x.com"), format="json")
        assert reused.status_code == 201
        assert Customer.objects.count() == 2
