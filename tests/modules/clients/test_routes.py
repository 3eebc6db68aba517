"""
Tests for client API endpoints under /api/client.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_client_service
from modules.clients.exceptions import ClientNotFoundError
from modules.clients.repository import ClientRepository
from modules.companies.exceptions import CompanyNotFoundError

from tests.conftest import CLIENT_ADDRESS_ROW, CLIENT_ID, COMPANY_ID, client_row

_mapper = ClientRepository(MagicMock())


def make_client(**overrides):
    return _mapper._map_to_client(client_row(**overrides))


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def client_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_client_service] = lambda: service
    return service


@pytest.fixture
def http(app) -> TestClient:
    return TestClient(app)


class TestListClients:
    """Tests for GET /api/client"""

    def test_list(self, http, client_service):
        client_service.get_clients_by_company.return_value = [make_client(company="Big Co")]

        response = http.get("/api/client", params={"companyId": COMPANY_ID})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["clients"][0]["clientType"] == "company"
        assert body["clients"][0]["address"]["postalCodeOrZip"] == "62702"

    def test_missing_company_id(self, http, client_service):
        response = http.get("/api/client")

        assert response.status_code == 400
        assert response.json()["error"] == "Company ID is required"

    def test_unknown_company(self, http, client_service):
        client_service.get_clients_by_company.side_effect = CompanyNotFoundError(COMPANY_ID)

        response = http.get("/api/client", params={"companyId": COMPANY_ID})

        assert response.status_code == 404


class TestCreateClient:
    """Tests for POST /api/client"""

    def test_create(self, http, client_service):
        client_service.create_client.return_value = make_client()

        response = http.post(
            "/api/client",
            json={
                "companyId": COMPANY_ID,
                "clientData": {
                    "firstName": "Cora",
                    "lastName": "Client",
                    "email": "cora@example.com",
                    "phone": "555-0101",
                    "address": CLIENT_ADDRESS_ROW,
                },
            },
        )

        assert response.status_code == 200
        assert response.json()["client"]["id"] == CLIENT_ID
        company_id, data = client_service.create_client.call_args[0]
        assert company_id == COMPANY_ID
        assert data.first_name == "Cora"

    def test_incomplete_client_data(self, http, client_service):
        response = http.post(
            "/api/client",
            json={"companyId": COMPANY_ID, "clientData": {"firstName": "Cora"}},
        )

        assert response.status_code == 400
        fields = {d["field"] for d in response.json()["details"]}
        assert "clientData.email" in fields
        client_service.create_client.assert_not_called()


class TestUpdateClient:
    """Tests for PATCH /api/client"""

    def test_update(self, http, client_service):
        client_service.update_client.return_value = make_client(phone="555-9999")

        response = http.patch(
            "/api/client",
            json={"companyId": COMPANY_ID, "clientId": CLIENT_ID, "updatedData": {"phone": "555-9999"}},
        )

        assert response.status_code == 200
        assert response.json()["client"]["phone"] == "555-9999"
        _, client_id, data = client_service.update_client.call_args[0]
        assert client_id == CLIENT_ID
        assert data.model_fields_set == {"phone"}

    def test_unknown_client(self, http, client_service):
        client_service.update_client.side_effect = ClientNotFoundError(CLIENT_ID)

        response = http.patch(
            "/api/client",
            json={"companyId": COMPANY_ID, "clientId": CLIENT_ID, "updatedData": {}},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "CLIENT_NOT_FOUND"


class TestDeleteClient:
    """Tests for DELETE /api/client"""

    def test_delete(self, http, client_service):
        response = http.request(
            "DELETE",
            "/api/client",
            json={"companyId": COMPANY_ID, "clientId": CLIENT_ID},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Client deleted successfully"}
        client_service.delete_client.assert_awaited_once_with(COMPANY_ID, CLIENT_ID)

    def test_missing_client_id(self, http, client_service):
        response = http.request("DELETE", "/api/client", json={"companyId": COMPANY_ID})

        assert response.status_code == 400
        client_service.delete_client.assert_not_called()
