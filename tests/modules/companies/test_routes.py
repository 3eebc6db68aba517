"""
Tests for company API endpoints.

Covers the owner's collection under /api/companies and single-company
operations under /api/company.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_company_service
from modules.companies.exceptions import CompanyLimitReachedError, CompanyNotFoundError
from modules.companies.repository import CompanyRepository

from tests.conftest import ADDRESS_ROW, COMPANY_ID, TEST_CLERK_ID, company_row, user_row

_mapper = CompanyRepository(MagicMock())


def make_company(**overrides):
    return _mapper._map_to_company(company_row(**overrides))


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def company_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_company_service] = lambda: service
    return service


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class TestCreateCompany:
    """Tests for POST /api/companies"""

    def test_create(self, client, company_service, auth_settings, auth_headers):
        company_service.create_company.return_value = make_company(business_type="tech")

        response = client.post(
            "/api/companies",
            json={
                "name": "Acme Builders",
                "phone": "555-0100",
                "email": "hello@acme.example",
                "businessType": "tech",
                "address": ADDRESS_ROW,
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == COMPANY_ID
        assert data["businessType"] == "tech"
        assert data["companyUrl"].endswith(f"/company/portal/{COMPANY_ID}")
        owner, request = company_service.create_company.call_args[0]
        assert owner == TEST_CLERK_ID
        assert request.address.postal_code_or_zip == "62701"

    def test_requires_auth(self, client, company_service):
        response = client.post("/api/companies", json={})
        assert response.status_code == 401

    def test_missing_fields(self, client, company_service, auth_settings, auth_headers):
        response = client.post("/api/companies", json={"name": "Acme"}, headers=auth_headers)

        assert response.status_code == 400
        fields = {d["field"] for d in response.json()["details"]}
        assert {"phone", "email", "businessType", "address"} <= fields
        company_service.create_company.assert_not_called()

    def test_limit_reached(self, client, company_service, auth_settings, auth_headers):
        company_service.create_company.side_effect = CompanyLimitReachedError(1, "free")

        response = client.post(
            "/api/companies",
            json={
                "name": "Second Co",
                "phone": "555-0100",
                "email": "hello@acme.example",
                "businessType": "retail",
                "address": ADDRESS_ROW,
            },
            headers=auth_headers,
        )

        assert response.status_code == 403
        assert response.json()["code"] == "COMPANY_LIMIT_REACHED"


class TestListCompanies:
    """Tests for GET /api/companies"""

    def test_list(self, client, company_service, auth_settings, auth_headers):
        company_service.get_user_companies.return_value = [make_company()]

        response = client.get("/api/companies", headers=auth_headers)

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [COMPANY_ID]

    def test_get_owned(self, client, company_service, auth_settings, auth_headers):
        company_service.get_owned_company.return_value = make_company()

        response = client.get(f"/api/companies/{COMPANY_ID}", headers=auth_headers)

        assert response.status_code == 200
        company_service.get_owned_company.assert_awaited_once_with(TEST_CLERK_ID, COMPANY_ID)


class TestSingleCompany:
    """Tests for /api/company/{company_id}"""

    def test_fetch_without_auth(self, client, company_service):
        company_service.get_company_by_id.return_value = make_company()

        response = client.get(f"/api/company/{COMPANY_ID}")

        assert response.status_code == 200
        assert response.json()["name"] == "Acme Builders"

    def test_fetch_unknown(self, client, company_service):
        company_service.get_company_by_id.side_effect = CompanyNotFoundError("unknown")

        response = client.get("/api/company/unknown")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Company not found",
            "code": "COMPANY_NOT_FOUND",
            "details": {"company_id": "unknown"},
        }

    def test_update(self, client, company_service, auth_settings, auth_headers):
        company_service.update_company.return_value = make_company(name="Renamed")

        response = client.put(
            f"/api/company/{COMPANY_ID}",
            json={"name": "Renamed"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        _, company_id, request = company_service.update_company.call_args[0]
        assert company_id == COMPANY_ID
        assert request.model_fields_set == {"name"}

    def test_update_unknown_id(self, client, company_service, auth_settings, auth_headers):
        company_service.update_company.side_effect = CompanyNotFoundError("missing")

        response = client.put("/api/company/missing", json={"name": "X"}, headers=auth_headers)

        assert response.status_code == 404

    def test_update_without_id(self, client, company_service, auth_settings, auth_headers):
        response = client.put("/api/company", json={"name": "X"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Company ID is required"
        company_service.update_company.assert_not_called()

    def test_update_null_name(self, client, company_service, auth_settings, auth_headers):
        response = client.put(
            f"/api/company/{COMPANY_ID}",
            json={"name": None},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_update_requires_auth(self, client, company_service):
        response = client.put(f"/api/company/{COMPANY_ID}", json={"name": "X"})
        assert response.status_code == 401

    def test_delete(self, client, company_service, auth_settings, auth_headers):
        response = client.delete(f"/api/company/{COMPANY_ID}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Company successfully deleted",
            "companyId": COMPANY_ID,
        }
        company_service.delete_company.assert_awaited_once_with(TEST_CLERK_ID, COMPANY_ID)

    def test_delete_without_id(self, client, company_service, auth_settings, auth_headers):
        response = client.delete("/api/company", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "COMPANY_ID_REQUIRED"


class TestCreateThenFetchScenario:
    """Real CompanyService over mocked repositories."""

    @pytest.fixture
    def stored(self):
        return {}

    @pytest.fixture
    def wired_client(self, app, stored):
        from modules.companies.service import CompanyService
        from modules.users.repository import UserRepository

        users = MagicMock(spec=UserRepository)
        users.get_by_clerk_id.return_value = UserRepository(MagicMock())._map_to_user(user_row())

        def create_for_owner(owner_id, row, **kwargs):
            stored.update(row, owner_id=owner_id, employees=[], clients=[], jobs=[])
            return _mapper._map_to_company(stored)

        repo = MagicMock(spec=CompanyRepository)
        repo.create_for_owner.side_effect = create_for_owner
        repo.get_by_public_id.side_effect = lambda public_id: (
            _mapper._map_to_company(stored) if stored.get("public_id") == public_id else None
        )

        service = CompanyService(repository=repo, users=users)
        app.dependency_overrides[get_company_service] = lambda: service
        return TestClient(app)

    def test_create_company_defaults(self, wired_client, auth_settings, auth_headers):
        response = wired_client.post(
            "/api/companies",
            json={
                "name": "Acme",
                "phone": "555",
                "email": "a@b.com",
                "businessType": "tech",
                "address": {
                    "street": "1 Rd",
                    "city": "X",
                    "stateOrProvince": "Y",
                    "postalCodeOrZip": "000",
                    "country": "Z",
                },
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["employees"] == []
        assert data["clients"] == []
        assert data["jobs"] == []
        assert data["totalRevenue"] == 0
        assert data["status"] == "active"
        assert data["id"] in data["companyUrl"]

    def test_public_id_round_trip(self, wired_client, stored, auth_settings, auth_headers):
        created = wired_client.post(
            "/api/companies",
            json={
                "name": "Acme",
                "phone": "555",
                "email": "a@b.com",
                "businessType": "tech",
                "address": ADDRESS_ROW,
            },
            headers=auth_headers,
        ).json()

        response = wired_client.get(f"/api/public/{created['publicId']}")

        assert response.status_code == 200
        portal = response.json()
        for field in ("name", "address", "phone", "email"):
            assert portal[field] == created[field]
