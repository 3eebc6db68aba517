"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
from unittest.mock import MagicMock, patch
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service


# HS256 signing secret used in place of Clerk's JWKS during tests
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_CLERK_ID = "user_2abcTESTclerk"
TEST_EMAIL = "owner@example.com"


def create_test_token(
    user_id: str = TEST_CLERK_ID,
    email: Optional[str] = TEST_EMAIL,
    expired: bool = False,
    azp: str = "http://localhost:3000",
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a Clerk-style session token signed with the test secret.

    Args:
        user_id: Clerk user ID (``sub``)
        email: Optional custom email claim
        expired: If True, the token expired an hour ago
        azp: Authorized party claim
        secret: HS256 signing key
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(minutes=5)

    payload = {
        "sub": user_id,
        "sid": "sess_test123",
        "azp": azp,
        "iss": "https://clerk.example.com",
        "iat": int((exp - timedelta(minutes=10)).timestamp()) if expired else int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    if email:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm="HS256")


def make_auth_settings(
    secret: str = TEST_JWT_SECRET,
    jwks_url: str = "",
    authorized_parties: Optional[list[str]] = None,
) -> MagicMock:
    """Settings stand-in carrying only what AuthService reads."""
    settings = MagicMock()
    settings.clerk_jwt_secret = secret
    settings.clerk_jwks_url = jwks_url
    settings.clerk_authorized_parties = authorized_parties or []
    return settings


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the auth service and service container around each test."""
    reset_auth_service()
    reset_container()
    yield
    reset_auth_service()
    reset_container()


@pytest.fixture
def auth_settings():
    """Make AuthService verify HS256 tokens signed with TEST_JWT_SECRET."""
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value = make_auth_settings()
        yield mock_settings


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent Clerk user ID."""
    return TEST_CLERK_ID


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


def mock_db_result(data) -> MagicMock:
    """A Supabase APIResponse stand-in."""
    result = MagicMock()
    result.data = data
    return result


def make_db_mock() -> MagicMock:
    """
    Supabase client stand-in whose query builder chains back to itself.

    Set ``db.table.return_value.execute.return_value`` (or
    ``db.rpc.return_value.execute.return_value``) to control results.
    """
    db = MagicMock()
    query = db.table.return_value
    for method in ("select", "insert", "update", "delete", "eq", "in_", "ilike", "order", "limit"):
        getattr(query, method).return_value = query
    return db


# -----------------------------------------------------------------------------
# Domain object builders
# -----------------------------------------------------------------------------

USER_ID = "0b6f3c1e-5d2a-4f8b-9c7e-1a2b3c4d5e6f"
COMPANY_ID = "1c7a4d2f-6e3b-4a9c-8d1f-2b3c4d5e6f70"
PUBLIC_ID = "2d8b5e30-7f4c-4b0d-9e2a-3c4d5e6f7081"
CLIENT_ID = "3e9c6f41-8a5d-4c1e-af3b-4d5e6f708192"
JOB_ID = "4fad7052-9b6e-4d2f-b04c-5e6f708192a3"

ADDRESS_ROW = {
    "street": "1 Main St",
    "city": "Springfield",
    "stateOrProvince": "IL",
    "postalCodeOrZip": "62701",
    "country": "US",
}

CLIENT_ADDRESS_ROW = {
    "street": "9 Elm St",
    "city": "Springfield",
    "postalCodeOrZip": "62702",
}


def user_row(**overrides) -> dict:
    row = {
        "id": USER_ID,
        "clerk_id": TEST_CLERK_ID,
        "email": TEST_EMAIL,
        "first_name": "Olive",
        "last_name": "Owner",
        "subscription_tier": "free",
        "stripe_customer_id": None,
        "companies": [],
        "created_at": "2025-01-01T00:00:00+00:00",
        "updated_at": "2025-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


def company_row(**overrides) -> dict:
    row = {
        "id": COMPANY_ID,
        "public_id": PUBLIC_ID,
        "owner_id": USER_ID,
        "name": "Acme Builders",
        "logo": None,
        "description": "We build things",
        "address": dict(ADDRESS_ROW),
        "phone": "555-0100",
        "email": "hello@acme.example",
        "website": None,
        "business_type": "construction",
        "founded_year": 1999,
        "social_media": None,
        "services": ["roofing"],
        "images": [],
        "testimonials": [],
        "employees": [],
        "clients": [],
        "jobs": [],
        "total_revenue": 0,
        "status": "active",
        "company_url": f"http://localhost:3000/company/portal/{COMPANY_ID}",
        "created_at": "2025-01-02T00:00:00+00:00",
        "updated_at": "2025-01-02T00:00:00+00:00",
    }
    row.update(overrides)
    return row


def client_row(**overrides) -> dict:
    row = {
        "id": CLIENT_ID,
        "company_id": COMPANY_ID,
        "first_name": "Cora",
        "last_name": "Client",
        "email": "cora@example.com",
        "phone": "555-0101",
        "company": None,
        "address": dict(CLIENT_ADDRESS_ROW),
        "images": [],
        "created_at": "2025-01-03T00:00:00+00:00",
        "updated_at": "2025-01-03T00:00:00+00:00",
    }
    row.update(overrides)
    return row


def job_row(**overrides) -> dict:
    row = {
        "id": JOB_ID,
        "company_id": COMPANY_ID,
        "client_id": CLIENT_ID,
        "title": "Fix the roof",
        "description": None,
        "location": dict(ADDRESS_ROW),
        "start_date": "2025-03-01T09:00:00+00:00",
        "end_date": "2025-03-05T17:00:00+00:00",
        "status": "active",
        "assigned_employees": [],
        "created_at": "2025-02-01T00:00:00+00:00",
        "updated_at": "2025-02-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row
