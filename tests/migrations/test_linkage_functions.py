"""
Integration tests for the SQL linkage functions in migrations/.

Runs against a real Postgres when HUBBER_TEST_DB_URL is set. Each test
applies the migrations into a scratch schema inside one transaction and
rolls it back afterwards, so nothing is left behind.
"""

import os
import uuid

import pytest
import psycopg2
from psycopg2.extras import Json, register_uuid

from run_migrations import discover_migrations

from tests.conftest import ADDRESS_ROW, CLIENT_ADDRESS_ROW

DB_URL = os.environ.get("HUBBER_TEST_DB_URL", "")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not DB_URL, reason="HUBBER_TEST_DB_URL not set"),
]


@pytest.fixture
def cur():
    conn = psycopg2.connect(DB_URL)
    register_uuid(conn_or_curs=conn)
    try:
        with conn.cursor() as cursor:
            schema = f"hubber_test_{uuid.uuid4().hex[:12]}"
            cursor.execute(f"CREATE SCHEMA {schema}")
            cursor.execute(f"SET LOCAL search_path TO {schema}, public")
            for migration in discover_migrations():
                cursor.execute(migration.path.read_text())
            yield cursor
    finally:
        conn.rollback()
        conn.close()


def call(cur, function: str, *args):
    placeholders = ", ".join(["%s"] * len(args))
    cur.execute(f"SELECT {function}({placeholders})", args)
    return cur.fetchone()[0]


def sqlstate_of(cur, function: str, *args) -> str:
    """Run a call that should fail and return its SQLSTATE."""
    cur.execute("SAVEPOINT expect_error")
    try:
        call(cur, function, *args)
    except psycopg2.Error as e:
        cur.execute("ROLLBACK TO SAVEPOINT expect_error")
        return e.pgcode
    pytest.fail(f"{function} did not raise")


def make_owner(cur, clerk_id: str = "user_sql") -> str:
    cur.execute(
        "INSERT INTO users (clerk_id, email) VALUES (%s, %s) RETURNING id",
        (clerk_id, f"{clerk_id}@example.com"),
    )
    return str(cur.fetchone()[0])


def company_payload(name: str = "Acme") -> Json:
    return Json({
        "name": name,
        "address": ADDRESS_ROW,
        "phone": "555",
        "email": "a@b.com",
        "business_type": "tech",
    })


def client_payload() -> Json:
    return Json({
        "first_name": "Cora",
        "last_name": "Client",
        "email": "cora@example.com",
        "phone": "555-0101",
        "address": CLIENT_ADDRESS_ROW,
    })


def job_payload() -> Json:
    return Json({
        "title": "Fix the roof",
        "location": ADDRESS_ROW,
        "start_date": "2025-03-01T09:00:00Z",
        "end_date": "2025-03-05T17:00:00Z",
    })


def array_column(cur, table: str, column: str, row_id: str) -> list[str]:
    cur.execute(f"SELECT {column} FROM {table} WHERE id = %s", (row_id,))
    return [str(v) for v in cur.fetchone()[0]]


@pytest.fixture
def owner(cur) -> str:
    return make_owner(cur)


@pytest.fixture
def company(cur, owner) -> str:
    return call(cur, "create_company_for_owner", owner, company_payload(), 10)["id"]


@pytest.fixture
def client(cur, company) -> str:
    return call(cur, "create_client_for_company", company, client_payload())["id"]


class TestCompanies:
    def test_create_links_owner(self, cur, owner):
        row = call(cur, "create_company_for_owner", owner, company_payload(), 1)

        assert array_column(cur, "users", "companies", owner) == [row["id"]]
        assert row["status"] == "active"
        assert row["clients"] == []

    def test_quota_rechecked(self, cur, owner):
        call(cur, "create_company_for_owner", owner, company_payload("First"), 1)

        assert sqlstate_of(cur, "create_company_for_owner", owner, company_payload("Second"), 1) == "HB403"
        assert len(array_column(cur, "users", "companies", owner)) == 1

    def test_unknown_owner(self, cur):
        assert sqlstate_of(cur, "create_company_for_owner", str(uuid.uuid4()), company_payload(), 1) == "HB404"

    def test_delete_unlinks_owner(self, cur, owner, company):
        result = call(cur, "delete_company_for_owner", company)

        assert result["owner_id"] == owner
        assert array_column(cur, "users", "companies", owner) == []


class TestClients:
    def test_create_links_company(self, cur, company, client):
        assert array_column(cur, "companies", "clients", company) == [client]

    def test_unknown_company(self, cur):
        assert sqlstate_of(cur, "create_client_for_company", str(uuid.uuid4()), client_payload()) == "HB404"

    def test_delete_removes_client_and_its_jobs(self, cur, company, client):
        job = call(cur, "create_job_for_company", company, client, job_payload())["id"]

        result = call(cur, "delete_client_from_company", company, client)

        assert result["deleted_jobs"] == [job]
        assert array_column(cur, "companies", "clients", company) == []
        assert array_column(cur, "companies", "jobs", company) == []
        cur.execute("SELECT count(*) FROM jobs WHERE id = %s", (job,))
        assert cur.fetchone()[0] == 0


class TestJobs:
    def test_create_links_company(self, cur, company, client):
        job = call(cur, "create_job_for_company", company, client, job_payload())

        assert array_column(cur, "companies", "jobs", company) == [job["id"]]
        assert job["client_id"] == client

    def test_client_from_other_company(self, cur, owner, client):
        other = call(cur, "create_company_for_owner", owner, company_payload("Other"), 10)["id"]

        assert sqlstate_of(cur, "create_job_for_company", other, client, job_payload()) == "HB409"
        assert array_column(cur, "companies", "jobs", other) == []

    def test_delete_unlinks_once(self, cur, company, client):
        first = call(cur, "create_job_for_company", company, client, job_payload())["id"]
        second = call(cur, "create_job_for_company", company, client, job_payload())["id"]

        result = call(cur, "delete_job", first)

        assert result["company_id"] == company
        assert array_column(cur, "companies", "jobs", company) == [second]
        assert sqlstate_of(cur, "delete_job", first) == "HB404"
        assert array_column(cur, "companies", "jobs", company) == [second]
