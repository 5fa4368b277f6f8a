import uuid

from sqlalchemy import text

from dashboard_seed.placeholder_data import CUSTOMERS, INVOICES, REVENUE, USERS
from dashboard_seed.security import verify_password


EXPECTED_SUMMARY = {
    "users": len(USERS),
    "customers": len(CUSTOMERS),
    "invoices": len(INVOICES),
    "revenue": len(REVENUE),
}


def test_seed_route_is_registered_as_get(client):
    assert client.get("/api/seed").status_code == 200
    assert client.post("/api/seed").status_code == 405


def test_seed_endpoint_returns_summary(client):
    r = client.get("/api/seed")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Database seeded successfully"
    assert body["summary"] == EXPECTED_SUMMARY


def test_seed_endpoint_populates_tables(client, table_count):
    assert client.get("/api/seed").status_code == 200

    for table, expected in EXPECTED_SUMMARY.items():
        assert table_count(table) == expected


def test_seed_endpoint_is_idempotent(client, table_count):
    r1 = client.get("/api/seed")
    assert r1.status_code == 200
    counts_1 = {table: table_count(table) for table in EXPECTED_SUMMARY}

    r2 = client.get("/api/seed")
    assert r2.status_code == 200
    # Summary reports records processed, not rows inserted
    assert r2.json()["summary"] == EXPECTED_SUMMARY

    counts_2 = {table: table_count(table) for table in EXPECTED_SUMMARY}
    assert counts_2 == counts_1


def test_seeded_passwords_are_hashed(client, test_engine):
    assert client.get("/api/seed").status_code == 200

    with test_engine.connect() as conn:
        stored = conn.execute(text("SELECT password FROM users WHERE email = :email"), {"email": USERS[0].email}).scalar()

    assert stored != USERS[0].password
    assert verify_password(USERS[0].password, stored)


def test_seeded_invoices_get_generated_ids(client, test_engine):
    assert client.get("/api/seed").status_code == 200

    with test_engine.connect() as conn:
        ids = conn.execute(text("SELECT id FROM invoices")).scalars().all()

    assert len(ids) == len(INVOICES)
    assert len(set(ids)) == len(ids)
    assert all(i is not None for i in ids)


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_seed_endpoint_failure_returns_500_envelope(client, test_engine, table_count):
    from dashboard_seed.placeholder_data import SeedDatasets
    from dashboard_seed.routers.system import get_seed_datasets
    from dashboard_seed.schemas import UserSeed
    from dashboard_seed.seed import ensure_schema

    with test_engine.begin() as conn:
        ensure_schema(conn)

    # Two users sharing an email: the second violates the email unique key
    datasets = SeedDatasets(
        users=[
            UserSeed(id=uuid.uuid4(), name="First", email="dup@example.com", password="secret123"),
            UserSeed(id=uuid.uuid4(), name="Second", email="dup@example.com", password="secret123"),
        ],
        customers=list(CUSTOMERS),
        invoices=list(INVOICES),
        revenue=list(REVENUE),
    )
    client.app.dependency_overrides[get_seed_datasets] = lambda: datasets
    try:
        r = client.get("/api/seed")
    finally:
        client.app.dependency_overrides.pop(get_seed_datasets, None)

    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "seed_constraint_violation"
    assert "users" in body["error"]["message"]
    details = body["error"]["details"]
    assert details["dataset"] == "users"
    assert details["type"]
    assert details["message"]

    assert table_count("users") == 0
