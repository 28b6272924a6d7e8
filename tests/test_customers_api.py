import logging
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from customer_management_api.app.core.db import CustomerStore, SqliteCustomerStore
from customer_management_api.app.main import create_app


def parse_timestamp(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_list_initially_empty(client):
    rv = client.get("/api/customers")
    assert rv.status_code == 200
    assert rv.json() == []


def test_customer_lifecycle(client):
    rv = client.post(
        "/api/customers",
        json={"firstName": "Alice", "lastName": "Smith", "email": "alice@example.com"},
    )
    assert rv.status_code == 201
    created = rv.json()
    assert created["id"] > 0
    assert created["firstName"] == "Alice"
    assert created["lastName"] == "Smith"
    assert created["email"] == "alice@example.com"
    age = datetime.now(timezone.utc) - parse_timestamp(created["createdAt"])
    assert timedelta(0) <= age < timedelta(minutes=1)
    assert rv.headers["location"].endswith(f"/api/customers/{created['id']}")

    rv = client.get("/api/customers")
    assert rv.status_code == 200
    assert rv.json() == [created]

    rv = client.get(f"/api/customers/{created['id']}")
    assert rv.status_code == 200
    assert rv.json() == created

    rv = client.delete(f"/api/customers/{created['id']}")
    assert rv.status_code == 204
    assert rv.content == b""

    rv = client.get(f"/api/customers/{created['id']}")
    assert rv.status_code == 404
    assert rv.content == b""


def test_location_header_resolves(client):
    rv = client.post("/api/customers", json={"firstName": "Bob"})
    location = rv.headers["location"]
    assert client.get(location).json() == rv.json()


def test_get_missing_returns_empty_404(client):
    rv = client.get("/api/customers/999999")
    assert rv.status_code == 404
    assert rv.content == b""


def test_delete_missing_returns_empty_404(client):
    rv = client.delete("/api/customers/42424242")
    assert rv.status_code == 404
    assert rv.content == b""


def test_null_fields_are_omitted(client):
    rv = client.post("/api/customers", json={"firstName": "Test"})
    assert rv.status_code == 201
    body = rv.json()
    assert "lastName" not in body
    assert "email" not in body
    assert set(body) == {"id", "firstName", "createdAt"}


def test_empty_object_creates_customer(client):
    rv = client.post("/api/customers", json={})
    assert rv.status_code == 201
    assert set(rv.json()) == {"id", "createdAt"}


def test_snake_case_input_accepted(client):
    rv = client.post("/api/customers", json={"first_name": "Eve"})
    assert rv.status_code == 201
    assert rv.json()["firstName"] == "Eve"


def test_multiple_creates_assign_increasing_ids(client):
    first = client.post("/api/customers", json={"firstName": "First"}).json()
    second = client.post("/api/customers", json={"firstName": "Second"}).json()
    assert second["id"] > first["id"]


def test_missing_body_returns_400(client):
    rv = client.post("/api/customers")
    assert rv.status_code == 400
    assert rv.json() == {"detail": "Customer payload is required"}


def test_null_body_returns_400(client):
    rv = client.post("/api/customers", content="null", headers={"Content-Type": "application/json"})
    assert rv.status_code == 400
    assert "detail" in rv.json()


def test_malformed_json_returns_400(client):
    rv = client.post("/api/customers", content="{not json", headers={"Content-Type": "application/json"})
    assert rv.status_code == 400
    assert isinstance(rv.json()["detail"], list)


def test_wrong_field_type_returns_400(client):
    rv = client.post("/api/customers", json={"firstName": 123})
    assert rv.status_code == 400
    assert client.get("/api/customers").json() == []


def test_non_integer_id_returns_400(client):
    rv = client.get("/api/customers/abc")
    assert rv.status_code == 400


def test_health(client):
    rv = client.get("/health")
    assert rv.status_code == 200
    assert rv.json() == {"status": "ok"}


def test_sqlite_backed_app(tmp_path):
    store = SqliteCustomerStore(str(tmp_path / "customers.db"))
    with TestClient(create_app(store=store)) as client:
        created = client.post("/api/customers", json={"firstName": "Alice", "email": "alice@example.com"}).json()
        assert client.get(f"/api/customers/{created['id']}").json() == created

    # Data survives a new application over the same file.
    with TestClient(create_app(store=SqliteCustomerStore(store.path))) as client:
        assert client.get("/api/customers").json() == [created]


class FailingStore(CustomerStore):
    def list_all(self):
        raise RuntimeError("store unavailable")

    def get(self, customer_id):
        raise RuntimeError("store unavailable")

    def insert(self, data):
        raise RuntimeError("store unavailable")

    def delete(self, customer_id):
        raise RuntimeError("store unavailable")


def test_store_failure_returns_500():
    with TestClient(create_app(store=FailingStore()), raise_server_exceptions=False) as client:
        rv = client.get("/api/customers")
    assert rv.status_code == 500
    assert rv.json() == {"detail": "Internal server error"}


def test_store_failure_is_not_logged_by_the_app(caplog):
    with caplog.at_level(logging.ERROR):
        with TestClient(create_app(store=FailingStore()), raise_server_exceptions=False) as client:
            assert client.get("/api/customers").status_code == 500
    assert not [r for r in caplog.records if r.name.startswith("customer_management_api")]


def test_huge_id_returns_404_on_sqlite(tmp_path):
    store = SqliteCustomerStore(str(tmp_path / "customers.db"))
    with TestClient(create_app(store=store)) as client:
        client.post("/api/customers", json={"firstName": "Kept"})
        assert client.get("/api/customers/99999999999999999999").status_code == 404
        assert client.delete("/api/customers/99999999999999999999").status_code == 404
        assert len(client.get("/api/customers").json()) == 1


def test_huge_id_returns_404_in_memory(client):
    assert client.get("/api/customers/99999999999999999999").status_code == 404
    assert client.delete("/api/customers/99999999999999999999").status_code == 404
