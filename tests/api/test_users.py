import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from src.main import app
from src.db.azure_tables import AzureTableUserStore
from src.dependencies.providers import get_user_store
from src.models.errors import StorageError

# Create a test client
client = TestClient(app)

JOHN = {"name": "John", "surName": "Doe", "email": "john.doe@example.com"}

# Each test runs against its own empty store
@pytest.fixture(autouse=True)
def override_store(user_store):
    app.dependency_overrides[get_user_store] = lambda: user_store
    yield user_store
    app.dependency_overrides.clear()

def create_john():
    response = client.post("/users", json=JOHN)
    assert response.status_code == 201
    return response

# Test the documented end-to-end flow
def test_create_get_duplicate_and_mismatch_flow():
    response = create_john()
    assert response.content == b""

    response = client.get("/users", params={"email": JOHN["email"]})
    assert response.status_code == 200
    assert response.json() == JOHN

    response = client.post("/users", json=JOHN)
    assert response.status_code == 400
    assert response.text == "User with email 'john.doe@example.com' already exists"
    assert response.headers["content-type"].startswith("text/plain")

    response = client.put(
        "/users",
        params={"email": JOHN["email"]},
        json={**JOHN, "email": "different@example.com"},
    )
    assert response.status_code == 400
    assert response.text == "Email in URL must match email in request body"

def test_create_reports_all_validation_errors():
    response = client.post("/users", json={"name": "", "surName": "D", "email": "nope"})

    assert response.status_code == 400
    assert response.text == (
        "Invalid input: Name is required, "
        "Surname must be at least 2 characters, "
        "Invalid email format: 'nope'"
    )

def test_create_with_missing_field_is_bad_request():
    response = client.post("/users", json={"name": "John", "email": JOHN["email"]})
    assert response.status_code == 400
    assert response.text.startswith("Invalid request:")
    assert "surName" in response.text

def test_create_with_malformed_json_is_bad_request():
    response = client.post(
        "/users",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400

def test_get_missing_user():
    response = client.get("/users", params={"email": "nobody@example.com"})
    assert response.status_code == 400
    assert response.text == "User with email 'nobody@example.com' not found"

def test_get_without_email_is_bad_request():
    response = client.get("/users")
    assert response.status_code == 400
    assert "email" in response.text

def test_update_user(override_store):
    create_john()

    response = client.put("/users", params={"email": JOHN["email"]}, json={**JOHN, "name": "Johnny"})
    assert response.status_code == 204
    assert response.content == b""

    stored = override_store.get_by_email(JOHN["email"])
    assert stored.name == "Johnny"
    assert client.get("/users", params={"email": JOHN["email"]}).json()["name"] == "Johnny"

def test_update_missing_user():
    response = client.put("/users", params={"email": JOHN["email"]}, json=JOHN)
    assert response.status_code == 400
    assert response.text == "User with email 'john.doe@example.com' not found"

def test_update_with_invalid_fields():
    create_john()
    response = client.put("/users", params={"email": JOHN["email"]}, json={**JOHN, "surName": ""})
    assert response.status_code == 400
    assert response.text == "Invalid input: Surname is required"

def test_delete_user():
    create_john()

    response = client.delete("/users", params={"email": JOHN["email"]})
    assert response.status_code == 204

    response = client.delete("/users", params={"email": JOHN["email"]})
    assert response.status_code == 400
    assert response.text == "User with email 'john.doe@example.com' not found"

def test_list_users():
    jane = {"name": "Jane", "surName": "Doe", "email": "jane@example.com"}
    create_john()
    assert client.post("/users", json=jane).status_code == 201

    response = client.get("/users/list")

    assert response.status_code == 200
    users = response.json()
    assert len(users) == 2
    assert JOHN in users
    assert jane in users

def test_list_users_empty():
    response = client.get("/users/list")
    assert response.status_code == 200
    assert response.json() == []

def test_storage_failure_is_bad_request():
    failing_store = MagicMock()
    failing_store.list.side_effect = StorageError("Azure Table Storage error: unavailable")
    app.dependency_overrides[get_user_store] = lambda: failing_store

    response = client.get("/users/list")

    assert response.status_code == 400
    assert response.text == "Invalid input: Azure Table Storage error: unavailable"

def test_openapi_documents_user_endpoints():
    response = client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert set(paths["/users"]) == {"get", "post", "put", "delete"}
    assert "/users/list" in paths

def test_email_the_table_cannot_store_is_not_found():
    table_client = MagicMock()
    app.dependency_overrides[get_user_store] = lambda: AzureTableUserStore(table_client)

    for method in ("GET", "DELETE"):
        response = client.request(method, "/users", params={"email": "a/b"})
        assert response.status_code == 400
        assert response.text == "User with email 'a/b' not found"

    table_client.get_entity.assert_not_called()
