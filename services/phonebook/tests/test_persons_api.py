"""HTTP contract of the `/api/persons` routes."""

from sqlalchemy import text

MISSING = {"error": "The name and number must be provided."}


def test_list_starts_empty(client) -> None:
    r = client.get("/api/persons")
    assert r.status_code == 200
    assert r.json() == []


def test_create_and_list(client) -> None:
    r = client.post("/api/persons", json={"name": "Ada", "number": "12345"})

    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Ada"
    assert body["number"] == "12345"
    assert len(body["id"]) == 24

    listed = client.get("/api/persons").json()
    assert body in listed


def test_get_by_id(client) -> None:
    created = client.post("/api/persons", json={"name": "Ada", "number": "12345"}).json()

    r = client.get(f"/api/persons/{created['id']}")

    assert r.status_code == 200
    assert r.json() == created


def test_get_unknown_id_is_empty_404(client) -> None:
    r = client.get("/api/persons/000000000000000000000000")

    assert r.status_code == 404
    assert r.content == b""


def test_get_malformed_id_is_server_error(client) -> None:
    """Known defect: malformed ids answer 500 rather than 400.

    Kept until the mapping is decided; this test pins the current behavior.
    """
    r = client.get("/api/persons/not-a-valid-id")

    assert r.status_code == 500
    assert "not-a-valid-id" in r.json()["error"]


def test_delete(client) -> None:
    created = client.post("/api/persons", json={"name": "Ada", "number": "12345"}).json()

    r = client.delete(f"/api/persons/{created['id']}")
    assert r.status_code == 204
    assert r.content == b""

    again = client.delete(f"/api/persons/{created['id']}")
    assert again.status_code == 404
    assert again.json() == {"error": "Person not found with the provided ID"}
    assert client.get("/api/persons").json() == []


def test_delete_unknown_id(client) -> None:
    r = client.delete("/api/persons/000000000000000000000000")

    assert r.status_code == 404
    assert r.json() == {"error": "Person not found with the provided ID"}


def test_delete_malformed_id_is_server_error(client) -> None:
    r = client.delete("/api/persons/abc")
    assert r.status_code == 500


def test_create_missing_fields(client, store) -> None:
    for payload in ({}, {"name": "Ada"}, {"number": "1"}, {"name": "", "number": "1"}):
        r = client.post("/api/persons", json=payload)
        assert r.status_code == 400
        assert r.json() == MISSING
    assert store.count() == 0


def test_create_without_body(client) -> None:
    r = client.post("/api/persons")
    assert r.status_code == 400
    assert r.json() == MISSING


def test_create_short_name_uses_missing_fields_message(client, store) -> None:
    r = client.post("/api/persons", json={"name": "Al", "number": "111"})

    assert r.status_code == 400
    assert r.json() == MISSING
    assert store.count() == 0


def test_extra_fields_are_ignored(client) -> None:
    r = client.post("/api/persons", json={"name": "Ada", "number": "1", "id": "x", "age": 36})

    assert r.status_code == 200
    assert set(r.json()) == {"id", "name", "number"}
    assert r.json()["id"] != "x"


def test_no_update_endpoint(client) -> None:
    created = client.post("/api/persons", json={"name": "Ada", "number": "12345"}).json()

    r = client.put(f"/api/persons/{created['id']}", json={"name": "Ada", "number": "9"})

    assert r.status_code == 405


def test_storage_failure_is_500(client, store) -> None:
    with store.engine.begin() as conn:
        conn.execute(text("DROP TABLE persons"))

    r = client.get("/api/persons")

    assert r.status_code == 500
    assert "persons" in r.json()["error"]


def test_cors_allows_any_origin(client) -> None:
    r = client.get("/api/persons", headers={"Origin": "http://example.com"})
    assert r.headers["access-control-allow-origin"] == "*"


def test_numeric_fields_are_stored_as_text(client) -> None:
    r = client.post("/api/persons", json={"name": 12345, "number": 5551234})

    assert r.status_code == 200
    assert r.json()["name"] == "12345"
    assert r.json()["number"] == "5551234"


def test_invalid_json_body(client, store) -> None:
    r = client.post(
        "/api/persons",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json() == MISSING
    assert store.count() == 0


def test_array_body(client, store) -> None:
    r = client.post("/api/persons", json=["Ada", "12345"])

    assert r.status_code == 400
    assert r.json() == MISSING
    assert store.count() == 0


def test_object_fields_are_rejected(client) -> None:
    r = client.post("/api/persons", json={"name": {"first": "Ada"}, "number": "1"})

    assert r.status_code == 400
    assert r.json() == MISSING
