"""
HTTP front-end tests through the FastAPI test client.
"""

from fastapi.testclient import TestClient

from notelayer.core.storage import SqlStorage
from notelayer.database import create_engine
from notelayer.main import create_app


def create(client, name="foo", content="bar"):
    response = client.post("/notes/", json={"name": name, "content": content})
    assert response.status_code == 201
    return response.json()


def test_get_by_id_after_create(client):
    created = create(client)

    response = client.get("/notes/?id=1")

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "foo", "content": "bar"}
    assert created == response.json()


def test_get_without_id_returns_array(client):
    create(client, "a", "b")
    create(client, "c", "d")

    response = client.get("/notes/")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "a", "content": "b"},
        {"id": 2, "name": "c", "content": "d"},
    ]


def test_empty_id_lists_everything(client):
    create(client)

    response = client.get("/notes/", params={"id": ""})

    assert response.status_code == 200
    assert isinstance(response.json(), list)


def test_empty_collection(client):
    assert client.get("/notes/").json() == []


def test_update_changes_only_given_fields(client):
    create(client, "A", "B")

    response = client.put("/notes/?id=1", json={"content": "C"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "A", "content": "C"}


def test_update_with_empty_strings_is_noop(client):
    create(client, "A", "B")

    response = client.put("/notes/?id=1", json={"name": "", "content": ""})

    assert response.json() == {"id": 1, "name": "A", "content": "B"}


def test_delete_returns_note_then_it_is_gone(client):
    create(client)

    response = client.delete("/notes/?id=1")
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "foo", "content": "bar"}

    missing = client.get("/notes/?id=1")
    assert missing.status_code == 404
    assert missing.json()["error"] == "NoteNotFoundError"


def test_ids_not_reused_over_http(client):
    create(client)
    create(client)
    client.delete("/notes/?id=2")

    assert create(client)["id"] == 3


def test_bad_id_is_400(client):
    response = client.get("/notes/?id=notanumber")

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "ParseError"
    assert body["details"] == {"id": "notanumber"}


def test_missing_note_is_404(client):
    for method in ("put", "delete"):
        kwargs = {"json": {"name": "x"}} if method == "put" else {}
        response = getattr(client, method)("/notes/?id=42", **kwargs)
        assert response.status_code == 404
        assert response.json()["message"] == "Note 42 not found"


def test_create_with_invalid_body_is_400(client):
    response = client.post("/notes/", json={"name": "only name"})
    assert response.status_code == 400

    response = client.post("/notes/", content=b"not json", headers={"content-type": "application/json"})
    assert response.status_code == 400


def test_update_and_delete_require_id(client):
    assert client.put("/notes/", json={"name": "x"}).status_code == 400
    assert client.delete("/notes/").status_code == 400


def test_unsupported_method_is_405(client):
    assert client.patch("/notes/", json={}).status_code == 405


def test_storage_is_shared_with_app_state(client, memory_storage):
    create(client)

    assert client.app.state.storage is memory_storage


def test_id_too_large_for_sql_backend_is_400(test_settings):
    app = create_app(SqlStorage(create_engine(test_settings)), test_settings)

    with TestClient(app) as sql_client:
        for method in ("get", "put", "delete"):
            response = sql_client.request(
                method, "/notes/?id=99999999999999999999", json={"name": "a"}
            )
            assert response.status_code == 400
            assert response.json()["details"] == {"id": "99999999999999999999"}
