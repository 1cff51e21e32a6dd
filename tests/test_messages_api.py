from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from message_store_api.app.core.config import Settings
from message_store_api.app.main import create_app
from message_store_api.app.services.message_store import MessageStore
from message_store_api.app.services.storage import InMemoryMessageStorage

BASE = "/api/v1/messages"


def add(client: TestClient, **overrides: str) -> dict:
    body = {"title": "T", "body": "B", "attachmentURL": "U"}
    body.update(overrides)
    response = client.post(f"{BASE}/", json=body)
    assert response.status_code == 201
    return response.json()


def test_add_message_returns_camel_case_record(client: TestClient) -> None:
    message = add(client)

    assert message == {
        "id": "msg-1",
        "title": "T",
        "body": "B",
        "attachmentURL": "U",
        "createdAt": 1_000,
        "updatedAt": None,
    }


def test_list_and_get(client: TestClient) -> None:
    first = add(client, title="one")
    second = add(client, title="two")

    listed = client.get(f"{BASE}/")
    fetched = client.get(f"{BASE}/{second['id']}")

    assert listed.status_code == 200
    assert listed.json() == [first, second]
    assert fetched.status_code == 200
    assert fetched.json() == second


def test_missing_field_is_bad_request_and_not_stored(client: TestClient) -> None:
    response = client.post(f"{BASE}/", json={"title": "", "body": "B", "attachmentURL": "U"})
    omitted = client.post(f"{BASE}/", json={"title": "T", "body": "B"})

    assert response.status_code == 400
    assert response.json() == {"detail": "All data must be added"}
    assert omitted.status_code == 400
    assert client.get(f"{BASE}/").json() == []


def test_get_unknown_message_is_not_found(client: TestClient) -> None:
    response = client.get(f"{BASE}/nonexistent-id")

    assert response.status_code == 404
    assert response.json() == {"detail": "Message with id=nonexistent-id not found"}


def test_update_then_delete(client: TestClient) -> None:
    message = add(client)

    updated = client.put(
        f"{BASE}/{message['id']}",
        json={"title": "T2", "body": "B", "attachmentURL": "U"},
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["title"] == "T2"
    assert body["id"] == message["id"]
    assert body["createdAt"] == message["createdAt"]
    assert body["updatedAt"] == 1_010

    deleted = client.delete(f"{BASE}/{message['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == body

    assert client.get(f"{BASE}/{message['id']}").status_code == 404


def test_update_with_empty_payload_is_bad_request(client: TestClient) -> None:
    message = add(client)

    response = client.put(
        f"{BASE}/{message['id']}",
        json={"title": "", "body": "", "attachmentURL": ""},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "At least one field must be updated"}
    assert client.get(f"{BASE}/{message['id']}").json() == message


def test_update_and_delete_unknown_message(client: TestClient) -> None:
    updated = client.put(f"{BASE}/missing", json={"title": "T", "body": "B", "attachmentURL": "U"})
    deleted = client.delete(f"{BASE}/missing")

    assert updated.status_code == 404
    assert updated.json()["detail"].endswith("Couldn't update.")
    assert deleted.status_code == 404
    assert deleted.json()["detail"].endswith("Couldn't delete.")


def test_operation_ids_are_published(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    operation_ids = {
        op["operationId"]
        for path in schema["paths"].values()
        for op in path.values()
    }
    assert {"getMessages", "getMessage", "addMessage", "updateMessage", "deleteMessage"} <= operation_ids


def test_app_built_from_sqlite_settings(tmp_path: Path) -> None:
    settings = Settings(storage_backend="sqlite", database_url=str(tmp_path / "api.db"))

    with TestClient(create_app(settings)) as client:
        created = add(client)
        assert client.get(f"{BASE}/{created['id']}").json() == created

    with TestClient(create_app(settings)) as client:
        assert client.get(f"{BASE}/").json() == [created]


def test_null_field_on_add_is_bad_request(client: TestClient) -> None:
    response = client.post(f"{BASE}/", json={"title": None, "body": "B", "attachmentURL": "U"})

    assert response.status_code == 400
    assert response.json() == {"detail": "All data must be added"}
    assert client.get(f"{BASE}/").json() == []


def test_update_with_all_fields_null_is_bad_request(client: TestClient) -> None:
    message = add(client)

    response = client.put(
        f"{BASE}/{message['id']}",
        json={"title": None, "body": None, "attachmentURL": None},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "At least one field must be updated"}
    assert client.get(f"{BASE}/{message['id']}").json() == message


def test_update_reads_null_field_as_empty(client: TestClient) -> None:
    message = add(client)

    response = client.put(
        f"{BASE}/{message['id']}",
        json={"title": "T2", "body": None, "attachmentURL": "U"},
    )

    assert response.status_code == 200
    assert response.json()["body"] == ""


def test_store_is_closed_on_shutdown() -> None:
    closed = []

    class RecordingStorage(InMemoryMessageStorage):
        def close(self) -> None:
            closed.append(True)
            super().close()

    app = create_app(Settings(storage_backend="memory"), store=MessageStore(RecordingStorage()))

    with TestClient(app) as client:
        add(client)
        assert closed == []

    assert closed == [True]
