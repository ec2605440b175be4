from __future__ import annotations

import uuid
from datetime import timedelta
from typing import Awaitable, Callable

import pytest
from httpx import AsyncClient

from tasktracker.core.config import Settings
from tasktracker.core.security import TokenIssuer

pytestmark = pytest.mark.asyncio


async def _create_task(client: AsyncClient, headers: dict[str, str], **payload: object) -> dict:
    body = {"title": "Write docs", "description": "Initial draft"}
    body.update(payload)
    response = await client.post("/tasks", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/tasks"),
        ("POST", "/tasks"),
        ("GET", f"/tasks/{uuid.uuid4()}"),
        ("PUT", f"/tasks/{uuid.uuid4()}"),
        ("DELETE", f"/tasks/{uuid.uuid4()}"),
    ],
)
async def test_task_routes_require_a_token(client: AsyncClient, method: str, path: str) -> None:
    response = await client.request(method, path, json={"title": "x", "completed": True})

    assert response.status_code == 401
    payload = response.json()
    assert payload["code"] == "unauthorized"
    assert payload["message"] == "Not authenticated."
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_malformed_and_expired_tokens_are_rejected(
    client: AsyncClient,
    settings: Settings,
) -> None:
    malformed = await client.get("/tasks", headers={"Authorization": "Token abc"})
    assert malformed.status_code == 401
    assert malformed.json()["message"] == "Invalid authorization header."

    garbage = await client.get("/tasks", headers={"Authorization": "Bearer abc"})
    assert garbage.status_code == 401
    assert garbage.json()["message"] == "Could not validate credentials."

    expired = TokenIssuer(settings).sign(
        subject=1,
        username="ada",
        expires_delta=timedelta(minutes=-1),
    )
    response = await client.get("/tasks", headers={"Authorization": f"Bearer {expired.token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token has expired."


async def test_rejected_request_never_reaches_task_logic(client: AsyncClient) -> None:
    response = await client.post("/tasks", json={"title": ""})
    # Guard runs before body validation would have produced a 422.
    assert response.status_code == 401


async def test_task_crud_flow(
    client: AsyncClient,
    registered_user: Callable[..., Awaitable["RegisteredUser"]],
) -> None:
    user = await registered_user()

    created = await _create_task(client, user.headers)
    assert created["title"] == "WRITE DOCS"
    assert created["description"] == "INITIAL DRAFT"
    assert created["completed"] is False
    task_id = created["id"]
    uuid.UUID(task_id)

    listing = await client.get("/tasks", headers=user.headers)
    assert listing.status_code == 200
    assert [task["id"] for task in listing.json()] == [task_id]

    fetched = await client.get(f"/tasks/{task_id}", headers=user.headers)
    assert fetched.status_code == 200
    assert fetched.json()["title"] == "WRITE DOCS"

    updated = await client.put(
        f"/tasks/{task_id}",
        json={"description": "reviewed", "completed": True},
        headers=user.headers,
    )
    assert updated.status_code == 200
    updated_body = updated.json()
    assert updated_body["title"] == "WRITE DOCS"
    assert updated_body["description"] == "reviewed"
    assert updated_body["completed"] is True

    deleted = await client.delete(f"/tasks/{task_id}", headers=user.headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Task Deleted Successfully!"}

    missing = await client.get(f"/tasks/{task_id}", headers=user.headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "No task was found with this id"


async def test_update_requires_completed_flag(
    client: AsyncClient,
    registered_user: Callable[..., Awaitable["RegisteredUser"]],
) -> None:
    user = await registered_user()
    created = await _create_task(client, user.headers)

    response = await client.put(
        f"/tasks/{created['id']}",
        json={"title": "No flag"},
        headers=user.headers,
    )
    assert response.status_code == 422


async def test_task_payloads_reject_unknown_fields(
    client: AsyncClient,
    registered_user: Callable[..., Awaitable["RegisteredUser"]],
) -> None:
    user = await registered_user()

    created = await client.post(
        "/tasks",
        json={"title": "Write docs", "owner": "someone"},
        headers=user.headers,
    )
    assert created.status_code == 422
    assert created.json()["code"] == "validation_error"

    task = await _create_task(client, user.headers)
    updated = await client.put(
        f"/tasks/{task['id']}",
        json={"completed": True, "priority": "high"},
        headers=user.headers,
    )
    assert updated.status_code == 422

    listing = await client.get("/tasks", headers=user.headers)
    assert [item["id"] for item in listing.json()] == [task["id"]]


async def test_update_and_delete_missing_task_return_404(
    client: AsyncClient,
    registered_user: Callable[..., Awaitable["RegisteredUser"]],
) -> None:
    user = await registered_user()
    unknown = uuid.uuid4()

    update = await client.put(f"/tasks/{unknown}", json={"completed": True}, headers=user.headers)
    assert update.status_code == 404

    delete = await client.delete(f"/tasks/{unknown}", headers=user.headers)
    assert delete.status_code == 404


async def test_any_authenticated_user_can_manage_any_task(
    client: AsyncClient,
    registered_user: Callable[..., Awaitable["RegisteredUser"]],
) -> None:
    author = await registered_user()
    other = await registered_user()
    created = await _create_task(client, author.headers, title="shared")

    response = await client.put(
        f"/tasks/{created['id']}",
        json={"completed": True},
        headers=other.headers,
    )
    assert response.status_code == 200
    assert response.json()["completed"] is True


async def test_invalid_task_id_is_a_validation_error(
    client: AsyncClient,
    registered_user: Callable[..., Awaitable["RegisteredUser"]],
) -> None:
    user = await registered_user()

    response = await client.get("/tasks/not-a-uuid", headers=user.headers)
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


async def test_token_stays_valid_after_password_reset(
    client: AsyncClient,
    registered_user: Callable[..., Awaitable["RegisteredUser"]],
) -> None:
    user = await registered_user()

    reset = await client.post(
        "/auth/reset-password",
        json={"email": user.email, "oldPassword": user.password, "newPassword": "brand-new"},
    )
    assert reset.status_code == 200

    response = await client.get("/tasks", headers=user.headers)
    assert response.status_code == 200
