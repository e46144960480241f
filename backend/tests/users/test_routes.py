from conftest import USER_PAYLOAD, create_user

from users.infrastructure.user_repository import DbUserRepository


async def test_create(client):
    response = await client.post("/users/new", json=USER_PAYLOAD)
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"email": "a@x.com", "username": "a", "firstName": "A", "lastName": "B"},
    }


async def test_create_missing_field(client):
    payload = {k: v for k, v in USER_PAYLOAD.items() if k != "password"}
    response = await client.post("/users/new", json=payload)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "ValidationError"}

    lookup = await client.get("/users", params={"email": "a@x.com"})
    assert lookup.status_code == 404


async def test_create_malformed_body(client):
    response = await client.post("/users/new", json={**USER_PAYLOAD, "email": 42})
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"

    response = await client.post(
        "/users/new", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


async def test_create_duplicate_email(client):
    await create_user(client)
    for _ in range(2):
        response = await client.post("/users/new", json={**USER_PAYLOAD, "username": "b"})
        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "EmailAlreadyInUse"}


async def test_create_email_conflict_wins_across_rows(client):
    await create_user(client, email="a@x.com", username="u1")
    await create_user(client, email="b@x.com", username="u2")

    response = await client.post(
        "/users/new", json={**USER_PAYLOAD, "email": "b@x.com", "username": "u1"}
    )
    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "EmailAlreadyInUse"}


async def test_create_duplicate_username(client):
    await create_user(client)
    response = await client.post("/users/new", json={**USER_PAYLOAD, "email": "b@x.com"})
    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "UsernameAlreadyTaken"}


async def test_edit(client):
    await create_user(client)
    user_id = (await client.get("/users", params={"email": "a@x.com"})).json()["data"]["id"]

    response = await client.post(
        f"/users/edit/{user_id}", json={**USER_PAYLOAD, "firstName": "Alice"}
    )
    assert response.status_code == 200
    assert response.json()["data"] == {
        "email": "a@x.com",
        "username": "a",
        "firstName": "Alice",
        "lastName": "B",
    }


async def test_edit_not_found(client):
    response = await client.post("/users/edit/999", json=USER_PAYLOAD)
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "UserNotFound"}


async def test_edit_non_integer_id(client):
    response = await client.post("/users/edit/abc", json=USER_PAYLOAD)
    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


async def test_edit_requires_all_fields(client):
    await create_user(client)
    user_id = (await client.get("/users", params={"email": "a@x.com"})).json()["data"]["id"]
    response = await client.post(f"/users/edit/{user_id}", json={"firstName": "Alice"})
    assert response.status_code == 400


async def test_lookup(client):
    await create_user(client)
    response = await client.get("/users", params={"email": "a@x.com"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["email"] == "a@x.com"
    assert body["data"]["password"] == "p"
    assert isinstance(body["data"]["id"], int)


async def test_lookup_without_email(client):
    response = await client.get("/users")
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "ValidationError"}


async def test_lookup_not_found(client):
    response = await client.get("/users", params={"email": "nobody@x.com"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "UserNotFound"}


async def test_race_past_precheck_is_server_error(client, monkeypatch):
    await create_user(client)

    async def no_conflict(self, email, username, exclude_id=None):
        return None

    monkeypatch.setattr(DbUserRepository, "find_by_email_or_username", no_conflict)
    response = await client.post(
        "/users/new",
        json={**USER_PAYLOAD, "username": "b"},
        headers={"Origin": "http://ui"},
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "ServerError"}
    assert "access-control-allow-origin" in response.headers


async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"] == "abc-123"
