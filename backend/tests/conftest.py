import pytest
from httpx import ASGITransport, AsyncClient

from main import app
from shared.infrastructure.database import Database

import users.infrastructure.orm_models  # noqa: F401

USER_PAYLOAD = {
    "email": "a@x.com",
    "username": "a",
    "firstName": "A",
    "lastName": "B",
    "password": "p",
}


@pytest.fixture
async def database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'users_test.db'}")
    await database.create_schema()
    yield database
    await database.drop_schema()
    await database.dispose()


@pytest.fixture
async def db(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture(autouse=True)
def install_database(database):
    app.state.database = database
    yield
    del app.state.database


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def create_user(client: AsyncClient, **overrides) -> dict:
    """Register a user over HTTP and return the response body."""
    resp = await client.post("/users/new", json={**USER_PAYLOAD, **overrides})
    assert resp.status_code == 200, resp.text
    return resp.json()
