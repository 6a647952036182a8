import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_list_seeded_users(client: AsyncClient, test_data):
    response = await client.get("/users")

    assert response.status_code == 200
    users = {u["name"]: u for u in response.json()["users"]}
    assert set(users) == {"Alice Rider", "Bob Crusher", "Admin Sarah"}
    assert users["Bob Crusher"]["status"] == "SUSPENDED"
    assert users["Admin Sarah"]["role"] == "ADMIN"
    assert users["Alice Rider"]["id"] == test_data.get("users")["alice"]


@pytest.mark.asyncio
async def test_list_seeded_groups(client: AsyncClient, test_data):
    response = await client.get("/groups")

    assert response.status_code == 200
    groups = [
        {k: v for k, v in g.items() if k != "id"} for g in response.json()["groups"]
    ]
    assert groups == test_data.get("expected_groups")


@pytest.mark.asyncio
async def test_no_pending_memberships_after_seed(client: AsyncClient):
    response = await client.get("/memberships/pending")

    assert response.status_code == 200
    assert response.json() == {"memberships": []}


@pytest.mark.asyncio
async def test_seed_is_idempotent(db_session):
    from sqlmodel import select
    from src.adapter.seed import seed_sandbox
    from src.domain.entities import User

    assert await seed_sandbox(db_session) is False

    result = await db_session.exec(select(User))
    assert len(result.all()) == 3
