import pytest
from httpx import AsyncClient
from uuid import UUID, uuid4


@pytest.mark.asyncio
async def test_join_invite_only_group_creates_pending_membership(
    client: AsyncClient, db_session, test_data
):
    """Invite-only groups accept plain join requests"""
    users = test_data.get("users")
    groups = test_data.get("groups")

    response = await client.post(
        f"/groups/{groups['pro_peleton']}/join",
        json={"user_id": users["sarah"]},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["decision"] == {"allowed": True, "code": None, "reason": None}
    assert data["membership"]["status"] == "PENDING"
    assert data["membership"]["user_id"] == users["sarah"]
    assert [entry["layer"] for entry in data["trace"]] == [
        "API",
        "DATA",
        "DOMAIN",
        "DOMAIN",
        "DATA",
        "API",
    ]

    # Verify the membership was persisted
    from sqlmodel import select
    from src.domain.entities import Membership, MembershipStatus

    stmt = select(Membership).where(
        Membership.user_id == UUID(users["sarah"]),
        Membership.group_id == UUID(groups["pro_peleton"]),
    )
    result = await db_session.exec(stmt)
    membership = result.one()
    assert membership.status == MembershipStatus.pending
    assert membership.joined_at is not None


@pytest.mark.asyncio
async def test_join_twice_reports_pending_request(client: AsyncClient, test_data):
    users = test_data.get("users")
    groups = test_data.get("groups")
    url = f"/groups/{groups['pro_peleton']}/join"

    first = await client.post(url, json={"user_id": users["alice"]})
    second = await client.post(url, json={"user_id": users["alice"]})

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["error"] == {
        "code": "ALREADY_PENDING",
        "message": "You already have a pending request.",
    }


@pytest.mark.asyncio
async def test_join_as_existing_member(client: AsyncClient, test_data):
    users = test_data.get("users")
    groups = test_data.get("groups")

    response = await client.post(
        f"/groups/{groups['morning_climbers']}/join",
        json={"user_id": users["alice"]},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_join_as_suspended_user(client: AsyncClient, db_session, test_data):
    users = test_data.get("users")
    groups = test_data.get("groups")

    response = await client.post(
        f"/groups/{groups['morning_climbers']}/join",
        json={"user_id": users["bob"]},
    )

    assert response.status_code == 403
    error = response.json()["error"]
    assert error["code"] == "USER_SUSPENDED"
    assert error["message"] == "User Bob Crusher is suspended and cannot perform actions."

    # Nothing was written
    from sqlmodel import select
    from src.domain.entities import Membership

    result = await db_session.exec(
        select(Membership).where(Membership.user_id == UUID(users["bob"]))
    )
    assert result.all() == []


@pytest.mark.asyncio
async def test_join_inactive_group(client: AsyncClient, test_data):
    users = test_data.get("users")
    groups = test_data.get("groups")

    response = await client.post(
        f"/groups/{groups['sunday_cruisers']}/join",
        json={"user_id": users["alice"]},
    )

    assert response.status_code == 409
    assert response.json()["error"] == {
        "code": "GROUP_INACTIVE",
        "message": "This group is currently inactive.",
    }


@pytest.mark.asyncio
async def test_join_unknown_group(client: AsyncClient, test_data):
    users = test_data.get("users")

    response = await client.post(
        f"/groups/{uuid4()}/join", json={"user_id": users["alice"]}
    )

    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "ENTITY_NOT_FOUND",
        "message": "Entity not found",
    }


@pytest.mark.asyncio
async def test_join_with_malformed_user_id(client: AsyncClient, test_data):
    groups = test_data.get("groups")

    response = await client.post(
        f"/groups/{groups['morning_climbers']}/join", json={"user_id": "u1"}
    )

    assert response.status_code == 422
