"""
Unit tests for Resolve Membership Use Case
Tests orchestration in isolation with mocked dependencies.
"""

from uuid import uuid4

import pytest

from src.app.use_cases.memberships import ResolveMembershipUseCase
from src.domain.entities import (
    Membership,
    MembershipAction,
    MembershipStatus,
    User,
    UserRole,
    UserStatus,
)


def make_user(role=UserRole.admin, status=UserStatus.active):
    return User(
        id=uuid4(), name="Admin Sarah", email="sarah@apex.com", role=role, status=status
    )


def make_membership(status=MembershipStatus.pending):
    return Membership(id=uuid4(), user_id=uuid4(), group_id=uuid4(), status=status)


def persist_status(membership, status):
    membership.status = status
    return membership


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "action, expected",
    [
        (MembershipAction.approve, MembershipStatus.active),
        (MembershipAction.reject, MembershipStatus.rejected),
    ],
)
async def test_resolve_membership_success(mock_uow, action, expected):
    # Arrange
    admin = make_user()
    membership = make_membership()
    mock_uow.users.get_by_id.return_value = admin
    mock_uow.memberships.get_by_id.return_value = membership
    mock_uow.memberships.update_status.side_effect = persist_status

    # Act
    use_case = ResolveMembershipUseCase(mock_uow)
    result = await use_case.execute(admin.id, membership.id, action)

    # Assert
    assert result.is_ok()
    assert result.value.previous_status == "PENDING"
    assert result.value.membership.status == expected.value
    mock_uow.memberships.update_status.assert_called_once_with(membership, expected)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_resolve_membership_admin_not_found(mock_uow):
    mock_uow.users.get_by_id.return_value = None
    mock_uow.memberships.get_by_id.return_value = make_membership()

    result = await ResolveMembershipUseCase(mock_uow).execute(
        uuid4(), uuid4(), MembershipAction.approve
    )

    assert result.is_err()
    assert result.error.code == "ENTITY_NOT_FOUND"
    assert result.error.message == "Data not found"
    mock_uow.memberships.update_status.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_membership_not_found(mock_uow):
    mock_uow.users.get_by_id.return_value = make_user()
    mock_uow.memberships.get_by_id.return_value = None

    result = await ResolveMembershipUseCase(mock_uow).execute(
        uuid4(), uuid4(), MembershipAction.approve
    )

    assert result.is_err()
    assert result.error.code == "ENTITY_NOT_FOUND"


@pytest.mark.asyncio
async def test_resolve_membership_by_rider_is_denied(mock_uow):
    membership = make_membership()
    mock_uow.users.get_by_id.return_value = make_user(role=UserRole.rider)
    mock_uow.memberships.get_by_id.return_value = membership

    result = await ResolveMembershipUseCase(mock_uow).execute(
        uuid4(), membership.id, MembershipAction.approve
    )

    assert result.is_err()
    assert result.error.code == "NOT_ADMIN"
    assert membership.status == MembershipStatus.pending
    mock_uow.memberships.update_status.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_membership_by_suspended_admin_is_denied(mock_uow):
    mock_uow.users.get_by_id.return_value = make_user(status=UserStatus.suspended)
    mock_uow.memberships.get_by_id.return_value = make_membership()

    result = await ResolveMembershipUseCase(mock_uow).execute(
        uuid4(), uuid4(), MembershipAction.reject
    )

    assert result.is_err()
    assert result.error.code == "USER_SUSPENDED"


@pytest.mark.asyncio
async def test_resolve_already_active_membership_is_denied(mock_uow):
    mock_uow.users.get_by_id.return_value = make_user()
    mock_uow.memberships.get_by_id.return_value = make_membership(
        MembershipStatus.active
    )

    result = await ResolveMembershipUseCase(mock_uow).execute(
        uuid4(), uuid4(), MembershipAction.reject
    )

    assert result.is_err()
    assert result.error.code == "NOT_PENDING"
    assert result.error.message == "Cannot resolve membership that is ACTIVE."
    mock_uow.memberships.update_status.assert_not_called()
