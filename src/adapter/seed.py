"""
Sandbox Seed Data

Initial users, groups and memberships the demo starts from: one active
rider, one suspended rider, one admin, an open group, an invite-only group,
an inactive group and a single active membership.
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import (
    Group,
    GroupJoinPolicy,
    Membership,
    MembershipStatus,
    User,
    UserRole,
    UserStatus,
)

logger = logging.getLogger(__name__)

ALICE_ID = UUID("00000000-0000-0000-0000-000000000001")
BOB_ID = UUID("00000000-0000-0000-0000-000000000002")
SARAH_ID = UUID("00000000-0000-0000-0000-000000000003")

MORNING_CLIMBERS_ID = UUID("00000000-0000-0000-0000-000000000101")
PRO_PELETON_ID = UUID("00000000-0000-0000-0000-000000000102")
SUNDAY_CRUISERS_ID = UUID("00000000-0000-0000-0000-000000000103")


def initial_users() -> list[User]:
    return [
        User(id=ALICE_ID, name="Alice Rider", email="alice@apex.com",
             role=UserRole.rider, status=UserStatus.active),
        User(id=BOB_ID, name="Bob Crusher", email="bob@apex.com",
             role=UserRole.rider, status=UserStatus.suspended),
        User(id=SARAH_ID, name="Admin Sarah", email="sarah@apex.com",
             role=UserRole.admin, status=UserStatus.active),
    ]


def initial_groups() -> list[Group]:
    return [
        Group(
            id=MORNING_CLIMBERS_ID,
            name="Morning Climbers",
            description="Early birds catching the elevation. 5am starts.",
            is_active=True,
            policy=GroupJoinPolicy.open,
            image_url="https://picsum.photos/400/200?random=1",
        ),
        Group(
            id=PRO_PELETON_ID,
            name="Pro Peleton",
            description="High pace training group. Drop policy active.",
            is_active=True,
            policy=GroupJoinPolicy.invite_only,
            image_url="https://picsum.photos/400/200?random=2",
        ),
        Group(
            id=SUNDAY_CRUISERS_ID,
            name="Sunday Cruisers",
            description="Coffee stops mandatory. No drops.",
            is_active=False,
            policy=GroupJoinPolicy.open,
            image_url="https://picsum.photos/400/200?random=3",
        ),
    ]


def initial_memberships() -> list[Membership]:
    return [
        Membership(
            user_id=ALICE_ID,
            group_id=MORNING_CLIMBERS_ID,
            status=MembershipStatus.active,
            joined_at=datetime.now(UTC),
        )
    ]


async def seed_sandbox(session: AsyncSession) -> bool:
    """
    Insert the initial sandbox state unless users already exist.

    Returns:
        True when data was inserted
    """
    result = await session.execute(select(User).limit(1))
    if result.scalar_one_or_none() is not None:
        logger.info("Sandbox already seeded, skipping")
        return False

    session.add_all(initial_users())
    session.add_all(initial_groups())
    await session.flush()
    session.add_all(initial_memberships())
    await session.commit()

    logger.info("Sandbox seeded with initial users, groups and memberships")
    return True
