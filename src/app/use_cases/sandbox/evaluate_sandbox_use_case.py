"""
Evaluate Sandbox Use Case

Maps a simulated scenario to domain entities and runs the join rule on them.
No storage is involved: this shows the domain layer as the pure function it
is.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.trace import Layer, LayerTrace, TraceStatus
from src.domain import rules
from src.domain.entities import (
    Group,
    GroupJoinPolicy,
    MembershipStatus,
    User,
    UserRole,
    UserStatus,
)

from .dtos import (
    SandboxGroupType,
    SandboxMembership,
    SandboxResponse,
    SandboxScenario,
    SandboxUserType,
)

SIM_USER_ID = UUID("00000000-0000-0000-0000-00000000a001")
SIM_GROUP_ID = UUID("00000000-0000-0000-0000-00000000b001")


def build_user(user_type: SandboxUserType) -> User:
    is_admin = user_type == SandboxUserType.admin
    return User(
        id=SIM_USER_ID,
        name="Admin User" if is_admin else "Sim User",
        email="sim@apex.com",
        role=UserRole.admin if is_admin else UserRole.rider,
        status=(
            UserStatus.suspended
            if user_type == SandboxUserType.suspended
            else UserStatus.active
        ),
    )


def build_group(group_type: SandboxGroupType) -> Group:
    return Group(
        id=SIM_GROUP_ID,
        name="Simulation Group",
        description="A test group",
        is_active=group_type != SandboxGroupType.archive,
        policy=(
            GroupJoinPolicy.invite_only
            if group_type == SandboxGroupType.private
            else GroupJoinPolicy.open
        ),
        image_url="",
    )


def to_membership_status(membership: SandboxMembership) -> Optional[MembershipStatus]:
    if membership == SandboxMembership.none:
        return None
    return MembershipStatus(membership.value)


class EvaluateSandboxUseCase:
    def __init__(self, trace: Optional[LayerTrace] = None):
        self.trace = trace if trace is not None else LayerTrace()

    async def execute(self, scenario: SandboxScenario) -> Result[SandboxResponse]:
        self.trace.record(Layer.client, "Simulation Input", scenario.model_dump(mode="json"))

        user = build_user(scenario.user_type)
        group = build_group(scenario.group_type)
        current_status = to_membership_status(scenario.membership)

        self.trace.record(
            Layer.domain,
            "Evaluate Rule: evaluate_group_join",
            {
                "user_status": user.status.value,
                "group_active": group.is_active,
                "current_membership": scenario.membership.value,
            },
        )
        decision = rules.evaluate_group_join(user, group, current_status)

        if decision.allowed:
            self.trace.record(Layer.domain, "Decision: ALLOWED", None, TraceStatus.success)
        else:
            self.trace.record(
                Layer.domain, "Decision: DENIED", decision.reason, TraceStatus.error
            )

        return Return.ok(
            SandboxResponse(scenario=scenario, decision=decision, trace=self.trace.entries)
        )
