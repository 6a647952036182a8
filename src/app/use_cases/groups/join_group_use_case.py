"""
Join Group Use Case

Handles a user's request to join a group.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.repositories.membership_repository import DuplicateMembershipError
from src.app.services.trace import Layer, LayerTrace, TraceStatus
from src.app.services.unit_of_work import UnitOfWork
from src.domain import rules
from src.domain.entities import Membership, MembershipStatus

from .dtos import JoinGroupResponse, MembershipInfo


class JoinGroupUseCase:
    """
    Use case for requesting membership of a group.

    Business Rules:
    - User and group must exist (ENTITY_NOT_FOUND otherwise)
    - The domain decides through rules.evaluate_group_join
    - A denial is returned with its DenialCode as the error code
    - Only an allowed decision creates a membership, always as pending
    - A concurrent duplicate request fails with ALREADY_REQUESTED
    """

    def __init__(self, uow: UnitOfWork, trace: Optional[LayerTrace] = None):
        self.uow = uow
        self.trace = trace if trace is not None else LayerTrace()

    async def execute(self, user_id: UUID, group_id: UUID) -> Result[JoinGroupResponse]:
        """
        Execute join group use case.

        Args:
            user_id: Requesting user ID
            group_id: Target group ID

        Returns:
            Result with JoinGroupResponse DTO, or Error
        """
        self.trace.record(
            Layer.api,
            "Join Group Request",
            {"user_id": str(user_id), "group_id": str(group_id)},
        )

        async with self.uow:
            # 1. Fetch required facts
            self.trace.record(Layer.data, "Fetch User & Group", "Fetching entities...")
            user = await self.uow.users.get_by_id(user_id)
            group = await self.uow.groups.get_by_id(group_id)
            existing = await self.uow.memberships.get_by_user_and_group(user_id, group_id)

            if user is None or group is None:
                self.trace.record(
                    Layer.api, "Entity Not Found", "User or Group missing", TraceStatus.error
                )
                return Return.err(Error("ENTITY_NOT_FOUND", "Entity not found"))

            current_status = existing.status if existing is not None else None

            # 2. Ask the domain for a decision
            self.trace.record(
                Layer.domain,
                "Evaluate Rule: evaluate_group_join",
                {
                    "user_status": user.status.value,
                    "group_active": group.is_active,
                    "current_membership": current_status.value if current_status else None,
                },
            )
            decision = rules.evaluate_group_join(user, group, current_status)

            if not decision.allowed:
                self.trace.record(
                    Layer.domain, "Decision: DENIED", decision.reason, TraceStatus.error
                )
                return Return.err(Error(decision.code.value, decision.reason))

            self.trace.record(
                Layer.domain,
                "Decision: ALLOWED",
                "Proceeding to write...",
                TraceStatus.success,
            )

            # 3. Execute the result
            self.trace.record(
                Layer.data, "Create Membership", {"status": MembershipStatus.pending.value}
            )
            membership = Membership(
                user_id=user_id,
                group_id=group_id,
                status=MembershipStatus.pending,
                joined_at=datetime.now(UTC),
            )
            try:
                await self.uow.memberships.create(membership)
            except DuplicateMembershipError:
                await self.uow.rollback()
                self.trace.record(
                    Layer.data,
                    "Create Membership Failed",
                    "Concurrent request for the same group",
                    TraceStatus.error,
                )
                return Return.err(
                    Error(
                        "ALREADY_REQUESTED",
                        "A membership request for this group was just recorded",
                    )
                )

            await self.uow.commit()

            self.trace.record(Layer.api, "Request Complete", "Success", TraceStatus.success)

            return Return.ok(
                JoinGroupResponse(
                    decision=decision,
                    membership=MembershipInfo.from_entity(membership),
                    trace=self.trace.entries,
                )
            )
