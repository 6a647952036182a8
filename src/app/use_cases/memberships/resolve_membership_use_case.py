"""
Resolve Membership Use Case

Handles an administrator approving or rejecting a pending membership.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.trace import Layer, LayerTrace, TraceStatus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.groups.dtos import MembershipInfo
from src.domain import rules
from src.domain.entities import MembershipAction

from .dtos import ResolveMembershipResponse


class ResolveMembershipUseCase:
    """
    Use case for resolving a pending membership.

    Business Rules:
    - Admin and membership must exist (ENTITY_NOT_FOUND otherwise)
    - The domain authorizes through rules.evaluate_membership_resolution
    - The next status comes from rules.resolve_next_membership_status
    - Nothing is written unless the decision allows it
    """

    def __init__(self, uow: UnitOfWork, trace: Optional[LayerTrace] = None):
        self.uow = uow
        self.trace = trace if trace is not None else LayerTrace()

    async def execute(
        self, admin_id: UUID, membership_id: UUID, action: MembershipAction
    ) -> Result[ResolveMembershipResponse]:
        """
        Execute resolve membership use case.

        Args:
            admin_id: ID of the acting user
            membership_id: Membership under review
            action: approve or reject

        Returns:
            Result with ResolveMembershipResponse DTO, or Error
        """
        self.trace.record(
            Layer.api,
            "Resolve Membership",
            {
                "admin_id": str(admin_id),
                "membership_id": str(membership_id),
                "action": action.value,
            },
        )

        async with self.uow:
            # 1. Fetch facts
            self.trace.record(
                Layer.data, "Fetch Data", "Fetching Admin & Membership..."
            )
            admin = await self.uow.users.get_by_id(admin_id)
            membership = await self.uow.memberships.get_by_id(membership_id)

            if admin is None or membership is None:
                self.trace.record(
                    Layer.api,
                    "Error",
                    "Admin or Membership not found",
                    TraceStatus.error,
                )
                return Return.err(Error("ENTITY_NOT_FOUND", "Data not found"))

            # 2. Domain decision
            self.trace.record(
                Layer.domain,
                "Evaluate Rule: evaluate_membership_resolution",
                {
                    "admin_role": admin.role.value,
                    "membership_status": membership.status.value,
                },
            )
            decision = rules.evaluate_membership_resolution(admin, membership)

            if not decision.allowed:
                self.trace.record(
                    Layer.domain, "Decision: DENIED", decision.reason, TraceStatus.error
                )
                return Return.err(Error(decision.code.value, decision.reason))

            self.trace.record(
                Layer.domain,
                "Decision: ALLOWED",
                "Proceeding with state transition",
                TraceStatus.success,
            )

            # 3. Calculate new state
            previous_status = membership.status
            new_status = rules.resolve_next_membership_status(action)
            self.trace.record(
                Layer.domain, "State Transition", f"New State: {new_status.value}"
            )

            # 4. Persist
            self.trace.record(
                Layer.data,
                "Update Membership",
                {"id": str(membership_id), "new_state": new_status.value},
            )
            membership = await self.uow.memberships.update_status(membership, new_status)
            await self.uow.commit()

            self.trace.record(
                Layer.api, "Resolution Complete", "Success", TraceStatus.success
            )

            return Return.ok(
                ResolveMembershipResponse(
                    membership=MembershipInfo.from_entity(membership),
                    previous_status=previous_status.value,
                    trace=self.trace.entries,
                )
            )
