"""
Domain Rules

Decides what is allowed. Every function here is pure: facts arrive as
arguments, the answer is a Decision (or a next status), and nothing is read
from or written to storage. Callers fetch the facts beforehand and persist
only after an allowed decision.
"""

from typing import Optional

from .decision import Decision
from .entities import Group, Membership, User
from .entities.enums import (
    DenialCode,
    GroupJoinPolicy,
    MembershipAction,
    MembershipStatus,
    UserRole,
    UserStatus,
)

_EXISTING_MEMBERSHIP_DENIALS = {
    MembershipStatus.active: (
        DenialCode.already_member,
        "You are already a member of this group.",
    ),
    MembershipStatus.pending: (
        DenialCode.already_pending,
        "You already have a pending request.",
    ),
    MembershipStatus.rejected: (
        DenialCode.previously_rejected,
        "Your previous request was rejected. Contact support.",
    ),
}


def evaluate_user_eligibility(user: User) -> Decision:
    """Gate shared by every rule: suspended users may do nothing."""
    if user.status != UserStatus.active:
        return Decision.deny(
            DenialCode.user_suspended,
            f"User {user.name} is suspended and cannot perform actions.",
        )
    return Decision.allow()


def evaluate_group_join(
    user: User, group: Group, current_status: Optional[MembershipStatus]
) -> Decision:
    """
    Decide whether ``user`` may request to join ``group``.

    Args:
        user: Requesting user
        group: Target group
        current_status: Status of the user's existing membership in the
            group, or None when no membership record exists

    Returns:
        The first denial among the ordered gates, or an allowing Decision
    """
    user_check = evaluate_user_eligibility(user)
    if not user_check.allowed:
        return user_check

    if not group.is_active:
        return Decision.deny(
            DenialCode.group_inactive, "This group is currently inactive."
        )

    if current_status is not None:
        code, reason = _EXISTING_MEMBERSHIP_DENIALS[MembershipStatus(current_status)]
        return Decision.deny(code, reason)

    if group.policy == GroupJoinPolicy.invite_only:
        # Invite codes are not modelled yet; invite-only groups accept
        # join requests exactly like open ones.
        pass

    return Decision.allow()


def evaluate_membership_resolution(actor: User, membership: Membership) -> Decision:
    """
    Decide whether ``actor`` may approve or reject ``membership``.

    Only authorizes the transition; the membership is left untouched.
    """
    actor_check = evaluate_user_eligibility(actor)
    if not actor_check.allowed:
        return actor_check

    if actor.role != UserRole.admin:
        return Decision.deny(
            DenialCode.not_admin, "Only administrators can resolve memberships."
        )

    if membership.status != MembershipStatus.pending:
        return Decision.deny(
            DenialCode.not_pending,
            f"Cannot resolve membership that is {MembershipStatus(membership.status).value}.",
        )

    return Decision.allow()


def resolve_next_membership_status(action: MembershipAction) -> MembershipStatus:
    """
    Map an administrator action to the membership's next status.

    Raises:
        ValueError: ``action`` is not a MembershipAction
    """
    action = MembershipAction(action)
    if action == MembershipAction.approve:
        return MembershipStatus.active
    if action == MembershipAction.reject:
        return MembershipStatus.rejected
    raise ValueError(f"Unhandled membership action: {action!r}")
