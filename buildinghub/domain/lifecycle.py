"""
Membership Lifecycle

Transition rules for a membership's status:

    (none) --request_access--> pending
    pending --verify(active)--> active
    pending --verify(rejected)--> rejected

active and rejected are terminal. Anything else raises InvalidTransition.
"""

from typing import Dict, FrozenSet, Union

from buildinghub.domain.entities.enums import MembershipStatus

INITIAL_STATUS = MembershipStatus.pending

TRANSITIONS: Dict[MembershipStatus, FrozenSet[MembershipStatus]] = {
    MembershipStatus.pending: frozenset(
        {MembershipStatus.active, MembershipStatus.rejected}
    ),
    MembershipStatus.active: frozenset(),
    MembershipStatus.rejected: frozenset(),
}

# Statuses that block a new access request for the same building
OPEN_STATUSES: FrozenSet[MembershipStatus] = frozenset(
    {MembershipStatus.pending, MembershipStatus.active}
)


class InvalidTransition(Exception):
    def __init__(self, current: MembershipStatus, target: Union[MembershipStatus, str]):
        self.current = current
        self.target = target
        target_value = target.value if isinstance(target, MembershipStatus) else target
        super().__init__(
            f"Cannot move membership from {current.value} to {target_value}"
        )


def is_terminal(status: MembershipStatus) -> bool:
    return not TRANSITIONS[status]


def can_transition(current: MembershipStatus, target: MembershipStatus) -> bool:
    return target in TRANSITIONS[current]


def next_status(
    current: MembershipStatus, decision: Union[MembershipStatus, str]
) -> MembershipStatus:
    """
    Resolve a decision against the current status.

    Args:
        current: Status the membership is in now
        decision: Requested target status (enum or raw string)

    Returns:
        The new status

    Raises:
        InvalidTransition: decision is unknown or not reachable from current
    """
    try:
        target = MembershipStatus(decision)
    except ValueError:
        raise InvalidTransition(current, decision)

    if not can_transition(current, target):
        raise InvalidTransition(current, target)

    return target
