"""
Decide Membership Use Case

Approves or rejects a pending membership.
"""

import logging
from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.domain.capabilities import can_decide
from buildinghub.domain.lifecycle import InvalidTransition, next_status

from .dtos import MembershipInfo

logger = logging.getLogger(__name__)


class DecideMembershipUseCase:
    """
    Use case for verifying a membership request.

    Business Rules:
    - Role check comes first (decide_membership capability)
    - Membership must exist and belong to the building in the path
    - Only pending -> active and pending -> rejected are allowed; deciding
      an already decided membership fails with INVALID_TRANSITION and
      leaves it untouched
    - The write only applies if the stored status is still pending, so of
      two concurrent decisions exactly one succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_user_id: UUID,
        building_id: UUID,
        membership_id: UUID,
        decision: str,
    ) -> Result[MembershipInfo]:
        """
        Execute decide membership use case.

        Args:
            actor_user_id: Admin making the decision
            building_id: Building the membership must belong to
            membership_id: Membership to decide
            decision: "active" or "rejected"

        Returns:
            Result with updated MembershipInfo, or Error
        """
        async with self.uow:
            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            if not can_decide(actor.role):
                return Return.err(
                    Error(
                        "INSUFFICIENT_ROLE",
                        "Only building admins can approve or reject memberships",
                    )
                )

            membership = await self.uow.memberships.get_by_id(membership_id)
            if membership is None or membership.building_id != building_id:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "Membership not found in this building")
                )

            try:
                new_status = next_status(membership.status, decision)
            except InvalidTransition as exc:
                return Return.err(Error("INVALID_TRANSITION", str(exc)))

            previous_status = membership.status
            applied = await self.uow.memberships.transition_status(membership, new_status)
            if not applied:
                # A concurrent decision landed between the read and the write
                return Return.err(
                    Error(
                        "INVALID_TRANSITION",
                        "Membership was already decided by another request",
                    )
                )

            await self.uow.commit()

            logger.info(
                "Membership %s moved from %s to %s by %s",
                membership.id,
                previous_status.value,
                new_status.value,
                actor.id,
            )

            return Return.ok(MembershipInfo.from_entity(membership))
