"""
List Pending Memberships Use Case

Returns the approval queue of a building.
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.domain.capabilities import can_decide
from buildinghub.domain.entities import MembershipStatus

from .dtos import PendingMembershipInfo, PendingMembershipListResponse


class ListPendingMembershipsUseCase:
    """
    Use case for listing pending memberships of a building.

    Business Rules:
    - Role check comes first: callers without decide_membership get
      INSUFFICIENT_ROLE whatever the building state
    - Building must exist
    - Only memberships in pending status are returned, with requester email
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: UUID, building_id: UUID
    ) -> Result[PendingMembershipListResponse]:
        async with self.uow:
            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            if not can_decide(actor.role):
                return Return.err(
                    Error(
                        "INSUFFICIENT_ROLE",
                        "Only building admins can review membership requests",
                    )
                )

            building = await self.uow.buildings.get_by_id(building_id)
            if building is None:
                return Return.err(Error("BUILDING_NOT_FOUND", "Building not found"))

            rows = await self.uow.memberships.get_by_building_and_status(
                building_id, MembershipStatus.pending
            )

            return Return.ok(
                PendingMembershipListResponse(
                    memberships=[
                        PendingMembershipInfo.from_row(membership, user)
                        for membership, user in rows
                        if membership.status == MembershipStatus.pending
                    ]
                )
            )
