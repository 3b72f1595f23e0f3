"""
Get My Membership Use Case

Loads the caller's own membership in a building.
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork

from .dtos import MembershipInfo


class GetMyMembershipUseCase:
    """
    Use case for reading the caller's membership status.

    Business Rules:
    - Building must exist
    - When the caller has several memberships in the building (e.g. a
      rejected request followed by a new one) the newest is returned
    - No membership is reported as MEMBERSHIP_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: UUID, building_id: UUID
    ) -> Result[MembershipInfo]:
        async with self.uow:
            building = await self.uow.buildings.get_by_id(building_id)
            if building is None:
                return Return.err(Error("BUILDING_NOT_FOUND", "Building not found"))

            memberships = await self.uow.memberships.get_by_user_and_building(
                actor_user_id, building_id
            )
            if not memberships:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "You have no membership in this building")
                )

            latest = max(memberships, key=lambda m: m.created_at)
            return Return.ok(MembershipInfo.from_entity(latest))
