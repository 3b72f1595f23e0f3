"""
Request Access Use Case

Handles a user asking to join a unit of a building.
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.repositories.membership_repository import MembershipAlreadyExists
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.domain.entities import Membership, MembershipRole
from buildinghub.domain.lifecycle import INITIAL_STATUS, OPEN_STATUSES

from .dtos import MembershipInfo

ALREADY_EXISTS = Error(
    "MEMBERSHIP_ALREADY_EXISTS",
    "You already have a pending or active membership in this building",
)


class RequestAccessUseCase:
    """
    Use case for requesting access to a unit.

    Business Rules:
    - Any authenticated user may request access
    - Building must exist and the unit must belong to it
    - At most one pending or active membership per (user, building);
      a user whose requests were all rejected may ask again. The store
      enforces it with a partial unique index
    - The membership is always created in pending status
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_user_id: UUID,
        building_id: UUID,
        unit_id: UUID,
        role: str = MembershipRole.resident.value,
    ) -> Result[MembershipInfo]:
        """
        Execute request access use case.

        Args:
            actor_user_id: User asking for access
            building_id: Target building
            unit_id: Target unit, must belong to building_id
            role: Capacity in which the user occupies the unit

        Returns:
            Result with the new pending MembershipInfo, or Error
        """
        async with self.uow:
            try:
                membership_role = MembershipRole(role)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {role}. Must be one of: resident, owner, admin",
                    )
                )

            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            building = await self.uow.buildings.get_by_id(building_id)
            if building is None:
                return Return.err(Error("BUILDING_NOT_FOUND", "Building not found"))

            unit = await self.uow.units.get_by_id(unit_id)
            if unit is None or unit.building_id != building_id:
                return Return.err(
                    Error("UNIT_NOT_FOUND", "Unit not found in this building")
                )

            existing = await self.uow.memberships.get_by_user_and_building(
                actor_user_id, building_id
            )
            if any(m.status in OPEN_STATUSES for m in existing):
                return Return.err(ALREADY_EXISTS)

            membership = Membership(
                building_id=building_id,
                unit_id=unit_id,
                user_id=actor_user_id,
                role=membership_role,
                status=INITIAL_STATUS,
            )
            try:
                membership = await self.uow.memberships.create(membership)
            except MembershipAlreadyExists:
                # Lost the race against a concurrent request
                return Return.err(ALREADY_EXISTS)

            await self.uow.commit()

            return Return.ok(MembershipInfo.from_entity(membership))
