"""
Create Building Use Case
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.domain.capabilities import can_manage_buildings
from buildinghub.domain.entities import Building

from .dtos import BuildingInfo, CreateBuildingCommand


class CreateBuildingUseCase:
    """
    Use case for registering a new building.

    Business Rules:
    - Requires the manage_buildings capability
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: UUID, command: CreateBuildingCommand
    ) -> Result[BuildingInfo]:
        async with self.uow:
            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            if not can_manage_buildings(actor.role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only building admins can create buildings")
                )

            building = await self.uow.buildings.create(
                Building(name=command.name, address=command.address)
            )
            await self.uow.commit()

            return Return.ok(BuildingInfo.from_entity(building))
