from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork

from .dtos import BuildingInfo


class GetBuildingUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, building_id: UUID) -> Result[BuildingInfo]:
        async with self.uow:
            building = await self.uow.buildings.get_by_id(building_id)
            if building is None:
                return Return.err(Error("BUILDING_NOT_FOUND", "Building not found"))

            return Return.ok(BuildingInfo.from_entity(building))
