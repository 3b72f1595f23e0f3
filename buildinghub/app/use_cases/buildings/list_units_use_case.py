from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork

from .dtos import UnitInfo, UnitListResponse


class ListUnitsUseCase:
    """Use case for listing the units of a building, ordered by floor."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, building_id: UUID) -> Result[UnitListResponse]:
        async with self.uow:
            building = await self.uow.buildings.get_by_id(building_id)
            if building is None:
                return Return.err(Error("BUILDING_NOT_FOUND", "Building not found"))

            units = await self.uow.units.get_by_building_id(building_id)
            return Return.ok(
                UnitListResponse(units=[UnitInfo.from_entity(u) for u in units])
            )
