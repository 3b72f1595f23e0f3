from buildinghub.libs.result import Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork

from .dtos import BuildingInfo, BuildingListResponse


class ListBuildingsUseCase:
    """Use case for listing buildings, open to any authenticated user."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[BuildingListResponse]:
        async with self.uow:
            buildings = await self.uow.buildings.list_all()
            return Return.ok(
                BuildingListResponse(
                    buildings=[BuildingInfo.from_entity(b) for b in buildings]
                )
            )
