from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from buildinghub.app.repositories.building_repository import IBuildingRepository
from buildinghub.domain.entities import Building


class BuildingRepository(IBuildingRepository):
    """Building repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, building_id: UUID) -> Optional[Building]:
        stmt = select(Building).where(Building.id == building_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Building]:
        stmt = select(Building).order_by(Building.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, building: Building) -> Building:
        self.session.add(building)
        await self.session.flush()
        await self.session.refresh(building)
        return building
