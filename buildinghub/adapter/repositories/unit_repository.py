from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from buildinghub.app.repositories.unit_repository import IUnitRepository
from buildinghub.domain.entities import Unit


class UnitRepository(IUnitRepository):
    """Unit repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, unit_id: UUID) -> Optional[Unit]:
        stmt = select(Unit).where(Unit.id == unit_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_building_id(self, building_id: UUID) -> List[Unit]:
        stmt = (
            select(Unit)
            .where(Unit.building_id == building_id)
            .order_by(Unit.floor, Unit.unit_number)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, unit: Unit) -> Unit:
        self.session.add(unit)
        await self.session.flush()
        await self.session.refresh(unit)
        return unit
