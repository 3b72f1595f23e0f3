from sqlmodel.ext.asyncio.session import AsyncSession

from buildinghub.adapter.repositories.building_repository import BuildingRepository
from buildinghub.adapter.repositories.membership_repository import MembershipRepository
from buildinghub.adapter.repositories.unit_repository import UnitRepository
from buildinghub.adapter.repositories.user_repository import UserRepository
from buildinghub.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.buildings = BuildingRepository(self.session)
        self.units = UnitRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
