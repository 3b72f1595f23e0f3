from abc import ABC, abstractmethod

from buildinghub.app.repositories.building_repository import IBuildingRepository
from buildinghub.app.repositories.membership_repository import IMembershipRepository
from buildinghub.app.repositories.unit_repository import IUnitRepository
from buildinghub.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    buildings: IBuildingRepository
    units: IUnitRepository
    memberships: IMembershipRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
