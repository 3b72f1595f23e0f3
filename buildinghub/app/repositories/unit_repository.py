from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from buildinghub.domain.entities import Unit


class IUnitRepository(ABC):
    """Unit repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, unit_id: UUID) -> Optional[Unit]:
        """Get unit by ID"""
        pass

    @abstractmethod
    async def get_by_building_id(self, building_id: UUID) -> List[Unit]:
        """Get all units of a building"""
        pass

    @abstractmethod
    async def create(self, unit: Unit) -> Unit:
        """Create a new unit"""
        pass
