from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from buildinghub.domain.entities import Building


class IBuildingRepository(ABC):
    """Building repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, building_id: UUID) -> Optional[Building]:
        """Get building by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Building]:
        """Get all buildings"""
        pass

    @abstractmethod
    async def create(self, building: Building) -> Building:
        """Create a new building"""
        pass
