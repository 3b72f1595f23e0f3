"""
Building Use Case DTOs (Data Transfer Objects)

Command and Response classes for buildings and units.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from buildinghub.domain.entities import Building, Unit


# ============================================================================
# Commands
# ============================================================================


class CreateBuildingCommand(BaseModel):
    name: str
    address: str


class NewUnit(BaseModel):
    unit_number: str
    floor: int


# ============================================================================
# Response DTOs
# ============================================================================


class BuildingInfo(BaseModel):
    id: str
    name: str
    address: str
    created_at: datetime

    @classmethod
    def from_entity(cls, building: Building) -> "BuildingInfo":
        return cls(
            id=str(building.id),
            name=building.name,
            address=building.address,
            created_at=building.created_at,
        )


class BuildingListResponse(BaseModel):
    buildings: List[BuildingInfo]


class UnitInfo(BaseModel):
    id: str
    building_id: str
    unit_number: str
    floor: int
    created_at: datetime

    @classmethod
    def from_entity(cls, unit: Unit) -> "UnitInfo":
        return cls(
            id=str(unit.id),
            building_id=str(unit.building_id),
            unit_number=unit.unit_number,
            floor=unit.floor,
            created_at=unit.created_at,
        )


class UnitListResponse(BaseModel):
    units: List[UnitInfo]
