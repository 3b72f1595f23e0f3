"""
Building Management Use Cases

Buildings and their units.
"""

from .create_building_use_case import CreateBuildingUseCase
from .create_units_use_case import CreateUnitsUseCase
from .dtos import (
    BuildingInfo,
    BuildingListResponse,
    CreateBuildingCommand,
    NewUnit,
    UnitInfo,
    UnitListResponse,
)
from .get_building_use_case import GetBuildingUseCase
from .list_buildings_use_case import ListBuildingsUseCase
from .list_units_use_case import ListUnitsUseCase

__all__ = [
    "CreateBuildingUseCase",
    "ListBuildingsUseCase",
    "GetBuildingUseCase",
    "ListUnitsUseCase",
    "CreateUnitsUseCase",
    "CreateBuildingCommand",
    "NewUnit",
    "BuildingInfo",
    "BuildingListResponse",
    "UnitInfo",
    "UnitListResponse",
]
