"""
Create Units Use Case

Adds one or more units to a building in a single transaction.
"""

from typing import List
from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.domain.capabilities import can_manage_buildings
from buildinghub.domain.entities import Unit

from .dtos import NewUnit, UnitInfo, UnitListResponse


class CreateUnitsUseCase:
    """
    Use case for bulk unit creation.

    Business Rules:
    - Requires the manage_buildings capability
    - Building must exist
    - At least one unit
    - Unit numbers are unique within a building (against existing units
      and within the batch)
    - All or nothing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: UUID, building_id: UUID, units: List[NewUnit]
    ) -> Result[UnitListResponse]:
        async with self.uow:
            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            if not can_manage_buildings(actor.role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only building admins can create units")
                )

            if not units:
                return Return.err(Error("NO_UNITS", "At least one unit is required"))

            building = await self.uow.buildings.get_by_id(building_id)
            if building is None:
                return Return.err(Error("BUILDING_NOT_FOUND", "Building not found"))

            existing = await self.uow.units.get_by_building_id(building_id)
            taken = {u.unit_number for u in existing}
            for new_unit in units:
                if new_unit.unit_number in taken:
                    return Return.err(
                        Error(
                            "UNIT_ALREADY_EXISTS",
                            f"Unit {new_unit.unit_number} already exists in this building",
                        )
                    )
                taken.add(new_unit.unit_number)

            created = []
            for new_unit in units:
                unit = await self.uow.units.create(
                    Unit(
                        building_id=building_id,
                        unit_number=new_unit.unit_number,
                        floor=new_unit.floor,
                    )
                )
                created.append(unit)

            await self.uow.commit()

            return Return.ok(
                UnitListResponse(units=[UnitInfo.from_entity(u) for u in created])
            )
