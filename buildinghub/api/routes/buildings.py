from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from buildinghub.api.error import parse_uuid, raise_for_error
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.app.use_cases.buildings import (
    BuildingInfo,
    BuildingListResponse,
    CreateBuildingCommand,
    CreateBuildingUseCase,
    CreateUnitsUseCase,
    GetBuildingUseCase,
    ListBuildingsUseCase,
    ListUnitsUseCase,
    NewUnit,
    UnitListResponse,
)
from buildinghub.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/buildings", tags=["Buildings"])


class CreateBuildingRequest(BaseModel):
    """Create building HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)


@router.get("/", status_code=status.HTTP_200_OK, response_model=BuildingListResponse)
async def list_buildings(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListBuildingsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=BuildingInfo)
async def create_building(
    request: CreateBuildingRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Building

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
    """
    use_case = CreateBuildingUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]),
        CreateBuildingCommand(name=request.name, address=request.address),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{building_id}", status_code=status.HTTP_200_OK, response_model=BuildingInfo
)
async def get_building(
    building_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetBuildingUseCase(uow)
    result = await use_case.execute(parse_uuid(building_id, "building ID"))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{building_id}/units",
    status_code=status.HTTP_200_OK,
    response_model=UnitListResponse,
)
async def list_units(
    building_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListUnitsUseCase(uow)
    result = await use_case.execute(parse_uuid(building_id, "building ID"))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class CreateUnitsRequest(BaseModel):
    """Bulk unit creation HTTP request payload"""

    units: List[NewUnit] = Field(..., min_length=1)


@router.post(
    "/{building_id}/units",
    status_code=status.HTTP_201_CREATED,
    response_model=UnitListResponse,
)
async def create_units(
    building_id: str,
    request: CreateUnitsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Units

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BUILDING_NOT_FOUND
        - 409 Conflict: UNIT_ALREADY_EXISTS
    """
    use_case = CreateUnitsUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]),
        parse_uuid(building_id, "building ID"),
        request.units,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
