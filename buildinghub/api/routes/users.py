from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from buildinghub.api.error import parse_uuid, raise_for_error
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.app.use_cases.users import (
    ChangeRoleUseCase,
    ListUsersUseCase,
    LoadCurrentUserUseCase,
    UserInfo,
    UserListResponse,
)
from buildinghub.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/iam", tags=["Users"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User

    Raises:
        - 401 Unauthorized: Invalid or expired JWT, or user no longer exists
    """
    use_case = LoadCurrentUserUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/users", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE (requires super_admin)
    """
    use_case = ListUsersUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangeRoleRequest(BaseModel):
    """Change role HTTP request payload"""

    role: str = Field(..., description="New system role")


@router.patch(
    "/users/{user_id}/role", status_code=status.HTTP_200_OK, response_model=UserInfo
)
async def change_user_role(
    user_id: str,
    request: ChangeRoleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change User Role

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_ID
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: USER_NOT_FOUND
    """
    target_user_id = parse_uuid(user_id, "user ID")

    use_case = ChangeRoleUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), target_user_id, request.role
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
