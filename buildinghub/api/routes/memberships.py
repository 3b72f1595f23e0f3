from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from buildinghub.api.error import parse_uuid, raise_for_error
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.app.use_cases.memberships import (
    DecideMembershipUseCase,
    GetMyMembershipUseCase,
    ListPendingMembershipsUseCase,
    MembershipInfo,
    PendingMembershipListResponse,
    RequestAccessUseCase,
)
from buildinghub.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/buildings/{building_id}", tags=["Memberships"])


class RequestAccessRequest(BaseModel):
    """Request access HTTP request payload"""

    unit_id: str = Field(..., description="Unit the caller wants to join")
    role: str = Field("resident", description="resident, owner or admin")


@router.post(
    "/request-access",
    status_code=status.HTTP_201_CREATED,
    response_model=MembershipInfo,
)
async def request_access(
    building_id: str,
    request: RequestAccessRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request Access to a Unit

    Creates a pending membership for the caller.

    Raises:
        - 400 Bad Request: INVALID_ID, INVALID_ROLE
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: BUILDING_NOT_FOUND, UNIT_NOT_FOUND
        - 409 Conflict: MEMBERSHIP_ALREADY_EXISTS
    """
    use_case = RequestAccessUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]),
        parse_uuid(building_id, "building ID"),
        parse_uuid(request.unit_id, "unit ID"),
        request.role,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/memberships/pending",
    status_code=status.HTTP_200_OK,
    response_model=PendingMembershipListResponse,
)
async def list_pending_memberships(
    building_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Pending Memberships

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BUILDING_NOT_FOUND
    """
    use_case = ListPendingMembershipsUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), parse_uuid(building_id, "building ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class VerifyMembershipRequest(BaseModel):
    """Verify membership HTTP request payload"""

    status: str = Field(..., description="active or rejected")


@router.patch(
    "/memberships/{membership_id}/verify",
    status_code=status.HTTP_200_OK,
    response_model=MembershipInfo,
)
async def verify_membership(
    building_id: str,
    membership_id: str,
    request: VerifyMembershipRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve or Reject a Membership

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION (membership already decided)
    """
    use_case = DecideMembershipUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]),
        parse_uuid(building_id, "building ID"),
        parse_uuid(membership_id, "membership ID"),
        request.status,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MembershipInfo)
async def get_my_membership(
    building_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get My Membership

    Raises:
        - 404 Not Found: BUILDING_NOT_FOUND, MEMBERSHIP_NOT_FOUND (no membership yet)
    """
    use_case = GetMyMembershipUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), parse_uuid(building_id, "building ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
