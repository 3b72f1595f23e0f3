"""
Membership Use Case DTOs (Data Transfer Objects)

Response classes for the membership workflow.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from buildinghub.domain.entities import Membership, User


class MembershipInfo(BaseModel):
    """Membership as returned to callers"""

    id: str
    building_id: str
    unit_id: str
    user_id: str
    role: str
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, membership: Membership) -> "MembershipInfo":
        return cls(
            id=str(membership.id),
            building_id=str(membership.building_id),
            unit_id=str(membership.unit_id),
            user_id=str(membership.user_id),
            role=membership.role.value,
            status=membership.status.value,
            created_at=membership.created_at,
        )


class RequesterInfo(BaseModel):
    """Summary of the user who requested access"""

    id: str
    email: str


class PendingMembershipInfo(MembershipInfo):
    """Pending membership joined with its requester"""

    user: RequesterInfo

    @classmethod
    def from_row(cls, membership: Membership, user: User) -> "PendingMembershipInfo":
        base = MembershipInfo.from_entity(membership)
        return cls(
            **base.model_dump(),
            user=RequesterInfo(id=str(user.id), email=user.email),
        )


class PendingMembershipListResponse(BaseModel):
    memberships: List[PendingMembershipInfo]
