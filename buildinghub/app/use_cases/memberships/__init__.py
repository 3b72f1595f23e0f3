"""
Membership Workflow Use Cases

Request, review and decide unit memberships.
"""

from .decide_membership_use_case import DecideMembershipUseCase
from .dtos import (
    MembershipInfo,
    PendingMembershipInfo,
    PendingMembershipListResponse,
    RequesterInfo,
)
from .get_my_membership_use_case import GetMyMembershipUseCase
from .list_pending_memberships_use_case import ListPendingMembershipsUseCase
from .request_access_use_case import RequestAccessUseCase

__all__ = [
    "RequestAccessUseCase",
    "ListPendingMembershipsUseCase",
    "DecideMembershipUseCase",
    "GetMyMembershipUseCase",
    "MembershipInfo",
    "PendingMembershipInfo",
    "PendingMembershipListResponse",
    "RequesterInfo",
]
