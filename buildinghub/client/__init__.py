"""
BuildingHub client

Async client for the membership workflow and the building and user
administration endpoints.
"""

from .api_client import ApiClient
from .buildings import BuildingClient
from .errors import (
    ApiError,
    BuildingHubError,
    Conflict,
    Forbidden,
    InvalidTransition,
    NotFound,
    SubmissionInProgress,
    Unauthenticated,
)
from .guard import InFlightGuard
from .memberships import MembershipClient
from .models import (
    NO_MEMBERSHIP,
    Building,
    Membership,
    NoMembership,
    PendingMembership,
    Requester,
    TokenPair,
    Unit,
    User,
)
from .session import FileTokenStore, MemoryTokenStore, Session, SessionManager, TokenStore
from .users import UserClient
from .workflow import LoadStatus, MembershipWorkflow, MutationState, QueryState

__all__ = [
    "ApiClient",
    "BuildingClient",
    "MembershipClient",
    "UserClient",
    "InFlightGuard",
    "Session",
    "SessionManager",
    "TokenStore",
    "MemoryTokenStore",
    "FileTokenStore",
    "MembershipWorkflow",
    "QueryState",
    "MutationState",
    "LoadStatus",
    "BuildingHubError",
    "ApiError",
    "Unauthenticated",
    "Forbidden",
    "NotFound",
    "Conflict",
    "InvalidTransition",
    "SubmissionInProgress",
    "User",
    "Building",
    "Unit",
    "Membership",
    "PendingMembership",
    "Requester",
    "TokenPair",
    "NoMembership",
    "NO_MEMBERSHIP",
]
