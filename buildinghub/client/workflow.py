"""
Membership workflow state for a single building.

Holds the query and mutation states a view renders from. Mutations never
patch local data: after the service confirms a change, the affected
queries are fetched again.

Every exit path leaves a state out of loading, so a failure never blocks
the next submission. Service errors on reads are recorded, not raised.
"""

import asyncio
import logging
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar, Union

from buildinghub.client.errors import BuildingHubError, SubmissionInProgress
from buildinghub.client.memberships import MembershipClient
from buildinghub.client.models import Membership, NoMembership, PendingMembership
from buildinghub.domain.entities.enums import MembershipRole, MembershipStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoadStatus(str, Enum):
    idle = "idle"
    loading = "loading"
    success = "success"
    error = "error"


class QueryState(Generic[T]):
    """Last known result of a read; data survives a later failed refresh"""

    def __init__(self):
        self.status = LoadStatus.idle
        self.data: Optional[T] = None
        self.error: Optional[Exception] = None

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.loading

    def start(self):
        self.status = LoadStatus.loading
        self.error = None

    def succeed(self, data: T):
        self.status = LoadStatus.success
        self.data = data
        self.error = None

    def fail(self, error: Exception):
        self.status = LoadStatus.error
        self.error = error


class MutationState(QueryState[T]):
    @property
    def is_pending(self) -> bool:
        return self.is_loading


class MembershipWorkflow:
    def __init__(self, client: MembershipClient, building_id: str):
        self.client = client
        self.building_id = building_id
        self.my_membership: QueryState[Union[Membership, NoMembership]] = QueryState()
        self.pending: QueryState[List[PendingMembership]] = QueryState()
        self.request_state: MutationState[Membership] = MutationState()
        self.decide_states: Dict[str, MutationState[Membership]] = {}

    @property
    def can_decide(self) -> bool:
        return self.client.can_decide()

    def decide_state(self, membership_id: str) -> MutationState[Membership]:
        return self.decide_states.setdefault(membership_id, MutationState())

    async def refresh_my_membership(self) -> QueryState:
        self.my_membership.start()
        try:
            result = await self.client.my_status(self.building_id)
        except BuildingHubError as exc:
            self.my_membership.fail(exc)
        except (Exception, asyncio.CancelledError) as exc:
            self.my_membership.fail(exc)
            raise
        else:
            self.my_membership.succeed(result)
        return self.my_membership

    async def refresh_pending(self) -> QueryState:
        self.pending.start()
        try:
            result = await self.client.list_pending(self.building_id)
        except BuildingHubError as exc:
            self.pending.fail(exc)
        except (Exception, asyncio.CancelledError) as exc:
            self.pending.fail(exc)
            raise
        else:
            self.pending.succeed(result)
        return self.pending

    async def request_access(
        self, unit_id: str, role: Union[MembershipRole, str] = MembershipRole.resident
    ) -> Membership:
        if self.request_state.is_pending:
            raise SubmissionInProgress(f"request_access:{self.building_id}")

        self.request_state.start()
        try:
            membership = await self.client.request_access(self.building_id, unit_id, role)
        except (Exception, asyncio.CancelledError) as exc:
            self.request_state.fail(exc)
            raise
        self.request_state.succeed(membership)

        await self.refresh_my_membership()
        return membership

    async def decide(
        self, membership_id: str, decision: Union[MembershipStatus, str]
    ) -> Membership:
        state = self.decide_state(membership_id)
        if state.is_pending:
            raise SubmissionInProgress(f"decide:{membership_id}")

        state.start()
        try:
            membership = await self.client.decide(
                self.building_id, membership_id, decision
            )
        except (Exception, asyncio.CancelledError) as exc:
            state.fail(exc)
            raise
        state.succeed(membership)

        await self.refresh_pending()
        return membership
