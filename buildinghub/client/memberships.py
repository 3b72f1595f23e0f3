"""
Membership query/mutation layer.

The four workflow operations as async calls against the service:

    request_access(building_id, unit_id)     -> Membership (pending)
    list_pending(building_id)                -> [PendingMembership]
    decide(building_id, membership_id, dec)  -> Membership (active | rejected)
    my_status(building_id)                   -> Membership | NO_MEMBERSHIP

Role checks here are advisory and only save a round trip; the service
enforces them again.
"""

import logging
from typing import List, Optional, Union

from buildinghub.client.api_client import ApiClient
from buildinghub.client.errors import BuildingHubError, Forbidden, NotFound
from buildinghub.client.guard import InFlightGuard
from buildinghub.client.models import (
    NO_MEMBERSHIP,
    Membership,
    NoMembership,
    PendingMembership,
)
from buildinghub.domain.capabilities import can_decide
from buildinghub.domain.entities.enums import MembershipRole, MembershipStatus

logger = logging.getLogger(__name__)


class MembershipClient:
    def __init__(self, api: ApiClient, guard: Optional[InFlightGuard] = None):
        self.api = api
        self.guard = guard or InFlightGuard()

    def can_decide(self) -> bool:
        user = self.api.session.user
        return user is not None and can_decide(user.role)

    async def request_access(
        self,
        building_id: str,
        unit_id: str,
        role: Union[MembershipRole, str] = MembershipRole.resident,
    ) -> Membership:
        try:
            membership_role = MembershipRole(role)
        except ValueError:
            allowed = ", ".join(r.value for r in MembershipRole)
            raise BuildingHubError(
                "INVALID_ROLE", f"Invalid role: {role}. Must be one of: {allowed}"
            )

        async with self.guard.hold(request_access_key(building_id)):
            data = await self.api.post(
                f"/buildings/{building_id}/request-access",
                json={"unit_id": unit_id, "role": membership_role.value},
            )
        membership = Membership(**data)
        logger.info(f"Requested access to unit {unit_id} ({membership.id})")
        return membership

    async def list_pending(self, building_id: str) -> List[PendingMembership]:
        self._check_can_decide()
        data = await self.api.get(f"/buildings/{building_id}/memberships/pending")
        return [PendingMembership(**item) for item in data["memberships"]]

    async def decide(
        self,
        building_id: str,
        membership_id: str,
        decision: Union[MembershipStatus, str],
    ) -> Membership:
        self._check_can_decide()
        status = decision.value if isinstance(decision, MembershipStatus) else decision
        async with self.guard.hold(decide_key(membership_id)):
            data = await self.api.patch(
                f"/buildings/{building_id}/memberships/{membership_id}/verify",
                json={"status": status},
            )
        membership = Membership(**data)
        logger.info(f"Membership {membership_id} is now {membership.status.value}")
        return membership

    async def my_status(self, building_id: str) -> Union[Membership, NoMembership]:
        try:
            data = await self.api.get(f"/buildings/{building_id}/me")
        except NotFound as exc:
            if exc.code == "MEMBERSHIP_NOT_FOUND":
                return NO_MEMBERSHIP
            raise
        return Membership(**data)

    def _check_can_decide(self):
        # Skip when the user is not loaded yet; the service still checks
        if self.api.session.user is not None and not self.can_decide():
            raise Forbidden(
                "INSUFFICIENT_ROLE",
                "Only building admins can review membership requests",
            )


def request_access_key(building_id: str) -> str:
    return f"request_access:{building_id}"


def decide_key(membership_id: str) -> str:
    return f"decide:{membership_id}"
