from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from buildinghub.domain.entities import Membership, MembershipStatus, User


class MembershipAlreadyExists(Exception):
    """The user already holds a pending or active membership in the building"""


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_user_and_building(
        self, user_id: UUID, building_id: UUID
    ) -> List[Membership]:
        """Get all memberships of a user in a building, newest first"""
        pass

    @abstractmethod
    async def get_by_building_and_status(
        self, building_id: UUID, status: MembershipStatus
    ) -> List[Tuple[Membership, User]]:
        """Get memberships of a building in a given status, joined with their user"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """
        Create a new membership

        Raises:
            MembershipAlreadyExists: an open membership for the same
                (user, building) was stored first
        """
        pass

    @abstractmethod
    async def transition_status(
        self, membership: Membership, target: MembershipStatus
    ) -> bool:
        """
        Move membership to target only if its stored status is still the
        one held by the given object.

        Returns:
            False when another writer changed the status first
        """
        pass
