from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from buildinghub.app.repositories.membership_repository import (
    IMembershipRepository,
    MembershipAlreadyExists,
)
from buildinghub.domain.entities import Membership, MembershipStatus, User


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        stmt = select(Membership).where(Membership.id == membership_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_and_building(
        self, user_id: UUID, building_id: UUID
    ) -> List[Membership]:
        """Get all memberships of a user in a building, newest first"""
        stmt = (
            select(Membership)
            .where(
                Membership.user_id == user_id,
                Membership.building_id == building_id,
            )
            .order_by(Membership.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_building_and_status(
        self, building_id: UUID, status: MembershipStatus
    ) -> List[Tuple[Membership, User]]:
        """Get memberships of a building in a given status, joined with their user"""
        stmt = (
            select(Membership, User)
            .join(User, Membership.user_id == User.id)
            .where(
                Membership.building_id == building_id,
                Membership.status == status,
            )
            .order_by(Membership.created_at)
        )
        result = await self.session.exec(stmt)
        return [(membership, user) for membership, user in result.all()]

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            # uq_membership_open_per_building
            raise MembershipAlreadyExists(str(membership.user_id)) from exc
        await self.session.refresh(membership)
        return membership

    async def transition_status(
        self, membership: Membership, target: MembershipStatus
    ) -> bool:
        """Conditional status update, compare-and-set on the current status"""
        stmt = (
            update(Membership)
            .where(
                Membership.id == membership.id,
                Membership.status == membership.status,
            )
            .values(status=target)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount != 1:
            return False

        await self.session.refresh(membership)
        return True
