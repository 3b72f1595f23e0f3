"""
List Users Use Case
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.domain.capabilities import can_manage_users

from .dtos import UserInfo, UserListResponse


class ListUsersUseCase:
    """
    Use case for listing all user accounts.

    Business Rules:
    - Requires the manage_users capability (super_admin)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_user_id: UUID) -> Result[UserListResponse]:
        async with self.uow:
            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            if not can_manage_users(actor.role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only super admins can manage users")
                )

            users = await self.uow.users.list_all()
            return Return.ok(
                UserListResponse(users=[UserInfo.from_entity(u) for u in users])
            )
