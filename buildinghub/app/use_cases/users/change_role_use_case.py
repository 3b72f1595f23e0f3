"""
Change User Role Use Case

Handles changing a user's system-wide role.
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.domain.capabilities import can_manage_users
from buildinghub.domain.entities import SystemRole

from .dtos import UserInfo


class ChangeRoleUseCase:
    """
    Use case for changing a user's system role.

    Business Rules:
    - Only actors with manage_users can change roles
    - Role must be one of the system roles
    - Target user must exist
    - Takes effect on the next authorization check, tokens are not reissued
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: UUID, target_user_id: UUID, new_role: str
    ) -> Result[UserInfo]:
        """
        Execute change role use case.

        Args:
            actor_user_id: User ID of the admin making the change
            target_user_id: User ID whose role is being changed
            new_role: New system role

        Returns:
            Result with updated user info, or Error
        """
        async with self.uow:
            try:
                system_role = SystemRole(new_role)
            except ValueError:
                allowed = ", ".join(r.value for r in SystemRole)
                return Return.err(
                    Error("INVALID_ROLE", f"Invalid role: {new_role}. Must be one of: {allowed}")
                )

            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            if not can_manage_users(actor.role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only super admins can change roles")
                )

            target = await self.uow.users.get_by_id(target_user_id)
            if target is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            target.role = system_role
            target = await self.uow.users.update(target)

            await self.uow.commit()

            return Return.ok(UserInfo.from_entity(target))
