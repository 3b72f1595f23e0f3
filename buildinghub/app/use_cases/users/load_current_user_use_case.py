"""
Load Current User Use Case

Loads the authenticated user from JWT claims.
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.app.services.unit_of_work import UnitOfWork

from .dtos import UserInfo


class LoadCurrentUserUseCase:
    """
    Use case for loading the current user.

    Business Rules:
    - The user referenced by the token must still exist
    - The role returned is the stored one, not the one in the token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("UNAUTHENTICATED", "User no longer exists"))

            return Return.ok(UserInfo.from_entity(user))
