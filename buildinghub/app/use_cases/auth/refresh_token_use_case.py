"""
Refresh Token Use Case

Exchanges a refresh token for a new token pair.
"""

from uuid import UUID

from buildinghub.libs.result import Error, Result, Return
from buildinghub.api.utils.jwt import (
    REFRESH_TOKEN_TYPE,
    generate_jwt,
    generate_refresh_jwt,
    verify_jwt,
)
from buildinghub.app.services.unit_of_work import UnitOfWork

from .dtos import RefreshTokenResponse


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Refresh token must be a valid, unexpired token of type refresh
    - User must still exist
    - New tokens carry the user's current role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        payload = verify_jwt(refresh_token, token_type=REFRESH_TOKEN_TYPE)
        if payload is None:
            return Return.err(Error("INVALID_TOKEN", "Invalid or expired refresh token"))

        async with self.uow:
            user = await self.uow.users.get_by_id(UUID(payload["user_id"]))
            if user is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired refresh token"))

            return Return.ok(
                RefreshTokenResponse(
                    access_token=generate_jwt(user.id, user.role.value),
                    refresh_token=generate_refresh_jwt(user.id, user.role.value),
                )
            )
