"""
Login Use Case

Handles user authentication and returns JWT tokens.
"""

import bcrypt

from buildinghub.libs.result import Error, Result, Return
from buildinghub.api.utils.jwt import generate_jwt, generate_refresh_jwt
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.app.use_cases.users.dtos import UserInfo

from .dtos import AuthResponse


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Same error for unknown email and wrong password
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Hash dummy password to maintain constant time
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_entity(user),
                    access_token=generate_jwt(user.id, user.role.value),
                    refresh_token=generate_refresh_jwt(user.id, user.role.value),
                )
            )
