from typing import Iterable, Optional

import bcrypt

from buildinghub.libs.result import Error, Result, Return
from buildinghub.api.utils.jwt import generate_jwt, generate_refresh_jwt
from buildinghub.app.services.unit_of_work import UnitOfWork
from buildinghub.app.use_cases.users.dtos import UserInfo
from buildinghub.domain.capabilities import SELF_SERVICE_ROLES
from buildinghub.domain.entities import SystemRole, User

from .dtos import AuthResponse, RegisterCommand


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate the requested system role; roles carrying capabilities
       are granted by a super admin, not picked at sign-up
    2. Check if email already exists
    3. Hash password with bcrypt cost factor 12
    4. Create User
    5. Commit and issue access + refresh tokens
    """

    def __init__(self, uow: UnitOfWork, allowed_roles: Optional[Iterable[str]] = None):
        self.uow = uow
        if allowed_roles is None:
            self.allowed_roles = SELF_SERVICE_ROLES
        else:
            self.allowed_roles = frozenset(SystemRole(r) for r in allowed_roles)

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email, password, role

        Returns:
            Result[AuthResponse] with user data and tokens,
            or Error(INVALID_ROLE | INSUFFICIENT_ROLE | EMAIL_ALREADY_EXISTS)
        """
        async with self.uow:
            try:
                role = SystemRole(command.role)
            except ValueError:
                return Return.err(
                    Error("INVALID_ROLE", f"Invalid role: {command.role}")
                )

            if role not in self.allowed_roles:
                return Return.err(
                    Error(
                        "INSUFFICIENT_ROLE",
                        f"Role {role.value} cannot be chosen at registration",
                    )
                )

            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
                role=role,
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_entity(user),
                    access_token=generate_jwt(user.id, user.role.value),
                    refresh_token=generate_refresh_jwt(user.id, user.role.value),
                )
            )
