from typing import List, Union

from buildinghub.client.api_client import ApiClient
from buildinghub.client.errors import BuildingHubError, Forbidden
from buildinghub.client.models import User
from buildinghub.domain.capabilities import can_manage_users
from buildinghub.domain.entities.enums import SystemRole


class UserClient:
    def __init__(self, api: ApiClient):
        self.api = api

    async def list_users(self, search: str = "") -> List[User]:
        """List users, optionally filtered by a case-insensitive email substring"""
        self._check_can_manage()
        data = await self.api.get("/iam/users")
        users = [User(**item) for item in data["users"]]
        if search:
            needle = search.lower()
            users = [u for u in users if needle in u.email.lower()]
        return users

    async def update_role(self, user_id: str, role: Union[SystemRole, str]) -> User:
        self._check_can_manage()
        try:
            system_role = SystemRole(role)
        except ValueError:
            raise BuildingHubError("INVALID_ROLE", f"Invalid role: {role}")

        data = await self.api.patch(
            f"/iam/users/{user_id}/role", json={"role": system_role.value}
        )
        return User(**data)

    def _check_can_manage(self):
        user = self.api.session.user
        if user is not None and not can_manage_users(user.role):
            raise Forbidden("INSUFFICIENT_ROLE", "Only super admins can manage users")
