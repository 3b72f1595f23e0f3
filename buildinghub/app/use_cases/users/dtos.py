"""
User Use Case DTOs (Data Transfer Objects)

Response classes for user domain, shared with authentication.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from buildinghub.domain.entities import User


class UserInfo(BaseModel):
    """Public user summary (never includes the password hash)"""

    id: str
    email: str
    role: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
        )


class UserListResponse(BaseModel):
    """Response for list users use case"""

    users: List[UserInfo]
