"""
Authentication Use Case DTOs (Data Transfer Objects)

Command/Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel

from buildinghub.app.use_cases.users.dtos import UserInfo


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    role: str


# ============================================================================
# Response DTOs
# ============================================================================


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserInfo
    access_token: str
    refresh_token: str


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str
