"""
Authentication Use Cases

All authentication-related business logic.
"""

from .dtos import AuthResponse, RefreshTokenResponse, RegisterCommand
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .register_use_case import RegisterUseCase

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "RefreshTokenResponse",
]
