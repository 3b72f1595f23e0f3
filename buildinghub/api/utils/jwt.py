from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def create_token(
    user_id: str, role: str, token_type: str, expires_delta: timedelta
) -> str:
    """
    Create a signed JWT

    Args:
        user_id: User UUID as string
        role: System role at issue time (informational, re-checked server side)
        token_type: "access" or "refresh"
        expires_delta: Token expiration duration

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "role": role,
        "type": token_type,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def generate_jwt(user_id: UUID, role: str) -> str:
    """Generate an access token with the configured lifetime"""
    return create_token(
        str(user_id),
        role,
        ACCESS_TOKEN_TYPE,
        timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_MINUTES),
    )


def generate_refresh_jwt(user_id: UUID, role: str) -> str:
    """Generate a refresh token with the configured lifetime"""
    return create_token(
        str(user_id),
        role,
        REFRESH_TOKEN_TYPE,
        timedelta(days=ApplicationConfig.REFRESH_TOKEN_DAYS),
    )


def verify_jwt(token: str, token_type: str = ACCESS_TOKEN_TYPE) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string
        token_type: Expected "type" claim

    Returns:
        Decoded payload dict or None if invalid, expired or of the wrong type
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
    except JWTError:
        return None

    if payload.get("type") != token_type or "user_id" not in payload:
        return None
    return payload
