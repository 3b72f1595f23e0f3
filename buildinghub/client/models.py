"""
Client-side views of service resources.
"""

from datetime import datetime

from pydantic import BaseModel

from buildinghub.domain.entities.enums import MembershipRole, MembershipStatus, SystemRole


class User(BaseModel):
    id: str
    email: str
    role: SystemRole
    created_at: datetime


class Building(BaseModel):
    id: str
    name: str
    address: str
    created_at: datetime


class Unit(BaseModel):
    id: str
    building_id: str
    unit_number: str
    floor: int
    created_at: datetime


class Membership(BaseModel):
    id: str
    building_id: str
    unit_id: str
    user_id: str
    role: MembershipRole
    status: MembershipStatus
    created_at: datetime


class Requester(BaseModel):
    id: str
    email: str


class PendingMembership(Membership):
    user: Requester


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str


class NoMembership:
    """Sentinel for "the caller has no membership in this building"."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MEMBERSHIP"


NO_MEMBERSHIP = NoMembership()
