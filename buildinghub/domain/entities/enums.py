"""
BuildingHub Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class SystemRole(str, Enum):
    """System-wide role of a user account"""

    resident = "resident"
    building_admin = "building_admin"
    manager = "manager"
    provider = "provider"
    super_admin = "super_admin"


class MembershipRole(str, Enum):
    """Capacity in which a user occupies a unit"""

    resident = "resident"
    owner = "owner"
    admin = "admin"


class MembershipStatus(str, Enum):
    """Membership lifecycle status"""

    pending = "pending"
    active = "active"
    rejected = "rejected"
