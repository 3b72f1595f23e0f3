"""
BuildingHub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    SystemRole,
    MembershipRole,
    MembershipStatus,
)

# Export all entities
from .user import User
from .building import Building
from .unit import Unit
from .membership import Membership

__all__ = [
    # Enums
    "SystemRole",
    "MembershipRole",
    "MembershipStatus",
    # Entities
    "User",
    "Building",
    "Unit",
    "Membership",
]
