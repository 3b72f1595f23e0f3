"""
Authorization Gate

Every role-gated decision goes through has_capability(). Call sites never
compare role strings directly.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Union

from buildinghub.domain.entities.enums import SystemRole


class Capability(str, Enum):
    decide_membership = "decide_membership"
    manage_buildings = "manage_buildings"
    manage_users = "manage_users"


CAPABILITIES: Dict[SystemRole, FrozenSet[Capability]] = {
    SystemRole.resident: frozenset(),
    SystemRole.manager: frozenset(),
    SystemRole.provider: frozenset(),
    SystemRole.building_admin: frozenset(
        {Capability.decide_membership, Capability.manage_buildings}
    ),
    SystemRole.super_admin: frozenset(
        {
            Capability.decide_membership,
            Capability.manage_buildings,
            Capability.manage_users,
        }
    ),
}


def has_capability(
    role: Optional[Union[SystemRole, str]], capability: Capability
) -> bool:
    if role is None:
        return False
    try:
        system_role = SystemRole(role)
    except ValueError:
        return False
    return capability in CAPABILITIES[system_role]


def can_decide(role: Optional[Union[SystemRole, str]]) -> bool:
    return has_capability(role, Capability.decide_membership)


def can_manage_buildings(role: Optional[Union[SystemRole, str]]) -> bool:
    return has_capability(role, Capability.manage_buildings)


def can_manage_users(role: Optional[Union[SystemRole, str]]) -> bool:
    return has_capability(role, Capability.manage_users)


# Roles a user may pick when registering: those that grant nothing
SELF_SERVICE_ROLES: FrozenSet[SystemRole] = frozenset(
    role for role, capabilities in CAPABILITIES.items() if not capabilities
)
