import pytest
from unittest.mock import AsyncMock, MagicMock


async def _transition(membership, target):
    membership.status = target
    return True


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.list_all = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.buildings = MagicMock()
    uow.buildings.get_by_id = AsyncMock()
    uow.buildings.list_all = AsyncMock()
    uow.buildings.create = AsyncMock(side_effect=lambda building: building)

    uow.units = MagicMock()
    uow.units.get_by_id = AsyncMock()
    uow.units.get_by_building_id = AsyncMock(return_value=[])
    uow.units.create = AsyncMock(side_effect=lambda unit: unit)

    uow.memberships = MagicMock()
    uow.memberships.get_by_id = AsyncMock()
    uow.memberships.get_by_user_and_building = AsyncMock(return_value=[])
    uow.memberships.get_by_building_and_status = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock(side_effect=lambda membership: membership)
    uow.memberships.transition_status = AsyncMock(side_effect=_transition)

    return uow
