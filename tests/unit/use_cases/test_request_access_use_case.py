from uuid import uuid4

import pytest

from buildinghub.app.repositories.membership_repository import MembershipAlreadyExists
from buildinghub.app.use_cases.memberships import RequestAccessUseCase
from buildinghub.domain.entities import (
    Building,
    Membership,
    MembershipRole,
    MembershipStatus,
    SystemRole,
    Unit,
    User,
)


@pytest.fixture
def resident():
    return User(id=uuid4(), email="resident@example.com", password_hash="x", role=SystemRole.resident)


@pytest.fixture
def building():
    return Building(id=uuid4(), name="Harbor View", address="1 Pier Rd")


@pytest.fixture
def unit(building):
    return Unit(id=uuid4(), building_id=building.id, unit_number="101", floor=1)


@pytest.fixture
def ready_uow(mock_uow, resident, building, unit):
    mock_uow.users.get_by_id.return_value = resident
    mock_uow.buildings.get_by_id.return_value = building
    mock_uow.units.get_by_id.return_value = unit
    return mock_uow


@pytest.mark.asyncio
async def test_request_creates_pending_membership(ready_uow, resident, building, unit):
    # Act
    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, unit.id)

    # Assert
    assert result.is_ok()
    assert result.value.status == "pending"
    assert result.value.unit_id == str(unit.id)
    assert result.value.user_id == str(resident.id)
    assert result.value.role == "resident"

    created = ready_uow.memberships.create.call_args.args[0]
    assert created.status == MembershipStatus.pending
    ready_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_request_with_owner_role(ready_uow, resident, building, unit):
    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, unit.id, "owner")

    assert result.is_ok()
    assert result.value.role == MembershipRole.owner.value


@pytest.mark.asyncio
async def test_invalid_membership_role(ready_uow, resident, building, unit):
    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, unit.id, "landlord")

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    ready_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_building_not_found(ready_uow, resident, unit):
    ready_uow.buildings.get_by_id.return_value = None

    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, uuid4(), unit.id)

    assert result.is_err()
    assert result.error.code == "BUILDING_NOT_FOUND"


@pytest.mark.asyncio
async def test_unit_not_found(ready_uow, resident, building):
    ready_uow.units.get_by_id.return_value = None

    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, uuid4())

    assert result.is_err()
    assert result.error.code == "UNIT_NOT_FOUND"


@pytest.mark.asyncio
async def test_unit_of_another_building(ready_uow, resident, building):
    """A unit that exists but belongs elsewhere is reported as not found"""
    ready_uow.units.get_by_id.return_value = Unit(
        id=uuid4(), building_id=uuid4(), unit_number="202", floor=2
    )

    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, uuid4())

    assert result.is_err()
    assert result.error.code == "UNIT_NOT_FOUND"
    ready_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [MembershipStatus.pending, MembershipStatus.active])
async def test_open_membership_conflicts(ready_uow, resident, building, unit, status):
    ready_uow.memberships.get_by_user_and_building.return_value = [
        Membership(
            id=uuid4(),
            building_id=building.id,
            unit_id=unit.id,
            user_id=resident.id,
            status=status,
        )
    ]

    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, unit.id)

    assert result.is_err()
    assert result.error.code == "MEMBERSHIP_ALREADY_EXISTS"
    ready_uow.memberships.create.assert_not_called()
    ready_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_rejected_membership_allows_new_request(ready_uow, resident, building, unit):
    ready_uow.memberships.get_by_user_and_building.return_value = [
        Membership(
            id=uuid4(),
            building_id=building.id,
            unit_id=unit.id,
            user_id=resident.id,
            status=MembershipStatus.rejected,
        )
    ]

    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, unit.id)

    assert result.is_ok()
    assert result.value.status == "pending"


@pytest.mark.asyncio
async def test_deleted_user_is_unauthenticated(ready_uow, building, unit):
    ready_uow.users.get_by_id.return_value = None

    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(uuid4(), building.id, unit.id)

    assert result.is_err()
    assert result.error.code == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_concurrent_request_rejected_by_store(ready_uow, resident, building, unit):
    """The read saw no open membership but another request was stored first"""
    ready_uow.memberships.create.side_effect = MembershipAlreadyExists(str(resident.id))

    use_case = RequestAccessUseCase(ready_uow)
    result = await use_case.execute(resident.id, building.id, unit.id)

    assert result.is_err()
    assert result.error.code == "MEMBERSHIP_ALREADY_EXISTS"
    ready_uow.commit.assert_not_called()
