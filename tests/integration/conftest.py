from uuid import UUID

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from buildinghub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from buildinghub.depends import get_unit_of_work
from buildinghub.domain.capabilities import SELF_SERVICE_ROLES
from buildinghub.domain.entities import SystemRole, User
from tests.utils.auth import PASSWORD, auth_headers


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def app(engine):
    from buildinghub.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    # A fresh session per request, like the real dependency
    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def transport(app):
    return ASGITransport(app=app)


@pytest_asyncio.fixture
async def client(transport):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def register_user(client, db_session):
    """
    Returns an async helper: register_user(email, role) -> (user, access_token)

    Admin roles are not open to registration, so those users sign up as
    residents and are promoted directly in the database.
    """

    async def _register(email: str, role: str = "resident"):
        system_role = SystemRole(role)
        signup_role = role if system_role in SELF_SERVICE_ROLES else "resident"
        response = await client.post(
            "/iam/auth/register",
            json={"email": email, "password": PASSWORD, "role": signup_role},
        )
        assert response.status_code == 201, response.text
        data = response.json()

        if signup_role != role:
            user = await db_session.get(User, UUID(data["user"]["id"]))
            user.role = system_role
            db_session.add(user)
            await db_session.commit()
            data["user"]["role"] = role

        return data["user"], data["access_token"]

    return _register


@pytest_asyncio.fixture
async def building_with_units(client, register_user):
    """Returns an async helper creating a building and its units as a fresh admin"""
    counter = {"n": 0}

    async def _create(unit_numbers=("101", "102")):
        counter["n"] += 1
        _, token = await register_user(
            f"builder{counter['n']}@example.com", "building_admin"
        )
        response = await client.post(
            "/buildings/",
            json={"name": f"Tower {counter['n']}", "address": "1 Main St"},
            headers=auth_headers(token),
        )
        assert response.status_code == 201, response.text
        building = response.json()

        response = await client.post(
            f"/buildings/{building['id']}/units",
            json={"units": [{"unit_number": n, "floor": 1} for n in unit_numbers]},
            headers=auth_headers(token),
        )
        assert response.status_code == 201, response.text
        return building, response.json()["units"]

    return _create
