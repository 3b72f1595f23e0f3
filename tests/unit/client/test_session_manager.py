import os
import stat

import httpx
import pytest

from buildinghub.client.api_client import ApiClient
from buildinghub.client.errors import ApiError, Unauthenticated
from buildinghub.client.models import TokenPair
from buildinghub.client.session import (
    FileTokenStore,
    MemoryTokenStore,
    Session,
    SessionManager,
)

USER = {
    "id": "6f1c2b1e-0000-4000-8000-000000000001",
    "email": "alice@example.com",
    "role": "resident",
    "created_at": "2026-01-01T00:00:00",
}


def auth_body(access="access-1", refresh="refresh-1"):
    return {"user": USER, "access_token": access, "refresh_token": refresh}


def make_api(handler):
    return ApiClient(Session(), base_url="http://test", transport=httpx.MockTransport(handler))


def test_file_store_roundtrip(tmp_path):
    path = tmp_path / "nested" / "session.yaml"
    store = FileTokenStore(str(path))
    assert store.load() is None

    store.save(TokenPair(access_token="a", refresh_token="r"))

    assert store.load() == TokenPair(access_token="a", refresh_token="r")
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    store.clear()
    assert not path.exists()


def test_file_store_ignores_incomplete_file(tmp_path):
    path = tmp_path / "session.yaml"
    path.write_text("access_token: only-this\n")

    assert FileTokenStore(str(path)).load() is None


@pytest.mark.asyncio
async def test_login_starts_and_persists_session():
    def handler(request: httpx.Request):
        assert request.url.path == "/iam/auth/login"
        assert "Authorization" not in request.headers
        return httpx.Response(200, json=auth_body())

    store = MemoryTokenStore()
    async with make_api(handler) as api:
        manager = SessionManager(api, store)
        user = await manager.login("alice@example.com", "SecurePass123!")

        assert user.email == "alice@example.com"
        assert api.session.is_authenticated
        assert api.session.access_token == "access-1"
    assert store.load().refresh_token == "refresh-1"


@pytest.mark.asyncio
async def test_restore_with_nothing_stored():
    def handler(request: httpx.Request):
        raise AssertionError("request should not be sent")

    async with make_api(handler) as api:
        manager = SessionManager(api, MemoryTokenStore())
        assert await manager.restore() is False
        assert not api.session.is_authenticated


@pytest.mark.asyncio
async def test_restore_loads_current_user():
    def handler(request: httpx.Request):
        assert request.headers["Authorization"] == "Bearer stored-access"
        return httpx.Response(200, json=USER)

    store = MemoryTokenStore(TokenPair(access_token="stored-access", refresh_token="r"))
    async with make_api(handler) as api:
        manager = SessionManager(api, store)

        assert await manager.restore() is True
        assert api.session.user.email == "alice@example.com"


@pytest.mark.asyncio
async def test_restore_discards_rejected_tokens():
    def handler(request: httpx.Request):
        return httpx.Response(
            401, json={"error": {"code": "INVALID_TOKEN", "message": "Token expired"}}
        )

    store = MemoryTokenStore(TokenPair(access_token="old", refresh_token="r"))
    async with make_api(handler) as api:
        manager = SessionManager(api, store)

        assert await manager.restore() is False
        assert api.session.tokens is None
    assert store.load() is None


@pytest.mark.asyncio
async def test_restore_keeps_tokens_on_network_error():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    tokens = TokenPair(access_token="stored", refresh_token="r")
    store = MemoryTokenStore(tokens)
    async with make_api(handler) as api:
        manager = SessionManager(api, store)

        with pytest.raises(ApiError):
            await manager.restore()
        assert not api.session.is_authenticated
    assert store.load() == tokens


@pytest.mark.asyncio
async def test_refresh_replaces_tokens():
    def handler(request: httpx.Request):
        if request.url.path == "/iam/auth/refresh":
            return httpx.Response(
                200, json={"access_token": "access-2", "refresh_token": "refresh-2"}
            )
        return httpx.Response(200, json=USER)

    store = MemoryTokenStore()
    async with make_api(handler) as api:
        api.session.tokens = TokenPair(access_token="access-1", refresh_token="refresh-1")
        manager = SessionManager(api, store)

        tokens = await manager.refresh()

        assert tokens.access_token == "access-2"
        assert api.session.access_token == "access-2"
    assert store.load().refresh_token == "refresh-2"


@pytest.mark.asyncio
async def test_logout_clears_everything():
    store = MemoryTokenStore(TokenPair(access_token="a", refresh_token="r"))
    async with make_api(lambda request: httpx.Response(200, json={})) as api:
        api.session.tokens = store.load()
        manager = SessionManager(api, store)

        manager.logout()

        assert api.session.tokens is None
    assert store.load() is None


@pytest.mark.asyncio
async def test_rejected_refresh_token_ends_session():
    def handler(request: httpx.Request):
        return httpx.Response(
            401, json={"error": {"code": "INVALID_TOKEN", "message": "Invalid or expired"}}
        )

    tokens = TokenPair(access_token="access-1", refresh_token="expired")
    store = MemoryTokenStore(tokens)
    async with make_api(handler) as api:
        api.session.tokens = tokens
        manager = SessionManager(api, store)

        with pytest.raises(Unauthenticated):
            await manager.refresh()

        assert api.session.tokens is None
    assert store.load() is None


@pytest.mark.asyncio
async def test_refresh_network_error_keeps_tokens():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    tokens = TokenPair(access_token="access-1", refresh_token="refresh-1")
    store = MemoryTokenStore(tokens)
    async with make_api(handler) as api:
        api.session.tokens = tokens
        manager = SessionManager(api, store)

        with pytest.raises(ApiError):
            await manager.refresh()

        assert api.session.tokens == tokens
    assert store.load() == tokens
