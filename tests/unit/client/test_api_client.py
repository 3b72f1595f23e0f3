import httpx
import pytest

from buildinghub.client.api_client import ApiClient
from buildinghub.client.errors import ApiError, Forbidden, Unauthenticated
from buildinghub.client.models import TokenPair
from buildinghub.client.session import Session


def signed_in_session():
    session = Session()
    session.tokens = TokenPair(access_token="access-1", refresh_token="refresh-1")
    return session


@pytest.mark.asyncio
async def test_sends_bearer_token():
    seen = {}

    def handler(request: httpx.Request):
        seen["authorization"] = request.headers.get("Authorization")
        seen["url"] = str(request.url)
        return httpx.Response(200, json={"ok": True})

    async with ApiClient(
        signed_in_session(), base_url="http://test", transport=httpx.MockTransport(handler)
    ) as api:
        data = await api.get("/iam/me")

    assert data == {"ok": True}
    assert seen["authorization"] == "Bearer access-1"
    assert seen["url"] == "http://test/iam/me"


@pytest.mark.asyncio
async def test_auth_required_without_session():
    def handler(request: httpx.Request):
        raise AssertionError("request should not be sent")

    async with ApiClient(
        Session(), base_url="http://test", transport=httpx.MockTransport(handler)
    ) as api:
        with pytest.raises(Unauthenticated):
            await api.get("/iam/me")


@pytest.mark.asyncio
async def test_unauthenticated_call_has_no_header():
    seen = {}

    def handler(request: httpx.Request):
        seen["authorization"] = request.headers.get("Authorization")
        return httpx.Response(200, json={})

    async with ApiClient(
        Session(), base_url="http://test", transport=httpx.MockTransport(handler)
    ) as api:
        await api.post("/iam/auth/login", json={"email": "a@b.com"}, auth=False)

    assert seen["authorization"] is None


@pytest.mark.asyncio
async def test_error_response_is_raised():
    def handler(request: httpx.Request):
        return httpx.Response(
            403,
            json={"error": {"code": "INSUFFICIENT_ROLE", "message": "Admins only"}},
        )

    async with ApiClient(
        signed_in_session(), base_url="http://test", transport=httpx.MockTransport(handler)
    ) as api:
        with pytest.raises(Forbidden) as exc_info:
            await api.get("/buildings/1/memberships/pending")

    assert exc_info.value.message == "Admins only"


@pytest.mark.asyncio
async def test_network_error():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    async with ApiClient(
        signed_in_session(), base_url="http://test", transport=httpx.MockTransport(handler)
    ) as api:
        with pytest.raises(ApiError) as exc_info:
            await api.get("/health")

    assert exc_info.value.code == "NETWORK_ERROR"


@pytest.mark.asyncio
async def test_empty_body():
    async with ApiClient(
        signed_in_session(),
        base_url="http://test",
        transport=httpx.MockTransport(lambda request: httpx.Response(204)),
    ) as api:
        assert await api.patch("/anything") is None
