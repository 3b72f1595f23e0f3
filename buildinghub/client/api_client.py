import logging
from typing import Any, Optional

import httpx

from config import ApplicationConfig
from buildinghub.client.errors import ApiError, Unauthenticated, error_from_response
from buildinghub.client.session import Session

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin httpx wrapper: adds the bearer token of the given session and turns
    error responses into client exceptions. Never retries.
    """

    def __init__(
        self,
        session: Session,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self._http = httpx.AsyncClient(
            base_url=base_url or ApplicationConfig.API_BASE_URL,
            timeout=timeout or ApplicationConfig.HTTP_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        await self._http.aclose()

    async def request(
        self, method: str, path: str, *, json: Any = None, auth: bool = True
    ) -> Any:
        headers = {}
        if auth:
            token = self.session.access_token
            if token is None:
                raise Unauthenticated("UNAUTHENTICATED", "Not signed in")
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(f"{method} {path} failed: {exc}")
            raise ApiError("NETWORK_ERROR", str(exc)) from exc

        if response.is_error:
            error = error_from_response(response)
            logger.warning(f"{method} {path} -> {response.status_code} {error.code}")
            raise error

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get(self, path: str, **kwargs) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> Any:
        return await self.request("POST", path, **kwargs)

    async def patch(self, path: str, **kwargs) -> Any:
        return await self.request("PATCH", path, **kwargs)
