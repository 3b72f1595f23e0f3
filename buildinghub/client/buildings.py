from typing import Dict, List

from buildinghub.client.api_client import ApiClient
from buildinghub.client.errors import Forbidden
from buildinghub.client.models import Building, Unit
from buildinghub.domain.capabilities import can_manage_buildings


class BuildingClient:
    def __init__(self, api: ApiClient):
        self.api = api

    async def list_buildings(self) -> List[Building]:
        data = await self.api.get("/buildings/")
        return [Building(**item) for item in data["buildings"]]

    async def get_building(self, building_id: str) -> Building:
        data = await self.api.get(f"/buildings/{building_id}")
        return Building(**data)

    async def create_building(self, name: str, address: str) -> Building:
        self._check_can_manage()
        data = await self.api.post("/buildings/", json={"name": name, "address": address})
        return Building(**data)

    async def list_units(self, building_id: str) -> List[Unit]:
        data = await self.api.get(f"/buildings/{building_id}/units")
        return [Unit(**item) for item in data["units"]]

    async def create_units(self, building_id: str, units: List[Dict]) -> List[Unit]:
        """
        Args:
            units: [{"unit_number": "101", "floor": 1}, ...]
        """
        self._check_can_manage()
        data = await self.api.post(
            f"/buildings/{building_id}/units", json={"units": units}
        )
        return [Unit(**item) for item in data["units"]]

    def _check_can_manage(self):
        user = self.api.session.user
        if user is not None and not can_manage_buildings(user.role):
            raise Forbidden("INSUFFICIENT_ROLE", "Only building admins can manage buildings")
