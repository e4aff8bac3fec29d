# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Creative tools."""

from typing import Any

from .base import Params, Resource


class CreativesResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("creative_list", params)

    async def get(self, params: Params = None) -> Any:
        return await self._call("creative_get", params)

    async def create(self, params: Params = None) -> Any:
        return await self._call("creative_create", params)

    async def update(self, params: Params = None) -> Any:
        return await self._call("creative_update", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("creative_delete", params)

    async def assign(self, params: Params = None) -> Any:
        return await self._call("creative_assign", params)

    async def sync_sales_agents(self, params: Params = None) -> Any:
        return await self._call("creative_sync_sales_agents", params)
