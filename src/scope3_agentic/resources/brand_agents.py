# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Brand agent (advertiser account) tools."""

from typing import Any

from .base import Params, Resource


class BrandAgentsResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("brand_agent_list", params)

    async def get(self, params: Params = None) -> Any:
        return await self._call("brand_agent_get", params)

    async def create(self, params: Params = None) -> Any:
        return await self._call("brand_agent_create", params)

    async def update(self, params: Params = None) -> Any:
        return await self._call("brand_agent_update", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("brand_agent_delete", params)
