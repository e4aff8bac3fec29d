# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Campaign tools."""

from typing import Any

from .base import Params, Resource


class CampaignsResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("campaign_list", params)

    async def get(self, params: Params = None) -> Any:
        return await self._call("campaign_get", params)

    async def create(self, params: Params = None) -> Any:
        return await self._call("campaign_create", params)

    async def update(self, params: Params = None) -> Any:
        return await self._call("campaign_update", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("campaign_delete", params)

    async def get_summary(self, params: Params = None) -> Any:
        return await self._call("campaign_get_summary", params)

    async def list_tactics(self, params: Params = None) -> Any:
        return await self._call("campaign_list_tactics", params)

    async def validate_brief(self, params: Params = None) -> Any:
        return await self._call("campaign_validate_brief", params)
