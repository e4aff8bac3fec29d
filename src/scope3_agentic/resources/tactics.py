# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Tactic tools."""

from typing import Any

from .base import Params, Resource


class TacticsResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("tactic_list", params)

    async def get(self, params: Params = None) -> Any:
        return await self._call("tactic_get", params)

    async def create(self, params: Params = None) -> Any:
        return await self._call("tactic_create", params)

    async def update(self, params: Params = None) -> Any:
        return await self._call("tactic_update", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("tactic_delete", params)

    async def link_campaign(self, params: Params = None) -> Any:
        return await self._call("tactic_link_campaign", params)

    async def unlink_campaign(self, params: Params = None) -> Any:
        return await self._call("tactic_unlink_campaign", params)
