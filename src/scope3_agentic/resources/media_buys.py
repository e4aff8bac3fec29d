# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Media buy tools."""

from typing import Any

from .base import Params, Resource


class MediaBuysResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("media_buy_list", params)

    async def get(self, params: Params = None) -> Any:
        return await self._call("media_buy_get", params)

    async def create(self, params: Params = None) -> Any:
        """Create a media buy.

        Args:
            params: tacticId, name, products (allocations) and budget
                {amount, currency}

        Returns:
            The created media buy
        """
        return await self._call("media_buy_create", params)

    async def update(self, params: Params = None) -> Any:
        return await self._call("media_buy_update", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("media_buy_delete", params)

    async def execute(self, params: Params = None) -> Any:
        return await self._call("media_buy_execute", params)

    async def validate_budget(self, params: Params = None) -> Any:
        return await self._call("media_buy_validate_budget", params)
