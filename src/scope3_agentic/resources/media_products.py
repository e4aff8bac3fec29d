# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Media product discovery and catalogue tools."""

from typing import Any

from .base import Params, Resource


class MediaProductsResource(Resource):
    async def discover(self, params: Params = None) -> Any:
        """Discover products offered by one sales agent ({"salesAgentId": ...})."""
        return await self._call("media_product_discover", params)

    async def list(self, params: Params = None) -> Any:
        return await self._call("media_product_list", params)

    async def save(self, params: Params = None) -> Any:
        return await self._call("media_product_save", params)

    async def sync(self, params: Params = None) -> Any:
        return await self._call("media_product_sync", params)
