# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Brand story (audience definition) tools."""

from typing import Any

from .base import Params, Resource


class BrandStoriesResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("brand_story_list", params)

    async def create(self, params: Params = None) -> Any:
        return await self._call("brand_story_create", params)

    async def update(self, params: Params = None) -> Any:
        return await self._call("brand_story_update", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("brand_story_delete", params)
