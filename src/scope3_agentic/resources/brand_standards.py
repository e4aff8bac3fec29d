# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Brand safety standards tools."""

from typing import Any

from .base import Params, Resource


class BrandStandardsResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("brand_standards_list", params)

    async def create(self, params: Params = None) -> Any:
        return await self._call("brand_standards_create", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("brand_standards_delete", params)
