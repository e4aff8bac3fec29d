# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Customer account tools."""

from typing import Any

from .base import Params, Resource


class CustomersResource(Resource):
    async def get(self, params: Params = None) -> Any:
        return await self._call("customer_get", params)

    async def get_seats(self, params: Params = None) -> Any:
        return await self._call("customer_get_seats", params)
