# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Webhook subscription tools."""

from typing import Any

from .base import Params, Resource


class WebhooksResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("webhook_list", params)

    async def register(self, params: Params = None) -> Any:
        return await self._call("webhook_register", params)

    async def delete(self, params: Params = None) -> Any:
        return await self._call("webhook_delete", params)
