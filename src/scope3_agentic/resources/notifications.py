# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Notification tools."""

from typing import Any

from .base import Params, Resource


class NotificationsResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("notifications_list", params)

    async def mark_read(self, params: Params = None) -> Any:
        return await self._call("notifications_mark_read", params)

    async def mark_acknowledged(self, params: Params = None) -> Any:
        return await self._call("notifications_mark_acknowledged", params)

    async def mark_all_read(self, params: Params = None) -> Any:
        return await self._call("notifications_mark_all_read", params)
