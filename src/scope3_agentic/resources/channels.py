# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Reference data tools: channels, countries and languages."""

from typing import Any

from .base import Params, Resource


class ChannelsResource(Resource):
    async def list(self, params: Params = None) -> Any:
        return await self._call("channel_list", params)

    async def list_countries(self, params: Params = None) -> Any:
        return await self._call("country_list", params)

    async def list_languages(self, params: Params = None) -> Any:
        return await self._call("language_list", params)
