# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Sales and outcome agent registry tools."""

from typing import Any

from .base import Params, Resource


class AgentsResource(Resource):
    async def list(self, params: Params = None) -> Any:
        """List registered agents.

        Args:
            params: Filters, e.g. {"type": "SALES"} for selling agents

        Returns:
            Payload with the agents under "items" or "data"
        """
        return await self._call("agent_list", params)

    async def get(self, params: Params = None) -> Any:
        return await self._call("agent_get", params)

    async def register(self, params: Params = None) -> Any:
        return await self._call("agent_register", params)

    async def update(self, params: Params = None) -> Any:
        return await self._call("agent_update", params)

    async def unregister(self, params: Params = None) -> Any:
        return await self._call("agent_unregister", params)
