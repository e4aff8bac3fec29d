# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Outcome agent tools exposed by the platform."""

from typing import Any

from .base import Params, Resource


class OutcomesResource(Resource):
    async def get_proposals(self, params: Params = None) -> Any:
        return await self._call("outcomes_agent_get_proposals", params)

    async def accept_proposal(self, params: Params = None) -> Any:
        return await self._call("outcomes_agent_accept_proposal", params)

    async def list_tactics(self, params: Params = None) -> Any:
        return await self._call("outcomes_agent_list_tactics", params)
