# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""MCP (stdio) server exposing the simple media agent as tools.

Tool parameters use the platform's wire (camelCase) names.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP

from ..agents.simple_media_agent import SimpleMediaAgent
from ..config.settings import get_settings
from ..utils.logger import get_logger
from .media_agent_http import build_agent


def create_simple_media_agent_server(
    agent: SimpleMediaAgent,
    name: str = "simple-media-agent",
) -> FastMCP:
    """Register the media agent operations on a FastMCP server.

    The agent's platform client is disconnected when the server stops.
    """

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await agent.close()

    mcp = FastMCP(name, lifespan=lifespan)

    @mcp.tool()
    async def get_proposed_tactics(
        campaignId: str,
        seatId: Optional[str] = None,
        budgetRange: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Get tactic proposals for a campaign being set up."""
        return await agent.get_proposed_tactics(campaignId, budgetRange, seatId)

    @mcp.tool()
    async def manage_tactic(
        tacticId: str,
        tacticContext: dict[str, Any],
        brandAgentId: Optional[str] = None,
        seatId: Optional[str] = None,
    ) -> dict[str, Any]:
        """Accept or decline a tactic assignment and create its media buys."""
        return await agent.manage_tactic(tacticId, tacticContext, brandAgentId, seatId)

    @mcp.tool()
    async def tactic_context_updated(
        tacticId: str,
        patch: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Notification of tactic changes (JSON Patch), including budget changes."""
        return await agent.tactic_context_updated(tacticId, patch)

    @mcp.tool()
    async def tactic_creatives_updated(
        tacticId: str,
        patch: Optional[list[dict[str, Any]]] = None,
    ) -> dict[str, Any]:
        """Notification of creative changes on a tactic."""
        return await agent.tactic_creatives_updated(tacticId, patch)

    @mcp.tool()
    async def tactic_feedback(
        tacticId: str,
        deliveryIndex: Optional[float] = None,
        performanceIndex: Optional[float] = None,
    ) -> dict[str, Any]:
        """Delivery and performance feedback for a tactic."""
        return await agent.tactic_feedback(tacticId, deliveryIndex, performanceIndex)

    return mcp


def main() -> None:
    """Entry point for the scope3-simple-media-agent-mcp command."""
    settings = get_settings()
    logger = get_logger(settings)
    create_simple_media_agent_server(build_agent(settings, logger)).run()


if __name__ == "__main__":
    main()
