# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""MCP (stdio) server exposing the outcome agent tools."""

from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from ..agents.outcome import accept_proposal as accept_assignment
from ..agents.outcome import get_proposals as generate_proposals
from ..config.settings import get_settings
from ..utils.logger import StructuredLogger, get_logger
from ..utils.params import drop_none


def create_outcome_agent_server(
    logger: Optional[StructuredLogger] = None,
    name: str = "outcome-agent",
) -> FastMCP:
    """Register get_proposals and accept_proposal on a FastMCP server."""
    logger = logger or StructuredLogger()
    mcp = FastMCP(name)

    @mcp.tool()
    async def get_proposals(
        campaignId: str,
        seatId: str,
        budgetRange: Optional[dict[str, Any]] = None,
        startDate: Optional[str] = None,
        endDate: Optional[str] = None,
        channels: Optional[list[str]] = None,
        countries: Optional[list[str]] = None,
        brief: Optional[str] = None,
        products: Optional[list[dict[str, Any]]] = None,
        propertyListIds: Optional[list[int]] = None,
    ) -> dict[str, Any]:
        """Get proposals for a campaign from the products offered by sales agents.

        Products are filtered by channel, country and floor price and grouped
        into one revshare proposal per channel.
        """
        request = drop_none(
            {
                "campaignId": campaignId,
                "seatId": seatId,
                "budgetRange": budgetRange,
                "startDate": startDate,
                "endDate": endDate,
                "channels": channels,
                "countries": countries,
                "brief": brief,
                "products": products,
                "propertyListIds": propertyListIds,
            }
        )
        return generate_proposals(request, logger)

    @mcp.tool()
    async def accept_proposal(
        tacticId: str,
        campaignContext: dict[str, Any],
        brandAgentId: str,
        seatId: str,
        proposalId: Optional[str] = None,
        customFields: Optional[dict[str, Any]] = None,
        additional_info: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Accept or decline a proposal assigned to this agent."""
        request = drop_none(
            {
                "tacticId": tacticId,
                "proposalId": proposalId,
                "campaignContext": campaignContext,
                "brandAgentId": brandAgentId,
                "seatId": seatId,
                "customFields": customFields,
                "additional_info": additional_info,
            }
        )
        return accept_assignment(request, logger)

    return mcp


def main() -> None:
    """Entry point for the scope3-outcome-agent command."""
    logger = get_logger(get_settings())
    create_outcome_agent_server(logger).run()


if __name__ == "__main__":
    main()
