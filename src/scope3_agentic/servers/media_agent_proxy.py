# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""MCP server forwarding tactic tools to a media agent's HTTP API."""

import json
from typing import Any, Optional

import httpx
from mcp.server.fastmcp import FastMCP

from ..config.settings import get_settings
from ..utils.params import drop_none


class MediaAgentMCP:
    """Exposes an HTTP media agent as MCP tools.

    Example:
        proxy = MediaAgentMCP("http://localhost:8080", api_key="secret")
        proxy.run()
    """

    def __init__(
        self,
        media_agent_url: str,
        api_key: Optional[str] = None,
        name: str = "media-agent-mcp",
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the proxy.

        Args:
            media_agent_url: Base URL of the media agent HTTP server
            api_key: Optional key sent as X-API-Key
            name: MCP server name
            timeout: Request timeout in seconds
            http_client: Client to use instead of creating one
        """
        self.media_agent_url = media_agent_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(
            base_url=self.media_agent_url,
            headers=self._build_headers(api_key),
            timeout=timeout,
        )
        self.server = FastMCP(name)
        self._register_tools()

    def _build_headers(self, api_key: Optional[str]) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["X-API-Key"] = api_key
        return headers

    async def call_media_agent(self, endpoint: str, body: dict[str, Any]) -> Any:
        """POST a JSON body to a media agent endpoint.

        Raises:
            httpx.HTTPStatusError: The media agent answered with an error status
        """
        response = await self._client.post(endpoint, json=body)
        response.raise_for_status()
        return response.json()

    def _register_tools(self) -> None:
        mcp = self.server

        @mcp.tool()
        async def get_proposed_tactics(
            campaignId: str,
            seatId: str,
            budgetRange: Optional[dict[str, Any]] = None,
            startDate: Optional[str] = None,
            endDate: Optional[str] = None,
            channels: Optional[list[str]] = None,
            countries: Optional[list[str]] = None,
            objectives: Optional[list[str]] = None,
            brief: Optional[str] = None,
            acceptedPricingMethods: Optional[list[str]] = None,
        ) -> str:
            """Get tactic proposals from the media agent for a campaign being set up."""
            body = drop_none(
                {
                    "campaignId": campaignId,
                    "seatId": seatId,
                    "budgetRange": budgetRange,
                    "startDate": startDate,
                    "endDate": endDate,
                    "channels": channels,
                    "countries": countries,
                    "objectives": objectives,
                    "brief": brief,
                    "acceptedPricingMethods": acceptedPricingMethods,
                }
            )
            response = await self.call_media_agent("/get-proposed-tactics", body)
            return json.dumps(response, indent=2)

        @mcp.tool()
        async def manage_tactic(
            tacticId: str,
            tacticContext: dict[str, Any],
            brandAgentId: str,
            seatId: str,
            customFields: Optional[dict[str, Any]] = None,
        ) -> str:
            """Accept or decline a tactic assignment."""
            body = drop_none(
                {
                    "tacticId": tacticId,
                    "tacticContext": tacticContext,
                    "brandAgentId": brandAgentId,
                    "seatId": seatId,
                    "customFields": customFields,
                }
            )
            response = await self.call_media_agent("/manage-tactic", body)
            return json.dumps(response, indent=2)

        @mcp.tool()
        async def tactic_context_updated(
            tacticId: str,
            patch: list[dict[str, Any]],
            tactic: Optional[dict[str, Any]] = None,
        ) -> str:
            """Notification of tactic changes that may impact targeting or budget."""
            body = drop_none({"tacticId": tacticId, "tactic": tactic, "patch": patch})
            await self.call_media_agent("/tactic-context-updated", body)
            return "Tactic context update sent successfully"

        @mcp.tool()
        async def tactic_creatives_updated(
            tacticId: str,
            patch: list[dict[str, Any]],
            creatives: Optional[list[Any]] = None,
        ) -> str:
            """Notification of creative changes on a tactic."""
            body = drop_none({"tacticId": tacticId, "creatives": creatives, "patch": patch})
            await self.call_media_agent("/tactic-creatives-updated", body)
            return "Tactic creatives update sent successfully"

        @mcp.tool()
        async def tactic_feedback(
            tacticId: str,
            deliveryIndex: Optional[float] = None,
            performanceIndex: Optional[float] = None,
        ) -> str:
            """Send delivery and performance feedback for a tactic."""
            body = drop_none(
                {
                    "tacticId": tacticId,
                    "deliveryIndex": deliveryIndex,
                    "performanceIndex": performanceIndex,
                }
            )
            await self.call_media_agent("/tactic-feedback", body)
            return "Tactic feedback sent successfully"

    async def aclose(self) -> None:
        await self._client.aclose()

    def run(self) -> None:
        """Serve the tools over stdio."""
        self.server.run()


def main() -> None:
    """Entry point for the scope3-media-agent-mcp command."""
    settings = get_settings()
    MediaAgentMCP(settings.media_agent_url, api_key=settings.media_agent_api_key).run()


if __name__ == "__main__":
    main()
