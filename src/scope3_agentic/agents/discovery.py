# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Product discovery across all registered sales agents."""

import asyncio
from typing import Any, Optional

from ..models.media import Product
from ..resources.base import find_items
from ..utils.logger import StructuredLogger


class ProductDiscovery:
    """Collects products from every SALES agent known to the platform.

    Agents are queried concurrently. An agent whose discovery call fails, or
    whose answer is not a product list, is logged and skipped; the others
    still contribute. Results keep agent order.
    """

    def __init__(self, client: Any, logger: Optional[StructuredLogger] = None):
        """Initialize discovery.

        Args:
            client: PlatformClient (or any client with agents and
                media_products resources)
            logger: Logger for skipped agents
        """
        self._client = client
        self._logger = logger or StructuredLogger()

    async def list_sales_agents(self) -> list[dict[str, Any]]:
        """Fetch registered sales agents.

        Raises:
            TypeError: The agent list payload is not a list
        """
        payload = await self._client.agents.list({"type": "SALES"})
        agents = find_items(payload)
        if agents is None:
            raise TypeError("Expected agents to be a list")
        return agents

    async def _discover_for_agent(self, agent: dict[str, Any]) -> list[Product]:
        agent_id = agent.get("id")
        payload = await self._client.media_products.discover({"salesAgentId": agent_id})
        raw_products = find_items(payload)
        if raw_products is None:
            self._logger.warn("Discovery returned no product list", {"salesAgentId": agent_id})
            return []

        return [
            Product(
                id=str(raw["id"]),
                sales_agent_id=str(agent_id),
                floor_price=raw.get("floorPrice"),
                recommended_price=raw.get("recommendedPrice"),
                name=raw.get("name"),
                channels=raw.get("channels") or [],
                countries=raw.get("countries") or [],
            )
            for raw in raw_products
            if isinstance(raw, dict) and raw.get("id")
        ]

    async def discover(self) -> tuple[list[dict[str, Any]], list[Product]]:
        """Discover products from all sales agents.

        Returns:
            The sales agents queried and the combined product list
        """
        agents = await self.list_sales_agents()
        results = await asyncio.gather(
            *(self._discover_for_agent(agent) for agent in agents),
            return_exceptions=True,
        )

        products: list[Product] = []
        for agent, result in zip(agents, results):
            if isinstance(result, BaseException):
                self._logger.error(
                    "Error fetching products from agent",
                    result,
                    {"salesAgentId": agent.get("id")},
                )
                continue
            products.extend(result)

        self._logger.debug(
            "Product discovery complete",
            {"agentCount": len(agents), "productCount": len(products)},
        )
        return agents, products

