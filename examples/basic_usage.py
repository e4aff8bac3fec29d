#!/usr/bin/env python3
# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Basic platform client usage.

Connects with SCOPE3_API_KEY, lists brand agents and campaigns, and calls
one tool by name.

Usage:
    SCOPE3_API_KEY=... python examples/basic_usage.py
"""

import asyncio
import os

from scope3_agentic import PlatformClient, StructuredLogger
from scope3_agentic.resources import extract_items


async def main():
    client = PlatformClient(
        api_key=os.environ["SCOPE3_API_KEY"],
        environment=os.environ.get("SCOPE3_ENVIRONMENT", "production"),
        debug=True,
        logger=StructuredLogger(json_output=False, debug=True),
    )

    async with client:
        brand_agents = extract_items(await client.brand_agents.list())
        print(f"Brand agents: {len(brand_agents)}")

        if brand_agents:
            campaigns = await client.campaigns.list({"brandAgentId": brand_agents[0]["id"]})
            print(f"Campaigns: {campaigns}")

        # Any tool can be called directly by name
        sales_agents = await client.call_tool("agent_list", {"type": "SALES"})
        print(f"Sales agents: {sales_agents}")

        if client.last_debug_info:
            print(f"Last call took {client.last_debug_info.duration_ms:.0f}ms")


if __name__ == "__main__":
    asyncio.run(main())
