#!/usr/bin/env python3
# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Run the simple media agent against the platform.

Discovers products across all sales agents, proposes a passthrough tactic
and, given a tactic id, allocates the budget into media buys.

Usage:
    SCOPE3_API_KEY=... python examples/simple_media_agent.py <campaign_id> [tactic_id]
"""

import asyncio
import sys
from typing import Optional

from scope3_agentic.agents import AllocationEngine, SimpleMediaAgent
from scope3_agentic.clients import PlatformClient
from scope3_agentic.config import get_settings
from scope3_agentic.utils.logger import get_logger


async def main(campaign_id: str, tactic_id: Optional[str] = None):
    settings = get_settings()
    logger = get_logger(settings)

    async with PlatformClient.from_config(settings.client_config(), logger=logger) as client:
        agent = SimpleMediaAgent(
            client,
            engine=AllocationEngine(
                min_daily_budget=settings.min_daily_budget,
                overallocation_percent=settings.overallocation_percent,
                logger=logger,
            ),
            logger=logger,
        )

        proposals = await agent.get_proposed_tactics(
            campaign_id, {"min": 1000, "max": 10000, "currency": "USD"}
        )
        for tactic in proposals["proposedTactics"]:
            print(f"{tactic['tacticId']}: {tactic['execution']}")

        if tactic_id:
            result = await agent.manage_tactic(
                tactic_id, {"budget": {"amount": 5000, "currency": "USD"}}
            )
            print(f"Manage tactic: {result}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None))
