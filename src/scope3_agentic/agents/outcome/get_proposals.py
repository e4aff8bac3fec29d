# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Proposal generation for the outcome agent.

Products supplied with the request are filtered against the campaign
(channels, countries, floor price) and grouped by channel. Each channel
group becomes one revshare proposal.
"""

import re
import secrets
import time
from typing import Any, Optional, Union

from ...models.outcome import (
    GetProposalsRequest,
    GetProposalsResponse,
    OutcomeProduct,
    Proposal,
    ProposalPricing,
)
from ...utils.logger import StructuredLogger

REVSHARE_RATE = 0.15
MAX_FLOOR_PRICE_SHARE = 0.1
CAPACITY_FLOOR_MULTIPLIER = 100
UNKNOWN_CHANNEL = "unknown"


def _matches(requested: list[str], declared: list[str]) -> bool:
    """A product passes unless it declares values and none were requested."""
    if not requested or not declared:
        return True
    return any(value in declared for value in requested)


def is_eligible(product: OutcomeProduct, request: GetProposalsRequest) -> bool:
    """Check a product against the campaign's channels, countries and budget."""
    channels = [channel.value for channel in request.channels]
    if not _matches(channels, product.declared_channels):
        return False
    if not _matches(request.countries, product.declared_countries):
        return False

    budget_max = request.budget_range.max if request.budget_range else None
    if budget_max and product.floor_price:
        if product.floor_price > budget_max * MAX_FLOOR_PRICE_SHARE:
            return False
    return True


def group_by_channel(products: list[OutcomeProduct]) -> dict[str, list[OutcomeProduct]]:
    """Group products by declared channel, in first-seen order.

    A product declaring several channels appears in each group; one declaring
    none goes to the "unknown" group.
    """
    grouped: dict[str, list[OutcomeProduct]] = {}
    for product in products:
        for channel in product.declared_channels or [UNKNOWN_CHANNEL]:
            grouped.setdefault(channel, []).append(product)
    return grouped


def budget_capacity(products: list[OutcomeProduct], request: GetProposalsRequest) -> float:
    """Budget max when given, else 100x the summed floor prices."""
    if request.budget_range and request.budget_range.max:
        return request.budget_range.max
    return sum(p.floor_price or 0 for p in products) * CAPACITY_FLOOR_MULTIPLIER


def channel_slug(channel: str) -> str:
    return re.sub(r"[^a-z0-9]", "-", channel.lower())


def generate_proposal_id(campaign_id: str, channel: str) -> str:
    timestamp_ms = int(time.time() * 1000)
    return f"prop-{campaign_id}-{channel}-{timestamp_ms}-{secrets.token_hex(3)}"


def build_proposal(
    channel: str,
    products: list[OutcomeProduct],
    capacity: float,
    request: GetProposalsRequest,
) -> Proposal:
    currency = (request.budget_range.currency if request.budget_range else None) or "USD"
    return Proposal(
        proposal_id=generate_proposal_id(request.campaign_id, channel),
        execution=(
            f"Optimized {channel} campaign across {len(products)} products. "
            "Budget allocation strategy: maximize reach while maintaining quality thresholds."
        ),
        budget_capacity=capacity,
        pricing=ProposalPricing(method="revshare", rate=REVSHARE_RATE, currency=currency),
        sku=f"outcome-agent-{channel_slug(channel)}",
        additional_info={
            "channel": channel,
            "productCount": len(products),
            "products": [
                {
                    "product_ref": p.product_ref,
                    "sales_agent_url": p.sales_agent_url,
                    "pricing_option_id": p.pricing_option_id,
                }
                for p in products
            ],
        },
    )


def get_proposals(
    request: Union[GetProposalsRequest, dict[str, Any]],
    logger: Optional[StructuredLogger] = None,
) -> dict[str, Any]:
    """Generate proposals for a campaign.

    Args:
        request: GetProposalsRequest or its wire-format dict
        logger: Logger for request and outcome summaries

    Returns:
        {"proposals": [...]} in wire format; empty when no product is
        supplied or none is eligible
    """
    logger = logger or StructuredLogger()
    if not isinstance(request, GetProposalsRequest):
        request = GetProposalsRequest.model_validate(request)

    logger.info(
        "Received get-proposals request",
        {
            "campaignId": request.campaign_id,
            "seatId": request.seat_id,
            "channels": [c.value for c in request.channels],
            "countries": request.countries,
            "productsCount": len(request.products),
        },
    )

    if not request.products:
        logger.info("No products provided, returning empty proposals")
        return GetProposalsResponse().to_wire()

    eligible = [p for p in request.products if is_eligible(p, request)]
    if not eligible:
        logger.info("No eligible products found after filtering")
        return GetProposalsResponse().to_wire()

    proposals = []
    for channel, channel_products in group_by_channel(eligible).items():
        capacity = budget_capacity(channel_products, request)
        if capacity <= 0:
            continue
        proposals.append(build_proposal(channel, channel_products, capacity, request))

    logger.info("Generated proposals", {"campaignId": request.campaign_id, "count": len(proposals)})
    return GetProposalsResponse(proposals=proposals).to_wire()
