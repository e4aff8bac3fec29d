# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Data models for media agents, outcome agents and webhooks."""

from .media import (
    MediaBuyAllocation,
    Product,
    ProposedTactic,
    TacticPricing,
    TacticState,
)
from .outcome import (
    AcceptProposalRequest,
    AcceptProposalResponse,
    BudgetRange,
    CampaignContext,
    Channel,
    GetProposalsRequest,
    GetProposalsResponse,
    OutcomeProduct,
    ProductTargeting,
    Proposal,
    ProposalPricing,
)
from .webhook import WebhookEvent

__all__ = [
    "AcceptProposalRequest",
    "AcceptProposalResponse",
    "BudgetRange",
    "CampaignContext",
    "Channel",
    "GetProposalsRequest",
    "GetProposalsResponse",
    "MediaBuyAllocation",
    "OutcomeProduct",
    "Product",
    "ProductTargeting",
    "Proposal",
    "ProposalPricing",
    "ProposedTactic",
    "TacticPricing",
    "TacticState",
    "WebhookEvent",
]
