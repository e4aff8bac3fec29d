# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Outcome agent protocol models (get-proposals / accept-proposal)."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class Channel(str, Enum):
    """Channels a campaign or product can target."""

    DISPLAY = "display"
    VIDEO = "video"
    NATIVE = "native"
    AUDIO = "audio"
    CONNECTED_TV = "connected_tv"


class BudgetRange(BaseModel):
    """Campaign budget range."""

    min: Optional[float] = None
    max: Optional[float] = None
    currency: Optional[str] = None  # ISO 4217, USD when absent


class ProductTargeting(BaseModel):
    """Targeting declared by a sales agent product."""

    channels: list[str] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class OutcomeProduct(BaseModel):
    """Product passed in by the platform, as reported by its sales agent."""

    sales_agent_url: Optional[str] = None
    product_ref: Optional[str] = None
    pricing_option_id: Optional[str] = None
    floor_price: Optional[float] = None
    floor_price_currency: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    targeting: ProductTargeting = Field(default_factory=ProductTargeting)

    model_config = {"extra": "allow"}

    @property
    def declared_channels(self) -> list[str]:
        return self.targeting.channels

    @property
    def declared_countries(self) -> list[str]:
        return self.targeting.countries


class GetProposalsRequest(BaseModel):
    """Request for proposals on a newly created campaign."""

    campaign_id: str = Field(..., alias="campaignId")
    seat_id: Optional[str] = Field(default=None, alias="seatId")
    budget_range: Optional[BudgetRange] = Field(default=None, alias="budgetRange")
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    channels: list[Channel] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
    brief: Optional[str] = None
    products: list[OutcomeProduct] = Field(default_factory=list)
    property_list_ids: list[int] = Field(default_factory=list, alias="propertyListIds")

    model_config = {"populate_by_name": True}


class ProposalPricing(BaseModel):
    """Pricing the outcome agent charges for a proposal."""

    method: str = "revshare"  # revshare or cost_per_unit
    rate: float
    unit: Optional[str] = None  # cpm, cpc, cpa, cpv, cpcv
    currency: str = "USD"


class Proposal(BaseModel):
    """One proposal returned from get-proposals."""

    proposal_id: str = Field(..., alias="proposalId")
    execution: str
    budget_capacity: float = Field(..., alias="budgetCapacity")
    pricing: ProposalPricing
    sku: str
    custom_fields_required: Optional[list[dict[str, Any]]] = Field(
        default=None, alias="customFieldsRequired"
    )
    additional_info: Optional[dict[str, Any]] = None

    model_config = {"populate_by_name": True}


class GetProposalsResponse(BaseModel):
    proposals: list[Proposal] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CampaignContext(BaseModel):
    """Campaign details sent along with an accepted proposal."""

    budget: float = 0.0
    budget_currency: Optional[str] = Field(default=None, alias="budgetCurrency")
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    channel: Optional[str] = None
    countries: list[str] = Field(default_factory=list)
    creatives: list[dict[str, Any]] = Field(default_factory=list)
    brand_standards: list[dict[str, Any]] = Field(default_factory=list, alias="brandStandards")

    model_config = {"populate_by_name": True, "extra": "allow"}


class AcceptProposalRequest(BaseModel):
    """Assignment of a tactic to this outcome agent."""

    tactic_id: Optional[str] = Field(default=None, alias="tacticId")
    proposal_id: Optional[str] = Field(default=None, alias="proposalId")
    campaign_context: Optional[CampaignContext] = Field(default=None, alias="campaignContext")
    brand_agent_id: Optional[str] = Field(default=None, alias="brandAgentId")
    seat_id: Optional[str] = Field(default=None, alias="seatId")
    custom_fields: Optional[dict[str, Any]] = Field(default=None, alias="customFields")
    additional_info: Optional[dict[str, Any]] = None

    model_config = {"populate_by_name": True}


class AcceptProposalResponse(BaseModel):
    acknowledged: bool
    reason: Optional[str] = None  # set when acknowledged is False

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
