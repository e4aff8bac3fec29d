# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Media agent models: discovered products, allocations and tactics."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A purchasable media product offered by one sales agent."""

    id: str
    sales_agent_id: str = Field(..., alias="salesAgentId")
    floor_price: Optional[float] = Field(default=None, alias="floorPrice")
    recommended_price: Optional[float] = Field(default=None, alias="recommendedPrice")
    name: Optional[str] = None
    channels: list[str] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @property
    def sort_price(self) -> float:
        """Floor price used for ordering (missing counts as 0)."""
        return self.floor_price or 0.0


class MediaBuyAllocation(BaseModel):
    """Budget assigned to one product, issued as one media buy."""

    product_id: str = Field(..., alias="mediaProductId")
    sales_agent_id: str = Field(..., alias="salesAgentId")
    budget_amount: float = Field(..., alias="budgetAmount", ge=0)
    currency: str = Field(default="USD", alias="budgetCurrency")
    pricing_cpm: float = Field(default=0.0, alias="pricingCpm", ge=0)

    model_config = {"populate_by_name": True}

    def to_wire(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) field names."""
        return self.model_dump(by_alias=True)


class TacticPricing(BaseModel):
    """Pricing of a proposed tactic."""

    method: str = "passthrough"
    estimated_cpm: float = Field(default=0.0, alias="estimatedCpm")
    currency: str = "USD"

    model_config = {"populate_by_name": True}


class ProposedTactic(BaseModel):
    """Tactic offered back to the platform for a campaign."""

    tactic_id: str = Field(..., alias="tacticId")
    execution: str
    budget_capacity: float = Field(default=0.0, alias="budgetCapacity")
    pricing: TacticPricing
    sku: str
    metadata: Optional[dict[str, Any]] = None

    model_config = {"populate_by_name": True}


class TacticState(BaseModel):
    """In-memory record of a managed tactic, kept for reallocation."""

    tactic_id: str
    budget: float = 0.0
    currency: str = "USD"
    products: list[Product] = Field(default_factory=list)
    allocations: list[MediaBuyAllocation] = Field(default_factory=list)
