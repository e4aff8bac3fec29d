# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Simple passthrough media agent.

Proposes a single passthrough tactic per campaign and, once the tactic is
assigned, spreads its budget over the cheapest products offered by the
registered sales agents, issuing one media buy per allocation. Managed
tactics are kept in memory so later events (budget changes, feedback,
daily reporting) can be handed to a reallocation policy.
"""

from typing import Any, Optional, Protocol

from ..errors import InventoryUnavailableError
from ..models.media import ProposedTactic, TacticPricing, TacticState
from ..resources.base import extract_items
from ..utils.logger import StructuredLogger
from .allocation import AllocationEngine, sort_by_floor_price
from .discovery import ProductDiscovery

TACTIC_ID_PREFIX = "simple-passthrough"
TACTIC_SKU = "simple-passthrough"


class ReallocationPolicy(Protocol):
    """Reacts to events on a managed tactic."""

    async def on_budget_changed(self, state: TacticState, patch: list[dict[str, Any]]) -> None:
        ...

    async def on_feedback(
        self,
        state: TacticState,
        delivery_index: Optional[float],
        performance_index: Optional[float],
    ) -> None:
        ...

    async def on_reporting_complete(
        self,
        state: TacticState,
        media_buys: list[dict[str, Any]],
        reporting_data: Any,
    ) -> None:
        ...


class LogOnlyReallocationPolicy:
    """Records events without changing any media buy."""

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._logger = logger or StructuredLogger()

    async def on_budget_changed(self, state: TacticState, patch: list[dict[str, Any]]) -> None:
        self._logger.info(
            "Budget changed, will reallocate on next reporting cycle",
            {"tacticId": state.tactic_id, "patch": patch},
        )

    async def on_feedback(
        self,
        state: TacticState,
        delivery_index: Optional[float],
        performance_index: Optional[float],
    ) -> None:
        self._logger.info(
            "Tactic feedback received",
            {
                "tacticId": state.tactic_id,
                "deliveryIndex": delivery_index,
                "performanceIndex": performance_index,
            },
        )

    async def on_reporting_complete(
        self,
        state: TacticState,
        media_buys: list[dict[str, Any]],
        reporting_data: Any,
    ) -> None:
        for media_buy in media_buys:
            self._logger.info(
                "Media buy performance data",
                {"tacticId": state.tactic_id, "mediaBuyId": media_buy.get("id"), "reportingData": reporting_data},
            )


def _budget_from_context(tactic_context: dict[str, Any]) -> tuple[float, str]:
    """Read (amount, currency) from a tactic context.

    The budget arrives either as a plain number or as {amount, currency}.
    """
    budget = tactic_context.get("budget")
    currency = tactic_context.get("budgetCurrency") or "USD"
    if isinstance(budget, dict):
        return float(budget.get("amount") or 0), budget.get("currency") or currency
    if isinstance(budget, (int, float)):
        return float(budget), currency
    return 0.0, currency


def _is_budget_patch(operation: Any) -> bool:
    return isinstance(operation, dict) and str(operation.get("path", "")).startswith("/budget")


class SimpleMediaAgent:
    """Passthrough media agent backed by a Scope3 platform client."""

    def __init__(
        self,
        client: Any,
        engine: Optional[AllocationEngine] = None,
        logger: Optional[StructuredLogger] = None,
        reallocation_policy: Optional[ReallocationPolicy] = None,
    ):
        """Initialize the agent.

        Args:
            client: PlatformClient used for discovery and media buys
            engine: Allocation engine (defaults: 100 min daily, 40% over)
            logger: Logger shared with discovery and the engine
            reallocation_policy: Handler for tactic events (log-only default)
        """
        self._client = client
        self._logger = logger or StructuredLogger()
        self.engine = engine or AllocationEngine(logger=self._logger)
        self.discovery = ProductDiscovery(client, logger=self._logger)
        self.reallocation_policy = reallocation_policy or LogOnlyReallocationPolicy(self._logger)
        self.active_tactics: dict[str, TacticState] = {}

    async def close(self) -> None:
        """Disconnect the platform client."""
        await self._client.disconnect()

    async def get_proposed_tactics(
        self,
        campaign_id: str,
        budget_range: Optional[dict[str, Any]] = None,
        seat_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Propose the passthrough tactic for a campaign.

        Args:
            campaign_id: Campaign to propose for
            budget_range: Optional {min, max, currency}
            seat_id: Seat of the requesting buyer

        Returns:
            {"proposedTactics": [...]} with a single tactic

        Raises:
            InventoryUnavailableError: No sales agent returned any product
        """
        agents, products = await self.discovery.discover()
        if not products:
            raise InventoryUnavailableError(
                f"No products available from {len(agents)} agents. "
                "Cannot propose tactics without available inventory."
            )

        products = sort_by_floor_price(products)
        avg_floor_price = sum(p.sort_price for p in products) / len(products)
        budget_range = budget_range or {}

        tactic = ProposedTactic(
            tactic_id=f"{TACTIC_ID_PREFIX}-{campaign_id}",
            execution=(
                f"Passthrough strategy: distribute budget across {len(products)} products "
                f"based on floor prices with {self.engine.overallocation_percent:g}% overallocation."
            ),
            budget_capacity=budget_range.get("max") or 0,
            pricing=TacticPricing(
                method="passthrough",
                estimated_cpm=avg_floor_price,
                currency=budget_range.get("currency") or "USD",
            ),
            sku=TACTIC_SKU,
            metadata={"productCount": len(products), "avgFloorPrice": avg_floor_price},
        )
        self._logger.info(
            "Proposed tactic",
            {"campaignId": campaign_id, "seatId": seat_id, "productCount": len(products)},
        )
        return {"proposedTactics": [tactic.model_dump(by_alias=True, exclude_none=True)]}

    async def manage_tactic(
        self,
        tactic_id: str,
        tactic_context: Optional[dict[str, Any]] = None,
        brand_agent_id: Optional[str] = None,
        seat_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Take over a tactic: allocate its budget and create media buys.

        Args:
            tactic_id: Assigned tactic
            tactic_context: Context carrying the budget
            brand_agent_id: Brand agent owning the campaign
            seat_id: Buyer seat

        Returns:
            {"acknowledged": True, "mediaBuysCreated": n}, or
            {"acknowledged": False, "reason": ...} when a media buy fails
        """
        self._logger.info(
            "Managing tactic",
            {"tacticId": tactic_id, "brandAgentId": brand_agent_id, "seatId": seat_id},
        )
        total_budget, currency = _budget_from_context(tactic_context or {})

        _, products = await self.discovery.discover()
        allocations = self.engine.allocate(products, total_budget, currency)

        self.active_tactics[tactic_id] = TacticState(
            tactic_id=tactic_id,
            budget=total_budget,
            currency=currency,
            products=products,
            allocations=allocations,
        )

        for allocation in allocations:
            try:
                await self._client.media_buys.create(
                    {
                        "tacticId": tactic_id,
                        "name": f"Media Buy - {allocation.product_id}",
                        "products": [allocation.to_wire()],
                        "budget": {
                            "amount": allocation.budget_amount,
                            "currency": allocation.currency,
                        },
                    }
                )
            except Exception as e:
                self._logger.error(
                    "Error creating media buy",
                    e,
                    {"tacticId": tactic_id, "productId": allocation.product_id},
                )
                return {
                    "acknowledged": False,
                    "reason": f"Failed to create media buy for product {allocation.product_id}",
                }

        return {"acknowledged": True, "mediaBuysCreated": len(allocations)}

    async def tactic_context_updated(
        self,
        tactic_id: str,
        patch: Optional[list[dict[str, Any]]] = None,
    ) -> dict[str, Any]:
        """Handle a JSON-patch update of a tactic's context."""
        patch = patch or []
        self._logger.info("Tactic context updated", {"tacticId": tactic_id, "patch": patch})

        state = self.active_tactics.get(tactic_id)
        budget_ops = [op for op in patch if _is_budget_patch(op)]
        if state is not None and budget_ops:
            await self.reallocation_policy.on_budget_changed(state, budget_ops)

        return {"acknowledged": True}

    async def tactic_creatives_updated(
        self,
        tactic_id: str,
        patch: Optional[list[dict[str, Any]]] = None,
    ) -> dict[str, Any]:
        self._logger.info("Tactic creatives updated", {"tacticId": tactic_id, "patch": patch or []})
        return {"acknowledged": True}

    async def tactic_feedback(
        self,
        tactic_id: str,
        delivery_index: Optional[float] = None,
        performance_index: Optional[float] = None,
    ) -> dict[str, Any]:
        state = self.active_tactics.get(tactic_id)
        if state is None:
            self._logger.info("Feedback for unmanaged tactic", {"tacticId": tactic_id})
        else:
            await self.reallocation_policy.on_feedback(state, delivery_index, performance_index)
        return {"acknowledged": True}

    async def reporting_complete(
        self,
        tactic_id: str,
        reporting_data: Any = None,
    ) -> dict[str, Any]:
        """Handle the daily reporting-complete notification for a tactic."""
        state = self.active_tactics.get(tactic_id)
        if state is None:
            return {"acknowledged": True, "message": "Tactic not found"}

        payload = await self._client.media_buys.list({"tacticId": tactic_id})
        media_buys = extract_items(payload)
        self._logger.info(
            "Reporting complete",
            {"tacticId": tactic_id, "mediaBuyCount": len(media_buys)},
        )
        await self.reallocation_policy.on_reporting_complete(state, media_buys, reporting_data)
        return {"acknowledged": True, "message": "Reallocation triggered"}
