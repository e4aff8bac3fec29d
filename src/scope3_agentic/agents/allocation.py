# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Budget allocation across discovered products.

The engine spreads an overallocated budget equally over the cheapest
products, taking only as many products as can each sustain the minimum
daily budget over the planning window:

    effective    = total * (1 + overallocation_percent / 100)
    max_products = floor(effective / planning_days / min_daily_budget)
    n            = min(max_products, len(products))

Each of the ``n`` cheapest products (stable order by floor price, missing
floor price counted as 0) receives ``effective / n``.
"""

import math
from typing import Optional, Sequence

from ..models.media import MediaBuyAllocation, Product
from ..utils.logger import StructuredLogger

DEFAULT_MIN_DAILY_BUDGET = 100.0
DEFAULT_OVERALLOCATION_PERCENT = 40.0
DEFAULT_PLANNING_DAYS = 30


def sort_by_floor_price(products: Sequence[Product]) -> list[Product]:
    """Cheapest first; ties keep their input order."""
    return sorted(products, key=lambda product: product.sort_price)


class AllocationEngine:
    """Turns a product set and a total budget into media buy allocations."""

    def __init__(
        self,
        min_daily_budget: float = DEFAULT_MIN_DAILY_BUDGET,
        overallocation_percent: float = DEFAULT_OVERALLOCATION_PERCENT,
        planning_days: int = DEFAULT_PLANNING_DAYS,
        logger: Optional[StructuredLogger] = None,
    ):
        """Initialize the engine.

        Args:
            min_daily_budget: Smallest daily spend a single media buy may get
            overallocation_percent: Extra budget allocated to ensure delivery
            planning_days: Campaign length assumed when sizing daily budgets

        Raises:
            ValueError: min_daily_budget or planning_days is not positive
        """
        if min_daily_budget <= 0:
            raise ValueError("min_daily_budget must be greater than 0")
        if planning_days <= 0:
            raise ValueError("planning_days must be greater than 0")

        self.min_daily_budget = min_daily_budget
        self.overallocation_percent = overallocation_percent
        self.planning_days = planning_days
        self._logger = logger or StructuredLogger()

    def effective_budget(self, total_budget: float) -> float:
        return total_budget * (1 + self.overallocation_percent / 100)

    def max_products(self, total_budget: float) -> int:
        """Number of products the budget can fund at the minimum daily rate."""
        effective = self.effective_budget(total_budget)
        return math.floor(effective / self.planning_days / self.min_daily_budget)

    def allocate(
        self,
        products: Sequence[Product],
        total_budget: float,
        currency: str = "USD",
    ) -> list[MediaBuyAllocation]:
        """Allocate a budget across the cheapest products.

        Args:
            products: Candidate products, in discovery order
            total_budget: Budget to spend over the planning window
            currency: Currency of the budget

        Returns:
            One allocation per selected product, cheapest first. Empty when
            there are no products or the budget cannot fund even one.
        """
        if not products:
            return []

        effective = self.effective_budget(total_budget)
        n = min(self.max_products(total_budget), len(products))
        if n <= 0:
            self._logger.info(
                "Budget too small to fund any product",
                {
                    "totalBudget": total_budget,
                    "minDailyBudget": self.min_daily_budget,
                    "productCount": len(products),
                },
            )
            return []

        per_product = effective / n
        selected = sort_by_floor_price(products)[:n]

        allocations = [
            MediaBuyAllocation(
                product_id=product.id,
                sales_agent_id=product.sales_agent_id,
                budget_amount=per_product,
                currency=currency,
                pricing_cpm=product.floor_price or 0.0,
            )
            for product in selected
        ]

        self._logger.debug(
            "Allocated budget",
            {
                "totalBudget": total_budget,
                "effectiveBudget": effective,
                "selected": n,
                "available": len(products),
                "perProduct": per_product,
            },
        )
        return allocations
