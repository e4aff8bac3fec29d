# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""FastAPI server exposing the simple media agent over HTTP."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..agents.allocation import AllocationEngine
from ..agents.simple_media_agent import SimpleMediaAgent
from ..clients.platform import PlatformClient
from ..clients.reconciler import get_policy
from ..config.settings import Settings, get_settings
from ..models.outcome import BudgetRange
from ..utils.logger import StructuredLogger, get_logger


class ProposedTacticsRequest(BaseModel):
    campaign_id: str = Field(..., alias="campaignId")
    budget_range: Optional[BudgetRange] = Field(default=None, alias="budgetRange")
    seat_id: Optional[str] = Field(default=None, alias="seatId")

    model_config = {"populate_by_name": True, "extra": "allow"}


class ManageTacticRequest(BaseModel):
    tactic_id: str = Field(..., alias="tacticId")
    tactic_context: dict[str, Any] = Field(default_factory=dict, alias="tacticContext")
    brand_agent_id: Optional[str] = Field(default=None, alias="brandAgentId")
    seat_id: Optional[str] = Field(default=None, alias="seatId")

    model_config = {"populate_by_name": True, "extra": "allow"}


class TacticPatchRequest(BaseModel):
    tactic_id: str = Field(..., alias="tacticId")
    patch: list[dict[str, Any]] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "extra": "allow"}


class TacticFeedbackRequest(BaseModel):
    tactic_id: str = Field(..., alias="tacticId")
    delivery_index: Optional[float] = Field(default=None, alias="deliveryIndex")
    performance_index: Optional[float] = Field(default=None, alias="performanceIndex")

    model_config = {"populate_by_name": True, "extra": "allow"}


class ReportingCompleteRequest(BaseModel):
    tactic_id: str = Field(..., alias="tacticId")
    reporting_data: Any = Field(default=None, alias="reportingData")

    model_config = {"populate_by_name": True, "extra": "allow"}


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


def create_app(agent: SimpleMediaAgent, logger: Optional[StructuredLogger] = None) -> FastAPI:
    """Build the HTTP app around a media agent.

    The agent's platform client is disconnected on application shutdown.

    Args:
        agent: The media agent handling requests
        logger: Logger for request failures

    Returns:
        FastAPI application
    """
    logger = logger or StructuredLogger()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await agent.close()

    app = FastAPI(
        title="Simple Media Agent",
        description="Passthrough media agent for the Scope3 agentic platform",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/get-proposed-tactics")
    async def get_proposed_tactics(request: ProposedTacticsRequest) -> Any:
        try:
            budget_range = request.budget_range.model_dump(exclude_none=True) if request.budget_range else None
            return await agent.get_proposed_tactics(request.campaign_id, budget_range, request.seat_id)
        except Exception as e:
            logger.error("Error in get-proposed-tactics", e)
            return _error("Failed to generate tactic proposals")

    @app.post("/manage-tactic")
    async def manage_tactic(request: ManageTacticRequest) -> Any:
        try:
            return await agent.manage_tactic(
                request.tactic_id,
                request.tactic_context,
                brand_agent_id=request.brand_agent_id,
                seat_id=request.seat_id,
            )
        except Exception as e:
            logger.error("Error in manage-tactic", e)
            return _error("Failed to manage tactic")

    @app.post("/tactic-context-updated")
    async def tactic_context_updated(request: TacticPatchRequest) -> Any:
        return await agent.tactic_context_updated(request.tactic_id, request.patch)

    @app.post("/tactic-creatives-updated")
    async def tactic_creatives_updated(request: TacticPatchRequest) -> Any:
        return await agent.tactic_creatives_updated(request.tactic_id, request.patch)

    @app.post("/tactic-feedback")
    async def tactic_feedback(request: TacticFeedbackRequest) -> Any:
        return await agent.tactic_feedback(
            request.tactic_id, request.delivery_index, request.performance_index
        )

    @app.post("/webhook/reporting-complete")
    async def reporting_complete(request: ReportingCompleteRequest) -> Any:
        try:
            return await agent.reporting_complete(request.tactic_id, request.reporting_data)
        except Exception as e:
            logger.error("Error in reporting-complete", e)
            return _error("Failed to process reporting data")

    return app


def build_agent(settings: Settings, logger: StructuredLogger) -> SimpleMediaAgent:
    """Create a SimpleMediaAgent from settings."""
    client = PlatformClient.from_config(
        settings.client_config(),
        logger=logger,
        policy=get_policy(settings.response_policy),
    )
    engine = AllocationEngine(
        min_daily_budget=settings.min_daily_budget,
        overallocation_percent=settings.overallocation_percent,
        logger=logger,
    )
    return SimpleMediaAgent(client, engine=engine, logger=logger)


def run_server(host: str = "0.0.0.0", port: Optional[int] = None) -> None:
    """Run the media agent HTTP server."""
    settings = get_settings()
    logger = get_logger(settings)
    app = create_app(build_agent(settings, logger), logger)
    uvicorn.run(app, host=host, port=port or settings.port)


def main() -> None:
    """Entry point for the scope3-media-agent command."""
    run_server()


if __name__ == "__main__":
    main()
