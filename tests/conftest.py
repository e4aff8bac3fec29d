# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Pytest configuration and fixtures."""

import io
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from mcp.types import CallToolResult, TextContent

from scope3_agentic.utils.logger import StructuredLogger


def make_result(
    structured: Optional[dict[str, Any]] = None,
    text: Optional[str] = None,
    is_error: bool = False,
) -> CallToolResult:
    """Build a real CallToolResult with optional structured and text parts."""
    content = [TextContent(type="text", text=text)] if text is not None else []
    return CallToolResult(content=content, structuredContent=structured, isError=is_error)


@pytest.fixture
def call_result():
    """Factory for CallToolResult objects."""
    return make_result


@pytest.fixture
def log_stream() -> io.StringIO:
    """Captured log output."""
    return io.StringIO()


@pytest.fixture
def logger(log_stream) -> StructuredLogger:
    """Debug-enabled JSON logger writing to log_stream."""
    return StructuredLogger("test", debug=True, stream=log_stream)


@pytest.fixture
def platform_client() -> MagicMock:
    """Stand-in for PlatformClient with async resource methods."""
    client = MagicMock()
    client.agents.list = AsyncMock(return_value={"data": []})
    client.media_products.discover = AsyncMock(return_value={"data": []})
    client.media_buys.create = AsyncMock(return_value={"id": "mb_1"})
    client.media_buys.list = AsyncMock(return_value={"data": []})
    return client


@pytest.fixture
def sales_agents() -> list[dict]:
    """Two registered sales agents."""
    return [{"id": "agent_a", "name": "Agent A"}, {"id": "agent_b", "name": "Agent B"}]


@pytest.fixture
def sample_outcome_products() -> list[dict]:
    """Products as passed to the outcome agent by the platform."""
    return [
        {
            "product_ref": "prod_display_1",
            "sales_agent_url": "https://sales-a.example.com",
            "pricing_option_id": "po_1",
            "floor_price": 5.0,
            "targeting": {"channels": ["display"], "countries": ["US"]},
        },
        {
            "product_ref": "prod_video_1",
            "sales_agent_url": "https://sales-b.example.com",
            "pricing_option_id": "po_2",
            "floor_price": 20.0,
            "targeting": {"channels": ["video"], "countries": ["US", "CA"]},
        },
        {
            "product_ref": "prod_any",
            "sales_agent_url": "https://sales-c.example.com",
            "pricing_option_id": "po_3",
            "floor_price": 2.0,
        },
    ]
