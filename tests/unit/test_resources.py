# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Tests for resource wrappers and the platform/partner clients."""

from unittest.mock import AsyncMock

import pytest

from scope3_agentic.clients import PartnerClient, PlatformClient
from scope3_agentic.resources import extract_items, find_items


class TestResources:
    """Each resource method calls exactly one tool with its params."""

    @pytest.fixture
    def client(self):
        client = PlatformClient(api_key="test_key")
        client.call_tool = AsyncMock(return_value={"id": "x"})
        return client

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "resource, method, tool",
        [
            ("campaigns", "get_summary", "campaign_get_summary"),
            ("media_buys", "create", "media_buy_create"),
            ("media_buys", "execute", "media_buy_execute"),
            ("media_products", "discover", "media_product_discover"),
            ("agents", "list", "agent_list"),
            ("tactics", "link_campaign", "tactic_link_campaign"),
        ],
    )
    async def test_method_maps_to_tool(self, client, resource, method, tool):
        result = await getattr(getattr(client, resource), method)({"id": "x"})

        assert result == {"id": "x"}
        client.call_tool.assert_awaited_once_with(tool, {"id": "x"})

    @pytest.mark.asyncio
    async def test_missing_params_send_empty_mapping(self, client):
        await client.channels.list()
        client.call_tool.assert_awaited_once_with("channel_list", {})

    @pytest.mark.asyncio
    async def test_partner_outcome_tools(self):
        client = PartnerClient(api_key="test_key", environment="staging")
        client.call_tool = AsyncMock(return_value={"proposals": []})

        await client.outcomes.get_proposals({"campaignId": "c1"})

        client.call_tool.assert_awaited_once_with("outcomes_agent_get_proposals", {"campaignId": "c1"})
        assert client.get_base_url() == "https://api.agentic.staging.scope3.com"
        assert not hasattr(client, "campaigns")


class TestItemExtraction:
    """Tests for list payload extraction."""

    def test_shapes(self):
        assert find_items([1]) == [1]
        assert find_items({"items": [1]}) == [1]
        assert find_items({"data": [1]}) == [1]
        assert find_items({"data": {"items": [1]}}) == [1]

    def test_no_list(self):
        assert find_items({"data": {"id": "1"}}) is None
        assert find_items("text") is None
        assert extract_items({"message": "x"}) == []
