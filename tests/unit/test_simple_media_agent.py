# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Tests for product discovery and the simple media agent."""

from unittest.mock import AsyncMock

import pytest

from scope3_agentic.agents.discovery import ProductDiscovery
from scope3_agentic.agents.simple_media_agent import SimpleMediaAgent
from scope3_agentic.errors import InventoryUnavailableError
from scope3_agentic.models.media import TacticState


def products_by_agent(catalogue):
    """discover() side effect answering from a {agent_id: payload} map."""

    async def discover(params):
        payload = catalogue[params["salesAgentId"]]
        if isinstance(payload, Exception):
            raise payload
        return payload

    return discover


class TestProductDiscovery:
    """Tests for the discovery fan-out."""

    @pytest.mark.asyncio
    async def test_collects_products_in_agent_order(self, platform_client, sales_agents, logger):
        platform_client.agents.list.return_value = {"data": sales_agents}
        platform_client.media_products.discover.side_effect = products_by_agent(
            {
                "agent_a": {"data": [{"id": "a1", "floorPrice": 3.0, "name": "A1"}]},
                "agent_b": {"items": [{"id": "b1", "floorPrice": 1.0}, {"id": "b2"}]},
            }
        )

        agents, products = await ProductDiscovery(platform_client, logger).discover()

        platform_client.agents.list.assert_awaited_once_with({"type": "SALES"})
        assert len(agents) == 2
        assert [(p.id, p.sales_agent_id) for p in products] == [
            ("a1", "agent_a"),
            ("b1", "agent_b"),
            ("b2", "agent_b"),
        ]
        assert products[0].floor_price == 3.0
        assert products[2].floor_price is None

    @pytest.mark.asyncio
    async def test_failing_agent_is_skipped(self, platform_client, sales_agents, logger, log_stream):
        platform_client.agents.list.return_value = {"data": sales_agents}
        platform_client.media_products.discover.side_effect = products_by_agent(
            {
                "agent_a": RuntimeError("agent down"),
                "agent_b": {"data": [{"id": "b1", "floorPrice": 1.0}]},
            }
        )

        _, products = await ProductDiscovery(platform_client, logger).discover()

        assert [p.id for p in products] == ["b1"]
        assert "agent down" in log_stream.getvalue()

    @pytest.mark.asyncio
    async def test_non_list_products_skipped(self, platform_client, sales_agents, logger):
        platform_client.agents.list.return_value = {"data": sales_agents}
        platform_client.media_products.discover.side_effect = products_by_agent(
            {
                "agent_a": {"message": "no catalogue"},
                "agent_b": {"data": [{"id": "b1"}]},
            }
        )

        _, products = await ProductDiscovery(platform_client, logger).discover()

        assert [p.id for p in products] == ["b1"]

    @pytest.mark.asyncio
    async def test_agents_must_be_a_list(self, platform_client, logger):
        platform_client.agents.list.return_value = {"data": {"id": "not-a-list"}}

        with pytest.raises(TypeError):
            await ProductDiscovery(platform_client, logger).discover()


class TestSimpleMediaAgent:
    """Tests for the passthrough media agent."""

    @pytest.fixture
    def agent(self, platform_client, sales_agents, logger):
        platform_client.agents.list.return_value = {"data": sales_agents}
        platform_client.media_products.discover.side_effect = products_by_agent(
            {
                "agent_a": {"data": [{"id": "a1", "floorPrice": 4.0}, {"id": "a2", "floorPrice": 8.0}]},
                "agent_b": {"data": [{"id": "b1", "floorPrice": 2.0}]},
            }
        )
        return SimpleMediaAgent(platform_client, logger=logger)

    @pytest.mark.asyncio
    async def test_get_proposed_tactics(self, agent):
        result = await agent.get_proposed_tactics("camp_1", {"min": 1000, "max": 50000, "currency": "USD"})

        [tactic] = result["proposedTactics"]
        assert tactic["tacticId"] == "simple-passthrough-camp_1"
        assert tactic["budgetCapacity"] == 50000
        assert tactic["sku"] == "simple-passthrough"
        assert tactic["pricing"] == {
            "method": "passthrough",
            "estimatedCpm": pytest.approx(14.0 / 3),
            "currency": "USD",
        }
        assert "3 products" in tactic["execution"]

    @pytest.mark.asyncio
    async def test_get_proposed_tactics_without_inventory(self, platform_client, sales_agents, logger):
        platform_client.agents.list.return_value = {"data": sales_agents}
        platform_client.media_products.discover.return_value = {"data": []}
        agent = SimpleMediaAgent(platform_client, logger=logger)

        with pytest.raises(InventoryUnavailableError, match="2 agents"):
            await agent.get_proposed_tactics("camp_1")

    @pytest.mark.asyncio
    async def test_manage_tactic_creates_media_buys(self, agent, platform_client):
        # 7,000 * 1.4 = 9,800 -> 3 products at 3,266.67
        result = await agent.manage_tactic("tactic_1", {"budget": {"amount": 7000, "currency": "USD"}})

        assert result == {"acknowledged": True, "mediaBuysCreated": 3}
        calls = platform_client.media_buys.create.await_args_list
        assert len(calls) == 3

        first = calls[0].args[0]
        assert first["tacticId"] == "tactic_1"
        assert first["name"] == "Media Buy - b1"
        assert first["products"][0]["mediaProductId"] == "b1"
        assert first["products"][0]["salesAgentId"] == "agent_b"
        assert first["products"][0]["pricingCpm"] == 2.0
        assert first["budget"]["amount"] == pytest.approx(9800 / 3)
        assert first["budget"]["currency"] == "USD"

        state = agent.active_tactics["tactic_1"]
        assert isinstance(state, TacticState)
        assert state.budget == 7000
        assert len(state.allocations) == 3

    @pytest.mark.asyncio
    async def test_manage_tactic_accepts_numeric_budget(self, agent, platform_client):
        # 3,000 * 1.4 = 4,200 -> 1 product
        result = await agent.manage_tactic("tactic_2", {"budget": 3000})

        assert result["mediaBuysCreated"] == 1
        assert platform_client.media_buys.create.await_args.args[0]["name"] == "Media Buy - b1"

    @pytest.mark.asyncio
    async def test_manage_tactic_stops_on_first_failure(self, agent, platform_client):
        platform_client.media_buys.create.side_effect = [{"id": "mb_1"}, RuntimeError("rejected"), {"id": "mb_3"}]

        result = await agent.manage_tactic("tactic_3", {"budget": 7000})

        assert result == {
            "acknowledged": False,
            "reason": "Failed to create media buy for product a1",
        }
        assert platform_client.media_buys.create.await_count == 2

    @pytest.mark.asyncio
    async def test_budget_patch_reaches_reallocation_policy(self, agent):
        policy = AsyncMock()
        agent.reallocation_policy = policy
        await agent.manage_tactic("tactic_1", {"budget": 3000})

        patch_ops = [
            {"op": "replace", "path": "/budget/amount", "value": 9000},
            {"op": "replace", "path": "/name", "value": "Renamed"},
        ]
        result = await agent.tactic_context_updated("tactic_1", patch_ops)

        assert result == {"acknowledged": True}
        policy.on_budget_changed.assert_awaited_once()
        state, ops = policy.on_budget_changed.await_args.args
        assert state.tactic_id == "tactic_1"
        assert ops == [patch_ops[0]]

    @pytest.mark.asyncio
    async def test_patch_for_unknown_tactic_is_acknowledged(self, agent):
        policy = AsyncMock()
        agent.reallocation_policy = policy

        result = await agent.tactic_context_updated("unknown", [{"op": "replace", "path": "/budget"}])

        assert result == {"acknowledged": True}
        policy.on_budget_changed.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_creatives_and_feedback(self, agent):
        policy = AsyncMock()
        agent.reallocation_policy = policy
        await agent.manage_tactic("tactic_1", {"budget": 3000})

        assert await agent.tactic_creatives_updated("tactic_1", []) == {"acknowledged": True}
        assert await agent.tactic_feedback("tactic_1", 0.9, 1.1) == {"acknowledged": True}
        policy.on_feedback.assert_awaited_once()
        assert policy.on_feedback.await_args.args[1:] == (0.9, 1.1)

    @pytest.mark.asyncio
    async def test_reporting_complete(self, agent, platform_client):
        platform_client.media_buys.list.return_value = {"data": [{"id": "mb_1"}]}
        await agent.manage_tactic("tactic_1", {"budget": 3000})

        result = await agent.reporting_complete("tactic_1", {"impressions": 1000})

        assert result == {"acknowledged": True, "message": "Reallocation triggered"}
        platform_client.media_buys.list.assert_awaited_once_with({"tacticId": "tactic_1"})

    @pytest.mark.asyncio
    async def test_reporting_for_unknown_tactic(self, agent, platform_client):
        result = await agent.reporting_complete("nope")

        assert result == {"acknowledged": True, "message": "Tactic not found"}
        platform_client.media_buys.list.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_close_disconnects_client(self, agent, platform_client):
        platform_client.disconnect = AsyncMock()

        await agent.close()

        platform_client.disconnect.assert_awaited_once()
