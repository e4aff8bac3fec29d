# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Tests for CLI output formatting, request building and commands."""

import io
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from scope3_agentic.config import cli_config
from scope3_agentic.interfaces.cli.commands import (
    RESOURCE_ATTRIBUTES,
    RESOURCE_METHODS,
    CommandError,
    build_request,
    method_attribute,
    parse_option_pairs,
)
from scope3_agentic.interfaces.cli.formatting import format_output, unwrap
from scope3_agentic.interfaces.cli.main import app
from scope3_agentic.clients.platform import PlatformClient


def render(data, output_format="table") -> str:
    stream = io.StringIO()
    format_output(data, output_format, Console(file=stream, width=200, color_system=None))
    return stream.getvalue()


class TestFormatOutput:
    """Tests for format_output."""

    def test_json(self):
        data = {"items": [{"id": "1", "nested": {"deep": "value"}}], "metadata": {"total": 1}}
        assert json.loads(render(data, "json")) == data

    def test_json_null(self):
        assert render(None, "json").strip() == "null"

    def test_no_data(self):
        assert "No data to display" in render(None)

    def test_unwrap_data_then_items(self):
        assert unwrap({"success": True, "data": {"items": [{"id": "1"}]}}) == [{"id": "1"}]
        assert unwrap({"items": [{"id": "1"}], "total": 1}) == [{"id": "1"}]
        assert unwrap({"data": {"id": "c1"}}) == {"id": "c1"}
        assert unwrap([1, 2]) == [1, 2]

    def test_message_only(self):
        assert render({"message": "Resource deleted"}, "list").strip() == "Resource deleted"
        assert render({"message": "Operation completed"}, "table").strip() == "Operation completed"

    def test_message_with_other_fields_uses_table(self):
        output = render({"message": "Success", "id": "123"})
        assert "Success" in output
        assert "123" in output
        assert "message" in output

    def test_list_format(self):
        output = render([{"id": "1", "name": "Item 1"}, {"id": "2", "name": "Item 2"}], "list")
        assert "1." in output
        assert "2." in output
        assert "name: Item 1" in output

    def test_list_shows_empty_values(self):
        assert "(empty)" in render([{"id": "1", "name": None}], "list")

    def test_list_nested_as_json(self):
        output = render([{"id": "1", "metadata": {"created": "2024-01-01"}}], "list")
        assert '"created": "2024-01-01"' in output

    def test_empty_list(self):
        assert "No results found" in render([], "list")
        assert "No results found" in render({"items": []}, "table")

    def test_table_for_rows(self):
        output = render([{"id": "c1", "name": "Spring"}, {"id": "c2", "name": None}])
        assert "id" in output
        assert "Spring" in output
        assert "c2" in output

    def test_primitives(self):
        assert render("plain string").strip() == "plain string"
        assert render(42).strip() == "42"

    def test_success_indicator(self):
        assert "Success" in render({"success": True, "data": {"id": "1"}})
        assert "Failed" in render({"success": False, "data": {"id": "1"}})

    def test_unknown_format_falls_back_to_table(self):
        assert "Spring" in render([{"name": "Spring"}], "yaml")


class TestRequestBuilding:
    """Tests for option parsing against the method table."""

    def test_parse_option_pairs(self):
        assert parse_option_pairs(["--name", "x", "--limit=5"]) == {"name": "x", "limit": "5"}

    def test_parse_rejects_positional(self):
        with pytest.raises(CommandError):
            parse_option_pairs(["name"])

    def test_parse_rejects_missing_value(self):
        with pytest.raises(CommandError):
            parse_option_pairs(["--name"])

    def test_conversions(self):
        spec = RESOURCE_METHODS["media-buys"]["create"]
        request = build_request(
            spec,
            {
                "tacticId": "t1",
                "name": "Buy",
                "products": '[{"mediaProductId": "p1"}]',
                "budget": '{"amount": 100}',
                "creativeIds": "a, b",
            },
        )
        assert request == {
            "tacticId": "t1",
            "name": "Buy",
            "products": [{"mediaProductId": "p1"}],
            "budget": {"amount": 100},
            "creativeIds": ["a", "b"],
        }

    def test_integers_and_booleans(self):
        assert build_request(RESOURCE_METHODS["campaigns"]["list"], {"limit": "10"}) == {"limit": 10}
        assert build_request(
            RESOURCE_METHODS["campaigns"]["delete"], {"campaignId": "c1", "hardDelete": "true"}
        ) == {"campaignId": "c1", "hardDelete": True}

    def test_missing_required(self):
        with pytest.raises(CommandError, match="Missing required parameters: campaignId"):
            build_request(RESOURCE_METHODS["campaigns"]["get"], {})

    def test_unknown_parameter(self):
        with pytest.raises(CommandError, match="Unknown parameters: bogus"):
            build_request(RESOURCE_METHODS["campaigns"]["get"], {"campaignId": "c1", "bogus": "1"})

    def test_invalid_json(self):
        with pytest.raises(CommandError, match="Invalid JSON"):
            build_request(RESOURCE_METHODS["campaigns"]["update"], {"campaignId": "c", "budget": "{"})

    def test_every_command_maps_to_a_client_method(self):
        client = PlatformClient(api_key="k")
        for resource_name, methods in RESOURCE_METHODS.items():
            resource = getattr(client, RESOURCE_ATTRIBUTES[resource_name])
            for method_name in methods:
                assert callable(getattr(resource, method_attribute(method_name))), (resource_name, method_name)


class TestCliCommands:
    """Tests for the typer app."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture(autouse=True)
    def config_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        monkeypatch.setattr(cli_config, "CONFIG_FILE", path)
        for name in ("SCOPE3_API_KEY", "SCOPE3_BASE_URL", "SCOPE3_ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
        return path

    @pytest.fixture
    def mock_client(self):
        client = MagicMock()
        client.disconnect = AsyncMock()
        client.campaigns.get = AsyncMock(return_value={"id": "c1", "name": "Spring"})
        client.call_tool = AsyncMock(return_value={"items": [{"id": "a1"}]})
        with patch("scope3_agentic.interfaces.cli.main.PlatformClient", return_value=client) as cls:
            yield client, cls

    def test_config_set_get_clear(self, runner, config_file):
        result = runner.invoke(app, ["config", "set", "apiKey", "file_key"])
        assert result.exit_code == 0
        assert json.loads(config_file.read_text()) == {"apiKey": "file_key"}

        result = runner.invoke(app, ["config", "get", "apiKey"])
        assert result.output.strip() == "file_key"

        result = runner.invoke(app, ["config", "clear"])
        assert result.exit_code == 0
        assert not config_file.exists()

    def test_config_set_unknown_key(self, runner):
        result = runner.invoke(app, ["config", "set", "token", "x"])
        assert result.exit_code == 1

    def test_missing_api_key(self, runner):
        result = runner.invoke(app, ["campaigns", "get", "--campaignId", "c1"])
        assert result.exit_code == 1

    def test_resource_command(self, runner, mock_client):
        client, client_cls = mock_client

        result = runner.invoke(
            app, ["--api-key", "k", "--format", "json", "campaigns", "get", "--campaignId", "c1"]
        )

        assert result.exit_code == 0, result.output
        client.campaigns.get.assert_awaited_once_with({"campaignId": "c1"})
        client.disconnect.assert_awaited_once()
        assert json.loads(result.output) == {"id": "c1", "name": "Spring"}
        assert client_cls.call_args.kwargs["api_key"] == "k"

    def test_resource_command_validation(self, runner, mock_client):
        client, _ = mock_client
        result = runner.invoke(app, ["--api-key", "k", "campaigns", "get"])

        assert result.exit_code == 1
        client.campaigns.get.assert_not_awaited()

    def test_call_command(self, runner, mock_client):
        client, _ = mock_client

        result = runner.invoke(
            app,
            ["--api-key", "k", "--format", "list", "call", "agent_list", "--args", '{"type": "SALES"}'],
        )

        assert result.exit_code == 0, result.output
        client.call_tool.assert_awaited_once_with("agent_list", {"type": "SALES"})
        assert "a1" in result.output

    def test_call_invalid_json(self, runner, mock_client):
        result = runner.invoke(app, ["--api-key", "k", "call", "agent_list", "--args", "{"])
        assert result.exit_code == 1

    def test_api_errors_exit_nonzero(self, runner, mock_client):
        client, _ = mock_client
        client.call_tool.side_effect = RuntimeError("API Error: Missing structured data")

        result = runner.invoke(app, ["--api-key", "k", "call", "agent_list"])

        assert result.exit_code == 1
        client.disconnect.assert_awaited_once()
