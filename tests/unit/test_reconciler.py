# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Tests for tool result reconciliation and sanitization."""

import pytest
from mcp.types import CallToolResult, ImageContent, TextContent

from scope3_agentic.clients.reconciler import (
    MESSAGE_FIELD,
    REDACTED,
    EmptyResult,
    LenientPolicy,
    StrictPolicy,
    StructuredResult,
    TextOnlyResult,
    get_policy,
    parse_call_result,
    reconcile,
    sanitize,
)
from scope3_agentic.errors import ProtocolViolationError, ToolExecutionError


class TestParseCallResult:
    """Tests for classifying raw tool results."""

    def test_structured_with_text(self, call_result):
        """Structured payload and text are both captured."""
        parsed = parse_call_result("campaign_get", call_result({"id": "c1"}, "Found campaign"))
        assert parsed == StructuredResult(data={"id": "c1"}, message="Found campaign")

    def test_structured_only(self, call_result):
        parsed = parse_call_result("campaign_get", call_result({"id": "c1"}))
        assert parsed == StructuredResult(data={"id": "c1"}, message=None)

    def test_text_only(self, call_result):
        parsed = parse_call_result("campaign_get", call_result(text="hello"))
        assert parsed == TextOnlyResult(text="hello")

    def test_neither(self, call_result):
        assert parse_call_result("campaign_get", call_result()) == EmptyResult()

    def test_empty_structured_payload_counts_as_absent(self, call_result):
        """An empty mapping is treated like a missing payload."""
        assert parse_call_result("campaign_get", call_result({})) == EmptyResult()
        assert parse_call_result("campaign_get", call_result({}, "text")) == TextOnlyResult("text")

    def test_first_text_item_wins_and_non_text_ignored(self):
        """Non-text content is skipped when looking for the message."""
        result = CallToolResult(
            content=[
                ImageContent(type="image", data="aGk=", mimeType="image/png"),
                TextContent(type="text", text="first"),
                TextContent(type="text", text="second"),
            ],
            structuredContent={"ok": True},
        )
        parsed = parse_call_result("asset_list", result)
        assert parsed.message == "first"

    def test_is_error_raises(self, call_result):
        """Server-flagged failures raise ToolExecutionError."""
        with pytest.raises(ToolExecutionError) as exc_info:
            parse_call_result("media_buy_create", call_result(text="Budget too low", is_error=True))

        assert exc_info.value.tool_name == "media_buy_create"
        assert "Budget too low" in str(exc_info.value)


class TestReconcile:
    """Tests for turning parsed results into caller values."""

    def test_structured_returned_as_copy(self):
        data = {"id": "c1", "name": "Campaign"}
        value = reconcile("campaign_get", StructuredResult(data=data))

        assert value == data
        assert value is not data

    def test_message_merged(self):
        value = reconcile("campaign_get", StructuredResult(data={"id": "c1"}, message="ok"))
        assert value == {"id": "c1", MESSAGE_FIELD: "ok"}

    def test_structured_field_wins_on_collision(self):
        value = reconcile(
            "campaign_get",
            StructuredResult(data={MESSAGE_FIELD: "from payload"}, message="from text"),
        )
        assert value[MESSAGE_FIELD] == "from payload"

    def test_strict_text_only_raises_with_preview(self):
        """Strict policy names the tool and includes the first 200 characters."""
        text = "x" * 250
        with pytest.raises(ProtocolViolationError) as exc_info:
            reconcile("agent_list", TextOnlyResult(text=text), StrictPolicy())

        message = str(exc_info.value)
        assert message.startswith("API Error: Missing structured data")
        assert "agent_list" in message
        assert "x" * 200 in message
        assert "x" * 201 not in message

    def test_default_policy_is_strict(self):
        with pytest.raises(ProtocolViolationError):
            reconcile("agent_list", TextOnlyResult(text="plain"))

    def test_lenient_parses_json_text(self):
        value = reconcile("agent_list", TextOnlyResult(text='{"items": [1, 2]}'), LenientPolicy())
        assert value == {"items": [1, 2]}

    def test_lenient_wraps_plain_text(self):
        value = reconcile("agent_list", TextOnlyResult(text="all good"), LenientPolicy())
        assert value == {"message": "all good"}

    @pytest.mark.parametrize("policy", [StrictPolicy(), LenientPolicy()])
    def test_empty_raises_under_every_policy(self, policy):
        with pytest.raises(ProtocolViolationError) as exc_info:
            reconcile("agent_list", EmptyResult(), policy)
        assert "No text content was returned" in str(exc_info.value)

    def test_get_policy(self):
        assert isinstance(get_policy("strict"), StrictPolicy)
        assert isinstance(get_policy("lenient"), LenientPolicy)
        with pytest.raises(ValueError):
            get_policy("relaxed")


class TestSanitize:
    """Tests for secret redaction."""

    def test_redacts_sensitive_keys_at_any_depth(self):
        value = {
            "name": "Campaign",
            "apiKey": "k",
            "nested": {"accessToken": "t", "items": [{"client_secret": "s", "id": 1}]},
            "Authorization": "Bearer x",
        }
        cleaned = sanitize(value)

        assert cleaned["name"] == "Campaign"
        assert cleaned["apiKey"] == REDACTED
        assert cleaned["nested"]["accessToken"] == REDACTED
        assert cleaned["nested"]["items"][0] == {"client_secret": REDACTED, "id": 1}
        assert cleaned["Authorization"] == REDACTED

    def test_does_not_mutate_input(self):
        value = {"password": "p", "list": [{"token": "t"}]}
        sanitize(value)
        assert value == {"password": "p", "list": [{"token": "t"}]}

    def test_tuples_and_scalars(self):
        assert sanitize(({"secret": 1}, 2)) == ({"secret": REDACTED}, 2)
        assert sanitize("plain") == "plain"
        assert sanitize(None) is None
