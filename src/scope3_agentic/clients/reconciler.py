# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Reconciliation of raw MCP tool results into a single typed value.

A tool result can carry a structured payload, text content, both or neither.
``parse_call_result`` turns the raw result into one of three variants right
after the call returns; a ``ReconciliationPolicy`` then turns the variant
into the value handed back to the caller:

1. ``StructuredResult``: returned as a new dict. When text content is also
   present, the first text item is added under ``MESSAGE_FIELD`` without
   overwriting structured fields.
2. ``TextOnlyResult``: the server broke the structured-response contract.
   ``StrictPolicy`` raises ``ProtocolViolationError``; ``LenientPolicy``
   parses the text as JSON or wraps it as ``{"message": text}``.
3. ``EmptyResult``: always ``ProtocolViolationError``.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

from mcp.types import CallToolResult

from ..errors import ProtocolViolationError, ToolExecutionError

MESSAGE_FIELD = "_message"
REDACTED = "[REDACTED]"
SENSITIVE_TERMS = ("token", "secret", "password", "apikey", "api_key", "auth", "credential")


@dataclass(frozen=True)
class StructuredResult:
    """Structured payload present, with the first text item if any."""

    data: dict[str, Any]
    message: Optional[str] = None


@dataclass(frozen=True)
class TextOnlyResult:
    """Only text content present."""

    text: str


@dataclass(frozen=True)
class EmptyResult:
    """Neither structured payload nor text content."""

    pass


CallResult = Union[StructuredResult, TextOnlyResult, EmptyResult]


@dataclass
class DebugInfo:
    """Request/response snapshot of the most recent tool call."""

    tool_name: str
    request: Any
    response: Any
    duration_ms: float
    raw_response: Optional[str] = None


def _first_text(result: CallToolResult) -> Optional[str]:
    for content in result.content or []:
        if getattr(content, "type", None) == "text":
            return content.text
    return None


def parse_call_result(tool_name: str, result: CallToolResult) -> CallResult:
    """Classify a raw tool result.

    Args:
        tool_name: Name of the tool that produced the result
        result: Raw result from ClientSession.call_tool

    Returns:
        The matching CallResult variant

    Raises:
        ToolExecutionError: The server flagged the call as failed
    """
    text = _first_text(result)

    if result.isError:
        raise ToolExecutionError(tool_name, text or "")

    if result.structuredContent:
        return StructuredResult(data=dict(result.structuredContent), message=text)
    if text is not None:
        return TextOnlyResult(text=text)
    return EmptyResult()


class ReconciliationPolicy(Protocol):
    """Decides what a text-only result turns into."""

    name: str

    def on_text_only(self, tool_name: str, text: str) -> Any:
        ...


class StrictPolicy:
    """Treat text-only results as protocol violations."""

    name = "strict"

    def on_text_only(self, tool_name: str, text: str) -> Any:
        raise ProtocolViolationError(tool_name, text)


class LenientPolicy:
    """Parse text-only results as JSON, or wrap them as a message."""

    name = "lenient"

    def on_text_only(self, tool_name: str, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return {"message": text}


POLICIES: dict[str, type] = {
    StrictPolicy.name: StrictPolicy,
    LenientPolicy.name: LenientPolicy,
}


def get_policy(name: str) -> ReconciliationPolicy:
    """Look up a policy by name ("strict" or "lenient")."""
    try:
        return POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown response policy: {name}") from None


def reconcile(
    tool_name: str,
    parsed: CallResult,
    policy: Optional[ReconciliationPolicy] = None,
) -> Any:
    """Produce the caller-facing value for a parsed tool result."""
    policy = policy or StrictPolicy()

    if isinstance(parsed, StructuredResult):
        if parsed.message is None:
            return dict(parsed.data)
        return {MESSAGE_FIELD: parsed.message, **parsed.data}
    if isinstance(parsed, TextOnlyResult):
        return policy.on_text_only(tool_name, parsed.text)
    raise ProtocolViolationError(tool_name)


def _is_sensitive(key: Any) -> bool:
    lowered = str(key).lower()
    return any(term in lowered for term in SENSITIVE_TERMS)


def sanitize(value: Any) -> Any:
    """Return a copy of value with sensitive fields redacted at any depth."""
    if isinstance(value, dict):
        return {
            key: REDACTED if _is_sensitive(key) else sanitize(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [sanitize(item) for item in value]
    if isinstance(value, tuple):
        return tuple(sanitize(item) for item in value)
    return value
