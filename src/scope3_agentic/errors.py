# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Error types raised by the Scope3 agentic client and example agents."""

from typing import Optional


class Scope3Error(Exception):
    """Base error for the scope3_agentic package."""

    pass


class MCPConnectionError(Scope3Error, ConnectionError):
    """The MCP transport could not be established.

    The message is the underlying transport failure, unchanged. The original
    exception is available as ``__cause__``.
    """

    pass


class ProtocolViolationError(Scope3Error):
    """A tool result did not carry the structured payload the API must return."""

    PREVIEW_LENGTH = 200

    def __init__(self, tool_name: str, text: Optional[str] = None):
        self.tool_name = tool_name
        self.preview = text[: self.PREVIEW_LENGTH] if text else None

        message = (
            f"API Error: Missing structured data in response from tool '{tool_name}'. "
            "This is an API bug that needs to be fixed upstream."
        )
        if self.preview is not None:
            message += f" Text content: {self.preview}"
        else:
            message += " No text content was returned."
        super().__init__(message)


class ToolExecutionError(Scope3Error):
    """The server reported the tool call itself as failed (isError)."""

    def __init__(self, tool_name: str, detail: str = ""):
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(f"Tool '{tool_name}' failed: {detail or 'no details returned'}")


class AssignmentValidationError(Scope3Error):
    """A proposal assignment failed local pre-flight validation."""

    pass


class InventoryUnavailableError(Scope3Error):
    """Product discovery returned nothing to build a tactic from."""

    pass


class ConfigError(Scope3Error):
    """Invalid or missing CLI configuration."""

    pass
