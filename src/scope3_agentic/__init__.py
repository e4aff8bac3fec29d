# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Scope3 agentic SDK: MCP client, resource wrappers and example agents."""

from .clients import (
    DebugInfo,
    LenientPolicy,
    PartnerClient,
    PlatformClient,
    Scope3Client,
    StrictPolicy,
)
from .config import ClientConfig, Settings, get_settings
from .errors import (
    AssignmentValidationError,
    ConfigError,
    InventoryUnavailableError,
    MCPConnectionError,
    ProtocolViolationError,
    Scope3Error,
    ToolExecutionError,
)
from .utils.logger import StructuredLogger, get_logger
from .webhooks import WebhookServer

__version__ = "1.0.0"

__all__ = [
    "AssignmentValidationError",
    "ClientConfig",
    "ConfigError",
    "DebugInfo",
    "InventoryUnavailableError",
    "LenientPolicy",
    "MCPConnectionError",
    "PartnerClient",
    "PlatformClient",
    "ProtocolViolationError",
    "Scope3Client",
    "Scope3Error",
    "Settings",
    "StrictPolicy",
    "StructuredLogger",
    "ToolExecutionError",
    "WebhookServer",
    "get_logger",
    "get_settings",
]
