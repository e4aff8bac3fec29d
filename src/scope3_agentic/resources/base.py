# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Base class for tool-backed resource wrappers."""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..clients.mcp_client import Scope3Client

Params = Optional[dict[str, Any]]


class Resource:
    """Group of tools sharing one Scope3Client session.

    Each public method maps to exactly one tool; parameters are passed
    through with their wire (camelCase) names.
    """

    def __init__(self, client: "Scope3Client"):
        self._client = client

    async def _call(self, tool_name: str, params: Params = None) -> Any:
        return await self._client.call_tool(tool_name, params or {})


def find_items(payload: Any) -> Optional[list]:
    """Pull the list out of a list-tool payload.

    List tools answer either with a bare list or with a mapping holding the
    list under ``items`` or ``data`` (possibly ``data.items``). Returns None
    when the payload holds no list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("items", "data"):
            value = payload.get(key)
            if isinstance(value, list):
                return value
            if isinstance(value, dict) and isinstance(value.get("items"), list):
                return value["items"]
    return None


def extract_items(payload: Any) -> list:
    """Like find_items, but an empty list when the payload holds no list."""
    items = find_items(payload)
    return items if items is not None else []
