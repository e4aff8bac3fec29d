# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Resource command table and request building for the CLI.

Each resource command maps ``--param value`` pairs onto the request of one
client method. Values are converted by parameter kind: JSON, comma
separated arrays, integers and booleans; everything else stays a string.
"""

import json
from dataclasses import dataclass
from typing import Any


class CommandError(ValueError):
    """Invalid resource command invocation."""

    pass


@dataclass(frozen=True)
class MethodSpec:
    """Parameters accepted by one resource method."""

    params: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    json: tuple[str, ...] = ()
    array: tuple[str, ...] = ()


INTEGER_PARAMS = frozenset(
    {
        "limit",
        "offset",
        "take",
        "skip",
        "threshold",
        "outcomeScoreWindowDays",
        "brandAgentId",
        "organizationId",
        "creativeId",
    }
)
BOOLEAN_PARAMS = frozenset(
    {"hardDelete", "includeArchived", "tacticSeedDataCoop", "isArchived", "unreadOnly"}
)

# CLI resource name -> client attribute
RESOURCE_ATTRIBUTES = {
    "agents": "agents",
    "brand-agents": "brand_agents",
    "brand-standards": "brand_standards",
    "brand-stories": "brand_stories",
    "campaigns": "campaigns",
    "channels": "channels",
    "creatives": "creatives",
    "media-buys": "media_buys",
    "notifications": "notifications",
    "products": "media_products",
    "tactics": "tactics",
    "webhooks": "webhooks",
}

RESOURCE_METHODS: dict[str, dict[str, MethodSpec]] = {
    "agents": {
        "list": MethodSpec(params=("type", "status", "organizationId", "relationship", "name")),
        "get": MethodSpec(params=("agentId",), required=("agentId",)),
        "register": MethodSpec(
            params=("type", "name", "endpointUrl", "protocol", "authenticationType",
                    "description", "organizationId", "authConfig"),
            required=("type", "name", "endpointUrl", "protocol"),
            json=("authConfig",),
        ),
        "update": MethodSpec(
            params=("agentId", "name", "description", "endpointUrl", "protocol",
                    "authenticationType", "authConfig"),
            required=("agentId",),
            json=("authConfig",),
        ),
        "unregister": MethodSpec(params=("agentId",), required=("agentId",)),
    },
    "brand-agents": {
        "list": MethodSpec(),
        "create": MethodSpec(
            params=("name", "description", "nickname", "externalId", "advertiserDomains"),
            required=("name",),
            array=("advertiserDomains",),
        ),
        "get": MethodSpec(params=("brandAgentId",), required=("brandAgentId",)),
        "update": MethodSpec(
            params=("brandAgentId", "name", "description", "tacticSeedDataCoop"),
            required=("brandAgentId",),
        ),
        "delete": MethodSpec(params=("brandAgentId",), required=("brandAgentId",)),
    },
    "brand-standards": {
        "list": MethodSpec(params=("where", "orderBy", "take", "skip"), json=("where", "orderBy")),
        "create": MethodSpec(
            params=("brandAgentId", "prompt", "name", "description", "isArchived",
                    "countries", "channels", "brands"),
            required=("brandAgentId", "prompt"),
            array=("countries", "channels", "brands"),
        ),
        "delete": MethodSpec(params=("brandStandardId",), required=("brandStandardId",)),
    },
    "brand-stories": {
        "list": MethodSpec(params=("brandAgentId",), required=("brandAgentId",)),
        "create": MethodSpec(
            params=("brandAgentId", "name", "prompt", "countries", "channels", "languages", "brands"),
            required=("brandAgentId", "name", "prompt"),
            array=("countries", "channels", "languages", "brands"),
        ),
        "update": MethodSpec(params=("brandStoryId", "prompt"), required=("brandStoryId", "prompt")),
        "delete": MethodSpec(params=("brandStoryId",), required=("brandStoryId",)),
    },
    "campaigns": {
        "list": MethodSpec(params=("brandAgentId", "status", "limit", "offset")),
        "get": MethodSpec(params=("campaignId",), required=("campaignId",)),
        "create": MethodSpec(
            params=("prompt", "brandAgentId", "name", "budget", "startDate", "endDate",
                    "scoringWeights", "outcomeScoreWindowDays", "segmentIds", "dealIds",
                    "visibility", "status"),
            required=("prompt", "brandAgentId"),
            json=("budget", "scoringWeights"),
            array=("segmentIds", "dealIds"),
        ),
        "update": MethodSpec(
            params=("campaignId", "name", "prompt", "status", "budget", "startDate", "endDate",
                    "scoringWeights", "outcomeScoreWindowDays", "segmentIds", "dealIds",
                    "visibility"),
            required=("campaignId",),
            json=("budget", "scoringWeights"),
            array=("segmentIds", "dealIds"),
        ),
        "delete": MethodSpec(params=("campaignId", "hardDelete"), required=("campaignId",)),
        "get-summary": MethodSpec(params=("campaignId",), required=("campaignId",)),
        "list-tactics": MethodSpec(params=("campaignId", "includeArchived"), required=("campaignId",)),
        "validate-brief": MethodSpec(params=("brief", "brandAgentId", "threshold"), required=("brief",)),
    },
    "channels": {
        "list": MethodSpec(),
    },
    "creatives": {
        "list": MethodSpec(params=("brandAgentId", "campaignId")),
        "create": MethodSpec(
            params=("brandAgentId", "name", "organizationId", "description", "formatSource",
                    "formatId", "mediaUrl", "content", "assemblyMethod", "campaignId"),
            required=("brandAgentId", "name"),
            json=("content",),
        ),
        "get": MethodSpec(params=("creativeId",), required=("creativeId",)),
        "update": MethodSpec(params=("creativeId", "name", "status"), required=("creativeId",)),
        "delete": MethodSpec(params=("creativeId",), required=("creativeId",)),
        "assign": MethodSpec(params=("creativeId", "campaignId"), required=("creativeId", "campaignId")),
        "sync-sales-agents": MethodSpec(params=("creativeId",), required=("creativeId",)),
    },
    "media-buys": {
        "list": MethodSpec(params=("tacticId", "campaignId", "includeArchived")),
        "create": MethodSpec(
            params=("tacticId", "name", "products", "budget", "description", "creativeIds"),
            required=("tacticId", "name", "products", "budget"),
            json=("products", "budget"),
            array=("creativeIds",),
        ),
        "get": MethodSpec(params=("mediaBuyId",), required=("mediaBuyId",)),
        "update": MethodSpec(
            params=("mediaBuyId", "name", "budget", "cpm", "creativeIds"),
            required=("mediaBuyId",),
            json=("budget",),
            array=("creativeIds",),
        ),
        "delete": MethodSpec(params=("mediaBuyId",), required=("mediaBuyId",)),
        "execute": MethodSpec(params=("mediaBuyId",), required=("mediaBuyId",)),
    },
    "notifications": {
        "list": MethodSpec(params=("unreadOnly", "limit")),
        "mark-read": MethodSpec(params=("notificationId",), required=("notificationId",)),
        "mark-acknowledged": MethodSpec(params=("notificationId",), required=("notificationId",)),
        "mark-all-read": MethodSpec(),
    },
    "products": {
        "list": MethodSpec(params=("salesAgentId",)),
        "discover": MethodSpec(params=("salesAgentId",)),
        "sync": MethodSpec(params=("salesAgentId",), required=("salesAgentId",)),
    },
    "tactics": {
        "list": MethodSpec(params=("campaignId", "includeArchived")),
        "create": MethodSpec(
            params=("name", "campaignId", "prompt", "channelCodes", "countryCodes"),
            required=("name", "campaignId"),
            array=("channelCodes", "countryCodes"),
        ),
        "get": MethodSpec(params=("tacticId",), required=("tacticId",)),
        "update": MethodSpec(
            params=("tacticId", "name", "prompt", "channelCodes", "countryCodes"),
            required=("tacticId",),
            array=("channelCodes", "countryCodes"),
        ),
        "delete": MethodSpec(params=("tacticId",), required=("tacticId",)),
        "link-campaign": MethodSpec(params=("tacticId", "campaignId"), required=("tacticId", "campaignId")),
        "unlink-campaign": MethodSpec(params=("tacticId", "campaignId"), required=("tacticId", "campaignId")),
    },
    "webhooks": {
        "list": MethodSpec(),
        "register": MethodSpec(
            params=("url", "events", "secret", "brandAgentId"),
            required=("url", "events"),
            array=("events",),
        ),
        "delete": MethodSpec(params=("webhookId",), required=("webhookId",)),
    },
}


def method_attribute(method_name: str) -> str:
    """CLI method name to client method name ("get-summary" -> "get_summary")."""
    return method_name.replace("-", "_")


def parse_option_pairs(args: list[str]) -> dict[str, str]:
    """Turn ["--name", "x", "--id=3"] into {"name": "x", "id": "3"}.

    Raises:
        CommandError: An argument is not an option, or an option has no value
    """
    values: dict[str, str] = {}
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("--"):
            raise CommandError(f"Unexpected argument: {arg}")
        name = arg[2:]
        if "=" in name:
            name, value = name.split("=", 1)
            index += 1
        else:
            if index + 1 >= len(args):
                raise CommandError(f"Missing value for option --{name}")
            value = args[index + 1]
            index += 2
        values[name] = value
    return values


def convert_value(spec: MethodSpec, name: str, value: str) -> Any:
    """Convert one raw option value according to its parameter kind."""
    if name in spec.json:
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            raise CommandError(f"Invalid JSON for --{name}: {value}") from None
    if name in spec.array:
        return [item.strip() for item in value.split(",")]
    if name in INTEGER_PARAMS:
        try:
            return int(value)
        except ValueError:
            raise CommandError(f"Invalid integer for --{name}: {value}") from None
    if name in BOOLEAN_PARAMS:
        return value.lower() == "true"
    return value


def build_request(spec: MethodSpec, raw: dict[str, str]) -> dict[str, Any]:
    """Validate raw option values against a method spec and build the request.

    Raises:
        CommandError: Unknown or missing parameters, or unconvertible values
    """
    unknown = [name for name in raw if name not in spec.params]
    if unknown:
        raise CommandError(f"Unknown parameters: {', '.join(unknown)}")

    missing = [name for name in spec.required if not raw.get(name)]
    if missing:
        raise CommandError(f"Missing required parameters: {', '.join(missing)}")

    return {name: convert_value(spec, name, raw[name]) for name in spec.params if name in raw}
