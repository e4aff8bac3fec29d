# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Tool-backed resource wrappers for the Scope3 platform."""

from .agents import AgentsResource
from .base import Resource, extract_items, find_items
from .brand_agents import BrandAgentsResource
from .brand_standards import BrandStandardsResource
from .brand_stories import BrandStoriesResource
from .campaigns import CampaignsResource
from .channels import ChannelsResource
from .creatives import CreativesResource
from .customers import CustomersResource
from .media_buys import MediaBuysResource
from .media_products import MediaProductsResource
from .notifications import NotificationsResource
from .outcomes import OutcomesResource
from .tactics import TacticsResource
from .webhooks import WebhooksResource

__all__ = [
    "AgentsResource",
    "BrandAgentsResource",
    "BrandStandardsResource",
    "BrandStoriesResource",
    "CampaignsResource",
    "ChannelsResource",
    "CreativesResource",
    "CustomersResource",
    "MediaBuysResource",
    "MediaProductsResource",
    "NotificationsResource",
    "OutcomesResource",
    "Resource",
    "TacticsResource",
    "WebhooksResource",
    "extract_items",
    "find_items",
]
