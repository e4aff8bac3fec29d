# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""High-level clients: a Scope3Client session plus resource wrappers."""

from typing import Optional

from ..resources import (
    AgentsResource,
    BrandAgentsResource,
    BrandStandardsResource,
    BrandStoriesResource,
    CampaignsResource,
    ChannelsResource,
    CreativesResource,
    CustomersResource,
    MediaBuysResource,
    MediaProductsResource,
    NotificationsResource,
    OutcomesResource,
    TacticsResource,
    WebhooksResource,
)
from ..utils.logger import StructuredLogger
from .mcp_client import Scope3Client
from .reconciler import ReconciliationPolicy


class PlatformClient(Scope3Client):
    """Client for brand-side (buyer) platform tools.

    Example:
        async with PlatformClient(api_key="...") as client:
            campaigns = await client.campaigns.list()
            buy = await client.media_buys.get({"mediaBuyId": "mb_123"})
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        environment: str = "production",
        timeout: float = 30.0,
        debug: bool = False,
        logger: Optional[StructuredLogger] = None,
        policy: Optional[ReconciliationPolicy] = None,
    ):
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            environment=environment,
            timeout=timeout,
            debug=debug,
            logger=logger,
            policy=policy,
        )
        self.agents = AgentsResource(self)
        self.brand_agents = BrandAgentsResource(self)
        self.brand_standards = BrandStandardsResource(self)
        self.brand_stories = BrandStoriesResource(self)
        self.campaigns = CampaignsResource(self)
        self.channels = ChannelsResource(self)
        self.creatives = CreativesResource(self)
        self.customers = CustomersResource(self)
        self.media_buys = MediaBuysResource(self)
        self.media_products = MediaProductsResource(self)
        self.notifications = NotificationsResource(self)
        self.tactics = TacticsResource(self)
        self.webhooks = WebhooksResource(self)


class PartnerClient(Scope3Client):
    """Client for partner-side (seller and outcome agent) tools."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        environment: str = "production",
        timeout: float = 30.0,
        debug: bool = False,
        logger: Optional[StructuredLogger] = None,
        policy: Optional[ReconciliationPolicy] = None,
    ):
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            environment=environment,
            timeout=timeout,
            debug=debug,
            logger=logger,
            policy=policy,
        )
        self.agents = AgentsResource(self)
        self.media_buys = MediaBuysResource(self)
        self.media_products = MediaProductsResource(self)
        self.outcomes = OutcomesResource(self)
        self.tactics = TacticsResource(self)
        self.webhooks = WebhooksResource(self)

