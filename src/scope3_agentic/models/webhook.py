# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Webhook event model."""

from typing import Any, Optional

from pydantic import BaseModel


class WebhookEvent(BaseModel):
    """Event delivered by the platform to a registered webhook URL."""

    type: str
    timestamp: Optional[str] = None
    data: Any = None

    model_config = {"extra": "allow"}
