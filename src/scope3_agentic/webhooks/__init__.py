# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Webhook listener."""

from .server import WebhookHandler, WebhookServer

__all__ = ["WebhookHandler", "WebhookServer"]
