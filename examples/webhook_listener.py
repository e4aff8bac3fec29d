#!/usr/bin/env python3
# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Listen for platform webhook events.

Register http://<host>:3000/webhooks with the platform (scope3 webhooks
register --url ... --events media_buy.created) and run this script.

Usage:
    WEBHOOK_SECRET=... python examples/webhook_listener.py
"""

import asyncio
import os

from scope3_agentic import StructuredLogger, WebhookServer
from scope3_agentic.models import WebhookEvent


def on_media_buy_created(event: WebhookEvent) -> None:
    print(f"Media buy created: {event.data}")


async def on_any_event(event: WebhookEvent) -> None:
    print(f"[{event.timestamp}] {event.type}")


async def main():
    server = WebhookServer(
        port=int(os.environ.get("WEBHOOK_PORT", "3000")),
        secret=os.environ.get("WEBHOOK_SECRET"),
        logger=StructuredLogger(json_output=False, debug=True),
    )
    server.on("media_buy.created", on_media_buy_created)
    server.on("*", on_any_event)

    await server.start()
    print(f"Listening on {server.get_url()} (Ctrl+C to stop)")
    try:
        await asyncio.Event().wait()
    finally:
        await server.stop()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
