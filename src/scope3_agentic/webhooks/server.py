# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Webhook listener for platform events."""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, Union

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..models.webhook import WebhookEvent
from ..utils.logger import StructuredLogger

WILDCARD = "*"

WebhookHandler = Callable[[WebhookEvent], Union[None, Awaitable[None]]]


class WebhookServer:
    """Receives webhook POSTs and dispatches them to registered handlers.

    Handlers registered for the event's type and for ``"*"`` all run
    concurrently. When a secret is configured, requests must carry
    ``Authorization: Bearer <secret>``.

    Example:
        server = WebhookServer(port=3000, secret="s3cret")
        server.on("media_buy.created", handle_created)
        await server.start()
    """

    def __init__(
        self,
        port: int = 3000,
        path: str = "/webhooks",
        secret: Optional[str] = None,
        host: str = "0.0.0.0",
        logger: Optional[StructuredLogger] = None,
    ):
        self.port = port
        self.path = path
        self.host = host
        self._secret = secret or None
        self._logger = logger or StructuredLogger()
        self._handlers: dict[str, list[WebhookHandler]] = {}
        self._server: Any = None
        self._serve_task: Optional[asyncio.Task] = None
        self.app = self._create_app()

    def _create_app(self) -> FastAPI:
        app = FastAPI(title="Scope3 Webhook Server")

        @app.post(self.path)
        async def receive(request: Request) -> JSONResponse:
            if self._secret and request.headers.get("authorization") != f"Bearer {self._secret}":
                return JSONResponse(status_code=401, content={"error": "Unauthorized"})

            try:
                body = await request.json()
            except ValueError:
                return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

            if not isinstance(body, dict) or not body.get("type"):
                return JSONResponse(status_code=400, content={"error": "Missing event type"})

            try:
                event = WebhookEvent.model_validate(body)
                await self.dispatch(event)
            except Exception as e:
                self._logger.error("Webhook handler error", e, {"type": body.get("type")})
                return JSONResponse(status_code=500, content={"error": "Internal server error"})

            return JSONResponse(status_code=200, content={"success": True})

        @app.get("/health")
        async def health_check() -> dict[str, str]:
            return {"status": "ok"}

        return app

    def on(self, event_type: str, handler: WebhookHandler) -> None:
        """Register a handler for an event type, or "*" for every event."""
        self._handlers.setdefault(event_type, []).append(handler)

    def off(self, event_type: str, handler: Optional[WebhookHandler] = None) -> None:
        """Remove one handler, or all handlers for the type when none is given."""
        if handler is None:
            self._handlers.pop(event_type, None)
            return
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    async def dispatch(self, event: WebhookEvent) -> None:
        """Run every handler matching the event concurrently."""
        handlers = self._handlers.get(event.type, []) + self._handlers.get(WILDCARD, [])
        await asyncio.gather(*(self._invoke(handler, event) for handler in handlers))

    @staticmethod
    async def _invoke(handler: WebhookHandler, event: WebhookEvent) -> None:
        result = handler(event)
        if inspect.isawaitable(result):
            await result

    def get_url(self) -> str:
        return f"http://localhost:{self.port}{self.path}"

    async def start(self) -> None:
        """Start serving in the background; returns once the server is up."""
        if self._serve_task is not None:
            return

        config = uvicorn.Config(self.app, host=self.host, port=self.port, log_level="warning")
        self._server = uvicorn.Server(config)
        self._serve_task = asyncio.create_task(self._server.serve())
        while not self._server.started:
            if self._serve_task.done():
                task, self._serve_task = self._serve_task, None
                task.result()
                return
            await asyncio.sleep(0.05)

        self._logger.info("Webhook server listening", {"url": self.get_url()})

    async def stop(self) -> None:
        """Stop the server. No-op when not started."""
        if self._serve_task is None:
            return
        self._server.should_exit = True
        try:
            await self._serve_task
        finally:
            self._serve_task = None
            self._server = None
        self._logger.info("Webhook server stopped")
