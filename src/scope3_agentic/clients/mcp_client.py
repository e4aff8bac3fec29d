# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""MCP client for the Scope3 agentic API using Streamable HTTP transport."""

import asyncio
import time
from typing import Any, Optional

from mcp import ClientSession
from mcp.client.streamable_http import streamablehttp_client

from ..config.client_config import BASE_URLS, ClientConfig
from ..errors import MCPConnectionError
from ..utils.logger import StructuredLogger
from .reconciler import (
    DebugInfo,
    ReconciliationPolicy,
    StrictPolicy,
    TextOnlyResult,
    parse_call_result,
    reconcile,
    sanitize,
)


def _single_cause(error: BaseException) -> BaseException:
    """Unwrap task-group errors that hold exactly one exception."""
    while len(getattr(error, "exceptions", ())) == 1:
        error = error.exceptions[0]
    return error


class Scope3Client:
    """Session with the Scope3 MCP endpoint.

    One client owns at most one MCP session. The session is opened on the
    first tool call (or an explicit ``connect``) and reused until
    ``disconnect``. Every tool result goes through the response reconciler,
    so callers receive a plain dict or an exception, never a raw result.
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
        """Initialize the client.

        Args:
            api_key: Scope3 API key, sent as a bearer token
            base_url: Explicit API base URL, overrides environment
            environment: "production" or "staging" default endpoint
            timeout: Transport timeout in seconds
            debug: Record sanitized request/response of the last call
            logger: Logger to report connection and debug events to
            policy: Handling of text-only tool results (strict by default)
        """
        if not api_key:
            raise ValueError("api_key is required")

        self._api_key = api_key
        self.environment = environment
        self.base_url = (base_url or self._default_base_url(environment)).rstrip("/")
        self.mcp_url = f"{self.base_url}/mcp"
        self.timeout = timeout
        self.debug = debug
        self._logger = logger or StructuredLogger(debug=debug)
        self._policy = policy or StrictPolicy()

        self._tools: dict[str, dict] = {}
        self._session: Optional[ClientSession] = None
        self._session_task: Optional[asyncio.Task] = None
        self._closing: Optional[asyncio.Event] = None
        self._get_session_id = None
        self._connect_lock = asyncio.Lock()
        self._last_debug_info: Optional[DebugInfo] = None

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        logger: Optional[StructuredLogger] = None,
        policy: Optional[ReconciliationPolicy] = None,
    ) -> "Scope3Client":
        """Create a client from a ClientConfig."""
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            environment=config.environment,
            timeout=config.timeout,
            debug=config.debug,
            logger=logger,
            policy=policy,
        )

    @staticmethod
    def _default_base_url(environment: str) -> str:
        try:
            return BASE_URLS[environment]
        except KeyError:
            raise ValueError(
                f"Unknown environment '{environment}'. Expected one of: {', '.join(BASE_URLS)}"
            ) from None

    def get_base_url(self) -> str:
        """Get the API base URL this client talks to."""
        return self.base_url

    @property
    def connected(self) -> bool:
        return self._session is not None

    @property
    def policy(self) -> ReconciliationPolicy:
        return self._policy

    @property
    def last_debug_info(self) -> Optional[DebugInfo]:
        """Debug record of the most recent successful call (debug mode only)."""
        return self._last_debug_info

    @property
    def tools(self) -> dict[str, dict]:
        """Tools returned by the last list_tools call."""
        return self._tools

    @property
    def session_id(self) -> Optional[str]:
        """Get the current MCP session ID."""
        if self._get_session_id:
            return self._get_session_id()
        return None

    async def connect(self) -> None:
        """Connect to the MCP server and initialize the session.

        Safe to call repeatedly and concurrently: only the first caller opens
        the transport, the others wait for it and return. The transport and
        session are owned by a background task, so any task may later
        disconnect.

        Raises:
            MCPConnectionError: The transport or session could not be opened
        """
        async with self._connect_lock:
            if self._session is not None:
                return
            await self._reap_session_task()

            ready: asyncio.Future = asyncio.get_running_loop().create_future()
            closing = asyncio.Event()
            task = asyncio.create_task(self._hold_session(ready, closing))
            try:
                session, get_session_id = await ready
            except asyncio.CancelledError:
                closing.set()
                raise
            except Exception as e:
                await asyncio.gather(task, return_exceptions=True)
                cause = _single_cause(e)
                self._logger.error("Failed to connect to MCP server", cause, {"url": self.mcp_url})
                raise MCPConnectionError(str(cause)) from cause

            self._session_task = task
            self._closing = closing
            self._session = session
            self._get_session_id = get_session_id
            self._logger.info("Connected to MCP server", {"url": self.mcp_url})

    async def _hold_session(self, ready: asyncio.Future, closing: asyncio.Event) -> None:
        """Open transport and session, hand them over, keep them open until closing."""
        session: Optional[ClientSession] = None
        try:
            async with streamablehttp_client(
                self.mcp_url,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self.timeout,
            ) as (read_stream, write_stream, get_session_id):
                async with ClientSession(read_stream, write_stream) as session:
                    await session.initialize()
                    if not ready.done():
                        ready.set_result((session, get_session_id))
                    await closing.wait()
        except Exception as e:
            if not ready.done():
                ready.set_exception(e)
                return
            self._logger.error("MCP connection closed with error", e, {"url": self.mcp_url})
            raise
        finally:
            if not ready.done():
                ready.cancel()
            if session is not None and self._session is session:
                self._session = None
                self._get_session_id = None

    async def _reap_session_task(self) -> None:
        """Collect a session task that ended on its own (server went away)."""
        task, self._session_task, self._closing = self._session_task, None, None
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def disconnect(self) -> None:
        """Close the MCP session and connection. No-op when not connected."""
        async with self._connect_lock:
            task, closing = self._session_task, self._closing
            self._session_task = None
            self._closing = None
            self._session = None
            self._get_session_id = None
            if task is None:
                return

            closing.set()
            await task
            self._logger.info("Disconnected from MCP server", {"url": self.mcp_url})

    close = disconnect

    async def __aenter__(self) -> "Scope3Client":
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.disconnect()

    async def _ensure_session(self) -> ClientSession:
        session = self._session
        if session is None:
            await self.connect()
            session = self._session
        if session is None:
            raise MCPConnectionError("Session closed")
        return session

    async def list_tools(self) -> list[dict]:
        """List tools exposed by the server.

        Returns:
            Tool descriptors with name, description and input schema
        """
        session = await self._ensure_session()
        result = await session.list_tools()
        self._tools = {
            tool.name: {
                "name": tool.name,
                "description": tool.description or "",
                "schema": tool.inputSchema if hasattr(tool, "inputSchema") else {},
            }
            for tool in result.tools
        }
        return list(self._tools.values())

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]] = None) -> Any:
        """Call an MCP tool and reconcile its result.

        Args:
            name: Tool name (e.g., 'media_buy_create', 'agent_list')
            arguments: Tool arguments as a dict

        Returns:
            The structured payload of the result (see reconciler)

        Raises:
            MCPConnectionError: Connecting failed
            ProtocolViolationError: The result had no structured payload
            ToolExecutionError: The server reported the call as failed
        """
        arguments = arguments or {}
        session = await self._ensure_session()

        request_snapshot = None
        if self.debug:
            request_snapshot = sanitize(arguments)
            self._logger.debug("MCP request", {"tool": name, "request": request_snapshot})

        started = time.perf_counter()
        raw = await session.call_tool(name, arguments)
        parsed = parse_call_result(name, raw)
        value = reconcile(name, parsed, self._policy)

        if self.debug:
            duration_ms = (time.perf_counter() - started) * 1000
            response_snapshot = sanitize(value)
            self._last_debug_info = DebugInfo(
                tool_name=name,
                request=request_snapshot,
                response=response_snapshot,
                duration_ms=duration_ms,
                raw_response=parsed.text if isinstance(parsed, TextOnlyResult) else None,
            )
            self._logger.debug(
                "MCP response",
                {"tool": name, "response": response_snapshot, "durationMs": round(duration_ms, 2)},
            )

        return value
