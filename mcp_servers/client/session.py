"""
MCP client session helper.
==========================
Connects to one MCP server over any of the three transports and exposes the
two calls the command-line clients need: list the tools, call a tool.

  stdio       : the server is launched as a child process (JSON-RPC on stdin/stdout)
  sse         : the server is already running, e.g. http://127.0.0.1:8080/sse
  streamable  : the server is already running, e.g. http://127.0.0.1:8080/mcp

Usage:
    async with McpClientSession.sse("http://127.0.0.1:8080/sse") as client:
        for tool in await client.list_tools():
            print(tool.name)
        result = await client.call_tool("text_to_image", {"prompt": "a cat"})
        print(render_content(result))
"""

import base64
import sys
from contextlib import AsyncExitStack
from typing import Any, Callable, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.sse import sse_client
from mcp.client.stdio import stdio_client
from mcp.client.streamable_http import streamablehttp_client
from mcp.types import CallToolResult, ImageContent, TextContent, Tool


class McpClientSession:
    """
    One initialized ``ClientSession`` plus the transport it runs on.

    Build it with ``stdio()``, ``sse()`` or ``streamable_http()`` and use it
    as an async context manager; leaving the block closes the session and
    the transport (and stops a stdio child process).
    """

    def __init__(self, connect: Callable[[], Any], label: str):
        # connect() returns the transport's async context manager
        self._connect = connect
        self.label = label
        self._stack: Optional[AsyncExitStack] = None
        self._session: Optional[ClientSession] = None

    @classmethod
    def stdio(cls, command: str, args: list[str], env: Optional[dict[str, str]] = None) -> "McpClientSession":
        params = StdioServerParameters(command=command, args=args, env=env)
        return cls(lambda: stdio_client(params), label=f"stdio:{command}")

    @classmethod
    def sse(cls, url: str) -> "McpClientSession":
        return cls(lambda: sse_client(url), label=_redact(url))

    @classmethod
    def streamable_http(cls, url: str) -> "McpClientSession":
        return cls(lambda: streamablehttp_client(url), label=_redact(url))

    async def __aenter__(self) -> "McpClientSession":
        self._stack = AsyncExitStack()
        try:
            # stdio/sse yield (read, write); streamable HTTP adds a session-id getter
            streams = await self._stack.enter_async_context(self._connect())
            read, write = streams[0], streams[1]
            self._session = await self._stack.enter_async_context(ClientSession(read, write))
            await self._session.initialize()
        except BaseException:
            await self._stack.aclose()
            raise
        print(f"[MCP] Connected to {self.label}", file=sys.stderr)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._stack is not None:
            await self._stack.aclose()
        self._stack = None
        self._session = None

    @property
    def session(self) -> ClientSession:
        if self._session is None:
            raise RuntimeError("MCP session is not connected")
        return self._session

    async def list_tools(self) -> list[Tool]:
        result = await self.session.list_tools()
        return list(result.tools)

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]] = None) -> CallToolResult:
        return await self.session.call_tool(name, arguments=arguments or {})


def render_block(block) -> str:
    if isinstance(block, TextContent):
        return block.text
    if isinstance(block, ImageContent):
        size = len(base64.b64decode(block.data))
        return f"[image {block.mimeType}, {size} bytes]"
    return str(block)


def render_content(result: CallToolResult) -> str:
    """Turn the content blocks of a tool result into printable text."""
    parts = [render_block(block) for block in result.content]
    return "\n".join(parts) if parts else "Tool returned no output."


def _redact(url: str) -> str:
    # Keys travel in the query string (e.g. AMap); keep them out of logs
    return url.split("?", 1)[0]
