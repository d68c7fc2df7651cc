"""
Gaode (AMap) MCP client.

AMap hosts its own MCP server over SSE; this client connects with the key
from GAODE_API_KEY, lists the available map tools and calls one of them.

    python -m mcp_servers.client.gaode_client
    python -m mcp_servers.client.gaode_client --tool maps_geo --arguments '{"address": "..."}'
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from mcp_servers.client.session import McpClientSession, render_block
from mcp_servers.config import ConfigError, load_gaode_key

AMAP_SSE_URL = "https://mcp.amap.com/sse?key={key}"
DEFAULT_TOOL = "maps_geo"
DEFAULT_ARGUMENTS = {"address": "厦门高崎国际机场", "city": "厦门"}


def build_sse_url(key: str) -> str:
    return AMAP_SSE_URL.format(key=key)


def parse_arguments(raw: Optional[str]) -> dict:
    """Parse the --arguments JSON object."""
    if not raw:
        return dict(DEFAULT_ARGUMENTS)
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"--arguments is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise ValueError("--arguments must be a JSON object")
    return value


async def run(key: str, tool: str, arguments: dict, verbose: bool = False) -> int:
    async with McpClientSession.sse(build_sse_url(key)) as client:
        tools = await client.list_tools()
        print(f"[Gaode] {len(tools)} tool(s) available", file=sys.stderr)
        if verbose:
            for t in tools:
                print(f"  - {t.name}", file=sys.stderr)

        result = await client.call_tool(tool, arguments)
        if result.isError:
            print(f"[Gaode] call to {tool} failed", file=sys.stderr)

        for i, block in enumerate(result.content, 1):
            print(f"{i}: {render_block(block)}")

        return 1 if result.isError else 0


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Call a tool on the AMap MCP server.")
    parser.add_argument("--tool", default=DEFAULT_TOOL, help=f"Tool name (default {DEFAULT_TOOL})")
    parser.add_argument("--arguments", help="Tool arguments as a JSON object")
    parser.add_argument("--verbose", action="store_true", help="Print the tool list")
    args = parser.parse_args(argv)

    try:
        key = load_gaode_key()
        arguments = parse_arguments(args.arguments)
    except (ConfigError, ValueError) as e:
        print(f"[Gaode] {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(asyncio.run(run(key, args.tool, arguments, verbose=args.verbose)))


if __name__ == "__main__":
    main()
