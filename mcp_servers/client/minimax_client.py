"""
MiniMax MCP demo client.

Connects to a MiniMax MCP server, prints its tools, and asks for an image.

    # server already running with MINIMAX_MCP_MODE=sse
    python -m mcp_servers.client.minimax_client --prompt "a cute little snake, pencil drawing"

    # launch the server as a child process instead
    python -m mcp_servers.client.minimax_client --transport stdio --prompt "..."

Inline images in the result are written to --output-dir.
"""

import argparse
import asyncio
import base64
import sys
from typing import Optional

from mcp.types import CallToolResult, ImageContent

from mcp_servers.client.session import McpClientSession, render_content
from mcp_servers.servers.minimax.storage import build_output_file, build_output_path, write_output_file

DEFAULT_SSE_URL = "http://127.0.0.1:8080/sse"
DEFAULT_STREAMABLE_URL = "http://127.0.0.1:8080/mcp"


def save_images(result: CallToolResult, prompt: str, output_dir: Optional[str] = None) -> list[str]:
    """Write every inline image of *result* to disk and return the paths."""
    directory = build_output_path(output_dir)
    saved = []
    for i, block in enumerate(result.content):
        if not isinstance(block, ImageContent):
            continue
        extension = block.mimeType.split("/")[-1] or "jpeg"
        path = build_output_file("image", f"{i}_{prompt}", directory, extension)
        saved.append(str(write_output_file(path, base64.b64decode(block.data))))
    return saved


def _build_session(args: argparse.Namespace) -> McpClientSession:
    if args.transport == "stdio":
        return McpClientSession.stdio(sys.executable, ["-m", "mcp_servers.servers.minimax.server"])
    if args.transport == "streamable":
        return McpClientSession.streamable_http(args.url or DEFAULT_STREAMABLE_URL)
    return McpClientSession.sse(args.url or DEFAULT_SSE_URL)


async def run(args: argparse.Namespace) -> int:
    async with _build_session(args) as client:
        for tool in await client.list_tools():
            first_line = (tool.description or "").strip().splitlines()[:1]
            print(f"{tool.name}: {first_line[0] if first_line else ''}")

        result = await client.call_tool("text_to_image", {"prompt": args.prompt})
        print(render_content(result))

        if result.isError:
            print("[MiniMax] text_to_image failed", file=sys.stderr)
            return 1

        for path in save_images(result, args.prompt, args.output_dir):
            print(f"Image saved as: {path}")
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Call the MiniMax MCP server's text_to_image tool.")
    parser.add_argument("--transport", choices=["sse", "streamable", "stdio"], default="sse")
    parser.add_argument("--url", help="Server URL for sse/streamable transports")
    parser.add_argument("--prompt", required=True, help="Image prompt")
    parser.add_argument("--output-dir", help="Where to save inline images (default ~/Desktop)")
    args = parser.parse_args(argv)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
