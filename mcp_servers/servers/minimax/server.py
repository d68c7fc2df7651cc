"""
MiniMax MCP Server.

Exposes MiniMax's generative media API as MCP tools:
- text_to_audio: Text to speech, returned as URL or saved file
- list_voices: List system and cloned voices
- voice_clone: Clone a voice from an audio file
- generate_video: Submit a video job and wait for the result
- text_to_image: Generate images, returned as URLs or inline images

Configuration comes from the environment / .env (see mcp_servers/config.py).
The transport is chosen by MINIMAX_MCP_MODE: stdio (default), sse or
streamable.

RUN:
    python -m mcp_servers.servers.minimax.server
"""

# NOTE: no `from __future__ import annotations` here, FastMCP needs the
# real Annotated types to build the tool schemas.

import sys
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from mcp_servers.config import ConfigError, ServerMode, Settings, load_settings

from . import minimax_descriptions as d
from .api_client import MinimaxAPIClient
from .errors import MinimaxError
from .tools import MinimaxTools

SERVER_NAME = "MiniMax MCP"

# Config mode -> FastMCP transport name
TRANSPORTS = {
    ServerMode.STDIO: "stdio",
    ServerMode.SSE: "sse",
    ServerMode.STREAMABLE: "streamable-http",
}


async def _run_tool(name: str, call):
    """Await a handler, reporting MiniMax failures as tool errors."""
    try:
        return await call
    except MinimaxError as e:
        print(f"[MiniMax] {name} failed: {e}", file=sys.stderr)
        raise ToolError(str(e)) from e


def create_server(settings: Settings, client: Optional[MinimaxAPIClient] = None) -> FastMCP:
    """Build the FastMCP server with all MiniMax tools registered."""
    mcp = FastMCP(SERVER_NAME, host=settings.host, port=settings.port)
    tools = MinimaxTools(client or MinimaxAPIClient(settings.api_key, settings.api_host), settings)

    # ------------------------------------------------------------------
    # 1. Text to audio
    # ------------------------------------------------------------------
    @mcp.tool(description=d.TEXT_TO_AUDIO_DESCRIPTION)
    async def text_to_audio(
        text: Annotated[str, Field(description=d.TEXT_PARAM)],
        voice_id: Annotated[Optional[str], Field(description=d.VOICE_ID_PARAM)] = None,
        model: Annotated[Optional[str], Field(description=d.T2A_MODEL_PARAM)] = None,
        speed: Annotated[Optional[float], Field(description=d.SPEED_PARAM)] = None,
        vol: Annotated[Optional[float], Field(description=d.VOL_PARAM)] = None,
        pitch: Annotated[Optional[int], Field(description=d.PITCH_PARAM)] = None,
        emotion: Annotated[Optional[str], Field(description=d.EMOTION_PARAM)] = None,
        sample_rate: Annotated[Optional[int], Field(description=d.SAMPLE_RATE_PARAM)] = None,
        bitrate: Annotated[Optional[int], Field(description=d.BITRATE_PARAM)] = None,
        channel: Annotated[Optional[int], Field(description=d.CHANNEL_PARAM)] = None,
        format: Annotated[Optional[str], Field(description=d.FORMAT_PARAM)] = None,
        language_boost: Annotated[Optional[str], Field(description=d.LANGUAGE_BOOST_PARAM)] = None,
        output_directory: Annotated[Optional[str], Field(description=d.OUTPUT_DIRECTORY_PARAM)] = None,
    ) -> str:
        return await _run_tool(
            "text_to_audio",
            tools.text_to_audio(
                text,
                voice_id=voice_id,
                model=model,
                speed=speed,
                vol=vol,
                pitch=pitch,
                emotion=emotion,
                sample_rate=sample_rate,
                bitrate=bitrate,
                channel=channel,
                audio_format=format,
                language_boost=language_boost,
                output_directory=output_directory,
            ),
        )

    # ------------------------------------------------------------------
    # 2. List voices
    # ------------------------------------------------------------------
    @mcp.tool(description=d.LIST_VOICES_DESCRIPTION)
    async def list_voices(
        voice_type: Annotated[Optional[str], Field(description=d.VOICE_TYPE_PARAM)] = None,
    ) -> str:
        return await _run_tool("list_voices", tools.list_voices(voice_type))

    # ------------------------------------------------------------------
    # 3. Voice clone
    # ------------------------------------------------------------------
    @mcp.tool(description=d.VOICE_CLONE_DESCRIPTION)
    async def voice_clone(
        voice_id: Annotated[str, Field(description=d.CLONE_VOICE_ID_PARAM)],
        file: Annotated[str, Field(description=d.CLONE_FILE_PARAM)],
        text: Annotated[str, Field(description=d.CLONE_TEXT_PARAM)],
        is_url: Annotated[bool, Field(description=d.IS_URL_PARAM)] = False,
        output_directory: Annotated[Optional[str], Field(description=d.OUTPUT_DIRECTORY_PARAM)] = None,
    ) -> str:
        return await _run_tool(
            "voice_clone",
            tools.voice_clone(voice_id, file, text, is_url=is_url, output_directory=output_directory),
        )

    # ------------------------------------------------------------------
    # 4. Generate video
    # ------------------------------------------------------------------
    @mcp.tool(description=d.GENERATE_VIDEO_DESCRIPTION)
    async def generate_video(
        prompt: Annotated[str, Field(description=d.VIDEO_PROMPT_PARAM)],
        model: Annotated[Optional[str], Field(description=d.VIDEO_MODEL_PARAM)] = None,
        first_frame_image: Annotated[Optional[str], Field(description=d.FIRST_FRAME_PARAM)] = None,
        output_directory: Annotated[Optional[str], Field(description=d.OUTPUT_DIRECTORY_PARAM)] = None,
    ) -> str:
        return await _run_tool(
            "generate_video",
            tools.generate_video(
                prompt,
                model=model,
                first_frame_image=first_frame_image,
                output_directory=output_directory,
            ),
        )

    # ------------------------------------------------------------------
    # 5. Text to image
    # ------------------------------------------------------------------
    # Returns text or a list of Image blocks, so no return annotation
    @mcp.tool(description=d.TEXT_TO_IMAGE_DESCRIPTION)
    async def text_to_image(
        prompt: Annotated[str, Field(description=d.IMAGE_PROMPT_PARAM)],
        model: Annotated[Optional[str], Field(description=d.IMAGE_MODEL_PARAM)] = None,
        aspect_ratio: Annotated[Optional[str], Field(description=d.ASPECT_RATIO_PARAM)] = None,
        n: Annotated[Optional[int], Field(description=d.N_PARAM)] = None,
        prompt_optimizer: Annotated[Optional[bool], Field(description=d.PROMPT_OPTIMIZER_PARAM)] = None,
        response_format: Annotated[Optional[str], Field(description=d.RESPONSE_FORMAT_PARAM)] = None,
        output_directory: Annotated[Optional[str], Field(description=d.OUTPUT_DIRECTORY_PARAM)] = None,
    ):
        return await _run_tool(
            "text_to_image",
            tools.text_to_image(
                prompt,
                model=model,
                aspect_ratio=aspect_ratio,
                n=n,
                prompt_optimizer=prompt_optimizer,
                response_format=response_format,
                output_directory=output_directory,
            ),
        )

    return mcp


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"[MiniMax] Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    mcp = create_server(settings)
    print(
        f"[MiniMax] Starting {SERVER_NAME} (mode={settings.mode}, addr={settings.addr}, "
        f"resource_mode={settings.resource_mode})",
        file=sys.stderr,
    )
    mcp.run(transport=TRANSPORTS[settings.mode])


if __name__ == "__main__":
    main()
