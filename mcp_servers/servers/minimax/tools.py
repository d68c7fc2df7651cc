"""
MiniMax tool handlers.

Each public coroutine on ``MinimaxTools`` implements one MCP tool:
validate the arguments, fill in defaults, call the vendor, and shape the
response according to the deployment's resource mode:

- ``url``  : return the vendor-hosted URL as text
- ``data`` : download / decode the bytes and save them under the output
             directory (images are returned inline instead)

Failures are raised as ``MinimaxError`` subclasses; ``server.py`` turns
them into error results for the caller.
"""

import base64
import binascii
import mimetypes
import os
import sys
import tempfile
from typing import List, Optional, Union
from urllib.parse import urlparse

from mcp.server.fastmcp import Image

from mcp_servers.config import ResourceMode, Settings
from mcp_servers.core.thread_pool import run_in_thread

from .constants import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_BITRATE,
    DEFAULT_CHANNEL,
    DEFAULT_EMOTION,
    DEFAULT_FORMAT,
    DEFAULT_IMAGE_COUNT,
    DEFAULT_LANGUAGE_BOOST,
    DEFAULT_PITCH,
    DEFAULT_PROMPT_OPTIMIZER,
    DEFAULT_SAMPLE_RATE,
    DEFAULT_SPEED,
    DEFAULT_T2A_MODEL,
    DEFAULT_T2I_MODEL,
    DEFAULT_T2V_MODEL,
    DEFAULT_VC_MODEL,
    DEFAULT_VOICE_ID,
    DEFAULT_VOICE_TYPE,
    DEFAULT_VOLUME,
    GET_VOICE_ENDPOINT,
    IMAGE_GENERATION_ENDPOINT,
    T2A_ENDPOINT,
    VOICE_CLONE_ENDPOINT,
)
from .errors import LocalIOError, ResponseShapeError, ValidationError
from .models import (
    ImageGenerationResponse,
    TextToAudioResponse,
    UploadResponse,
    VoiceCloneResponse,
    VoiceListResponse,
    decode,
)
from .storage import build_output_file, build_output_path, write_output_file
from .video import VideoJobPoller

_INLINE_PREFIXES = ("http://", "https://", "data:")


def _require(**fields) -> None:
    """Raise ``ValidationError`` for the first missing or blank argument."""
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"The {name} parameter must be provided")


class MinimaxTools:
    """
    Handlers for the MiniMax MCP tools.

    Args:
        client: ``MinimaxAPIClient`` used for every vendor call.
        settings: Deployment settings (resource mode, base output path).
        poller: Video job poller; defaults to one built on *client*.
    """

    def __init__(self, client, settings: Settings, poller: Optional[VideoJobPoller] = None):
        self.client = client
        self.settings = settings
        self.poller = poller or VideoJobPoller(client)

    @property
    def url_mode(self) -> bool:
        return self.settings.resource_mode == ResourceMode.URL

    def _output_dir(self, output_directory: Optional[str]):
        return build_output_path(output_directory, self.settings.base_path)

    # ------------------------------------------------------------------
    # 1. Text to audio
    # ------------------------------------------------------------------
    async def text_to_audio(
        self,
        text: str,
        voice_id: Optional[str] = None,
        model: Optional[str] = None,
        speed: Optional[float] = None,
        vol: Optional[float] = None,
        pitch: Optional[int] = None,
        emotion: Optional[str] = None,
        sample_rate: Optional[int] = None,
        bitrate: Optional[int] = None,
        channel: Optional[int] = None,
        audio_format: Optional[str] = None,
        language_boost: Optional[str] = None,
        output_directory: Optional[str] = None,
    ) -> str:
        _require(text=text)

        voice_id = voice_id or DEFAULT_VOICE_ID
        model = model or DEFAULT_T2A_MODEL
        speed = DEFAULT_SPEED if speed is None else speed
        vol = DEFAULT_VOLUME if vol is None else vol
        pitch = DEFAULT_PITCH if pitch is None else pitch
        emotion = emotion or DEFAULT_EMOTION
        sample_rate = sample_rate or DEFAULT_SAMPLE_RATE
        bitrate = bitrate or DEFAULT_BITRATE
        channel = channel or DEFAULT_CHANNEL
        audio_format = audio_format or DEFAULT_FORMAT
        language_boost = language_boost or DEFAULT_LANGUAGE_BOOST

        payload = {
            "model": model,
            "text": text,
            "voice_setting": {
                "voice_id": voice_id,
                "speed": speed,
                "vol": vol,
                "pitch": pitch,
                "emotion": emotion,
            },
            "audio_setting": {
                "sample_rate": sample_rate,
                "bitrate": bitrate,
                "format": audio_format,
                "channel": channel,
            },
            "language_boost": language_boost,
        }
        if self.url_mode:
            payload["output_format"] = "url"

        document = await run_in_thread(self.client.post, T2A_ENDPOINT, payload)
        audio = decode(TextToAudioResponse, document).data.audio

        if self.url_mode:
            return f"Success. Audio URL: {audio}"

        # Inline audio arrives hex encoded
        try:
            audio_bytes = bytes.fromhex(audio)
        except ValueError as e:
            raise ResponseShapeError("Failed to decode audio data", field_path="data.audio") from e

        output_file = build_output_file("t2a", text, self._output_dir(output_directory), audio_format)
        write_output_file(output_file, audio_bytes)
        print(f"[MiniMax] Audio saved: {output_file}", file=sys.stderr)
        return f"Success. File saved as: {output_file}. Voice used: {voice_id}"

    # ------------------------------------------------------------------
    # 2. List voices
    # ------------------------------------------------------------------
    async def list_voices(self, voice_type: Optional[str] = None) -> str:
        voice_type = voice_type or DEFAULT_VOICE_TYPE

        document = await run_in_thread(
            self.client.post, GET_VOICE_ENDPOINT, {"voice_type": voice_type}
        )
        voices = decode(VoiceListResponse, document)

        lines = ["Available voices list:", ""]
        if voices.system_voice:
            lines.append("System voices:")
            for i, voice in enumerate(voices.system_voice, 1):
                lines.append(f"{i}. Name: {voice.voice_name}, ID: {voice.voice_id}")
            lines.append("")
        else:
            lines.extend(["No system voices", ""])

        if voices.voice_cloning:
            lines.append("Voice cloning:")
            for i, voice in enumerate(voices.voice_cloning, 1):
                lines.append(f"{i}. Name: {voice.voice_name}, ID: {voice.voice_id}")
        else:
            lines.append("No voice cloning")

        return "\n".join(lines)

    # ------------------------------------------------------------------
    # 3. Voice clone
    # ------------------------------------------------------------------
    async def voice_clone(
        self,
        voice_id: str,
        file: str,
        text: str,
        is_url: bool = False,
        output_directory: Optional[str] = None,
    ) -> str:
        _require(voice_id=voice_id, file=file, text=text)

        # Step 1: get a file_id for the source audio
        if is_url:
            file_id = await self._upload_from_url(file)
        else:
            if not os.path.isfile(file):
                raise ValidationError(f"Local file does not exist: {file}")
            file_id = await self._upload(file)

        # Step 2: clone
        payload = {
            "file_id": file_id,
            "voice_id": voice_id,
            "text": text,
            "model": DEFAULT_VC_MODEL,
        }
        document = await run_in_thread(self.client.post, VOICE_CLONE_ENDPOINT, payload)
        demo_audio = decode(VoiceCloneResponse, document).demo_audio

        if not demo_audio:
            return f"Voice cloning successful. Voice ID: {voice_id}"

        if self.url_mode:
            return f"Success. Demo audio URL: {demo_audio}"

        audio_bytes = await run_in_thread(self.client.download, demo_audio)
        output_file = build_output_file("voice_clone", text, self._output_dir(output_directory), "wav")
        write_output_file(output_file, audio_bytes)
        return f"Voice cloning successful: Voice ID: {voice_id}, demo audio saved as: {output_file}"

    async def _upload(self, path: str) -> str:
        document = await run_in_thread(self.client.upload_file, path)
        return decode(UploadResponse, document).file.file_id

    async def _upload_from_url(self, url: str) -> str:
        """Download *url* to a temporary file, upload it, and remove the file."""
        content = await run_in_thread(self.client.download, url)

        suffix = os.path.splitext(urlparse(url).path)[1] or ".mp3"
        try:
            fd, tmp_path = tempfile.mkstemp(prefix="voice_clone_", suffix=suffix)
        except OSError as e:
            raise LocalIOError(f"Failed to create temporary file: {e}") from e

        try:
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(content)
            except OSError as e:
                raise LocalIOError(f"Failed to write temporary file: {e}") from e
            return await self._upload(tmp_path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    # ------------------------------------------------------------------
    # 4. Generate video
    # ------------------------------------------------------------------
    async def generate_video(
        self,
        prompt: str,
        model: Optional[str] = None,
        first_frame_image: Optional[str] = None,
        output_directory: Optional[str] = None,
    ) -> str:
        _require(prompt=prompt)

        model = model or DEFAULT_T2V_MODEL
        payload = {"model": model, "prompt": prompt}
        if first_frame_image:
            payload["first_frame_image"] = _first_frame_value(first_frame_image)

        job = await self.poller.run(payload)

        if self.url_mode:
            return f"Success. Video URL: {job.download_url}"

        video_bytes = await run_in_thread(self.client.download, job.download_url)
        output_file = build_output_file("video", job.task_id, self._output_dir(output_directory), "mp4")
        write_output_file(output_file, video_bytes)
        print(f"[MiniMax] Video saved: {output_file}", file=sys.stderr)
        return f"Success. Video saved as: {output_file}"

    # ------------------------------------------------------------------
    # 5. Text to image
    # ------------------------------------------------------------------
    async def text_to_image(
        self,
        prompt: str,
        model: Optional[str] = None,
        aspect_ratio: Optional[str] = None,
        n: Optional[int] = None,
        prompt_optimizer: Optional[bool] = None,
        response_format: Optional[str] = None,
        output_directory: Optional[str] = None,
    ) -> Union[str, List[Image]]:
        _require(prompt=prompt)

        model = model or DEFAULT_T2I_MODEL
        aspect_ratio = aspect_ratio or DEFAULT_ASPECT_RATIO
        n = n or DEFAULT_IMAGE_COUNT
        if prompt_optimizer is None:
            prompt_optimizer = DEFAULT_PROMPT_OPTIMIZER
        response_format = response_format or ("url" if self.url_mode else "base64")

        payload = {
            "model": model,
            "prompt": prompt,
            "aspect_ratio": aspect_ratio,
            "n": n,
            "prompt_optimizer": prompt_optimizer,
            "response_format": response_format,
        }
        document = await run_in_thread(self.client.post, IMAGE_GENERATION_ENDPOINT, payload)
        data = decode(ImageGenerationResponse, document).data

        image_urls = data.image_urls or []
        image_base64 = data.image_base64 or []
        if not image_urls and not image_base64:
            raise ResponseShapeError("No images generated", field_path="data")

        if self.url_mode and image_urls:
            return "Success. Image URLs:\n" + "\n".join(image_urls)

        if image_base64:
            return [Image(data=_decode_base64_image(s), format="jpeg") for s in image_base64]

        # data mode, but the vendor only gave us URLs: save each one
        output_dir = self._output_dir(output_directory)
        saved = []
        for i, url in enumerate(image_urls):
            image_bytes = await run_in_thread(self.client.download, url)
            output_file = build_output_file("image", f"{i}_{prompt}", output_dir, "jpeg")
            saved.append(str(write_output_file(output_file, image_bytes)))
        return "Success. Images saved as:\n" + "\n".join(saved)


def _first_frame_value(first_frame_image: str) -> str:
    """Pass URLs and data URIs through; inline a local image as a data URI."""
    if first_frame_image.startswith(_INLINE_PREFIXES):
        return first_frame_image

    if not os.path.isfile(first_frame_image):
        raise ValidationError(f"First frame image file does not exist: {first_frame_image}")

    try:
        with open(first_frame_image, "rb") as f:
            encoded = base64.b64encode(f.read()).decode("ascii")
    except OSError as e:
        raise LocalIOError(f"Failed to read image file: {e}") from e

    mime_type = mimetypes.guess_type(first_frame_image)[0] or "image/jpeg"
    return f"data:{mime_type};base64,{encoded}"


def _decode_base64_image(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ResponseShapeError("Failed to decode base64 image", field_path="data.image_base64") from e
