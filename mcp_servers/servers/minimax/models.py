"""
Typed views of the MiniMax responses.

Each endpoint gets a small pydantic model. ``decode`` validates a raw JSON
document against one and raises ``ResponseShapeError`` naming the first
field that did not match, so handlers never navigate untyped dicts.
"""

from typing import Annotated, Any, Optional, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, model_validator

from .errors import ResponseShapeError

M = TypeVar("M", bound=BaseModel)


def _id_to_str(value: Any) -> Any:
    # MiniMax returns numeric ids from some endpoints and strings from others
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


VendorID = Annotated[str, BeforeValidator(_id_to_str)]


class VendorModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


def _text_or_none(value: Any) -> Any:
    # only a string counts as a status message
    return value if isinstance(value, str) else None


class BaseResp(VendorModel):
    status_code: int = 0
    status_msg: Annotated[Optional[str], BeforeValidator(_text_or_none)] = None


# ── text_to_audio ──────────────────────────────────────────────────────


class AudioData(VendorModel):
    audio: str = Field(min_length=1)


class TextToAudioResponse(VendorModel):
    data: AudioData


# ── list_voices ────────────────────────────────────────────────────────


class Voice(VendorModel):
    voice_id: str
    voice_name: Optional[str] = None


class VoiceListResponse(VendorModel):
    system_voice: Optional[list[Voice]] = None
    voice_cloning: Optional[list[Voice]] = None

    @model_validator(mode="after")
    def _has_voices(self):
        if self.system_voice is None and self.voice_cloning is None:
            raise ValueError("missing voice information")
        return self


# ── voice_clone ────────────────────────────────────────────────────────


class UploadedFile(VendorModel):
    file_id: VendorID = Field(min_length=1)


class UploadResponse(VendorModel):
    file: UploadedFile


class VoiceCloneResponse(VendorModel):
    demo_audio: Optional[str] = None


# ── generate_video ─────────────────────────────────────────────────────


class VideoTaskResponse(VendorModel):
    task_id: VendorID = Field(min_length=1)


class VideoStatusResponse(VendorModel):
    status: str
    file_id: Optional[VendorID] = None


class RetrievedFile(VendorModel):
    download_url: Optional[str] = None


class FileRetrieveResponse(VendorModel):
    file: RetrievedFile


# ── text_to_image ──────────────────────────────────────────────────────


class ImageData(VendorModel):
    image_urls: Optional[list[str]] = None
    image_base64: Optional[list[str]] = None


class ImageGenerationResponse(VendorModel):
    data: ImageData


def decode(model: Type[M], document: Any) -> M:
    """Validate *document* against *model*, raising ``ResponseShapeError``."""
    try:
        return model.model_validate(document)
    except ValidationError as e:
        first = e.errors()[0]
        path = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ResponseShapeError(
            f"Invalid API response format: {first.get('msg', 'unexpected shape')}",
            field_path=path,
        ) from e
