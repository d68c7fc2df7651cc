"""
Output file naming for saved audio, images and video.

These helpers only compute paths. Creating the directory and writing the
bytes is done by ``write_output_file``, called by the tool handlers.
"""

import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from .errors import LocalIOError

# Characters replaced with "_" in the label part of a filename
_UNSAFE_CHARS = ' /\\:*?"<>|'
_LABEL_MAX_LEN = 20


def sanitize_filename(name: str) -> str:
    for ch in _UNSAFE_CHARS:
        name = name.replace(ch, "_")
    return name


def build_output_path(explicit_dir: Optional[str] = None, configured_base: Optional[str] = None) -> Path:
    """
    Resolve the directory a tool writes into.

    Order: the per-call directory, the configured base path, ~/Desktop,
    and the system temp directory when no home directory is available.
    """
    if explicit_dir:
        return Path(os.path.expanduser(explicit_dir))
    if configured_base:
        return Path(os.path.expanduser(configured_base))
    try:
        return Path.home() / "Desktop"
    except RuntimeError:
        return Path(tempfile.gettempdir())


def build_output_file(
    prefix: str,
    label: str,
    output_path,
    extension: str,
    now: Optional[datetime] = None,
) -> Path:
    """Return ``{output_path}/{prefix}_{label[:20]}_{YYYYMMDD_HHMMSS}.{extension}``."""
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    label = sanitize_filename(label)[:_LABEL_MAX_LEN]
    return Path(output_path) / f"{prefix}_{label}_{timestamp}.{extension}"


def write_output_file(path: Path, data: bytes) -> Path:
    """Create the parent directory if needed and write *data* to *path*."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise LocalIOError(f"Failed to save file '{path}': {e}") from e
    return path
