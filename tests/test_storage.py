"""Tests for output file naming."""

import re
from datetime import datetime
from pathlib import Path

import pytest

from mcp_servers.servers.minimax import storage
from mcp_servers.servers.minimax.errors import LocalIOError


def test_build_output_file_sanitizes_label():
    path = storage.build_output_file("t2a", "a/b:c", "/tmp", "mp3")

    assert path.parent == Path("/tmp")
    assert re.fullmatch(r"t2a_a_b_c_\d{8}_\d{6}\.mp3", path.name)


def test_build_output_file_uses_timestamp():
    now = datetime(2024, 5, 6, 7, 8, 9)
    path = storage.build_output_file("video", "task-1", "/out", "mp4", now=now)
    assert path.name == "video_task-1_20240506_070809.mp4"


def test_build_output_file_truncates_label_to_20_chars():
    now = datetime(2024, 1, 2, 3, 4, 5)
    path = storage.build_output_file("t2a", "hello world this is a long sentence", "/tmp", "mp3", now=now)
    assert path.name == "t2a_hello_world_this_is__20240102_030405.mp3"


def test_sanitize_replaces_only_unsafe_characters():
    assert storage.sanitize_filename('a b/c\\d:e*f?g"h<i>j|k') == "a_b_c_d_e_f_g_h_i_j_k"
    assert storage.sanitize_filename("héllo-wörld.txt") == "héllo-wörld.txt"


def test_output_path_prefers_explicit_directory():
    assert storage.build_output_path("/explicit", "/configured") == Path("/explicit")


def test_output_path_falls_back_to_configured_base():
    assert storage.build_output_path(None, "/configured") == Path("/configured")


def test_output_path_defaults_to_desktop(monkeypatch, tmp_path):
    monkeypatch.setattr(storage.Path, "home", classmethod(lambda cls: tmp_path))
    assert storage.build_output_path(None, None) == tmp_path / "Desktop"


def test_output_path_uses_temp_dir_without_home(monkeypatch, tmp_path):
    def no_home(cls):
        raise RuntimeError("no home")

    monkeypatch.setattr(storage.Path, "home", classmethod(no_home))
    monkeypatch.setattr(storage.tempfile, "gettempdir", lambda: str(tmp_path))
    assert storage.build_output_path(None, None) == tmp_path


def test_helpers_do_not_touch_filesystem(tmp_path):
    target = tmp_path / "nested"
    storage.build_output_file("image", "x", storage.build_output_path(str(target)), "jpeg")
    assert not target.exists()


def test_write_output_file_creates_parent(tmp_path):
    path = tmp_path / "a" / "b" / "out.bin"
    storage.write_output_file(path, b"\x00\x01")
    assert path.read_bytes() == b"\x00\x01"


def test_write_output_file_wraps_os_errors(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a dir")

    with pytest.raises(LocalIOError):
        storage.write_output_file(blocker / "out.bin", b"data")
