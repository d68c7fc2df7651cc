"""Shared fixtures: settings builder and a call-recording MiniMax client stub."""

import os

import pytest

from mcp_servers.config import ResourceMode, Settings


class FakeClient:
    """
    Stand-in for ``MinimaxAPIClient``.

    Responses are keyed by endpoint (or URL for downloads). A value can be a
    dict (returned every time), a list (consumed one item per call) or an
    exception instance (raised).
    """

    def __init__(self, post=None, get=None, upload=None, downloads=None):
        self._post = dict(post or {})
        self._get = dict(get or {})
        self._upload = upload if upload is not None else {"file": {"file_id": "file-1"}}
        self._downloads = dict(downloads or {})
        self.calls = []

    def _respond(self, table, key):
        value = table[key]
        if isinstance(value, list):
            value = value.pop(0)
        if isinstance(value, Exception):
            raise value
        return value

    def post(self, endpoint, payload):
        self.calls.append(("POST", endpoint, payload))
        return self._respond(self._post, endpoint)

    def get(self, endpoint, params=None):
        self.calls.append(("GET", endpoint, params))
        return self._respond(self._get, endpoint)

    def upload_file(self, file_path, purpose="voice_clone"):
        self.calls.append(("UPLOAD", file_path, os.path.exists(file_path)))
        value = self._upload
        if isinstance(value, Exception):
            raise value
        return value

    def download(self, url):
        self.calls.append(("DOWNLOAD", url, None))
        return self._respond(self._downloads, url)

    def calls_to(self, method, endpoint=None):
        return [c for c in self.calls if c[0] == method and (endpoint is None or c[1] == endpoint)]


@pytest.fixture
def make_settings(tmp_path):
    def _make(resource_mode=ResourceMode.URL, base_path=None):
        return Settings(
            api_key="test-key",
            api_host="https://api.minimax.test",
            base_path=str(base_path or tmp_path),
            resource_mode=resource_mode,
        )

    return _make


@pytest.fixture
def fake_client_cls():
    return FakeClient
