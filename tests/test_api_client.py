"""Tests for the MiniMax HTTP client."""

import pytest
import requests

from mcp_servers.servers.minimax.api_client import MinimaxAPIClient
from mcp_servers.servers.minimax.errors import (
    LocalIOError,
    ResponseShapeError,
    TransportError,
    VendorHTTPError,
    VendorLogicalError,
)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, content=b""):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else str(payload)
        self.content = content

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(payload={"base_resp": {"status_code": 0}})
        self.error = error
        self.requests = []

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        self.requests.append(("GET", url, kwargs))
        if self.error:
            raise self.error
        return self.response


def make_client(session):
    return MinimaxAPIClient("secret", "https://api.minimax.test/", session=session)


def test_post_sends_bearer_and_json():
    session = FakeSession(FakeResponse(payload={"data": {"audio": "ab"}, "base_resp": {"status_code": 0}}))
    client = make_client(session)

    document = client.post("/v1/t2a_v2", {"text": "hi"})

    assert document["data"]["audio"] == "ab"
    method, url, kwargs = session.requests[0]
    assert method == "POST"
    assert url == "https://api.minimax.test/v1/t2a_v2"
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["json"] == {"text": "hi"}
    assert kwargs["timeout"] == 30


def test_get_passes_query_params():
    session = FakeSession()
    make_client(session).get("/v1/query/video_generation", {"task_id": "t-1"})

    method, url, kwargs = session.requests[0]
    assert method == "GET"
    assert kwargs["params"] == {"task_id": "t-1"}
    assert kwargs["timeout"] == 30


def test_non_2xx_raises_vendor_http_error():
    session = FakeSession(FakeResponse(status_code=500, payload=None, text="boom"))

    with pytest.raises(VendorHTTPError) as exc_info:
        make_client(session).post("/v1/t2a_v2", {})

    assert exc_info.value.status_code == 500
    assert exc_info.value.body == "boom"
    assert isinstance(exc_info.value, TransportError)


def test_nonzero_embedded_status_is_logical_error_on_http_200():
    payload = {"base_resp": {"status_code": 1004, "status_msg": "authentication failed"}}
    session = FakeSession(FakeResponse(status_code=200, payload=payload))

    with pytest.raises(VendorLogicalError) as exc_info:
        make_client(session).get("/v1/files/retrieve")

    assert exc_info.value.code == 1004
    assert exc_info.value.message == "authentication failed"


def test_logical_error_without_message_uses_default():
    session = FakeSession(FakeResponse(payload={"base_resp": {"status_code": 2013}}))

    with pytest.raises(VendorLogicalError) as exc_info:
        make_client(session).post("/v1/image_generation", {})

    assert exc_info.value.message == "unknown error"


@pytest.mark.parametrize("status_msg", [None, 42])
def test_logical_error_with_non_string_message(status_msg):
    payload = {"base_resp": {"status_code": 1004, "status_msg": status_msg}}
    session = FakeSession(FakeResponse(payload=payload))

    with pytest.raises(VendorLogicalError) as exc_info:
        make_client(session).post("/v1/t2a_v2", {})

    assert exc_info.value.code == 1004
    assert exc_info.value.message == "unknown error"


def test_zero_status_with_null_message_is_success():
    payload = {"task_id": "t", "base_resp": {"status_code": 0, "status_msg": None}}
    session = FakeSession(FakeResponse(payload=payload))

    assert make_client(session).post("/v1/video_generation", {}) == payload


def test_missing_base_resp_is_success():
    session = FakeSession(FakeResponse(payload={"task_id": "abc"}))
    assert make_client(session).post("/v1/video_generation", {}) == {"task_id": "abc"}


def test_connection_failure_raises_transport_error():
    session = FakeSession(error=requests.ConnectionError("refused"))

    with pytest.raises(TransportError):
        make_client(session).post("/v1/t2a_v2", {})


def test_invalid_json_raises_shape_error():
    session = FakeSession(FakeResponse(status_code=200, payload=None, text="<html>"))

    with pytest.raises(ResponseShapeError):
        make_client(session).post("/v1/t2a_v2", {})


def test_upload_is_multipart_with_longer_timeout(tmp_path):
    audio = tmp_path / "sample.mp3"
    audio.write_bytes(b"ID3")
    session = FakeSession(FakeResponse(payload={"file": {"file_id": 123}}))

    document = make_client(session).upload_file(str(audio))

    assert document["file"]["file_id"] == 123
    method, url, kwargs = session.requests[0]
    assert url.endswith("/v1/files/upload")
    assert kwargs["timeout"] == 60
    assert kwargs["data"] == {"purpose": "voice_clone"}
    assert kwargs["files"]["file"][0] == "sample.mp3"


def test_upload_missing_file_raises_local_io_error(tmp_path):
    session = FakeSession()

    with pytest.raises(LocalIOError):
        make_client(session).upload_file(str(tmp_path / "missing.mp3"))
    assert session.requests == []


def test_download_returns_bytes_without_credentials():
    session = FakeSession(FakeResponse(content=b"video-bytes", payload={}))

    assert make_client(session).download("https://cdn.test/v.mp4") == b"video-bytes"
    method, url, kwargs = session.requests[0]
    assert "headers" not in kwargs


def test_download_http_error():
    session = FakeSession(FakeResponse(status_code=404, payload=None, text="not found"))

    with pytest.raises(VendorHTTPError):
        make_client(session).download("https://cdn.test/missing.mp4")
