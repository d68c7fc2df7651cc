"""
MiniMax HTTP client.

Thin wrapper around ``requests`` that attaches the bearer credential,
enforces timeouts and turns every failure into a typed error:

- connection problems           -> TransportError
- non-2xx status                -> VendorHTTPError(status_code, body)
- body is not a JSON object     -> ResponseShapeError
- base_resp.status_code != 0    -> VendorLogicalError(code, message)

The client is synchronous; async callers go through
``mcp_servers.core.thread_pool.run_in_thread``.
"""

import os
import sys
from typing import Any, Dict, Optional

import requests

from .constants import FILE_UPLOAD_ENDPOINT, REQUEST_TIMEOUT, UPLOAD_TIMEOUT
from .errors import (
    LocalIOError,
    ResponseShapeError,
    TransportError,
    VendorHTTPError,
    VendorLogicalError,
)
from .models import BaseResp, decode


class MinimaxAPIClient:
    """
    Encapsulates calls to the MiniMax API.

    Usage:
        client = MinimaxAPIClient(settings.api_key, settings.api_host)
        document = client.post("/v1/t2a_v2", {"text": "hello", ...})
    """

    def __init__(self, api_key: str, api_host: str, session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.api_host = api_host.rstrip("/")
        self.session = session or requests.Session()

    # ── Vendor API calls ───────────────────────────────────────────────

    def post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON payload to *endpoint* and return the decoded document."""
        return self._request("POST", endpoint, json=payload, timeout=REQUEST_TIMEOUT)

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET *endpoint* and return the decoded document."""
        return self._request("GET", endpoint, params=params, timeout=REQUEST_TIMEOUT)

    def upload_file(self, file_path: str, purpose: str = "voice_clone") -> Dict[str, Any]:
        """Upload a local file as multipart form data (``file`` + ``purpose``)."""
        try:
            with open(file_path, "rb") as f:
                files = {"file": (os.path.basename(file_path), f)}
                return self._request(
                    "POST",
                    FILE_UPLOAD_ENDPOINT,
                    files=files,
                    data={"purpose": purpose},
                    timeout=UPLOAD_TIMEOUT,
                )
        except OSError as e:
            raise LocalIOError(f"Failed to open file '{file_path}': {e}") from e

    # ── Asset downloads ────────────────────────────────────────────────

    def download(self, url: str) -> bytes:
        """
        Fetch a vendor-provided asset URL (audio, image, video).

        These are pre-signed links, so no credential is attached.
        """
        try:
            resp = self.session.get(url, timeout=UPLOAD_TIMEOUT)
        except requests.RequestException as e:
            raise TransportError(f"Failed to download {url}: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise VendorHTTPError(resp.status_code, resp.text)
        return resp.content

    # ── Internals ──────────────────────────────────────────────────────

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def _request(self, method: str, endpoint: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.api_host}{endpoint}"
        print(f"[MiniMax] {method} {endpoint}", file=sys.stderr)

        try:
            resp = self.session.request(method, url, headers=self._headers(), **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise VendorHTTPError(resp.status_code, resp.text)

        try:
            document = resp.json()
        except ValueError as e:
            raise ResponseShapeError(f"Response from {endpoint} is not valid JSON") from e

        if not isinstance(document, dict):
            raise ResponseShapeError(f"Response from {endpoint} is not a JSON object")

        _check_base_resp(document)
        return document


def _check_base_resp(document: Dict[str, Any]) -> None:
    """Raise ``VendorLogicalError`` when the embedded status code is non-zero."""
    raw = document.get("base_resp")
    if not isinstance(raw, dict):
        return

    base_resp = decode(BaseResp, raw)
    if base_resp.status_code != 0:
        raise VendorLogicalError(base_resp.status_code, base_resp.status_msg or "unknown error")
