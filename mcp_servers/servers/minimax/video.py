"""
Video generation job polling.

MiniMax video generation is asynchronous:

    submit ──> task_id ──> poll status every 20s ──> Success(file_id)
                                 │                   Fail
                                 └── 30 polls ──>    timed out

Once the job succeeds the result ``file_id`` is resolved to a download URL
with a single ``/v1/files/retrieve`` call. There is no cancellation: a
submitted job runs until it finishes, fails, or the poll budget runs out.
"""

import asyncio
import sys
from dataclasses import dataclass
from typing import Any, Dict

from mcp_servers.core.thread_pool import run_in_thread

from .constants import (
    FILE_RETRIEVE_ENDPOINT,
    VIDEO_GENERATION_ENDPOINT,
    VIDEO_MAX_POLLS,
    VIDEO_POLL_INTERVAL,
    VIDEO_QUERY_ENDPOINT,
    VIDEO_STATUS_FAIL,
    VIDEO_STATUS_SUCCESS,
)
from .errors import (
    JobTimedOut,
    MissingDownloadURL,
    MissingResultArtifact,
    MissingTaskID,
    ResponseShapeError,
    VideoJobFailed,
)
from .models import FileRetrieveResponse, VideoStatusResponse, VideoTaskResponse, decode


@dataclass(frozen=True)
class VideoJob:
    task_id: str
    file_id: str
    download_url: str


class VideoJobPoller:
    """
    Drives one video job from submission to a downloadable URL.

    Args:
        client: A ``MinimaxAPIClient`` (or anything with ``post``/``get``).
        poll_interval: Seconds to wait between status queries.
        max_attempts: Number of status queries before giving up.
        sleep: Awaitable sleep, replaceable in tests.
    """

    def __init__(
        self,
        client,
        poll_interval: float = VIDEO_POLL_INTERVAL,
        max_attempts: int = VIDEO_MAX_POLLS,
        sleep=asyncio.sleep,
    ):
        self.client = client
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self._sleep = sleep

    async def submit(self, payload: Dict[str, Any]) -> str:
        document = await run_in_thread(self.client.post, VIDEO_GENERATION_ENDPOINT, payload)
        try:
            task = decode(VideoTaskResponse, document)
        except ResponseShapeError as e:
            raise MissingTaskID() from e
        print(f"[MiniMax] Video task submitted: {task.task_id}", file=sys.stderr)
        return task.task_id

    async def wait(self, task_id: str) -> str:
        """Poll until the job finishes and return its result ``file_id``."""
        for attempt in range(1, self.max_attempts + 1):
            document = await run_in_thread(
                self.client.get, VIDEO_QUERY_ENDPOINT, {"task_id": task_id}
            )
            status = decode(VideoStatusResponse, document)
            print(
                f"[MiniMax] Video task {task_id} poll {attempt}/{self.max_attempts}: {status.status}",
                file=sys.stderr,
            )

            if status.status == VIDEO_STATUS_FAIL:
                raise VideoJobFailed(task_id)
            if status.status == VIDEO_STATUS_SUCCESS:
                if not status.file_id:
                    raise MissingResultArtifact(task_id)
                return status.file_id

            if attempt < self.max_attempts:
                await self._sleep(self.poll_interval)

        raise JobTimedOut(task_id, self.max_attempts)

    async def resolve_download_url(self, file_id: str) -> str:
        document = await run_in_thread(
            self.client.get, FILE_RETRIEVE_ENDPOINT, {"file_id": file_id}
        )
        retrieved = decode(FileRetrieveResponse, document)
        if not retrieved.file.download_url:
            raise MissingDownloadURL(file_id)
        return retrieved.file.download_url

    async def run(self, payload: Dict[str, Any]) -> VideoJob:
        task_id = await self.submit(payload)
        file_id = await self.wait(task_id)
        download_url = await self.resolve_download_url(file_id)
        return VideoJob(task_id=task_id, file_id=file_id, download_url=download_url)
