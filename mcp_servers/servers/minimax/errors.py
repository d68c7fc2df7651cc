"""
Error types raised by the MiniMax tools.

Every failure a tool can hit is a ``MinimaxError``. The server layer turns
them into flagged (``isError``) tool results; none of them stop the process.
"""

from typing import Optional


class MinimaxError(Exception):
    """Base class for all MiniMax tool failures."""


class ValidationError(MinimaxError):
    """Missing or invalid tool input. Raised before any network call."""


class TransportError(MinimaxError):
    """The HTTP request could not be completed."""


class VendorHTTPError(TransportError):
    """The vendor answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"MiniMax API error (status code: {status_code}): {body}")


class VendorLogicalError(MinimaxError):
    """HTTP succeeded but ``base_resp.status_code`` is non-zero."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"API error: status_code={code}, message={message}")


class ResponseShapeError(MinimaxError):
    """The response decoded as JSON but expected fields are absent or mistyped."""

    def __init__(self, message: str, field_path: Optional[str] = None):
        self.field_path = field_path
        if field_path:
            message = f"{message} (field: {field_path})"
        super().__init__(message)


class MissingTaskID(MinimaxError):
    """The video submission response carried no task id."""

    def __init__(self):
        super().__init__("Unable to get task_id from video generation response")


class VideoJobFailed(MinimaxError):
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Video generation failed, task ID: {task_id}")


class MissingResultArtifact(MinimaxError):
    """The job reported success without a result file id."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Unable to get file_id from success response, task ID: {task_id}")


class JobTimedOut(MinimaxError):
    """The job did not reach a terminal state within the polling budget."""

    def __init__(self, task_id: str, attempts: int):
        self.task_id = task_id
        self.attempts = attempts
        super().__init__(
            f"Timeout waiting for video generation after {attempts} polls, "
            f"task ID: {task_id}. The job may still finish on the MiniMax side."
        )


class MissingDownloadURL(MinimaxError):
    def __init__(self, file_id: str):
        self.file_id = file_id
        super().__init__(f"Unable to get download URL, file ID: {file_id}")


class LocalIOError(MinimaxError):
    """Reading or writing a local file failed."""
