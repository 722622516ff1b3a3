"""Error raised when a transcription request cannot be completed."""

from __future__ import annotations


class TranscriptionError(Exception):
    """Terminal failure of a transcription request.

    Carries a user-facing ``message``, optional ``details`` (e.g. the raw
    provider response body) and the HTTP status reported to the caller.
    """

    def __init__(self, message: str, details: str | None = None, status_code: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.status_code = status_code
