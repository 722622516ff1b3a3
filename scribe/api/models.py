"""Pydantic request/response schemas for the Scribe API."""

from __future__ import annotations

from pydantic import BaseModel

from scribe.transcription.models import Transcript


class WordResponse(BaseModel):
    """A single recognized word with timing and speaker."""

    word: str
    start: float
    end: float
    speaker: int = 0


class SegmentResponse(BaseModel):
    """A contiguous run of words from one speaker."""

    speaker: int
    text: str
    start: float
    end: float


class TranscriptResponse(BaseModel):
    """Response body for the /api/transcribe endpoint."""

    text: str
    language: str
    duration: float
    words: list[WordResponse] = []
    segments: list[SegmentResponse] = []
    speakers: int = 0

    @classmethod
    def from_transcript(cls, transcript: Transcript) -> TranscriptResponse:
        return cls(
            text=transcript.text,
            language=transcript.language,
            duration=transcript.duration,
            words=[
                WordResponse(word=w.display_text, start=w.start, end=w.end, speaker=w.speaker)
                for w in transcript.words
            ],
            segments=[
                SegmentResponse(speaker=s.speaker, text=s.text, start=s.start, end=s.end)
                for s in transcript.segments
            ],
            speakers=transcript.speakers,
        )


class ErrorResponse(BaseModel):
    """Error body returned for failed transcription requests."""

    error: str
    details: str | None = None


class LanguageResponse(BaseModel):
    code: str
    name: str
