"""Data models for transcription results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Word:
    """One recognized token with its timing and speaker."""

    text: str
    start: float
    end: float
    speaker: int = 0
    punctuated: str | None = None

    @property
    def display_text(self) -> str:
        """Provider-punctuated form when supplied, raw text otherwise."""
        return self.punctuated or self.text


@dataclass(frozen=True)
class Segment:
    """A contiguous run of words attributed to one speaker."""

    speaker: int
    text: str
    start: float
    end: float


@dataclass(frozen=True)
class ProviderResult:
    """A provider response translated into the common word-sequence shape."""

    text: str
    language: str
    duration: float
    words: list[Word] = field(default_factory=list)


@dataclass(frozen=True)
class Transcript:
    """Full result of one transcription call."""

    text: str
    language: str
    duration: float
    words: list[Word] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    speakers: int = 0
