"""Human-readable rendering of timestamps, durations and transcripts."""

from __future__ import annotations

import math

from scribe.pipeline_config import ViewMode
from scribe.transcription.models import Transcript


def format_timestamp(seconds: float) -> str:
    """Format an offset as ``M:SS.CC`` or ``H:MM:SS.CC``.

    Centiseconds are truncated, not rounded.
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    centis = math.floor((seconds % 1) * 100)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}.{centis:02d}"
    return f"{minutes}:{secs:02d}.{centis:02d}"


def format_duration(seconds: float) -> str:
    """Format a duration in whole units, e.g. ``1h 2m 5s``, ``2m 5s`` or ``45s``."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def format_transcript_text(transcript: Transcript, view: str | ViewMode = ViewMode.SPEAKER) -> str:
    """Render a transcript as plain text for copying or downloading.

    In speaker view each segment becomes a ``Speaker N: text`` paragraph
    (speakers numbered from 1). Falls back to the flat transcript text in
    plain view or when there are no segments.
    """
    if isinstance(view, str):
        view = ViewMode(view)

    if view is ViewMode.SPEAKER and transcript.segments:
        return "\n\n".join(f"Speaker {s.speaker + 1}: {s.text}" for s in transcript.segments)
    return transcript.text
