"""HTTP client wrapper for the Scribe FastAPI backend."""

from __future__ import annotations

import os
from typing import Any

import httpx
import streamlit as st

from scribe.transcription.models import Segment, Transcript, Word

API_URL = os.getenv("API_URL", "http://localhost:8000")


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.HTTPError:
        return False


def get_languages() -> list[dict[str, str]]:
    """Fetch the language picker options, or an empty list if unavailable."""
    try:
        r = httpx.get(f"{API_URL}/api/languages", timeout=10.0)
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError:
        return []


def _error_message(r: httpx.Response) -> str:
    """Best-effort user-facing message for a failed transcribe response."""
    if "application/json" not in r.headers.get("content-type", ""):
        if r.status_code == 413:
            return "File is too large. Please use a smaller file or compress your audio."
        return f"Server error: {r.text[:100]}"
    payload = r.json()
    return payload.get("error") or str(payload.get("detail") or "Transcription failed")


def transcribe_file(
    file_content: bytes,
    filename: str,
    language: str,
    content_type: str | None = None,
) -> dict[str, Any]:
    """Upload an audio file to the transcribe endpoint.

    Returns the transcript payload, or an empty dict after reporting the
    error with ``st.error``.
    """
    try:
        r = httpx.post(
            f"{API_URL}/api/transcribe",
            files={"file": (filename, file_content, content_type or "application/octet-stream")},
            data={"language": language},
            timeout=300.0,
        )
    except httpx.HTTPError as e:
        st.error(f"Transcription failed: {e}")
        return {}

    if r.is_error:
        st.error(_error_message(r))
        return {}
    return r.json()  # type: ignore[no-any-return]


def to_transcript(payload: dict[str, Any]) -> Transcript:
    """Rebuild a :class:`Transcript` from a transcribe response payload."""
    return Transcript(
        text=payload.get("text", ""),
        language=payload.get("language", ""),
        duration=payload.get("duration", 0.0),
        words=[
            Word(text=w["word"], start=w["start"], end=w["end"], speaker=w.get("speaker", 0))
            for w in payload.get("words", [])
        ],
        segments=[
            Segment(speaker=s["speaker"], text=s["text"], start=s["start"], end=s["end"])
            for s in payload.get("segments", [])
        ],
        speakers=payload.get("speakers", 0),
    )
