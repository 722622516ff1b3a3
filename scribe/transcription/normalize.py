"""Provider response adapters for Cartesia, Deepgram, and AssemblyAI JSON."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from scribe.pipeline_config import SttProvider
from scribe.transcription.models import ProviderResult, Word


def _speaker_id(value: Any) -> int:
    """Missing or null speaker maps to speaker 0."""
    return 0 if value is None else int(value)


def normalize_cartesia(data: dict[str, Any], language: str) -> ProviderResult:
    """Translate a Cartesia ``/stt`` response.

    Format::

        {"text": "...", "language": "en", "duration": s,
         "words": [{"word": "...", "start": s, "end": s}]}

    Cartesia does not diarize, so every word is attributed to speaker 0.
    """
    words = [
        Word(text=w.get("word", ""), start=w.get("start", 0.0), end=w.get("end", 0.0))
        for w in data.get("words") or []
    ]
    return ProviderResult(
        text=data.get("text", ""),
        language=data.get("language") or language,
        duration=data.get("duration") or 0.0,
        words=words,
    )


def normalize_deepgram(data: dict[str, Any], language: str) -> ProviderResult:
    """Translate a Deepgram ``/v1/listen`` response.

    Only the first channel's first alternative is used::

        {"metadata": {"duration": s},
         "results": {"channels": [{"alternatives": [
             {"transcript": "...",
              "words": [{"word": "...", "punctuated_word": "...",
                         "start": s, "end": s, "speaker": 0}]}]}]}}
    """
    channels = data.get("results", {}).get("channels") or [{}]
    alternative = (channels[0].get("alternatives") or [{}])[0]
    words = [
        Word(
            text=w.get("word", ""),
            start=w.get("start", 0.0),
            end=w.get("end", 0.0),
            speaker=_speaker_id(w.get("speaker")),
            punctuated=w.get("punctuated_word"),
        )
        for w in alternative.get("words") or []
    ]
    return ProviderResult(
        text=alternative.get("transcript", ""),
        language=language,
        duration=data.get("metadata", {}).get("duration") or 0.0,
        words=words,
    )


def normalize_assemblyai(data: dict[str, Any], language: str) -> ProviderResult:
    """Translate an AssemblyAI transcript response.

    Times are in milliseconds and speakers are letter labels ("A", "B", ...)::

        {"text": "...", "language_code": "en", "audio_duration": s,
         "words": [{"text": "...", "start": ms, "end": ms, "speaker": "A"}]}

    Labels are numbered in order of first appearance; unlabelled words are
    speaker 0.
    """
    labels: dict[str, int] = {}
    words: list[Word] = []
    for w in data.get("words") or []:
        label = w.get("speaker")
        if label is None:
            speaker = 0
        else:
            speaker = labels.setdefault(label, len(labels))
        words.append(
            Word(
                text=w.get("text", ""),
                start=w.get("start", 0) / 1000.0,
                end=w.get("end", 0) / 1000.0,
                speaker=speaker,
            )
        )
    return ProviderResult(
        text=data.get("text") or "",
        language=data.get("language_code") or language,
        duration=float(data.get("audio_duration") or 0.0),
        words=words,
    )


def normalize_response(
    provider: str | SttProvider, data: dict[str, Any], language: str
) -> ProviderResult:
    """Dispatch to the adapter for *provider*.

    Raises:
        ValueError: If *provider* is not recognized.
    """
    dispatch: dict[SttProvider, Callable[[dict[str, Any], str], ProviderResult]] = {
        SttProvider.CARTESIA: normalize_cartesia,
        SttProvider.DEEPGRAM: normalize_deepgram,
        SttProvider.ASSEMBLYAI: normalize_assemblyai,
    }
    return dispatch[SttProvider(provider)](data, language)
