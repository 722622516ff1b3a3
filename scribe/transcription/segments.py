"""Speaker segmentation of word-level transcripts."""

from __future__ import annotations

from collections.abc import Sequence

from scribe.transcription.models import ProviderResult, Segment, Transcript, Word


def _close_segment(speaker: int, texts: list[str], start: float, end: float) -> Segment:
    return Segment(speaker=speaker, text=" ".join(texts).strip(), start=start, end=end)


def build_segments(words: Sequence[Word]) -> list[Segment]:
    """Group consecutive words by the same speaker.

    A new segment starts whenever the speaker differs from the previous
    word's speaker. Words are not re-sorted and values are not validated;
    the input order and timings are taken as given.

    Args:
        words: Recognized words in provider order.

    Returns:
        Segments in encounter order. Empty if *words* is empty.
    """
    if not words:
        return []

    segments: list[Segment] = []
    first = words[0]
    speaker, start, end = first.speaker, first.start, first.end
    texts: list[str] = []

    for word in words:
        if word.speaker != speaker:
            segments.append(_close_segment(speaker, texts, start, end))
            speaker, start, end = word.speaker, word.start, word.end
            texts = [word.display_text]
        else:
            texts.append(word.display_text)
            end = word.end

    # Flush the in-progress segment
    segments.append(_close_segment(speaker, texts, start, end))
    return segments


def count_speakers(words: Sequence[Word]) -> int:
    """Number of distinct speaker ids in *words* (speaker 0 included)."""
    return len({w.speaker for w in words})


def build_transcript(result: ProviderResult) -> Transcript:
    """Assemble a :class:`Transcript` from a normalized provider result."""
    return Transcript(
        text=result.text,
        language=result.language,
        duration=result.duration,
        words=list(result.words),
        segments=build_segments(result.words),
        speakers=count_speakers(result.words),
    )
