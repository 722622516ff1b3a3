"""Tests for speaker segmentation of word-level transcripts."""

from __future__ import annotations

import copy

from scribe.transcription.models import ProviderResult, Segment, Word
from scribe.transcription.segments import build_segments, build_transcript, count_speakers


def _words(*specs: tuple[str, float, float, int]) -> list[Word]:
    return [Word(text=t, start=s, end=e, speaker=spk) for t, s, e, spk in specs]


class TestBuildSegments:
    def test_empty(self) -> None:
        assert build_segments([]) == []

    def test_single_word(self) -> None:
        segments = build_segments(_words(("Hello", 0.2, 0.6, 3)))
        assert segments == [Segment(speaker=3, text="Hello", start=0.2, end=0.6)]

    def test_two_speakers(self) -> None:
        words = _words(
            ("Hi", 0.0, 0.5, 0),
            ("there", 0.5, 1.0, 0),
            ("Bob", 1.0, 1.5, 1),
        )
        assert build_segments(words) == [
            Segment(speaker=0, text="Hi there", start=0.0, end=1.0),
            Segment(speaker=1, text="Bob", start=1.0, end=1.5),
        ]

    def test_constant_speaker_spans_full_run(self) -> None:
        words = _words(
            ("one", 0.1, 0.4, 2),
            ("two", 0.4, 0.9, 2),
            ("three", 1.2, 1.8, 2),
            ("four", 2.0, 2.3, 2),
        )
        segments = build_segments(words)
        assert len(segments) == 1
        assert segments[0].speaker == 2
        assert segments[0].start == 0.1
        assert segments[0].end == 2.3
        assert segments[0].text == "one two three four"

    def test_segment_count_follows_speaker_changes(self) -> None:
        speakers = [0, 0, 1, 1, 0, 2, 2, 2, 1, 0]
        words = [Word(text=f"w{i}", start=i, end=i + 1, speaker=s) for i, s in enumerate(speakers)]
        changes = sum(1 for a, b in zip(speakers, speakers[1:]) if a != b)
        assert len(build_segments(words)) == 1 + changes

    def test_returning_speaker_opens_new_segment(self) -> None:
        """Grouping is by change detection, not by bucketing speaker ids."""
        words = _words(("a", 0, 1, 5), ("b", 1, 2, 0), ("c", 2, 3, 5))
        segments = build_segments(words)
        assert [s.speaker for s in segments] == [5, 0, 5]
        assert [s.text for s in segments] == ["a", "b", "c"]

    def test_punctuated_text_preferred(self) -> None:
        words = [
            Word(text="hello", start=0.0, end=0.4, punctuated="Hello,"),
            Word(text="world", start=0.4, end=0.9, punctuated="world."),
            Word(text="bye", start=1.0, end=1.3),
        ]
        assert build_segments(words)[0].text == "Hello, world. bye"

    def test_default_speaker_is_zero(self) -> None:
        words = [Word(text="a", start=0, end=1), Word(text="b", start=1, end=2, speaker=0)]
        segments = build_segments(words)
        assert len(segments) == 1
        assert segments[0].speaker == 0

    def test_unsorted_timings_passed_through(self) -> None:
        words = _words(("late", 5.0, 6.0, 0), ("early", 1.0, 2.0, 0))
        segments = build_segments(words)
        assert segments[0].start == 5.0
        assert segments[0].end == 2.0

    def test_does_not_mutate_input_and_is_repeatable(self) -> None:
        words = _words(("x", 0, 1, 0), ("y", 1, 2, 1), ("z", 2, 3, 1))
        snapshot = copy.deepcopy(words)
        first = build_segments(words)
        second = build_segments(words)
        assert first == second
        assert words == snapshot

    def test_segment_texts_reproduce_word_sequence(self) -> None:
        words = _words(
            ("So", 0, 1, 0),
            ("what", 1, 2, 0),
            ("now", 2, 3, 1),
            ("we", 3, 4, 2),
            ("wait", 4, 5, 2),
        )
        joined = " ".join(s.text for s in build_segments(words))
        assert joined.split() == " ".join(w.display_text for w in words).split()


class TestCountSpeakers:
    def test_counts_distinct_ids(self) -> None:
        words = _words(("a", 0, 1, 0), ("b", 1, 2, 3), ("c", 2, 3, 0))
        assert count_speakers(words) == 2

    def test_empty(self) -> None:
        assert count_speakers([]) == 0


class TestBuildTranscript:
    def test_assembles_segments_and_speakers(self) -> None:
        result = ProviderResult(
            text="Hi there Bob",
            language="en",
            duration=1.5,
            words=_words(("Hi", 0.0, 0.5, 0), ("there", 0.5, 1.0, 0), ("Bob", 1.0, 1.5, 1)),
        )
        transcript = build_transcript(result)
        assert transcript.text == "Hi there Bob"
        assert transcript.language == "en"
        assert transcript.duration == 1.5
        assert len(transcript.words) == 3
        assert len(transcript.segments) == 2
        assert transcript.speakers == 2
