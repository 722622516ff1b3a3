"""Tests for the session transcription history."""

from __future__ import annotations

from unittest.mock import patch

from scribe.ui.history import TranscriptionHistory


class TestTranscriptionHistory:
    def test_add_is_newest_first(self) -> None:
        history = TranscriptionHistory()
        first = history.add({"text": "one"}, "one.mp3")
        second = history.add({"text": "two"}, "two.mp3")
        assert [item.id for item in history.items] == [second.id, first.id]
        assert len(history) == 2

    def test_ids_are_unique(self) -> None:
        history = TranscriptionHistory()
        ids = {history.add({"text": str(i)}).id for i in range(20)}
        assert len(ids) == 20

    def test_ids_stay_unique_after_delete_with_fixed_clock(self) -> None:
        history = TranscriptionHistory()
        with patch("scribe.ui.history.time.time", return_value=1000.0):
            history.add({"text": "a"})
            b = history.add({"text": "b"})
            history.add({"text": "c"})
            history.delete(b.id)
            d = history.add({"text": "d"})
        ids = [item.id for item in history.items]
        assert len(ids) == len(set(ids)) == 3
        assert history.get(d.id) == d

    def test_default_file_name(self) -> None:
        saved = TranscriptionHistory().add({"text": "x"})
        assert saved.file_name == "Untitled Audio"

    def test_get(self) -> None:
        history = TranscriptionHistory()
        saved = history.add({"text": "x"}, "x.wav")
        assert history.get(saved.id) == saved
        assert history.get("missing") is None

    def test_delete(self) -> None:
        history = TranscriptionHistory()
        keep = history.add({"text": "keep"})
        drop = history.add({"text": "drop"})
        assert history.delete(drop.id) is True
        assert history.delete(drop.id) is False
        assert history.items == [keep]

    def test_clear(self) -> None:
        history = TranscriptionHistory()
        history.add({"text": "x"})
        history.clear()
        assert len(history) == 0
