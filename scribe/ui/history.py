"""Session-scoped transcription history for the Streamlit UI."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SavedTranscription:
    """A completed transcription as shown in the history list."""

    id: str
    timestamp: float
    file_name: str
    transcription: dict[str, Any]


@dataclass
class TranscriptionHistory:
    """Completed transcriptions for one browser session, newest first."""

    items: list[SavedTranscription] = field(default_factory=list)

    def add(self, transcription: dict[str, Any], file_name: str | None = None) -> SavedTranscription:
        saved = SavedTranscription(
            id=uuid.uuid4().hex,
            timestamp=time.time(),
            file_name=file_name or "Untitled Audio",
            transcription=transcription,
        )
        self.items.insert(0, saved)
        return saved

    def get(self, item_id: str) -> SavedTranscription | None:
        return next((item for item in self.items if item.id == item_id), None)

    def delete(self, item_id: str) -> bool:
        """Remove an entry. Returns False if *item_id* was not present."""
        before = len(self.items)
        self.items = [item for item in self.items if item.id != item_id]
        return len(self.items) < before

    def clear(self) -> None:
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)
