"""Pipeline configuration: provider/view enums and PipelineConfig dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SttProvider(str, Enum):
    """Speech-to-text providers the service can forward audio to."""

    CARTESIA = "cartesia"
    DEEPGRAM = "deepgram"
    ASSEMBLYAI = "assemblyai"


class ViewMode(str, Enum):
    """How a transcript is rendered for display, copy and download."""

    SPEAKER = "speaker"
    PLAIN = "plain"


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable configuration for a single transcription request.

    Defaults mirror the deployment default (Cartesia, English).
    """

    provider: SttProvider = SttProvider.CARTESIA
    language: str = "en"
