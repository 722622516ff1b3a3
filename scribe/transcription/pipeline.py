"""End-to-end transcription pipeline: forward -> normalize -> segment."""

from __future__ import annotations

import logging

from scribe.config import Settings
from scribe.pipeline_config import PipelineConfig, SttProvider
from scribe.transcription.errors import TranscriptionError
from scribe.transcription.models import Transcript
from scribe.transcription.normalize import normalize_response
from scribe.transcription.providers import request_transcription
from scribe.transcription.segments import build_transcript

logger = logging.getLogger(__name__)


def transcribe_audio(
    raw: bytes,
    filename: str,
    content_type: str | None = None,
    config: PipelineConfig | None = None,
    settings: Settings | None = None,
) -> Transcript:
    """Full transcription pipeline for one uploaded file.

    Args:
        raw: Audio file bytes.
        filename: Original upload filename (forwarded to the provider).
        content_type: Upload MIME type, if known.
        config: Provider and language for this request.
        settings: Provider credentials and request options.

    Returns:
        The assembled :class:`Transcript`.

    Raises:
        TranscriptionError: If the provider call fails or returns an unreadable body.
    """
    config = config or PipelineConfig()
    provider = SttProvider(config.provider)

    try:
        # 1. Forward to provider
        data = request_transcription(
            provider, raw, filename, content_type, config.language, settings=settings
        )

        # 2. Normalize provider JSON
        result = normalize_response(provider, data, config.language)
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        # Provider answered 2xx with a body that is not the expected JSON shape
        logger.exception("Unreadable %s response for %s", provider.value, filename)
        raise TranscriptionError(
            "Failed to process transcription", details=str(exc), status_code=500
        ) from exc

    # 3. Segment by speaker
    transcript = build_transcript(result)
    logger.info(
        "Transcribed %s via %s: %d words, %d segments, %d speakers",
        filename,
        provider.value,
        len(transcript.words),
        len(transcript.segments),
        transcript.speakers,
    )
    return transcript
