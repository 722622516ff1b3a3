"""Transcribe endpoint: upload an audio file and return a speaker-segmented transcript."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile

from scribe.api.models import ErrorResponse, LanguageResponse, TranscriptResponse
from scribe.config import settings
from scribe.pipeline_config import PipelineConfig, SttProvider
from scribe.transcription.errors import TranscriptionError
from scribe.transcription.languages import SUPPORTED_LANGUAGES
from scribe.transcription.pipeline import transcribe_audio
from scribe.transcription.validation import UploadInfo, validate_audio_file

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status: {"model": ErrorResponse} for status in (400, 413, 500, 503)
}


@router.get("/api/languages", response_model=list[LanguageResponse])
async def list_languages() -> list[LanguageResponse]:
    """List the languages offered in the language picker."""
    return [LanguageResponse(code=code, name=name) for code, name in SUPPORTED_LANGUAGES]


@router.post(
    "/api/transcribe",
    response_model=TranscriptResponse,
    responses=_ERROR_RESPONSES,
)
async def transcribe(
    file: Annotated[UploadFile, File(...)],
    language: Annotated[str | None, Form()] = None,
    provider: Annotated[str | None, Form()] = None,
) -> TranscriptResponse:
    """Forward an uploaded audio file to the configured STT provider.

    Accepts .mp3, .wav, .m4a, .flac, .ogg, .webm and .mp4 uploads up to the
    configured size ceiling (500 MB by default). ``provider`` overrides the
    deployment's ``STT_PROVIDER`` for this request.

    Failures are returned as ``{"error": ..., "details": ...}``: 413 for
    oversize uploads, 400 for unsupported formats or providers, 500 when the
    provider key is missing, and the provider's own status for upstream
    errors.
    """
    # Enforce file size limit
    raw = await file.read()
    max_bytes = settings.max_upload_bytes
    if len(raw) > max_bytes:
        raise TranscriptionError(
            f"File size exceeds {max_bytes // (1024 * 1024)}MB limit",
            status_code=413,
        )

    filename = file.filename or ""
    result = validate_audio_file(UploadInfo(name=filename, size=len(raw)), max_size=max_bytes)
    if not result.valid:
        raise TranscriptionError(result.error or "Invalid file", status_code=400)

    try:
        stt_provider = SttProvider(provider or settings.stt_provider)
    except ValueError as exc:
        raise TranscriptionError(
            f"Unknown STT provider: {provider or settings.stt_provider!r}",
            details=f"Supported: {[p.value for p in SttProvider]}",
            status_code=400,
        ) from exc

    config = PipelineConfig(
        provider=stt_provider,
        language=language or settings.default_language,
    )

    # Provider calls are blocking; run them in a thread to keep the event loop free.
    transcript = await asyncio.to_thread(
        transcribe_audio, raw, filename, file.content_type, config, settings
    )
    return TranscriptResponse.from_transcript(transcript)
