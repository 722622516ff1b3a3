"""HTTP calls to the external speech-to-text providers.

Each call is a single blocking request returning the provider's raw JSON.
There is no retry: any failure surfaces as a :class:`TranscriptionError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from scribe.config import Settings, get_settings
from scribe.pipeline_config import SttProvider
from scribe.transcription.errors import TranscriptionError

logger = logging.getLogger(__name__)

CARTESIA_STT_URL = "https://api.cartesia.ai/stt"
DEEPGRAM_LISTEN_URL = "https://api.deepgram.com/v1/listen"

_KEY_NOT_CONFIGURED = "Server configuration error: API key not configured"


def _require_key(key: str, provider: SttProvider) -> str:
    if not key:
        logger.error("%s API key not found in environment variables", provider.value)
        raise TranscriptionError(_KEY_NOT_CONFIGURED, status_code=500)
    return key


def _raise_for_provider_error(response: httpx.Response, provider: SttProvider) -> None:
    """Translate a non-2xx provider response into a TranscriptionError.

    The message comes from the JSON ``error``/``message`` field when the body
    is JSON, otherwise from the HTTP reason phrase. The raw body is kept as
    details.
    """
    if response.is_success:
        return

    body = response.text
    logger.error("%s API error (%d): %s", provider.value, response.status_code, body)

    message = "Transcription failed"
    try:
        payload = response.json()
        if isinstance(payload, dict):
            message = payload.get("error") or payload.get("message") or message
    except ValueError:
        message = f"Transcription failed: {response.reason_phrase}"

    raise TranscriptionError(str(message), details=body, status_code=response.status_code)


def transcribe_cartesia(
    raw: bytes,
    filename: str,
    content_type: str | None,
    language: str,
    settings: Settings,
) -> dict[str, Any]:
    """Send audio to Cartesia's batch STT endpoint with word timestamps."""
    api_key = _require_key(settings.cartesia_api_key, SttProvider.CARTESIA)
    response = httpx.post(
        CARTESIA_STT_URL,
        headers={
            "Authorization": f"Bearer {api_key}",
            "Cartesia-Version": settings.cartesia_version,
        },
        data={
            "model": settings.cartesia_model,
            "language": language,
            "timestamp_granularities[]": "word",
        },
        files={"file": (filename, raw, content_type or "application/octet-stream")},
        timeout=settings.request_timeout_s,
    )
    _raise_for_provider_error(response, SttProvider.CARTESIA)
    return response.json()  # type: ignore[no-any-return]


def transcribe_deepgram(
    raw: bytes,
    content_type: str | None,
    language: str,
    settings: Settings,
) -> dict[str, Any]:
    """Send audio to Deepgram with diarization and smart formatting enabled."""
    api_key = _require_key(settings.deepgram_api_key, SttProvider.DEEPGRAM)
    response = httpx.post(
        DEEPGRAM_LISTEN_URL,
        params={
            "model": settings.deepgram_model,
            "diarize": "true",
            "punctuate": "true",
            "smart_format": "true",
            "language": language,
        },
        headers={
            "Authorization": f"Token {api_key}",
            "Content-Type": content_type or "audio/wav",
        },
        content=raw,
        timeout=settings.request_timeout_s,
    )
    _raise_for_provider_error(response, SttProvider.DEEPGRAM)
    return response.json()  # type: ignore[no-any-return]


def transcribe_assemblyai(raw: bytes, language: str, settings: Settings) -> dict[str, Any]:
    """Transcribe audio bytes via the AssemblyAI SDK with speaker labels.

    The SDK accepts bytes directly and polls until the transcript completes.
    """
    api_key = _require_key(settings.assemblyai_api_key, SttProvider.ASSEMBLYAI)

    import assemblyai as aai  # type: ignore[import-untyped]  # no stubs; import inside function

    aai.settings.api_key = api_key
    config = aai.TranscriptionConfig(
        speech_models=["universal-3-pro"],
        speaker_labels=True,
        language_code=language,
    )
    try:
        transcript = aai.Transcriber().transcribe(raw, config=config)
    except Exception as exc:
        # Infrastructure error: invalid API key, network failure, provider outage.
        logger.exception("AssemblyAI request failed")
        raise TranscriptionError(
            "Failed to process transcription", details=str(exc), status_code=503
        ) from exc

    if transcript.status == aai.TranscriptStatus.error:
        # AssemblyAI rejected the audio content (corrupted, unsupported format, etc.)
        logger.error("assemblyai transcription error: %s", transcript.error)
        raise TranscriptionError(
            f"Transcription failed: {transcript.error}",
            details=str(transcript.error),
            status_code=400,
        )
    return transcript.json_response  # type: ignore[no-any-return]


def request_transcription(
    provider: str | SttProvider,
    raw: bytes,
    filename: str,
    content_type: str | None,
    language: str,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Forward audio to *provider* and return its raw JSON response.

    Raises:
        TranscriptionError: Missing API key, provider non-2xx response, or
            transport failure.
        ValueError: If *provider* is not recognized.
    """
    provider = SttProvider(provider)
    settings = settings or get_settings()
    logger.info("Forwarding %s (%d bytes) to %s", filename, len(raw), provider.value)

    try:
        if provider is SttProvider.CARTESIA:
            return transcribe_cartesia(raw, filename, content_type, language, settings)
        if provider is SttProvider.DEEPGRAM:
            return transcribe_deepgram(raw, content_type, language, settings)
        return transcribe_assemblyai(raw, language, settings)
    except TranscriptionError:
        raise
    except httpx.HTTPError as exc:
        logger.exception("Transcription request to %s failed", provider.value)
        raise TranscriptionError(
            "Failed to process transcription", details=str(exc), status_code=503
        ) from exc
