"""Transcribe a local audio file through the configured provider and save the output.

Usage:
    python scripts/transcribe_file.py path/to/audio.mp3 [language] [provider]

Outputs next to the audio file:
    <stem>.txt   - speaker-labelled transcript
    <stem>.json  - full transcript (words + segments)
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from scribe.config import settings  # noqa: E402
from scribe.pipeline_config import PipelineConfig  # noqa: E402
from scribe.transcription.errors import TranscriptionError  # noqa: E402
from scribe.transcription.formatting import (  # noqa: E402
    format_duration,
    format_timestamp,
    format_transcript_text,
)
from scribe.transcription.pipeline import transcribe_audio  # noqa: E402
from scribe.transcription.validation import UploadInfo, validate_audio_file  # noqa: E402


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    audio_file = Path(sys.argv[1])
    language = sys.argv[2] if len(sys.argv) > 2 else settings.default_language
    provider = sys.argv[3] if len(sys.argv) > 3 else settings.stt_provider

    if not audio_file.exists():
        print(f"Audio file not found: {audio_file}")
        sys.exit(1)

    check = validate_audio_file(UploadInfo(audio_file.name, audio_file.stat().st_size))
    if not check.valid:
        print(check.error)
        sys.exit(1)

    print(f"Transcribing {audio_file.name} ({audio_file.stat().st_size / 1e6:.1f} MB) via {provider}...")

    try:
        transcript = transcribe_audio(
            audio_file.read_bytes(),
            audio_file.name,
            config=PipelineConfig(provider=provider, language=language),  # type: ignore[arg-type]
        )
    except TranscriptionError as exc:
        print(f"Transcription error: {exc.message}")
        if exc.details:
            print(exc.details)
        sys.exit(1)

    out_txt = audio_file.with_suffix(".txt")
    out_json = audio_file.with_suffix(".json")
    out_txt.write_text(format_transcript_text(transcript), encoding="utf-8")
    out_json.write_text(json.dumps(asdict(transcript), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Saved text -> {out_txt}")
    print(f"Saved JSON -> {out_json}")

    print(f"\nDuration: {format_duration(transcript.duration)}")
    print(f"Speakers detected: {transcript.speakers}")
    print(f"Segments: {len(transcript.segments)}")
    if transcript.segments:
        print("\nFirst 3 segments:")
        for seg in transcript.segments[:3]:
            print(f"  [{format_timestamp(seg.start)}] Speaker {seg.speaker + 1}: {seg.text[:80]}")


if __name__ == "__main__":
    main()
