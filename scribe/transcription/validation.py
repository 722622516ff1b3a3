"""Upload validation for audio files (extension allow-list and size ceiling)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

# Extensions accepted as audio uploads
AUDIO_EXTENSIONS = (".mp3", ".wav", ".m4a", ".flac", ".ogg", ".webm", ".mp4")

# 500 MB upload limit
MAX_FILE_SIZE = 500 * 1024 * 1024

_MB = 1024 * 1024


class AudioFileLike(Protocol):
    """Anything with a file name and a size in bytes (e.g. a Streamlit upload)."""

    name: str
    size: int


@dataclass(frozen=True)
class UploadInfo:
    """Name/size pair for uploads that arrive as raw bytes."""

    name: str
    size: int


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None


def file_extension(name: str) -> str:
    """Lower-cased extension including the dot, or ``""`` when there is none."""
    if "." not in name:
        return ""
    return "." + name.rsplit(".", 1)[-1].lower()


def validate_audio_file(file: AudioFileLike, max_size: int = MAX_FILE_SIZE) -> ValidationResult:
    """Check an upload against the audio extension allow-list and size ceiling.

    The extension check runs first; the first failing check is reported.
    """
    if file_extension(file.name) not in AUDIO_EXTENSIONS:
        return ValidationResult(
            valid=False,
            error=f"Unsupported file format. Please use: {', '.join(AUDIO_EXTENSIONS)}",
        )

    if file.size > max_size:
        return ValidationResult(
            valid=False,
            error=(
                f"File size exceeds {max_size // _MB}MB limit. "
                f"Your file is {file.size / _MB:.2f}MB"
            ),
        )

    return ValidationResult(valid=True)
