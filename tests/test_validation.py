"""Tests for audio upload validation."""

from __future__ import annotations

from scribe.transcription.validation import (
    AUDIO_EXTENSIONS,
    MAX_FILE_SIZE,
    UploadInfo,
    file_extension,
    validate_audio_file,
)


class TestFileExtension:
    def test_last_dot_lowercased(self) -> None:
        assert file_extension("my.clip.MP3") == ".mp3"

    def test_no_extension(self) -> None:
        assert file_extension("recording") == ""


class TestValidateAudioFile:
    def test_accepts_supported_formats(self) -> None:
        for ext in AUDIO_EXTENSIONS:
            assert validate_audio_file(UploadInfo(f"clip{ext}", 1000)).valid

    def test_extension_is_case_insensitive(self) -> None:
        result = validate_audio_file(UploadInfo("CLIP.WAV", 1000))
        assert result.valid
        assert result.error is None

    def test_unsupported_format(self) -> None:
        result = validate_audio_file(UploadInfo("clip.xyz", 1000))
        assert not result.valid
        assert result.error is not None
        assert "Unsupported file format" in result.error
        assert ".mp3" in result.error

    def test_missing_extension(self) -> None:
        result = validate_audio_file(UploadInfo("recording", 1000))
        assert not result.valid

    def test_too_large(self) -> None:
        result = validate_audio_file(UploadInfo("clip.wav", 600 * 1024 * 1024))
        assert not result.valid
        assert result.error is not None
        assert "500MB" in result.error
        assert "600.00MB" in result.error

    def test_exactly_at_limit_is_valid(self) -> None:
        assert validate_audio_file(UploadInfo("clip.wav", MAX_FILE_SIZE)).valid

    def test_extension_checked_before_size(self) -> None:
        result = validate_audio_file(UploadInfo("clip.xyz", 600 * 1024 * 1024))
        assert result.error is not None
        assert "Unsupported file format" in result.error

    def test_custom_ceiling(self) -> None:
        result = validate_audio_file(UploadInfo("clip.mp3", 3 * 1024 * 1024), max_size=2 * 1024 * 1024)
        assert result.error == "File size exceeds 2MB limit. Your file is 3.00MB"
