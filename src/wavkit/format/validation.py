"""Validation functions for decoded WAV files.

Decoding is lenient: tags are stored verbatim and the fmt fields are never
cross-checked. This module reports what a stricter reader would reject
(errors) or question (warnings), without changing the WavFile.
"""

from dataclasses import dataclass

from wavkit.format.riff import CANONICAL_FMT_SIZE, DATA_ID, FMT_ID, RIFF_ID, WAVE_ID
from wavkit.format.types import AudioFormat, WavFile


class ValidationError(Exception):
    """Error during WAV validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


@dataclass
class ValidationResult:
    """Result of validation with optional warnings."""

    valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def failure(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create a failed validation result."""
        return cls(valid=False, errors=errors, warnings=warnings or [])


def validate_wav(wav: WavFile) -> ValidationResult:
    """Validate a WavFile against the canonical WAV layout.

    Errors:
    - FourCC tags other than RIFF/WAVE/fmt /data
    - len(audio_data) != data_size
    - channel_count == 0

    Warnings:
    - fmt_chunk_size other than 16
    - audio_format other than PCM
    - bits_per_sample not a multiple of 8
    - block_align or byte_rate inconsistent with the other fmt fields
    - riff_chunk_size inconsistent with data_size

    Args:
        wav: The WavFile to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    for name, expected in (
        ("riff_header", RIFF_ID),
        ("wave_header", WAVE_ID),
        ("fmt_header", FMT_ID),
        ("data_tag", DATA_ID),
    ):
        actual = getattr(wav, name)
        if actual != expected:
            errors.append(f"{name} is {actual!r}, expected {expected!r}")

    if len(wav.audio_data) != wav.data_size:
        errors.append(
            f"data_size is {wav.data_size} but audio_data holds {len(wav.audio_data)} bytes"
        )

    if wav.channel_count == 0:
        errors.append("channel_count must be >= 1")

    if wav.fmt_chunk_size != CANONICAL_FMT_SIZE:
        warnings.append(
            f"fmt_chunk_size is {wav.fmt_chunk_size}, canonical PCM uses {CANONICAL_FMT_SIZE}"
        )

    if wav.audio_format != AudioFormat.PCM:
        warnings.append(f"audio_format is {wav.audio_format_name}, expected PCM")

    if wav.bits_per_sample % 8 != 0:
        warnings.append(f"bits_per_sample should be a multiple of 8, got {wav.bits_per_sample}")

    bytes_per_sample = (wav.bits_per_sample + 7) // 8
    expected_block_align = wav.channel_count * bytes_per_sample
    if wav.block_align != expected_block_align:
        warnings.append(
            f"block_align is {wav.block_align}, expected {expected_block_align} "
            f"({wav.channel_count} channels * {bytes_per_sample} bytes)"
        )

    expected_byte_rate = wav.sample_rate * expected_block_align
    if wav.byte_rate != expected_byte_rate:
        warnings.append(
            f"byte_rate is {wav.byte_rate}, expected {expected_byte_rate} "
            f"({wav.sample_rate} Hz * {expected_block_align} bytes per frame)"
        )

    expected_riff_size = 36 + wav.data_size
    if wav.riff_chunk_size != expected_riff_size:
        warnings.append(
            f"riff_chunk_size is {wav.riff_chunk_size}, expected {expected_riff_size}"
        )

    if errors:
        return ValidationResult.failure(errors, warnings)
    return ValidationResult.success(warnings)
