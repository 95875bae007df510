"""Unit tests for WAV validation."""

from wavkit.format import ValidationError, WavFile, validate_wav
from wavkit.format.validation import ValidationResult


def consistent_wav() -> WavFile:
    return WavFile(
        channel_count=2,
        sample_rate=44100,
        bits_per_sample=16,
        audio_data=bytes(16),
    ).with_derived_fields()


class TestValidateWav:
    """Tests for validate_wav function."""

    def test_consistent_file_passes(self) -> None:
        """Test that a consistent canonical file has no errors or warnings."""
        result = validate_wav(consistent_wav())

        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_bad_tags_are_errors(self) -> None:
        """Test that unexpected FourCC tags fail validation."""
        wav = consistent_wav()
        wav.riff_header = b"RIFX"
        wav.data_tag = b"LIST"

        result = validate_wav(wav)

        assert not result.valid
        assert any("riff_header" in e for e in result.errors)
        assert any("data_tag" in e for e in result.errors)

    def test_payload_length_mismatch_is_error(self) -> None:
        """Test that data_size must match the payload length."""
        wav = consistent_wav()
        wav.data_size = 99

        result = validate_wav(wav)

        assert not result.valid
        assert any("data_size" in e for e in result.errors)

    def test_zero_channels_is_error(self) -> None:
        wav = consistent_wav()
        wav.channel_count = 0

        result = validate_wav(wav)

        assert not result.valid
        assert any("channel_count" in e for e in result.errors)

    def test_stale_derived_fields_are_warnings(self) -> None:
        """Test that mutating channel_count flags byte_rate and block_align."""
        wav = consistent_wav()
        wav.channel_count = 1

        result = validate_wav(wav)

        assert result.valid
        assert any("block_align" in w for w in result.warnings)
        assert any("byte_rate" in w for w in result.warnings)

    def test_non_canonical_fmt_is_warning(self) -> None:
        wav = consistent_wav()
        wav.fmt_chunk_size = 18
        wav.audio_format = 3

        result = validate_wav(wav)

        assert result.valid
        assert any("fmt_chunk_size" in w for w in result.warnings)
        assert any("IEEE Float" in w for w in result.warnings)

    def test_riff_size_mismatch_is_warning(self) -> None:
        wav = consistent_wav()
        wav.riff_chunk_size += 2

        result = validate_wav(wav)

        assert result.valid
        assert any("riff_chunk_size" in w for w in result.warnings)

    def test_partial_byte_samples_round_up(self) -> None:
        """Test that 12-bit stereo expects a 4-byte block_align."""
        wav = WavFile(
            channel_count=2,
            sample_rate=8000,
            bits_per_sample=12,
            audio_data=bytes(12),
        ).with_derived_fields()

        result = validate_wav(wav)

        assert result.valid
        assert not any("block_align" in w for w in result.warnings)
        assert not any("byte_rate" in w for w in result.warnings)
        assert any("multiple of 8" in w for w in result.warnings)

    def test_floored_block_align_is_warning(self) -> None:
        """Test that a 12-bit stereo block_align of 2 is flagged."""
        wav = WavFile(
            channel_count=2,
            sample_rate=8000,
            bits_per_sample=12,
            audio_data=bytes(12),
        ).with_derived_fields()
        wav.block_align = 2
        wav.byte_rate = 16000

        result = validate_wav(wav)

        assert any("block_align is 2, expected 4" in w for w in result.warnings)
        assert any("byte_rate is 16000, expected 32000" in w for w in result.warnings)


class TestValidationResult:
    def test_success(self) -> None:
        result = ValidationResult.success(["careful"])
        assert result.valid
        assert result.warnings == ["careful"]

    def test_failure(self) -> None:
        result = ValidationResult.failure(["broken"])
        assert not result.valid
        assert result.errors == ["broken"]
        assert result.warnings == []


def test_validation_error_carries_field() -> None:
    error = ValidationError("bad value", field="sample_rate")
    assert error.field == "sample_rate"
    assert str(error) == "bad value"
