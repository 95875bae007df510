"""
Integration tests for the decode, clone, mutate and encode workflow.

Builds real WAV files with numpy sample data, then runs them through the
reader, the editing helpers and the writer, checking bytes on disk.
"""

from pathlib import Path

import numpy as np

from wavkit import WavFile, decode_samples, load_wav, save_wav, validate_wav


def make_sine_wav(path: Path, sample_rate: int = 8000, channels: int = 2) -> bytes:
    """Write a short 16-bit sine wave and return the file bytes."""
    t = np.arange(sample_rate // 10) / sample_rate
    tone = np.sin(2 * np.pi * 440.0 * t)
    frames = np.stack([tone * (0.5 + 0.25 * c) for c in range(channels)], axis=-1)
    pcm = (frames * 32767).astype("<i2")

    wav = WavFile(
        channel_count=channels,
        sample_rate=sample_rate,
        bits_per_sample=16,
        audio_data=pcm.tobytes(),
    ).with_derived_fields()
    save_wav(wav, path)
    return path.read_bytes()


class TestEditWorkflow:
    """Test the complete edit pipeline on disk."""

    def test_generated_file_is_canonical(self, tmp_path: Path) -> None:
        """Test that a freshly built file validates cleanly."""
        path = tmp_path / "sine.wav"
        data = make_sine_wav(path)

        wav = load_wav(path)
        result = validate_wav(wav)

        assert result.valid
        assert result.warnings == []
        assert len(data) == 44 + wav.data_size

    def test_roundtrip_on_disk(self, tmp_path: Path) -> None:
        """Test load then save reproduces the file exactly."""
        source = tmp_path / "sine.wav"
        copy_path = tmp_path / "copy.wav"
        data = make_sine_wav(source)

        save_wav(load_wav(source), copy_path)

        assert copy_path.read_bytes() == data

    def test_clone_mutate_encode(self, tmp_path: Path) -> None:
        """Test that editing a clone leaves the decoded original intact."""
        source = tmp_path / "sine.wav"
        output = tmp_path / "mono.wav"
        data = make_sine_wav(source)

        original = load_wav(source)
        edited = original.copy()
        edited.channel_count = 1
        save_wav(edited, output)

        assert original.channel_count == 2
        result = output.read_bytes()
        assert result[22:24] == b"\x01\x00"
        assert result[:22] + result[24:] == data[:22] + data[24:]

        # Stale derived fields are reported, not fixed
        reloaded = load_wav(output)
        warnings = validate_wav(reloaded).warnings
        assert any("block_align" in w for w in warnings)

    def test_samples_survive_roundtrip(self, tmp_path: Path) -> None:
        """Test that the decoded sample view matches across a save."""
        source = tmp_path / "sine.wav"
        copy_path = tmp_path / "copy.wav"
        make_sine_wav(source)

        save_wav(load_wav(source), copy_path)

        np.testing.assert_array_equal(
            decode_samples(load_wav(source)), decode_samples(load_wav(copy_path))
        )
        assert decode_samples(load_wav(copy_path)).shape == (800, 2)
