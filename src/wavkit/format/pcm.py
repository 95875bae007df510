"""Sample-level view of the WAV payload.

The codec keeps ``audio_data`` as raw bytes. This module interprets those
bytes as normalized float samples for inspection (levels, RMS, plotting).
"""

import numpy as np
from numpy.typing import NDArray

from wavkit.format.types import AudioFormat, WavFile
from wavkit.format.validation import ValidationError


def decode_samples(wav: WavFile) -> NDArray[np.float32]:
    """Decode the payload into float32 samples in [-1, 1].

    Trailing bytes that do not fill a whole frame are ignored.

    Args:
        wav: The WavFile whose ``audio_data`` should be decoded.

    Returns:
        Array with shape (frame_count, channel_count).

    Raises:
        ValidationError: If the sample format is not supported or the
            fmt fields cannot describe a frame.
    """
    if wav.channel_count == 0:
        raise ValidationError("channel_count must be >= 1", field="channel_count")

    bytes_per_sample = wav.bits_per_sample // 8
    if bytes_per_sample == 0:
        raise ValidationError(
            f"Unsupported bits_per_sample: {wav.bits_per_sample}", field="bits_per_sample"
        )

    frame_bytes = bytes_per_sample * wav.channel_count
    usable = len(wav.audio_data) - len(wav.audio_data) % frame_bytes
    data = bytes(wav.audio_data[:usable])

    audio_format = wav.audio_format
    bits = wav.bits_per_sample

    if audio_format == AudioFormat.IEEE_FLOAT and bits == 32:
        samples = np.frombuffer(data, dtype="<f4").astype(np.float32)
    elif audio_format == AudioFormat.PCM and bits == 8:
        samples = (np.frombuffer(data, dtype=np.uint8).astype(np.float32) - 128.0) / 128.0
    elif audio_format == AudioFormat.PCM and bits == 16:
        samples = np.frombuffer(data, dtype="<i2").astype(np.float32) / 32768.0
    elif audio_format == AudioFormat.PCM and bits == 24:
        samples = _decode_24bit_pcm(data)
    elif audio_format == AudioFormat.PCM and bits == 32:
        samples = np.frombuffer(data, dtype="<i4").astype(np.float32) / 2147483648.0
    else:
        raise ValidationError(
            f"Unsupported audio format: format={wav.audio_format_name}, bits={bits}",
            field="audio_format",
        )

    return samples.reshape(-1, wav.channel_count)


def channel_rms(samples: NDArray[np.float32]) -> NDArray[np.float64]:
    """Get the RMS level of each channel of a (frames, channels) array."""
    if samples.shape[0] == 0:
        return np.zeros(samples.shape[1], dtype=np.float64)
    return np.sqrt(np.mean(samples.astype(np.float64) ** 2, axis=0))


def _decode_24bit_pcm(data: bytes) -> NDArray[np.float32]:
    """Decode 24-bit little-endian PCM to float32."""
    raw = np.frombuffer(data, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
    values = raw[:, 0] | (raw[:, 1] << 8) | (raw[:, 2] << 16)
    # Sign-extend from 24 bits
    values = np.where(values & 0x800000, values - 0x1000000, values)
    return (values / 8388608.0).astype(np.float32)
