"""Canonical WAV format module.

This module reads and writes WAV files in the canonical 44-byte header layout:

    offset  size  field
    0       4     "RIFF"
    4       4     riff_chunk_size   (u32 LE)
    8       4     "WAVE"
    12      4     "fmt "
    16      4     fmt_chunk_size    (u32 LE, 16)
    20      2     audio_format      (u16 LE)
    22      2     channel_count     (u16 LE)
    24      4     sample_rate       (u32 LE)
    28      4     byte_rate         (u32 LE)
    32      2     block_align       (u16 LE)
    34      2     bits_per_sample   (u16 LE)
    36      4     "data"
    40      4     data_size         (u32 LE)
    44      N     audio_data

Example Usage
-------------
>>> from wavkit.format import load_wav, save_wav
>>> wav = load_wav("input.wav")
>>> edited = wav.copy()
>>> edited.channel_count = 1
>>> save_wav(edited, "output.wav")
"""

from wavkit.format.canonical.reader import decode_wav, load_wav
from wavkit.format.canonical.writer import encode_wav, save_wav, wav_to_bytes
from wavkit.format.pcm import channel_rms, decode_samples
from wavkit.format.riff import RiffError
from wavkit.format.types import AudioFormat, WavFile
from wavkit.format.validation import (
    ValidationError,
    ValidationResult,
    validate_wav,
)

__all__ = [
    # Types
    "WavFile",
    "AudioFormat",
    # Reader
    "decode_wav",
    "load_wav",
    # Writer
    "encode_wav",
    "save_wav",
    "wav_to_bytes",
    # Samples
    "decode_samples",
    "channel_rms",
    # Errors and validation
    "RiffError",
    "validate_wav",
    "ValidationResult",
    "ValidationError",
]
