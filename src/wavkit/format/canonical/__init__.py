"""Canonical WAV reader and writer.

This subpackage reads and writes the minimal RIFF/WAVE layout: one 16-byte
fmt chunk followed by one data chunk, with no extension chunks.
"""

from wavkit.format.canonical.reader import decode_wav, load_wav
from wavkit.format.canonical.writer import encode_wav, save_wav, wav_to_bytes

__all__ = [
    "decode_wav",
    "load_wav",
    "encode_wav",
    "save_wav",
    "wav_to_bytes",
]
