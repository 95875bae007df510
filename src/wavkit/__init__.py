"""wavkit - canonical WAV decoding, editing and re-encoding.

This package reads the RIFF/WAVE header and PCM payload of canonical WAV
files, exposes every header field for editing, and writes the result back
out byte for byte.

Example Usage
-------------
>>> from wavkit import load_wav, save_wav
>>>
>>> wav = load_wav("input.wav")
>>> print(f"{wav.channel_count} channels at {wav.sample_rate} Hz")
>>>
>>> # Edit a copy so the decoded original stays untouched
>>> stereo = wav.copy()
>>> stereo.channel_count = 2
>>> save_wav(stereo.with_derived_fields(), "output.wav")
"""

# Re-export format module for convenience
from wavkit.format import (
    AudioFormat,
    RiffError,
    ValidationError,
    ValidationResult,
    WavFile,
    decode_samples,
    decode_wav,
    encode_wav,
    load_wav,
    save_wav,
    validate_wav,
    wav_to_bytes,
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
    # Errors and validation
    "RiffError",
    "validate_wav",
    "ValidationResult",
    "ValidationError",
]
