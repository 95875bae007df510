"""RIFF/WAV primitives for canonical WAV files.

This module provides the FourCC identifiers, the fixed header layout, and the
little-endian read/write helpers shared by the canonical reader and writer.
"""

import struct
from typing import BinaryIO

# FourCC identifiers
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"

# Canonical PCM layout
CANONICAL_FMT_SIZE = 16
CANONICAL_HEADER_SIZE = 44

# Payload reads happen in blocks of this many bytes
DEFAULT_CHUNK_SIZE = 128

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class RiffError(Exception):
    """Error reading or writing RIFF files."""


def read_exact(f: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from a binary stream.

    Args:
        f: Readable binary stream.
        size: Number of bytes required.

    Returns:
        The bytes read.

    Raises:
        RiffError: If the stream ends before ``size`` bytes are available.
    """
    buf = bytearray()
    while len(buf) < size:
        block = f.read(size - len(buf))
        if not block:
            raise RiffError(
                f"truncated or malformed input: expected {size} bytes, got {len(buf)}"
            )
        buf.extend(block)
    return bytes(buf)


def read_word(f: BinaryIO) -> bytes:
    """Read one 4-byte word (a tag, a u32 or a pair of u16)."""
    return read_exact(f, 4)


def unpack_u32(word: bytes) -> int:
    return _U32.unpack(word)[0]


def unpack_u16_pair(word: bytes) -> tuple[int, int]:
    """Split a 4-byte word into two little-endian u16 values."""
    return _U16.unpack(word[0:2])[0], _U16.unpack(word[2:4])[0]


def pack_u16(value: int, field: str) -> bytes:
    try:
        return _U16.pack(value)
    except struct.error as e:
        raise RiffError(f"{field}={value!r} does not fit in an unsigned 16-bit field") from e


def pack_u32(value: int, field: str) -> bytes:
    try:
        return _U32.pack(value)
    except struct.error as e:
        raise RiffError(f"{field}={value!r} does not fit in an unsigned 32-bit field") from e


def pack_tag(tag: bytes, field: str) -> bytes:
    """Validate that a FourCC tag is exactly four bytes and return it."""
    tag = bytes(tag)
    if len(tag) != 4:
        raise RiffError(f"{field} must be exactly 4 bytes, got {len(tag)}")
    return tag


def check_tag(tag: bytes, expected: bytes, field: str) -> None:
    """Raise if a decoded FourCC tag does not match the expected identifier."""
    if tag != expected:
        raise RiffError(f"{field} is {tag!r}, expected {expected!r}")
