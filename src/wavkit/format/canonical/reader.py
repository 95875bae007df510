"""Canonical WAV file reader.

This module decodes the fixed 44-byte canonical header and the PCM payload
that follows it. Fields are read strictly in wire order; there is no chunk
search and no seeking, so any readable binary stream works.
"""

import logging
from pathlib import Path
from typing import BinaryIO

from wavkit.format.riff import (
    CANONICAL_FMT_SIZE,
    DATA_ID,
    DEFAULT_CHUNK_SIZE,
    FMT_ID,
    RIFF_ID,
    WAVE_ID,
    RiffError,
    check_tag,
    read_exact,
    read_word,
    unpack_u16_pair,
    unpack_u32,
)
from wavkit.format.types import WavFile

logger = logging.getLogger(__name__)


def decode_wav(
    f: BinaryIO,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    require_aligned: bool = False,
    validate_tags: bool = False,
) -> WavFile:
    """Decode a canonical WAV file from a binary stream.

    Args:
        f: Readable binary stream positioned at the RIFF header.
        chunk_size: Block size used when reading the payload.
        require_aligned: Reject payloads whose size is not a multiple of
            ``chunk_size``.
        validate_tags: Reject files whose FourCC tags are not
            RIFF/WAVE/fmt /data. Tags are stored verbatim otherwise.

    Returns:
        A fully populated WavFile.

    Raises:
        RiffError: If the stream is truncated, a tag is wrong and
            validate_tags=True, or the payload is misaligned and
            require_aligned=True.
        ValueError: If chunk_size is not positive.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    # RIFF chunk
    riff_header = read_word(f)
    riff_chunk_size = unpack_u32(read_word(f))
    wave_header = read_word(f)

    # fmt subchunk
    fmt_header = read_word(f)
    fmt_chunk_size = unpack_u32(read_word(f))
    audio_format, channel_count = unpack_u16_pair(read_word(f))
    sample_rate = unpack_u32(read_word(f))
    byte_rate = unpack_u32(read_word(f))
    block_align, bits_per_sample = unpack_u16_pair(read_word(f))

    # data subchunk
    data_tag = read_word(f)
    data_size = unpack_u32(read_word(f))

    if validate_tags:
        check_tag(riff_header, RIFF_ID, "riff_header")
        check_tag(wave_header, WAVE_ID, "wave_header")
        check_tag(fmt_header, FMT_ID, "fmt_header")
        check_tag(data_tag, DATA_ID, "data_tag")

    if fmt_chunk_size != CANONICAL_FMT_SIZE:
        # The fmt region is always read as 16 bytes
        logger.debug(
            "fmt_chunk_size is %d, reading the fmt chunk as %d bytes",
            fmt_chunk_size,
            CANONICAL_FMT_SIZE,
        )

    audio_data = _read_payload(f, data_size, chunk_size, require_aligned)

    logger.debug(
        "Decoded WAV: %d channel(s), %d Hz, %d bits, %d payload bytes",
        channel_count,
        sample_rate,
        bits_per_sample,
        data_size,
    )

    return WavFile(
        riff_header=riff_header,
        riff_chunk_size=riff_chunk_size,
        wave_header=wave_header,
        fmt_header=fmt_header,
        fmt_chunk_size=fmt_chunk_size,
        audio_format=audio_format,
        channel_count=channel_count,
        sample_rate=sample_rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
        data_tag=data_tag,
        data_size=data_size,
        audio_data=audio_data,
    )


def load_wav(
    path: Path | str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    require_aligned: bool = False,
    validate_tags: bool = False,
) -> WavFile:
    """Load a canonical WAV file from disk.

    Args:
        path: Path to the WAV file.
        chunk_size: Block size used when reading the payload.
        require_aligned: Reject payloads not a multiple of ``chunk_size``.
        validate_tags: Reject files with unexpected FourCC tags.

    Returns:
        The decoded WavFile.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be opened or read.
        RiffError: If the file is not a canonical WAV file.
    """
    path = Path(path)
    logger.debug("Loading %s", path)
    with open(path, "rb") as f:
        return decode_wav(
            f,
            chunk_size=chunk_size,
            require_aligned=require_aligned,
            validate_tags=validate_tags,
        )


def _read_payload(
    f: BinaryIO,
    data_size: int,
    chunk_size: int,
    require_aligned: bool,
) -> bytes:
    """Read exactly ``data_size`` payload bytes in ``chunk_size`` blocks.

    The last block may be short unless ``require_aligned`` is set.
    """
    if require_aligned and data_size % chunk_size != 0:
        raise RiffError(
            f"data_size ({data_size}) is not a multiple of the read chunk size ({chunk_size})"
        )

    payload = bytearray()
    remaining = data_size
    while remaining > 0:
        block = read_exact(f, min(chunk_size, remaining))
        payload.extend(block)
        remaining -= len(block)

    return bytes(payload)
