"""Canonical WAV file writer.

This module serializes a WavFile back to bytes in the same field order the
reader uses. Field values are written exactly as stored; nothing is
recomputed.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO

from wavkit.format.riff import pack_tag, pack_u16, pack_u32
from wavkit.format.types import WavFile

logger = logging.getLogger(__name__)


def encode_wav(wav: WavFile, f: BinaryIO) -> None:
    """Write a WavFile to a binary stream.

    Args:
        wav: The WavFile to serialize. It is not modified.
        f: Writable binary stream.

    Raises:
        RiffError: If a tag is not 4 bytes or a number does not fit its field.
        OSError: If the stream cannot be written.
    """
    # RIFF chunk
    f.write(pack_tag(wav.riff_header, "riff_header"))
    f.write(pack_u32(wav.riff_chunk_size, "riff_chunk_size"))
    f.write(pack_tag(wav.wave_header, "wave_header"))

    # fmt subchunk
    f.write(pack_tag(wav.fmt_header, "fmt_header"))
    f.write(pack_u32(wav.fmt_chunk_size, "fmt_chunk_size"))
    f.write(pack_u16(wav.audio_format, "audio_format"))
    f.write(pack_u16(wav.channel_count, "channel_count"))
    f.write(pack_u32(wav.sample_rate, "sample_rate"))
    f.write(pack_u32(wav.byte_rate, "byte_rate"))
    f.write(pack_u16(wav.block_align, "block_align"))
    f.write(pack_u16(wav.bits_per_sample, "bits_per_sample"))

    # data subchunk
    f.write(pack_tag(wav.data_tag, "data_tag"))
    f.write(pack_u32(wav.data_size, "data_size"))
    f.write(bytes(wav.audio_data))


def wav_to_bytes(wav: WavFile) -> bytes:
    """Serialize a WavFile to bytes."""
    buf = io.BytesIO()
    encode_wav(wav, buf)
    return buf.getvalue()


def save_wav(wav: WavFile, path: Path | str) -> None:
    """Save a WavFile to disk, creating or overwriting the file.

    The whole file is serialized before the destination is opened, so an
    unencodable field leaves the destination untouched. The file is then
    written in place; if the write fails part way, the partial file is left
    behind.

    Args:
        wav: The WavFile to serialize.
        path: Output file path. Parent directories are created as needed.

    Raises:
        RiffError: If a field cannot be encoded.
        OSError: If the file cannot be written.
    """
    path = Path(path)
    wav_bytes = wav_to_bytes(wav)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(wav_bytes)

    logger.debug("Wrote %d bytes to %s", len(wav_bytes), path)
