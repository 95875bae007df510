"""Python types for canonical WAV files.

A canonical WAV file is a RIFF container holding exactly one 16-byte ``fmt ``
chunk followed by one ``data`` chunk. ``WavFile`` mirrors that layout field by
field, in wire order.
"""

import copy
from dataclasses import dataclass, field, fields, replace
from enum import IntEnum

from wavkit.format.riff import CANONICAL_FMT_SIZE, DATA_ID, FMT_ID, RIFF_ID, WAVE_ID


class AudioFormat(IntEnum):
    """Format codes found in the ``audio_format`` field of the fmt chunk."""

    PCM = 1
    """Linear pulse-code modulation (integer samples)."""

    IEEE_FLOAT = 3
    """IEEE 754 floating point samples."""

    ALAW = 6
    """ITU G.711 A-law."""

    MULAW = 7
    """ITU G.711 mu-law."""

    EXTENSIBLE = 0xFFFE
    """WAVE_FORMAT_EXTENSIBLE (not supported by the canonical layout)."""

    @classmethod
    def from_code(cls, code: int) -> "AudioFormat | None":
        """Convert a raw format code, returning None for unknown codes."""
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        """Human-readable name for this format."""
        names = {
            AudioFormat.PCM: "PCM",
            AudioFormat.IEEE_FLOAT: "IEEE Float",
            AudioFormat.ALAW: "A-law",
            AudioFormat.MULAW: "mu-law",
            AudioFormat.EXTENSIBLE: "Extensible",
        }
        return names.get(self, "Unknown")


@dataclass
class WavFile:
    """A decoded canonical WAV file.

    Every field can be changed after decoding. The writer serializes the
    current values as they are and never recomputes the derived ones; call
    ``with_derived_fields`` first if the sizes and rates should follow the
    other fields.
    """

    # RIFF chunk
    riff_header: bytes = RIFF_ID
    """FourCC, normally ``b"RIFF"``."""

    riff_chunk_size: int = 0
    """Total file size minus 8."""

    wave_header: bytes = WAVE_ID
    """FourCC, normally ``b"WAVE"``."""

    # fmt subchunk
    fmt_header: bytes = FMT_ID
    """FourCC, normally ``b"fmt "``."""

    fmt_chunk_size: int = CANONICAL_FMT_SIZE
    """Size of the fmt body, 16 for canonical PCM."""

    audio_format: int = AudioFormat.PCM
    channel_count: int = 1
    sample_rate: int = 44100
    byte_rate: int = 0
    """sample_rate * channel_count * bits_per_sample / 8."""

    block_align: int = 0
    """channel_count * bits_per_sample / 8."""

    bits_per_sample: int = 16

    # data subchunk
    data_tag: bytes = DATA_ID
    """FourCC, normally ``b"data"``."""

    data_size: int = 0
    """Declared length of ``audio_data`` in bytes."""

    audio_data: bytes = field(default=b"", repr=False)
    """Raw payload bytes."""

    def copy(self) -> "WavFile":
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    def with_derived_fields(self) -> "WavFile":
        """Return a copy with sizes and rates recomputed from the other fields."""
        bytes_per_sample = (self.bits_per_sample + 7) // 8
        block_align = self.channel_count * bytes_per_sample
        data_size = len(self.audio_data)
        return replace(
            self.copy(),
            block_align=block_align,
            byte_rate=self.sample_rate * block_align,
            data_size=data_size,
            riff_chunk_size=self.file_size - 8,
        )

    def fields(self) -> list[tuple[str, object]]:
        """Get the fields as ``(name, value)`` pairs in wire order."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    @property
    def audio_format_name(self) -> str:
        """Get the audio format as a display string."""
        fmt = AudioFormat.from_code(self.audio_format)
        return fmt.display_name if fmt is not None else f"Unknown ({self.audio_format})"

    @property
    def frame_count(self) -> int:
        """Get the number of whole sample frames in the payload."""
        if self.block_align == 0:
            return 0
        return len(self.audio_data) // self.block_align

    @property
    def duration_seconds(self) -> float:
        """Get the payload duration, 0.0 when the rate fields are unset."""
        if self.byte_rate == 0:
            return 0.0
        return len(self.audio_data) / self.byte_rate

    @property
    def file_size(self) -> int:
        """Get the size of the encoded file in bytes."""
        return 8 + 4 + 8 + CANONICAL_FMT_SIZE + 8 + len(self.audio_data)
