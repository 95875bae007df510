import json
import logging
import os
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wavkit.cli.validators import validate_positive_integer, validate_u16, validate_u32
from wavkit.format import (
    RiffError,
    ValidationError,
    WavFile,
    channel_rms,
    decode_samples,
    load_wav,
    save_wav,
    validate_wav,
)
from wavkit.format.riff import DEFAULT_CHUNK_SIZE

DEFAULT_OUTPUT = Path("output.wav")
LOG_LEVEL_ENV = "WAVKIT_LOG_LEVEL"

app = App(name="wavkit", help="A utility for inspecting and editing canonical WAV files")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

ChunkSize = Annotated[int, Parameter(validator=validate_positive_integer)]


def configure_logging() -> None:
    """Route library log records through rich, level taken from the environment."""
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        print_warning(f"Unknown {LOG_LEVEL_ENV} value {name!r}, using WARNING")
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(message, style="bold red")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(message, style="bold green")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(message, style="bold yellow")


def format_field(value: object) -> str:
    """Render a WavFile field value for display."""
    if isinstance(value, bytes | bytearray):
        return repr(bytes(value).decode("ascii", errors="replace"))
    return str(value)


def open_wav(file: Path, chunk_size: int, strict: bool) -> WavFile | None:
    """Load a WAV file, printing an error and returning None on failure."""
    configure_logging()

    if not file.exists():
        print_error(f"Error: File {file} does not exist")
        return None

    try:
        return load_wav(
            file,
            chunk_size=chunk_size,
            require_aligned=strict,
            validate_tags=strict,
        )
    except RiffError as e:
        print_error(f"Error: {file} is not a canonical WAV file: {e}")
    except OSError as e:
        print_error(f"Error: Cannot read {file}: {e}")
    return None


@app.default
@app.command
def info(
    file: Path,
    chunk_size: ChunkSize = DEFAULT_CHUNK_SIZE,
    strict: bool = False,
) -> int:
    """
    Display the header fields of a WAV file.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    chunk_size: int
        Block size in bytes used to read the audio payload (default: 128)
    strict: bool
        Reject unexpected chunk tags and payloads that are not a multiple
        of the chunk size
    """
    wav = open_wav(file, chunk_size, strict)
    if wav is None:
        return 1

    table = Table(title=str(file), show_header=True, header_style="bold")
    table.add_column("Field", justify="left")
    table.add_column("Value", justify="right")
    for name, value in wav.fields():
        if name == "audio_data":
            value = f"<{len(value)} bytes>"
        table.add_row(name, format_field(value))
    console.print(table)

    console.print(f"  Audio format: {wav.audio_format_name}")
    console.print(f"  Frames: {wav.frame_count}")
    console.print(f"  Duration: {wav.duration_seconds:.3f}s")

    try:
        samples = decode_samples(wav)
    except ValidationError as e:
        print_warning(f"  Sample levels unavailable: {e}")
        return 0

    for channel, rms in enumerate(channel_rms(samples)):
        console.print(f"  Channel {channel}: RMS={rms:.3f}")

    return 0


@app.command
def validate(
    file: Path,
    strict: bool = False,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
) -> int:
    """
    Validate a WAV file against the canonical layout.

    Checks chunk tags, payload length, and consistency of the derived
    fmt fields.

    Parameters
    ----------
    file: Path
        The path to the .wav file to validate
    strict: bool
        Treat warnings as errors (default: False)
    output_json: bool
        Output results as JSON (default: False)
    """
    wav = open_wav(file, DEFAULT_CHUNK_SIZE, strict=False)
    if wav is None:
        return 1

    result = validate_wav(wav)
    errors = list(result.errors)
    warnings = list(result.warnings)

    # In strict mode, warnings become errors
    if strict and warnings:
        errors.extend(f"Strict mode: {w}" for w in warnings)
    valid = not errors

    if output_json:
        results = {
            "file": str(file),
            "valid": valid,
            "errors": errors,
            "warnings": warnings,
        }
        console.print(json.dumps(results, indent=2), soft_wrap=True)
        return 0 if valid else 1

    if valid:
        print_success(f"[PASS] {file}")
        console.print(f"  Channels: {wav.channel_count}")
        console.print(f"  Sample rate: {wav.sample_rate} Hz")
        console.print(f"  Bits per sample: {wav.bits_per_sample}")

        if warnings:
            console.print("")
            for warning in warnings:
                print_warning(f"  [WARN] {warning}")
    else:
        print_error(f"[FAIL] {file}")
        for error in errors:
            console.print(f"  {error}")

    return 0 if valid else 1


@app.command
def edit(
    file: Path,
    output: Path = DEFAULT_OUTPUT,
    channel_count: Annotated[int | None, Parameter(validator=validate_u16)] = None,
    sample_rate: Annotated[int | None, Parameter(validator=validate_u32)] = None,
    bits_per_sample: Annotated[int | None, Parameter(validator=validate_u16)] = None,
    audio_format: Annotated[int | None, Parameter(validator=validate_u16)] = None,
    recompute: bool = False,
    chunk_size: ChunkSize = DEFAULT_CHUNK_SIZE,
    strict: bool = False,
) -> int:
    """
    Change header fields of a WAV file and write the result to a new file.

    Fields that are not given keep their decoded values. Derived fields
    (byte_rate, block_align, data_size, riff_chunk_size) are written as
    decoded unless --recompute is set.

    Parameters
    ----------
    file: Path
        The path to the source .wav file
    output: Path
        The output destination for the edited .wav file (default: output.wav)
    channel_count: int | None
        New channel count
    sample_rate: int | None
        New sample rate in Hz
    bits_per_sample: int | None
        New bits per sample
    audio_format: int | None
        New audio format code (1 = PCM)
    recompute: bool
        Recompute byte_rate, block_align and the chunk sizes from the
        other fields before writing
    chunk_size: int
        Block size in bytes used to read the audio payload (default: 128)
    strict: bool
        Reject unexpected chunk tags and payloads that are not a multiple
        of the chunk size
    """
    wav = open_wav(file, chunk_size, strict)
    if wav is None:
        return 1

    edited = wav.copy()
    changes = {
        "channel_count": channel_count,
        "sample_rate": sample_rate,
        "bits_per_sample": bits_per_sample,
        "audio_format": audio_format,
    }
    for name, value in changes.items():
        if value is not None:
            logger.info("Setting %s: %s -> %s", name, getattr(edited, name), value)
            setattr(edited, name, value)

    if recompute:
        edited = edited.with_derived_fields()

    try:
        save_wav(edited, output)
    except RiffError as e:
        print_error(f"Error: Cannot encode {output}: {e}")
        return 1
    except OSError as e:
        print_error(f"Error: Cannot write {output}: {e}")
        return 1

    console.print(f"Wrote {output} ({edited.file_size} bytes)")
    return 0


def main() -> None:
    sys.exit(app())


if __name__ == "__main__":
    main()
