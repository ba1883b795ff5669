"""ffprobe argument vectors, one layout per probe kind."""

from __future__ import annotations

from os import PathLike, fspath
from typing import TYPE_CHECKING

from ffprobe_async.models.types import ProbeKind

if TYPE_CHECKING:
    from collections.abc import Sequence

_ERRORS_ONLY = ["-v", "error"]
_QUIET = ["-v", "quiet"]
_SHOW_ENTRIES = ["-show_entries"]
_INPUT = ["-i"]
_SEXAGESIMAL = ["-sexagesimal"]
_JSON_OUTPUT = ["-print_format", "json"]
_SHOW_FORMAT_STREAMS = ["-show_format", "-show_streams"]

STREAM_CODEC_TYPE = "stream=codec_type"
FORMAT_DURATION = "format=duration"
# No section wrappers around each stream entry.
DEFAULT_NO_WRAPPERS = ["-of", "default=nw=1"]
# No wrappers and no ``key=`` prefix, just the bare value.
DEFAULT_VALUE_ONLY = ["-of", "default=noprint_wrappers=1:nokey=1"]


def codec_types_args(src: str) -> list[str]:
    """List each stream's ``codec_type``, one per line."""
    return [*_ERRORS_ONLY, *_SHOW_ENTRIES, STREAM_CODEC_TYPE, *DEFAULT_NO_WRAPPERS, src]


def duration_args(src: str) -> list[str]:
    """Print the container duration as ``HH:MM:SS.ffffff``."""
    return [*_INPUT, src, *_ERRORS_ONLY, *_SHOW_ENTRIES, FORMAT_DURATION, *DEFAULT_VALUE_ONLY, *_SEXAGESIMAL]


def info_args(src: str) -> list[str]:
    """Dump format and stream sections as JSON."""
    return [*_QUIET, *_JSON_OUTPUT, *_SHOW_FORMAT_STREAMS, src]


_BUILDERS = {
    ProbeKind.CODEC_TYPES: codec_types_args,
    ProbeKind.DURATION: duration_args,
    ProbeKind.INFO: info_args,
}


def build_args(kind: ProbeKind, src: str) -> tuple[str, ...]:
    """Return the exact ffprobe argument vector for ``kind`` on ``src``.

    ``src`` must already be validated and trimmed. Argument order matters to
    ffprobe; this is the only place it is defined.
    """
    return tuple(_BUILDERS[kind](src))


def raw_args(args: Sequence[str | int | float | PathLike[str]]) -> tuple[str, ...]:
    """Convert caller-supplied arguments to strings without reordering them."""
    return tuple(fspath(a) if isinstance(a, PathLike) else str(a) for a in args)


__all__ = [
    "build_args",
    "codec_types_args",
    "duration_args",
    "info_args",
    "raw_args",
]
