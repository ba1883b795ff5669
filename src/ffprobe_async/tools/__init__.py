"""ffprobe invocation, argument building and output parsing."""

from . import probe
from .arguments import build_args
from .cli import join_command, run_process
from .parsers import (
    parse_codec_types,
    parse_duration_seconds,
    parse_duration_string,
    parse_duration_units,
    parse_info,
)
from .validation import UNDEFINED, check_exists, validate_source

__all__ = [
    "UNDEFINED",
    "build_args",
    "check_exists",
    "join_command",
    "parse_codec_types",
    "parse_duration_seconds",
    "parse_duration_string",
    "parse_duration_units",
    "parse_info",
    "probe",
    "run_process",
    "validate_source",
]
