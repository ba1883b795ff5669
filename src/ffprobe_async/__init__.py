"""Asynchronous facade over ffprobe."""

from .models import (
    CodecType,
    DurationUnits,
    MalformedDuration,
    MalformedJson,
    MediaInfo,
    ProbeError,
    ProbeResult,
    RuntimeContext,
    SourceError,
    SourceErrorKind,
    ToolError,
    Verbosity,
)
from .tools.probe import (
    FFprobe,
    codec_types,
    duration_seconds,
    duration_string,
    duration_units,
    get_ffprobe_version,
    is_audio,
    is_video,
    media_info,
    probe_many,
    run_raw_probe,
)

__all__ = [
    "CodecType",
    "DurationUnits",
    "FFprobe",
    "MalformedDuration",
    "MalformedJson",
    "MediaInfo",
    "ProbeError",
    "ProbeResult",
    "RuntimeContext",
    "SourceError",
    "SourceErrorKind",
    "ToolError",
    "Verbosity",
    "codec_types",
    "duration_seconds",
    "duration_string",
    "duration_units",
    "get_ffprobe_version",
    "is_audio",
    "is_video",
    "media_info",
    "probe_many",
    "run_raw_probe",
]
