"""Expose models and type definitions."""

from .context import RuntimeContext
from .errors import MalformedDuration, MalformedJson, ProbeError, SourceError, ToolError
from .media_info import MediaInfo
from .results import DurationUnits, ProbeResult, ProcessOutput
from .settings import Settings, get_settings
from .types import CodecType, ProbeKind, SourceErrorKind
from .verbosity import Verbosity

__all__ = [
    "CodecType",
    "DurationUnits",
    "MalformedDuration",
    "MalformedJson",
    "MediaInfo",
    "ProbeError",
    "ProbeKind",
    "ProbeResult",
    "ProcessOutput",
    "RuntimeContext",
    "Settings",
    "SourceError",
    "SourceErrorKind",
    "ToolError",
    "Verbosity",
    "get_settings",
]
