"""Enumerations shared by the probe pipeline."""

from enum import Enum


class CodecType(str, Enum):
    """Coarse stream classification reported by ffprobe."""

    AUDIO = "audio"
    VIDEO = "video"


class ProbeKind(str, Enum):
    """Kinds of ffprobe invocation with a fixed argument layout."""

    CODEC_TYPES = "codec_types"
    DURATION = "duration"
    INFO = "info"

    @property
    def label(self) -> str:
        """Human-readable description used in log messages."""
        return {
            ProbeKind.CODEC_TYPES: "codec types",
            ProbeKind.DURATION: "duration string",
            ProbeKind.INFO: "info",
        }[self]


class SourceErrorKind(str, Enum):
    """Reasons a source path is rejected before ffprobe runs."""

    UNDEFINED = "undefined"
    NULL = "null"
    EMPTY = "empty"
    WHITESPACE = "whitespace"
    INVALID_TYPE = "invalid_type"
    PATH_NOT_FOUND = "path_not_found"


__all__ = ["CodecType", "ProbeKind", "SourceErrorKind"]
