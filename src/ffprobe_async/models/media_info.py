"""Structured ffprobe ``-show_format -show_streams`` output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MediaInfo(BaseModel):
    """Stream and container metadata, kept verbatim from ffprobe's JSON."""

    streams: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Per-stream metadata in ffprobe order.",
    )
    format: dict[str, Any] = Field(
        default_factory=dict,
        description="Container-level metadata.",
    )

    model_config = ConfigDict(extra="allow")

    def streams_of(self, codec_type: str) -> list[dict[str, Any]]:
        """Return the streams whose ``codec_type`` equals ``codec_type``."""
        return [s for s in self.streams if s.get("codec_type") == codec_type]


__all__ = ["MediaInfo"]
