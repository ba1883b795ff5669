"""Convert raw ffprobe output into typed values."""

from __future__ import annotations

import json

from pydantic import ValidationError

from ffprobe_async.models.errors import MalformedDuration, MalformedJson
from ffprobe_async.models.media_info import MediaInfo
from ffprobe_async.models.results import DurationUnits, ProbeResult
from ffprobe_async.models.types import CodecType

EXPECTED_DURATION_PARTS = 3
# ``SS.ff``: two whole digits, the point, and two fractional digits.
SECONDS_FIELD_WIDTH = 5


def parse_codec_types(stdout: str) -> frozenset[CodecType]:
    """Collect the codec types named in ``codec_type=...`` lines.

    Lines mentioning neither type (subtitles, data, blanks) are ignored.
    """
    found: set[CodecType] = set()
    for line in stdout.splitlines():
        if CodecType.AUDIO.value in line:
            found.add(CodecType.AUDIO)
        if CodecType.VIDEO.value in line:
            found.add(CodecType.VIDEO)
    return frozenset(found)


def parse_duration_string(stdout: str) -> str:
    """Return the sexagesimal duration exactly as printed, minus whitespace."""
    return stdout.strip()


def parse_duration_units(text: str) -> ProbeResult[DurationUnits]:
    """Split ``HH:MM:SS.ffffff`` into hours, minutes and seconds.

    Seconds keep at most two fractional digits. Anything other than three
    colon-separated numeric segments is a :class:`MalformedDuration`.
    """
    trimmed = text.strip()
    parts = trimmed.split(":")
    if not trimmed or len(parts) != EXPECTED_DURATION_PARTS:
        return ProbeResult.failure(MalformedDuration(text))
    hours, minutes, seconds = parts
    try:
        units = DurationUnits(
            hours=float(hours),
            minutes=float(minutes),
            seconds=float(seconds[:SECONDS_FIELD_WIDTH]),
        )
    except ValueError as e:
        return ProbeResult.failure(MalformedDuration(text, reason=str(e)))
    return ProbeResult.success(units)


def parse_duration_seconds(text: str) -> ProbeResult[float]:
    """Total seconds of a sexagesimal duration string."""
    return parse_duration_units(text).map(lambda units: units.total_seconds)


def parse_info(stdout: str) -> ProbeResult[MediaInfo]:
    """Parse ffprobe's JSON document into :class:`MediaInfo`."""
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        return ProbeResult.failure(MalformedJson(stdout, reason=str(e)))
    if not isinstance(data, dict):
        return ProbeResult.failure(MalformedJson(stdout, reason=f"expected an object, got {type(data).__name__}"))
    try:
        info = MediaInfo.model_validate(data)
    except ValidationError as e:
        return ProbeResult.failure(MalformedJson(stdout, reason=str(e)))
    return ProbeResult.success(info)


__all__ = [
    "parse_codec_types",
    "parse_duration_seconds",
    "parse_duration_string",
    "parse_duration_units",
    "parse_info",
]
