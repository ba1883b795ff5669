"""Asynchronous ffprobe operations.

Each operation validates the source, builds the argument vector for its
probe kind, awaits a single ffprobe process and parses its stdout. Failures
come back as :class:`~ffprobe_async.models.results.ProbeResult` errors; no
exception escapes and the hosting process is never terminated.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from ffprobe_async.models.context import RuntimeContext
from ffprobe_async.models.errors import ToolError
from ffprobe_async.models.results import ProbeResult
from ffprobe_async.models.types import CodecType, ProbeKind

from .arguments import build_args, raw_args
from .cli import join_command, run_process
from .helpers import maybe_log_command, maybe_log_output
from .parsers import (
    parse_codec_types,
    parse_duration_seconds,
    parse_duration_string,
    parse_duration_units,
    parse_info,
)
from .validation import UNDEFINED, check_exists, validate_source

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Sequence
    from os import PathLike

    from ffprobe_async.models.media_info import MediaInfo
    from ffprobe_async.models.results import DurationUnits

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _context(ctx: RuntimeContext | None) -> RuntimeContext:
    return ctx if ctx is not None else RuntimeContext.from_settings()


async def run(ctx: RuntimeContext, args: Sequence[str]) -> ProbeResult[str]:
    """Run ffprobe with ``args`` and return its stdout.

    Any output on stderr is a :class:`ToolError`, whatever the exit code.
    """
    command = join_command(ctx.ffprobe, args)
    maybe_log_command(verbosity=ctx.verbosity, status_callback=ctx.status_callback, banner=f"Running: {command}")
    runner = ctx.runner or run_process
    output = await runner(ctx.ffprobe, args)
    if output.stderr:
        logger.warning("ffprobe command failed (%s): %s", output.returncode, command)
        return ProbeResult.failure(ToolError(output.stderr, returncode=output.returncode))
    maybe_log_output(output.stdout, verbosity=ctx.verbosity, status_callback=ctx.status_callback)
    return ProbeResult.success(output.stdout)


async def prepare_source(ctx: RuntimeContext, src: object) -> ProbeResult[str]:
    """Validate ``src`` and, when enabled, check that it exists.

    The existence check stats the filesystem in a worker thread.
    """
    checked = validate_source(src)
    if checked.ok and ctx.check_exists:
        return await asyncio.to_thread(check_exists, checked.unwrap())
    return checked


async def _probe(
    ctx: RuntimeContext | None,
    kind: ProbeKind,
    src: object,
    parse: Callable[[str], ProbeResult[T]],
) -> ProbeResult[T]:
    runtime = _context(ctx)
    source = await prepare_source(runtime, src)
    if source.error is not None:
        logger.debug("Rejected source for %s: %s", kind.label, source.error)
        return ProbeResult.failure(source.error)
    stdout = await run(runtime, build_args(kind, source.unwrap()))
    return stdout.then(parse)


async def codec_types(src: object = UNDEFINED, ctx: RuntimeContext | None = None) -> ProbeResult[frozenset[CodecType]]:
    """Return the set of codec types (audio, video) present in ``src``."""
    return await _probe(ctx, ProbeKind.CODEC_TYPES, src, lambda out: ProbeResult.success(parse_codec_types(out)))


async def is_video(src: object = UNDEFINED, ctx: RuntimeContext | None = None) -> ProbeResult[bool]:
    """Whether ``src`` has at least one video stream."""
    types = await codec_types(src, ctx)
    return types.map(lambda found: CodecType.VIDEO in found)


async def is_audio(src: object = UNDEFINED, ctx: RuntimeContext | None = None) -> ProbeResult[bool]:
    """Whether ``src`` has audio and no video streams at all."""
    types = await codec_types(src, ctx)
    return types.map(lambda found: CodecType.AUDIO in found and CodecType.VIDEO not in found)


async def duration_string(src: object = UNDEFINED, ctx: RuntimeContext | None = None) -> ProbeResult[str]:
    """Return the container duration as printed by ``-sexagesimal``."""
    return await _probe(ctx, ProbeKind.DURATION, src, lambda out: ProbeResult.success(parse_duration_string(out)))


async def duration_units(src: object = UNDEFINED, ctx: RuntimeContext | None = None) -> ProbeResult[DurationUnits]:
    """Return the duration split into hours, minutes and seconds."""
    text = await duration_string(src, ctx)
    return text.then(parse_duration_units)


async def duration_seconds(src: object = UNDEFINED, ctx: RuntimeContext | None = None) -> ProbeResult[float]:
    """Return the duration in seconds."""
    text = await duration_string(src, ctx)
    return text.then(parse_duration_seconds)


async def media_info(src: object = UNDEFINED, ctx: RuntimeContext | None = None) -> ProbeResult[MediaInfo]:
    """Return the full stream and format metadata of ``src``."""
    return await _probe(ctx, ProbeKind.INFO, src, parse_info)


async def run_raw_probe(
    args: Sequence[str | int | float | PathLike[str]],
    ctx: RuntimeContext | None = None,
) -> ProbeResult[str]:
    """Run ffprobe with ``args`` passed through verbatim and return stdout.

    No source validation happens here; callers own the argument layout.
    """
    return await run(_context(ctx), raw_args(args))


async def get_ffprobe_version(ctx: RuntimeContext | None = None) -> ProbeResult[str]:
    """Return the first line of ``ffprobe -version``."""
    out = await run(_context(ctx), ["-version"])
    return out.map(lambda text: next(iter(text.splitlines()), "").strip())


async def probe_many(
    sources: Iterable[object],
    operation: Callable[[object, RuntimeContext | None], Awaitable[ProbeResult[T]]],
    ctx: RuntimeContext | None = None,
) -> list[ProbeResult[T]]:
    """Run ``operation`` on every source concurrently.

    Each source gets its own ffprobe process; results follow input order.
    """
    runtime = _context(ctx)
    return list(await asyncio.gather(*(operation(src, runtime) for src in sources)))


class FFprobe:
    """Probe operations bound to one :class:`RuntimeContext`.

    Holds no per-call state, so a single instance may be shared between
    concurrent tasks.
    """

    def __init__(self, ctx: RuntimeContext | None = None) -> None:
        """Bind ``ctx`` (settings from the environment by default)."""
        self.ctx = _context(ctx)

    async def codec_types(self, src: object = UNDEFINED) -> ProbeResult[frozenset[CodecType]]:
        """Bound form of :func:`codec_types`."""
        return await codec_types(src, self.ctx)

    async def is_video(self, src: object = UNDEFINED) -> ProbeResult[bool]:
        """Bound form of :func:`is_video`."""
        return await is_video(src, self.ctx)

    async def is_audio(self, src: object = UNDEFINED) -> ProbeResult[bool]:
        """Bound form of :func:`is_audio`."""
        return await is_audio(src, self.ctx)

    async def duration_string(self, src: object = UNDEFINED) -> ProbeResult[str]:
        """Bound form of :func:`duration_string`."""
        return await duration_string(src, self.ctx)

    async def duration_units(self, src: object = UNDEFINED) -> ProbeResult[DurationUnits]:
        """Bound form of :func:`duration_units`."""
        return await duration_units(src, self.ctx)

    async def duration_seconds(self, src: object = UNDEFINED) -> ProbeResult[float]:
        """Bound form of :func:`duration_seconds`."""
        return await duration_seconds(src, self.ctx)

    async def media_info(self, src: object = UNDEFINED) -> ProbeResult[MediaInfo]:
        """Bound form of :func:`media_info`."""
        return await media_info(src, self.ctx)

    async def run_raw_probe(self, args: Sequence[str | int | float | PathLike[str]]) -> ProbeResult[str]:
        """Bound form of :func:`run_raw_probe`."""
        return await run_raw_probe(args, self.ctx)

    async def version(self) -> ProbeResult[str]:
        """Bound form of :func:`get_ffprobe_version`."""
        return await get_ffprobe_version(self.ctx)


__all__ = [
    "FFprobe",
    "RuntimeContext",
    "codec_types",
    "duration_seconds",
    "duration_string",
    "duration_units",
    "get_ffprobe_version",
    "is_audio",
    "is_video",
    "media_info",
    "prepare_source",
    "probe_many",
    "run",
    "run_raw_probe",
]
