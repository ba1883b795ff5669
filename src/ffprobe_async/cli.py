"""Command-line interface entry point."""

from __future__ import annotations

import asyncio
import json
import sys
from dataclasses import asdict
from functools import partial
from typing import TYPE_CHECKING, Annotated, TypeVar

from cyclopts import App, Parameter

from .models import CodecType, DurationUnits, MediaInfo, ProbeResult
from .models.options import RuntimeOptions
from .tools import probe

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine
else:
    from collections import abc

    Callable = abc.Callable

T = TypeVar("T")

app = App(name="ffprobe-async", help="Inspect local media files with ffprobe.")

StatusCallback = Annotated[Callable[[str], None] | None, Parameter(show=False)]  # type: ignore[call-arg]


def _render(value: object) -> str:
    """Format a probe value for the terminal."""
    if isinstance(value, str):
        return value
    if isinstance(value, MediaInfo):
        return value.model_dump_json(indent=2)
    if isinstance(value, DurationUnits):
        return json.dumps(asdict(value))
    if isinstance(value, frozenset):
        return json.dumps(sorted(t.value if isinstance(t, CodecType) else str(t) for t in value))
    return json.dumps(value)


def _execute(
    operation: Callable[[probe.RuntimeContext], Coroutine[object, object, ProbeResult[T]]],
    runtime: RuntimeOptions | None,
    status_callback: Callable[[str], None] | None,
) -> int:
    """Run ``operation`` to completion and report its result.

    Values go to stdout and errors to stderr unless ``status_callback`` is
    given, in which case it receives everything.
    """
    out_func = print if status_callback is None else status_callback
    err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
    ctx = (runtime or RuntimeOptions()).to_context(status_callback=err_func)
    result = asyncio.run(operation(ctx))
    if not result.ok:
        err_func(str(result.error).rstrip())
        return 1
    out_func(_render(result.value))
    return 0


@app.command(name="codec-types")
def codec_types(
    source: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """List the codec types (audio, video) in SOURCE."""
    return _execute(partial(probe.codec_types, source), runtime, status_callback)


@app.command(name="is-video")
def is_video(
    source: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Print whether SOURCE has a video stream."""
    return _execute(partial(probe.is_video, source), runtime, status_callback)


@app.command(name="is-audio")
def is_audio(
    source: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Print whether SOURCE is audio only."""
    return _execute(partial(probe.is_audio, source), runtime, status_callback)


@app.command(name="duration")
def duration(
    source: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Print the duration of SOURCE as HH:MM:SS.ffffff."""
    return _execute(partial(probe.duration_string, source), runtime, status_callback)


@app.command(name="duration-units")
def duration_units(
    source: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Print the duration of SOURCE as hours, minutes and seconds."""
    return _execute(partial(probe.duration_units, source), runtime, status_callback)


@app.command(name="duration-seconds")
def duration_seconds(
    source: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Print the duration of SOURCE in seconds."""
    return _execute(partial(probe.duration_seconds, source), runtime, status_callback)


@app.command(name="info")
def info(
    source: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Print the stream and format metadata of SOURCE as JSON."""
    return _execute(partial(probe.media_info, source), runtime, status_callback)


@app.command(name="raw")
def raw(
    *args: str,
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Run ffprobe with ARGS unchanged; separate them with ``--``."""
    return _execute(lambda ctx: probe.run_raw_probe(args, ctx), runtime, status_callback)


@app.command(name="ffprobe-version")
def ffprobe_version(
    runtime: RuntimeOptions | None = None,
    status_callback: StatusCallback = None,
) -> int:
    """Print the ffprobe version line."""
    return _execute(probe.get_ffprobe_version, runtime, status_callback)


def main(argv: list[str] | None = None) -> int:
    """Run the ffprobe-async CLI."""
    argv = sys.argv[1:] if argv is None else argv
    return app(argv)


if __name__ == "__main__":
    raise SystemExit(main())
