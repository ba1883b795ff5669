"""Shared pytest fixtures.

Provides a scripted ffprobe runner so most tests never spawn a process, and
synthetic media clips for the tests that exercise the real tool.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from ffprobe_async.models import ProcessOutput, RuntimeContext
from ffprobe_async.models.settings import get_settings

if TYPE_CHECKING:  # pragma: no cover - typing only
    from collections.abc import Callable, Sequence
    from pathlib import Path

# Duration in seconds used by synthetic sample clips in tests.
CLIP_DURATION_SEC: float = 4.0


@dataclass
class FakeRunner:
    """Stand-in for the process runner that records every invocation."""

    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    async def __call__(self, exe: str, args: Sequence[str]) -> ProcessOutput:
        """Record the call and return the scripted output."""
        self.calls.append((exe, tuple(args)))
        return ProcessOutput(stdout=self.stdout, stderr=self.stderr, returncode=self.returncode)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides from leaking between tests."""
    for name in ("FFPROBE_ASYNC_BIN", "FFPROBE_ASYNC_CHECK_EXISTS", "FFPROBE_ASYNC_VERBOSITY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a runner with empty output."""
    return FakeRunner()


@pytest.fixture
def make_ctx(fake_runner: FakeRunner) -> Callable[..., RuntimeContext]:
    """Build contexts wired to ``fake_runner`` with existence checks off."""

    def _make(**kwargs: object) -> RuntimeContext:
        kwargs.setdefault("check_exists", False)
        kwargs.setdefault("runner", fake_runner)
        return RuntimeContext(**kwargs)  # type: ignore[arg-type]

    return _make


def _ffmpeg(out: Path, inputs: list[str], codecs: list[str]) -> Path:
    ffmpeg = shutil.which("ffmpeg")
    if not ffmpeg or not shutil.which("ffprobe"):
        pytest.skip("ffmpeg and ffprobe must be available in PATH")
    out.parent.mkdir(parents=True, exist_ok=True)
    subprocess.run(  # noqa: S603
        [ffmpeg, "-v", "error", *inputs, "-shortest", *codecs, "-y", str(out)],
        check=True,
    )
    return out


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Provide a small synthetic MP4 with one video and one audio stream.

    Creates a 4-second 200x200 color clip with silent stereo audio.
    """
    return _ffmpeg(
        tmp_path / "data" / "video.mp4",
        [
            # Video source
            "-f",
            "lavfi",
            "-i",
            f"color=s=200x200:d={CLIP_DURATION_SEC}",
            # Audio source (silent stereo)
            "-f",
            "lavfi",
            "-i",
            f"anullsrc=r=48000:cl=stereo:d={CLIP_DURATION_SEC}",
        ],
        ["-c:v", "libx264", "-pix_fmt", "yuv420p", "-c:a", "aac", "-b:a", "128k"],
    )


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    """Provide a silent audio-only M4A clip."""
    return _ffmpeg(
        tmp_path / "data" / "audio.m4a",
        ["-f", "lavfi", "-i", f"anullsrc=r=48000:cl=stereo:d={CLIP_DURATION_SEC}"],
        ["-c:a", "aac", "-b:a", "128k"],
    )
