"""Result containers returned by the probe pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from .errors import ProbeError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Captured output of one finished subprocess."""

    stdout: str
    stderr: str
    returncode: int


@dataclass(frozen=True, slots=True)
class DurationUnits:
    """Duration split into sexagesimal components (all floats)."""

    hours: float
    minutes: float
    seconds: float

    @property
    def total_seconds(self) -> float:
        """Return ``hours * 3600 + minutes * 60 + seconds``."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds


@dataclass(frozen=True, slots=True)
class ProbeResult(Generic[T]):
    """Either a value or an error, never both."""

    value: T | None = None
    error: ProbeError | None = None

    def __post_init__(self) -> None:
        """Reject results carrying both a value and an error."""
        if self.error is not None and self.value is not None:
            raise ValueError("ProbeResult cannot carry both a value and an error")

    @classmethod
    def success(cls, value: T) -> ProbeResult[T]:
        """Wrap a successful ``value``."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: ProbeError) -> ProbeResult[T]:
        """Wrap ``error``."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.error is None

    def map(self, func: Callable[[T], U]) -> ProbeResult[U]:
        """Apply ``func`` to the value, passing errors through unchanged."""
        if self.error is not None:
            return ProbeResult(error=self.error)
        return ProbeResult(value=func(self.value))  # type: ignore[arg-type]

    def then(self, func: Callable[[T], ProbeResult[U]]) -> ProbeResult[U]:
        """Chain another fallible step, passing errors through unchanged."""
        if self.error is not None:
            return ProbeResult(error=self.error)
        return func(self.value)  # type: ignore[arg-type]

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = ["DurationUnits", "ProbeResult", "ProcessOutput"]
