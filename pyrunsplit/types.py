from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from .constants import MODE_AFTER, MODE_BEFORE, MODES


class Mode(str, Enum):
    """Where the boundary element of a run is placed."""

    BEFORE = MODE_BEFORE
    AFTER = MODE_AFTER

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        if isinstance(value, Mode):
            return value
        name = str(value).strip().lower()
        if name not in MODES:
            raise ValueError(
                f"Unknown split mode {value!r}, expected one of: {', '.join(MODES)}"
            )
        return cls(name)


@dataclass(frozen=True)
class RunSpan:
    """Offsets of a produced run into the *source* sequence (``[start, end)``)."""

    index: int
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["split"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    # Optional snapshot of produced offsets
    spans: list[RunSpan] | None = None
