from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .types import Mode


@dataclass(frozen=True)
class SplitConfig:
    """User-facing configuration for building a run splitter.

    Keep this frozen+hashable so it can be shared between splitters.
    """

    mode: Literal["before", "after"] = "before"

    # Behavior toggles
    return_trace: bool = False

    def __post_init__(self) -> None:
        Mode.parse(self.mode)

    @property
    def resolved_mode(self) -> Mode:
        return Mode.parse(self.mode)
