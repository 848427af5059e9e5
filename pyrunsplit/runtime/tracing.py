from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..types import Trace, TraceEvent


@contextmanager
def trace_timing(
    trace: Trace | None, stage: str, name: str, **details: Any
) -> Iterator[dict[str, Any]]:
    """Record a timed event on ``trace``.

    The yielded dict is stored as the event details, so callers can add
    values that are only known once the timed block has run.
    """
    if trace is None:
        yield details
        return
    t0 = time.perf_counter()
    yield details
    ms = (time.perf_counter() - t0) * 1000.0
    trace.events.append(
        TraceEvent(stage=stage, name=name, ms=ms, details=dict(details))
    )
