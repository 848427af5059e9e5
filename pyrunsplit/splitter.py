from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from .runtime.tracing import trace_timing
from .split_config import SplitConfig
from .types import Mode, RunSpan, Trace
from .views import slice_view

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["RunSplitter", "split", "split_after", "split_before"]


class RunSplitter(Generic[T]):
    """Lazily split a sequence into contiguous runs at predicate matches.

    In ``Mode.BEFORE`` a matched element opens the following run, in
    ``Mode.AFTER`` it closes the current one. Runs are views into ``source``
    (see :func:`pyrunsplit.views.slice_view`), never copies, and together they
    cover ``source`` exactly once, in order. No run is ever empty.

    Before mode keeps a match found at the very start of a scan inside the
    run being built, unless it is the last element. Splitting ``[0, 1, 2]``
    before ``0`` therefore yields a single run.

    The predicate is called in sequence order, at most once per position.
    A splitter owns a single cursor and must be driven by one consumer on one
    thread; stateful predicates are not synchronised.
    """

    def __init__(
        self,
        source: Sequence[T],
        predicate: Callable[[T], Any],
        mode: Mode | str = Mode.BEFORE,
        *,
        trace: Trace | None = None,
    ) -> None:
        self._source = source
        self._predicate = predicate
        self._mode = Mode.parse(mode)
        self._trace = trace
        self._len = len(source)
        self._index = 0
        self._produced = 0
        self._evaluations = 0
        # The element at the cursor matched while closing the previous run.
        self._boundary_at_cursor = False

    @classmethod
    def before(
        cls,
        source: Sequence[T],
        predicate: Callable[[T], Any],
        *,
        trace: Trace | None = None,
    ) -> RunSplitter[T]:
        return cls(source, predicate, Mode.BEFORE, trace=trace)

    @classmethod
    def after(
        cls,
        source: Sequence[T],
        predicate: Callable[[T], Any],
        *,
        trace: Trace | None = None,
    ) -> RunSplitter[T]:
        return cls(source, predicate, Mode.AFTER, trace=trace)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def cursor(self) -> int:
        """Start of the next unproduced run."""
        return self._index

    @property
    def exhausted(self) -> bool:
        return self._index == self._len

    @property
    def evaluations(self) -> int:
        """Number of predicate calls made so far."""
        return self._evaluations

    @property
    def trace(self) -> Trace | None:
        return self._trace

    def __iter__(self) -> Iterator[Sequence[T]]:
        return self

    def __next__(self) -> Sequence[T]:
        run = self.next_run()
        if run is None:
            raise StopIteration
        return run

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self._mode.value!r}, "
            f"cursor={self._index}, length={self._len})"
        )

    def next_run(self) -> Sequence[T] | None:
        """Return the next run, or ``None`` once the source is exhausted."""
        span = self.next_span()
        if span is None:
            return None
        return slice_view(self._source, span.start, span.end)

    def next_span(self) -> RunSpan | None:
        """Like :meth:`next_run` but return the run's offsets."""
        if self._index == self._len:
            return None

        start = self._index
        with trace_timing(
            self._trace, "split", self._mode.value, start=start
        ) as details:
            if self._mode is Mode.BEFORE:
                end, boundary_at_end = self._scan_before(start)
            else:
                end, boundary_at_end = self._scan_after(start), False
            details["end"] = end
            details["evaluations"] = self._evaluations

        span = RunSpan(index=self._produced, start=start, end=end)
        self._index = end
        self._boundary_at_cursor = boundary_at_end
        self._produced += 1
        if self._trace is not None and self._trace.spans is not None:
            self._trace.spans.append(span)

        logger.debug(
            "Split %s run %d: [%d, %d)", self._mode.value, span.index, start, end
        )
        if self._index == self._len:
            logger.debug(
                "Split %s exhausted after %d runs, %d predicate calls",
                self._mode.value,
                self._produced,
                self._evaluations,
            )
        return span

    def spans(self) -> Iterator[RunSpan]:
        """Iterate over the offsets of the remaining runs."""
        while True:
            span = self.next_span()
            if span is None:
                return
            yield span

    def _matches(self, i: int) -> bool:
        self._evaluations += 1
        return bool(self._predicate(self._source[i]))

    def _scan_before(self, start: int) -> tuple[int, bool]:
        for i in range(start, self._len):
            if i == start:
                # A match opening the scan stays in this run.
                if not self._boundary_at_cursor:
                    self._matches(i)
                continue
            if self._matches(i):
                return i, True
        return self._len, False

    def _scan_after(self, start: int) -> int:
        for i in range(start, self._len):
            if self._matches(i):
                return i + 1
        return self._len


def split_before(
    source: Sequence[T],
    predicate: Callable[[T], Any],
    *,
    trace: Trace | None = None,
) -> RunSplitter[T]:
    """Split ``source`` before each element matching ``predicate``.

    >>> [list(run) for run in split_before([0, 1, 2], lambda v: v == 1)]
    [[0], [1, 2]]
    """
    return RunSplitter.before(source, predicate, trace=trace)


def split_after(
    source: Sequence[T],
    predicate: Callable[[T], Any],
    *,
    trace: Trace | None = None,
) -> RunSplitter[T]:
    """Split ``source`` after each element matching ``predicate``.

    >>> [list(run) for run in split_after([0, 1, 2], lambda v: v == 1)]
    [[0, 1], [2]]
    """
    return RunSplitter.after(source, predicate, trace=trace)


def split(
    source: Sequence[T],
    predicate: Callable[[T], Any],
    config: SplitConfig | None = None,
) -> RunSplitter[T]:
    cfg = config or SplitConfig()
    trace = Trace(spans=[]) if cfg.return_trace else None
    return RunSplitter(source, predicate, cfg.resolved_mode, trace=trace)
