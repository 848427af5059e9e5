from __future__ import annotations

import operator
from collections.abc import Iterator, Sequence
from typing import Any, TypeVar, overload

import numpy as np

T = TypeVar("T")

__all__ = ["SequenceView", "slice_view"]


class SequenceView(Sequence[T]):
    """Read-only window ``[start, stop)`` over a borrowed sequence.

    Elements are read through to ``source`` on access, nothing is copied.
    The view is only valid while ``source`` keeps its length.
    """

    __slots__ = ("_source", "_start", "_stop")

    def __init__(
        self, source: Sequence[T], start: int = 0, stop: int | None = None
    ) -> None:
        n = len(source)
        if stop is None:
            stop = n
        if not 0 <= start <= stop <= n:
            raise IndexError(
                f"View bounds [{start}, {stop}) outside source of length {n}"
            )
        self._source = source
        self._start = start
        self._stop = stop

    @property
    def source(self) -> Sequence[T]:
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> SequenceView[T]: ...

    def __getitem__(self, index: int | slice) -> T | SequenceView[T]:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("SequenceView only supports contiguous slices")
            stop = max(start, stop)
            return SequenceView(self._source, self._start + start, self._start + stop)
        try:
            i = operator.index(index)
        except TypeError:
            raise TypeError(
                f"SequenceView indices must be integers or slices, "
                f"not {type(index).__name__}"
            ) from None
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError("SequenceView index out of range")
        return self._source[self._start + i]

    def __iter__(self) -> Iterator[T]:
        source = self._source
        for i in range(self._start, self._stop):
            yield source[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    # Views track a borrowed, possibly mutable source.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"SequenceView({list(self)!r}, start={self._start}, stop={self._stop})"
        )

    def tolist(self) -> list[T]:
        return list(self)


def slice_view(source: Any, start: int, stop: int) -> Any:
    """Return the ``[start, stop)`` range of ``source`` without copying elements.

    numpy arrays, memoryviews and ranges already slice into views and are
    sliced natively. Any other sequence is wrapped in a :class:`SequenceView`.
    """
    if isinstance(source, (np.ndarray, memoryview, range, SequenceView)):
        return source[start:stop]
    return SequenceView(source, start, stop)
