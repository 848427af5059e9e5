#!/usr/bin/env python3
"""
Split a stream of sensor samples into records, with a trace of each split.

Samples with the marker flag start a new record (before mode), and a
terminator byte closes a frame (after mode). Runs are views, so the numpy
records share memory with the original buffer.

Usage:
    python examples/split_records.py
"""

import logging

import numpy as np

from pyrunsplit import SplitConfig, split, split_after

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    samples = np.array(
        [(1, 0.1), (0, 0.2), (0, 0.3), (1, 1.1), (0, 1.2), (1, 2.1)],
        dtype=[("marker", "u1"), ("value", "f4")],
    )
    records = split(
        samples,
        lambda row: row["marker"] == 1,
        SplitConfig(mode="before", return_trace=True),
    )
    for record in records:
        print(f"record: {record['value'].tolist()}")

    for event in records.trace.events:
        print(f"{event.name}: {event.details} in {event.ms:.3f} ms")

    frames = memoryview(b"GET\x00PUT\x00DONE")
    for frame in split_after(frames, lambda byte: byte == 0):
        print(f"frame: {bytes(frame)!r}")


if __name__ == "__main__":
    main()
