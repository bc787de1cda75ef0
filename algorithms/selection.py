"""
selection.py — Selection Sort
==============================
Scans the unsorted suffix for its minimum (silently) and swaps it into
place.  Yields a Frame only when a swap actually happens.
"""

from typing import Iterator, List

from algorithms.frame import Frame, FrameEmitter
from algorithms.pacing import CancellationToken
from sequence.buffer import Buffer


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",                        # 0
    "    m ← i",                                 # 1
    "    for j in i+1 .. n-1:",                  # 2
    "        if a[j] < a[m]: m ← j",             # 3
    "    if m != i: swap(a[i], a[m])",           # 4
]


def selection_sort(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
) -> Iterator[Frame]:
    n = len(buffer)
    for i in range(n - 1):
        if token.poll():
            return
        min_idx = i
        for j in range(i + 1, n):
            if token.poll():
                return
            if buffer.get(j) < buffer.get(min_idx):
                min_idx = j
        if min_idx != i:
            buffer.swap(i, min_idx)
            yield emitter.emit(buffer, (i, min_idx))
