"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Compares adjacent pairs and swaps the
out-of-order ones; yields a Frame on every swap, never on a comparison.

Cancellation is polled before every outer pass and before every inner
comparison.
"""

from typing import Iterator, List

from algorithms.frame import Frame, FrameEmitter
from algorithms.pacing import CancellationToken
from sequence.buffer import Buffer


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",                        # 0
    "    for j in 0 .. n-2-i:",                  # 1
    "        if a[j] > a[j+1]:",                 # 2
    "            swap(a[j], a[j+1])",            # 3
]


def bubble_sort(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
) -> Iterator[Frame]:
    n = len(buffer)
    for i in range(n - 1):
        if token.poll():
            return
        for j in range(n - 1 - i):
            if token.poll():
                return
            if buffer.get(j) > buffer.get(j + 1):
                buffer.swap(j, j + 1)
                yield emitter.emit(buffer, (j, j + 1))
