"""
insertion.py — Insertion Sort
==============================
Generator-based insertion sort.  The key at position i is held aside
while larger predecessors are shifted one place to the right; each shift
yields a Frame.

The final placement of the key is written without a Frame.  Between the
last shift and that placement the buffer briefly holds the shifted value
twice, so the last Frame of a run may show a duplicate; read the
controller's sequence for the settled result.

If cancellation is observed mid-shift the key is still written back
before returning, so the buffer always holds a permutation of its input.
"""

from typing import Iterator, List

from algorithms.frame import WRITE, Frame, FrameEmitter
from algorithms.pacing import CancellationToken
from sequence.buffer import Buffer


PSEUDOCODE: List[str] = [
    "for i in 1 .. n-1:",                        # 0
    "    key ← a[i];  j ← i - 1",                # 1
    "    while j >= 0 and a[j] > key:",          # 2
    "        a[j+1] ← a[j]",                     # 3
    "        j ← j - 1",                         # 4
    "    a[j+1] ← key",                          # 5
]


def insertion_sort(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
) -> Iterator[Frame]:
    n = len(buffer)
    for i in range(1, n):
        if token.poll():
            return
        key = buffer.get(i)
        j = i - 1
        stopped = False
        while j >= 0 and buffer.get(j) > key:
            if token.poll():
                stopped = True
                break
            buffer.set(j + 1, buffer.get(j))
            yield emitter.emit(buffer, (j + 1,), WRITE)
            j -= 1
        if j + 1 != i:
            buffer.set(j + 1, key)
        if stopped:
            return
