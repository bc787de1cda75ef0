"""
quick.py — Quick Sort (Lomuto)
===============================
Recursive quick sort using the Lomuto partition scheme with the last
element of the active range as pivot.

Frames:
  • one per swap inside the partition loop (including i == j self-swaps)
  • one for the pivot placement, always, even when the pivot is already
    in its final position; every partition therefore ends on a paced
    frame

Cancellation is polled before each partition, inside the partition loop,
before the pivot placement and before each recursive descent.  Every
mutation is a swap, so stopping anywhere leaves a permutation of the
input.
"""

from typing import Generator, Iterator, List, Optional

from algorithms.frame import Frame, FrameEmitter
from algorithms.pacing import CancellationToken
from sequence.buffer import Buffer


PSEUDOCODE: List[str] = [
    "def quick_sort(a, lo, hi):",                # 0
    "    if lo >= hi: return",                   # 1
    "    p ← partition(a, lo, hi)",              # 2
    "    quick_sort(a, lo, p - 1)",              # 3
    "    quick_sort(a, p + 1, hi)",              # 4
    "def partition(a, lo, hi):",                 # 5
    "    pivot ← a[hi];  i ← lo - 1",            # 6
    "    for j in lo .. hi-1:",                  # 7
    "        if a[j] <= pivot:",                 # 8
    "            i ← i + 1;  swap(a[i], a[j])",  # 9
    "    swap(a[i+1], a[hi]);  return i + 1",    # 10
]


def quick_sort(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
) -> Iterator[Frame]:
    yield from _quick(buffer, token, emitter, 0, len(buffer) - 1)


def _quick(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
    lo: int,
    hi: int,
) -> Iterator[Frame]:
    if lo >= hi:
        return
    if token.poll():
        return

    pivot_idx = yield from _partition(buffer, token, emitter, lo, hi)
    if pivot_idx is None:
        return

    if token.poll():
        return
    yield from _quick(buffer, token, emitter, lo, pivot_idx - 1)
    if token.poll():
        return
    yield from _quick(buffer, token, emitter, pivot_idx + 1, hi)


def _partition(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
    lo: int,
    hi: int,
) -> Generator[Frame, None, Optional[int]]:
    """Returns the pivot's final index, or None if cancelled mid-partition."""
    pivot = buffer.get(hi)
    i = lo - 1
    for j in range(lo, hi):
        if token.poll():
            return None
        if buffer.get(j) <= pivot:
            i += 1
            buffer.swap(i, j)
            yield emitter.emit(buffer, (i, j))

    if token.poll():
        return None
    buffer.swap(i + 1, hi)
    yield emitter.emit(buffer, (i + 1, hi))
    return i + 1
