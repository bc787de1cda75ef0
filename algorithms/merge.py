"""
merge.py — Merge Sort
======================
Top-down merge sort.  Each merge collects the two sorted halves into a
temporary list, then writes that list back over the original range left
to right, yielding one Frame per positional overwrite.  Comparisons are
silent.

Cancellation is polled before each recursive descent, before each merge
and before each write-back.  A merge interrupted during write-back
finishes its region without Frames: the temporary list holds the only
copy of the values not yet written.
"""

from typing import Iterator, List

from algorithms.frame import WRITE, Frame, FrameEmitter
from algorithms.pacing import CancellationToken
from sequence.buffer import Buffer


PSEUDOCODE: List[str] = [
    "def merge_sort(a, lo, hi):",                # 0
    "    if lo >= hi: return",                   # 1
    "    mid ← (lo + hi) // 2",                  # 2
    "    merge_sort(a, lo, mid)",                # 3
    "    merge_sort(a, mid + 1, hi)",            # 4
    "    tmp ← merge(a[lo..mid], a[mid+1..hi])", # 5
    "    for k in 0 .. len(tmp)-1:",             # 6
    "        a[lo + k] ← tmp[k]",                # 7
]


def merge_sort(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
) -> Iterator[Frame]:
    yield from _merge_sort(buffer, token, emitter, 0, len(buffer) - 1)


def _merge_sort(
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

    mid = (lo + hi) // 2
    yield from _merge_sort(buffer, token, emitter, lo, mid)
    if token.poll():
        return
    yield from _merge_sort(buffer, token, emitter, mid + 1, hi)
    if token.poll():
        return
    yield from _merge(buffer, token, emitter, lo, mid, hi)


def _merge(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
    lo: int,
    mid: int,
    hi: int,
) -> Iterator[Frame]:
    merged: List[float] = []
    i, j = lo, mid + 1

    while i <= mid and j <= hi:
        if buffer.get(i) <= buffer.get(j):
            merged.append(buffer.get(i))
            i += 1
        else:
            merged.append(buffer.get(j))
            j += 1
    merged.extend(buffer.get(k) for k in range(i, mid + 1))
    merged.extend(buffer.get(k) for k in range(j, hi + 1))

    for k, value in enumerate(merged):
        if token.poll():
            for rest in range(k, len(merged)):
                buffer.set(lo + rest, merged[rest])
            return
        buffer.set(lo + k, value)
        yield emitter.emit(buffer, (lo + k,), WRITE)
