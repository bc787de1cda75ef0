"""
heap.py — Heap Sort
====================
Builds a max-heap bottom-up, then repeatedly swaps the root with the last
element of the shrinking heap and sinks the new root.

Frames are yielded for every swap: the root/last exchange in the sort
phase and each exchange `_heapify` makes while sinking a node.
"""

from typing import Iterator, List

from algorithms.frame import Frame, FrameEmitter
from algorithms.pacing import CancellationToken
from sequence.buffer import Buffer


PSEUDOCODE: List[str] = [
    "for i in n//2 - 1 .. 0:  heapify(a, n, i)",         # 0
    "for end in n-1 .. 1:",                              # 1
    "    swap(a[0], a[end])",                            # 2
    "    heapify(a, end, 0)",                            # 3
    "def heapify(a, size, root):",                       # 4
    "    largest ← max(root, 2·root+1, 2·root+2)",       # 5
    "    if largest != root:",                           # 6
    "        swap(a[root], a[largest])",                 # 7
    "        heapify(a, size, largest)",                 # 8
]


def heap_sort(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
) -> Iterator[Frame]:
    n = len(buffer)

    # --- build max-heap ---
    for i in range(n // 2 - 1, -1, -1):
        if token.poll():
            return
        yield from _heapify(buffer, token, emitter, n, i)

    # --- extract ---
    for end in range(n - 1, 0, -1):
        if token.poll():
            return
        buffer.swap(0, end)
        yield emitter.emit(buffer, (0, end))
        if token.poll():
            return
        yield from _heapify(buffer, token, emitter, end, 0)


def _heapify(
    buffer: Buffer,
    token: CancellationToken,
    emitter: FrameEmitter,
    size: int,
    root: int,
) -> Iterator[Frame]:
    """Sink `root` within the first `size` positions."""
    largest = root
    left    = 2 * root + 1
    right   = 2 * root + 2

    if left < size and buffer.get(left) > buffer.get(largest):
        largest = left
    if right < size and buffer.get(right) > buffer.get(largest):
        largest = right

    if largest != root:
        buffer.swap(root, largest)
        yield emitter.emit(buffer, (root, largest))
        if token.poll():
            return
        yield from _heapify(buffer, token, emitter, size, largest)
