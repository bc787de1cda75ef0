"""
buffer.py — Shared Mutable Sequence
====================================
The one list every sorting procedure mutates in place.

Design decisions:
  - Length is fixed for the lifetime of a Buffer: there is no insert or
    delete, only overwrite (`set`) and `swap`.
  - Indices are always derived from `len(buffer)`, so an out-of-range
    index is an engine defect.  It raises IndexError and is never caught.
    Negative indices are rejected rather than wrapped.
  - `swaps` / `writes` count every elementary mutation so callers can
    compare them against the number of emitted frames.
  - `snapshot()` is the only way values leave the buffer: it returns an
    independent tuple, never a reference to the live list.
"""

from typing import Iterable, List, Tuple


class Buffer:
    """
    Attributes:
        swaps  : Number of swap() calls performed.
        writes : Number of set() calls performed.
    """

    __slots__ = ("_values", "swaps", "writes")

    def __init__(self, values: Iterable[float] = ()):
        self._values: List[float] = list(values)
        self.swaps:   int         = 0
        self.writes:  int         = 0

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def get(self, i: int) -> float:
        self._check(i)
        return self._values[i]

    def set(self, i: int, value: float) -> None:
        self._check(i)
        self._values[i] = value
        self.writes += 1

    def swap(self, i: int, j: int) -> None:
        """Exchange two positions.  Swapping a position with itself still counts."""
        self._check(i)
        self._check(j)
        self._values[i], self._values[j] = self._values[j], self._values[i]
        self.swaps += 1

    def length(self) -> int:
        return len(self._values)

    def snapshot(self) -> Tuple[float, ...]:
        return tuple(self._values)

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Buffer({self._values!r})"

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._values):
            raise IndexError(
                f"buffer index {i} out of range for length {len(self._values)}"
            )
