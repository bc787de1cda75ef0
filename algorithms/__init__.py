"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting procedure the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, stable, …),
        …
    }

Every `fn` has the same shape:

    fn(buffer: Buffer, token: CancellationToken, emitter: FrameEmitter)
        -> Iterator[Frame]

so the engine can drive any of them without special cases.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.frame     import Frame, FrameEmitter, SWAP, WRITE
from algorithms.pacing    import CancellationToken, PacingConfig, SPEED_PRESETS


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                   # registry key, e.g. "quick"
    label:            str                   # human label, e.g. "Quick Sort"
    fn:               Callable              # the generator function
    pseudocode:       List[str]             # lines for the side-panel
    mutation:         str       = SWAP      # what each frame records
    stable:           bool      = False
    complexity_time:  str       = ""        # average case
    complexity_space: str       = ""
    description:      str       = ""
    tags:             List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "mutation":         self.mutation,
            "stable":           self.stable,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "tags":             list(self.tags),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        stable=True, tags=["quadratic", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent out-of-order pairs. The largest value bubbles to the end each pass.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        mutation=WRITE, stable=True, tags=["quadratic", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Shifts larger values right to open a slot for each new key.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        tags=["quadratic", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted suffix and swaps it into place.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["divide-and-conquer", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then recurse on both sides.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        mutation=WRITE, stable=True, tags=["divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sorts both halves, then writes the merged run back over the range.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        tags=["in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then moves the root to the end of the shrinking heap.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "Frame",
    "FrameEmitter",
    "SWAP",
    "WRITE",
    "CancellationToken",
    "PacingConfig",
    "SPEED_PRESETS",
]
