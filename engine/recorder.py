"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Frames) with zero pacing, then
computes the metrics the Analytics panel shows.

Usage:
    rec = Recorder()
    rec.start(algo_key="merge", values=[5, 3, 8, 1])
    rec.run_to_completion()          # drains the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable frame list for playback

The Recorder owns a private RunController, so recording never touches
the live controller the UI is driving.
"""

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.frame import Frame
from algorithms.pacing import PacingConfig
from engine.controller import RunController, RunStatus


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    size:         int   = 0
    total_frames: int   = 0
    swaps:        int   = 0
    writes:       int   = 0          # includes writes that produced no frame
    wall_time_ms: float = 0.0
    status:       str   = RunStatus.IDLE.value
    is_sorted:    bool  = False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        frames     : Full list of Frames from the run.
        metrics    : Computed RunMetrics (available after run_to_completion).
        controller : The private RunController driving the run.
    """

    def __init__(self):
        self.frames:     List[Frame]             = []
        self.metrics:    Optional[RunMetrics]    = None
        self.controller: Optional[RunController] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._initial:   List[float]        = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Iterable[float]) -> None:
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._initial   = list(values)
        self.frames     = []
        self.metrics    = None

        self.controller = RunController(
            self._initial, on_frame=self.record_frame, pacing=PacingConfig(delay_ms=0)
        )
        self.controller.start(algo_key)

    def run_to_completion(self) -> RunMetrics:
        """Drain the generator, record every frame, compute metrics."""
        if self.controller is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.controller.run_to_completion()
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def record_frame(self, frame: Frame) -> None:
        self.frames.append(frame)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "initial":  list(self._initial),
            "final":    self.controller.sequence if self.controller else [],
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "frames":   [f.to_dict() for f in self.frames],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info     = self._algo_info
        final    = self.controller.sequence
        counters = self.controller.counters

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            size=len(self._initial),
            total_frames=len(self.frames),
            swaps=counters["swaps"],
            writes=counters["writes"],
            wall_time_ms=round(wall_ms, 2),
            status=self.controller.status.value,
            is_sorted=all(final[i] <= final[i + 1] for i in range(len(final) - 1)),
        )
