"""
controller.py — Run Controller
===============================
The RunController is the ONLY object the control surface talks to during
a run.  It owns the sequence, the live Buffer, the CancellationToken and
the single RunState, and it drives the selected algorithm generator one
frame at a time.

State machine:
    IDLE       →  start()            →  RUNNING
    RUNNING    →  (generator ends)   →  COMPLETED
    RUNNING    →  (cancel observed)  →  ABORTED
    COMPLETED / ABORTED  →  start()  →  RUNNING
    COMPLETED / ABORTED  →  reset()  →  IDLE

start() and reset() are rejected (return False, state untouched) while a
run is RUNNING, including the window between cancel() and the moment the
procedure reaches its next checkpoint.

Drivers:
    advance()            – pull exactly one frame (no pacing)
    tick()               – time-based auto-advance for a polling loop
    run_to_completion()  – blocking loop, paced with FrameEmitter.pause
    run_async()          – asyncio loop, paced with FrameEmitter.pause_async

Thread safety:
  The run itself is single threaded: one procedure step executes at a
  time.  Lifecycle calls, drivers and the sequence/state accessors are
  serialised on one re-entrant lock, so a threaded web server can call
  them from concurrent requests; an on_frame observer may call cancel()
  from inside advance().  With run_async() a cancel() issued by another
  task is seen at the next suspension point.
"""

import logging
import threading
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from algorithms import get_algorithm
from algorithms.frame import Frame, FrameEmitter
from algorithms.pacing import CancellationToken, PacingConfig
from sequence.buffer import Buffer


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunStatus(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    COMPLETED = "completed"
    ABORTED   = "aborted"


@dataclass
class RunState:
    status:           RunStatus     = RunStatus.IDLE
    algorithm:        Optional[str] = None
    cancel_requested: bool          = False

    def to_dict(self) -> dict:
        return {
            "status":           self.status.value,
            "algorithm":        self.algorithm,
            "cancel_requested": self.cancel_requested,
        }


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        on_frame : Optional callback(Frame) fired for every emitted frame.
                   The renderer hooks its re-draw here.
        pacing   : PacingConfig used by the NEXT run.  The active run keeps
                   the config it was started with.
    """

    def __init__(
        self,
        sequence: Iterable[float] = (),
        on_frame: Optional[Callable[[Frame], None]] = None,
        pacing: Optional[PacingConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.on_frame: Optional[Callable[[Frame], None]] = on_frame
        self.pacing:   PacingConfig = pacing or PacingConfig()

        self._sequence:  List[float]                 = list(sequence)
        self._state:     RunState                    = RunState()
        self._buffer:    Optional[Buffer]            = None
        self._token:     Optional[CancellationToken] = None
        self._emitter:   Optional[FrameEmitter]      = None
        self._generator: Optional[Iterator[Frame]]   = None

        self._sleep = sleep
        self._clock = clock
        self._last_tick: float = 0.0
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, algorithm: str, sequence: Optional[Iterable[float]] = None) -> bool:
        """
        Begin a run of `algorithm` over `sequence` (or the held sequence).

        Returns False without touching any state if a run is active.
        Raises ValueError for an unknown algorithm key.
        """
        info = get_algorithm(algorithm)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")

        with self._lock:
            if self.is_running:
                logger.warning(
                    "start(%s) rejected: %s run still active", algorithm, self._state.algorithm
                )
                return False

            if sequence is not None:
                self._sequence = list(sequence)

            self._buffer    = Buffer(self._sequence)
            self._token     = CancellationToken()
            self._emitter   = FrameEmitter(observer=self._notify, pacing=self.pacing, sleep=self._sleep)
            self._generator = info.fn(self._buffer, self._token, self._emitter)
            self._state     = RunState(status=RunStatus.RUNNING, algorithm=algorithm)
            self._last_tick = self._clock()

            logger.info(
                "%s started on %d values (delay %d ms)",
                info.label, len(self._buffer), self.pacing.delay_ms,
            )

            if len(self._buffer) == 0:
                self._finish()
            return True

    def cancel(self) -> None:
        """Request a cooperative stop.  Idempotent; no-op when nothing runs."""
        with self._lock:
            if not self.is_running:
                logger.debug("cancel() ignored: no active run")
                return
            self._token.cancel()
            self._state.cancel_requested = True
            logger.debug("cancel requested for %s run", self._state.algorithm)

    def reset(self, sequence: Iterable[float]) -> bool:
        """Replace the held sequence and return to IDLE.  Rejected while running."""
        with self._lock:
            if self.is_running:
                logger.warning("reset() rejected: %s run still active", self._state.algorithm)
                return False
            self._sequence  = list(sequence)
            self._state     = RunState()
            self._buffer    = None
            self._token     = None
            self._emitter   = None
            self._generator = None
            return True

    def set_pacing(self, pacing: PacingConfig) -> None:
        with self._lock:
            self.pacing = pacing

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------
    def advance(self) -> Optional[Frame]:
        """Run the procedure up to its next frame.  None once the run is over."""
        with self._lock:
            if self._generator is None:
                return None
            try:
                return next(self._generator)
            except StopIteration:
                self._finish()
                return None

    def tick(self) -> bool:
        """
        Call periodically from an event loop.  If a run is active and its
        delay has elapsed since the previous frame, advances one frame.
        Returns True if a frame was taken.
        """
        with self._lock:
            if not self.is_running:
                return False
            now = self._clock()
            if now - self._last_tick >= self._emitter.pacing.delay_seconds:
                self._last_tick = now
                return self.advance() is not None
            return False

    def run_to_completion(self) -> RunStatus:
        """Drive the active run to its end, sleeping between frames."""
        while self.advance() is not None:
            self._emitter.pause()
        return self._state.status

    async def run_async(self) -> RunStatus:
        """Drive the active run on the asyncio loop, yielding after every frame."""
        while self.advance() is not None:
            await self._emitter.pause_async()
        return self._state.status

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        with self._lock:
            return replace(self._state)

    @property
    def status(self) -> RunStatus:
        return self._state.status

    @property
    def is_running(self) -> bool:
        return self._state.status == RunStatus.RUNNING

    @property
    def sequence(self) -> List[float]:
        """Copy of the current values; live buffer contents while a run is active."""
        with self._lock:
            if self.is_running:
                return list(self._buffer.snapshot())
            return list(self._sequence)

    @property
    def last_frame(self) -> Optional[Frame]:
        return self._emitter.last_frame if self._emitter else None

    @property
    def frames_emitted(self) -> int:
        return self._emitter.frames_emitted if self._emitter else 0

    @property
    def counters(self) -> Dict[str, int]:
        if self._buffer is None:
            return {"swaps": 0, "writes": 0}
        return {"swaps": self._buffer.swaps, "writes": self._buffer.writes}

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _finish(self) -> None:
        aborted = self._token is not None and self._token.observed
        self._state.status = RunStatus.ABORTED if aborted else RunStatus.COMPLETED
        self._sequence  = list(self._buffer.snapshot())
        self._generator = None
        logger.info(
            "%s run %s after %d frames",
            self._state.algorithm, self._state.status.value, self.frames_emitted,
        )

    def _notify(self, frame: Frame) -> None:
        if self.on_frame is not None:
            self.on_frame(frame)
