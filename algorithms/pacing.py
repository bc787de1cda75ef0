"""
pacing.py — Frame Pacing & Cancellation
========================================
Two small value objects every run carries:

    • PacingConfig       – how long to pause after each emitted frame
    • CancellationToken  – the cooperative stop signal polled by the
                           sorting procedures at their checkpoints

Both are passed explicitly into the engine (never module state) so that
several engines can exist side by side, e.g. a live run and a zero-delay
Recorder used for analytics.
"""

from dataclasses import dataclass

from config import SPEED_MAX, SPEED_STEP


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per frame)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   800,    # teaching mode
    "medium": 200,
    "fast":   50,
    "turbo":  0,
}


# ---------------------------------------------------------------------------
# PacingConfig
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PacingConfig:
    """
    Attributes:
        delay_ms : Pause after each frame, in milliseconds.  0 means no
                   enforced wait (a pass-through suspension is still taken).
    """

    delay_ms: int = SPEED_PRESETS["medium"]

    def __post_init__(self):
        if isinstance(self.delay_ms, bool) or not isinstance(self.delay_ms, int):
            raise ValueError(f"delay_ms must be an int, got {self.delay_ms!r}")
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {self.delay_ms}")

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0

    @classmethod
    def from_speed(cls, speed: int) -> "PacingConfig":
        """
        Map the speed slider (0..SPEED_MAX) inversely onto a delay.  The
        speed is clamped, then snapped to the nearest SPEED_STEP notch.
        """
        speed = max(0, min(SPEED_MAX, int(speed)))
        speed = min(SPEED_MAX, (speed + SPEED_STEP // 2) // SPEED_STEP * SPEED_STEP)
        return cls(delay_ms=SPEED_MAX - speed)

    @classmethod
    def from_preset(cls, preset: str) -> "PacingConfig":
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        return cls(delay_ms=SPEED_PRESETS[preset])


# ---------------------------------------------------------------------------
# CancellationToken
# ---------------------------------------------------------------------------
class CancellationToken:
    """
    Cooperative stop signal for one run.

    `cancel()` may be called any number of times.  Procedures read the
    flag through `poll()`, which also remembers that the request was
    observed; the controller uses that to report ABORTED only when the
    procedure actually stopped early.
    """

    __slots__ = ("_cancelled", "_observed")

    def __init__(self):
        self._cancelled = False
        self._observed  = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def observed(self) -> bool:
        return self._observed

    def poll(self) -> bool:
        """Checkpoint read.  Returns True if the procedure must stop now."""
        if self._cancelled:
            self._observed = True
        return self._cancelled
