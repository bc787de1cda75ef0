"""
frame.py — Frame Snapshot & Emitter
====================================
Every sorting procedure is a generator that yields Frame objects.
A Frame is a frozen copy of the buffer taken right after one elementary
mutation (a swap or a positional overwrite), plus the positions that
mutation touched so the renderer can highlight them.

Design decisions:
  - Frame holds a tuple, never the live list.  The procedure is the only
    writer of the Buffer; the emitter, the observer and the renderer are
    pure readers of copies.
  - The observer is called inside emit(), before the procedure yields.
    The yield itself is the suspension point; whoever drives the
    generator then calls pause() / pause_async() to apply the delay.
  - Frame numbers restart at 0 for every emitter, and one emitter is
    created per run.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from algorithms.pacing import PacingConfig
from sequence.buffer import Buffer


SWAP  = "swap"
WRITE = "write"


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        frame_number : 0-based index of this frame within its run.
        values       : Copy of the buffer contents after the mutation.
        indices      : Positions the mutation touched.
        mutation     : SWAP or WRITE.
    """

    frame_number: int                = 0
    values:       Tuple[float, ...]  = ()
    indices:      Tuple[int, ...]    = ()
    mutation:     str                = SWAP

    def to_dict(self) -> dict:
        return {
            "frame_number": self.frame_number,
            "values":       list(self.values),
            "indices":      list(self.indices),
            "mutation":     self.mutation,
        }


class FrameEmitter:
    """
    Attributes:
        observer       : Optional callback(Frame), the renderer hook.
        pacing         : PacingConfig captured for this run.
        frames_emitted : Count of frames produced so far.
        last_frame     : Most recent Frame, or None.
    """

    def __init__(
        self,
        observer: Optional[Callable[[Frame], None]] = None,
        pacing: Optional[PacingConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.observer:       Optional[Callable[[Frame], None]] = observer
        self.pacing:         PacingConfig    = pacing or PacingConfig()
        self.frames_emitted: int             = 0
        self.last_frame:     Optional[Frame] = None
        self._sleep = sleep

    def emit(self, buffer: Buffer, indices: Sequence[int], mutation: str = SWAP) -> Frame:
        frame = Frame(
            frame_number=self.frames_emitted,
            values=buffer.snapshot(),
            indices=tuple(indices),
            mutation=mutation,
        )
        self.frames_emitted += 1
        self.last_frame = frame
        if self.observer is not None:
            self.observer(frame)
        return frame

    # ------------------------------------------------------------------
    # Suspension
    # ------------------------------------------------------------------
    def pause(self) -> None:
        """Blocking pause for synchronous drivers."""
        if self.pacing.delay_ms > 0:
            self._sleep(self.pacing.delay_seconds)

    async def pause_async(self) -> None:
        # asyncio.sleep(0) still hands control back to the loop
        await asyncio.sleep(self.pacing.delay_seconds)
