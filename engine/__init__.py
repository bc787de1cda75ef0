"""
engine/
-------
Run control & recording layer.

    from engine import RunController, Recorder
"""

from engine.controller import RunController, RunState, RunStatus
from engine.recorder   import Recorder, RunMetrics

__all__ = [
    "RunController",
    "RunState",
    "RunStatus",
    "Recorder",
    "RunMetrics",
]
