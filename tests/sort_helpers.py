"""Inputs and small drivers shared by the algorithm and controller tests."""

from algorithms import REGISTRY
from algorithms.frame import FrameEmitter
from algorithms.pacing import CancellationToken, PacingConfig
from sequence import Buffer, generate


ALGORITHM_KEYS = list(REGISTRY)

SAMPLE_INPUTS = [
    [],
    [7],
    [4, 2],
    [5, 3, 8, 1],
    [1, 2, 3, 4, 5, 6],
    [6, 5, 4, 3, 2, 1],
    [3, 3, 1, 3, 2, 2, 1],
    [0.5, -2, 10, 3.25, -2, 7],
    generate(40, seed=7),
    generate(64, low=1, high=5, seed=11),
]


def count_inversions(values):
    return sum(
        1
        for i in range(len(values))
        for j in range(i + 1, len(values))
        if values[i] > values[j]
    )


def drain(algo_key, values, token=None):
    """Run one procedure directly, without a controller.  Returns (buffer, frames)."""
    buffer  = Buffer(values)
    token   = token or CancellationToken()
    emitter = FrameEmitter(pacing=PacingConfig(delay_ms=0))
    frames  = list(REGISTRY[algo_key].fn(buffer, token, emitter))
    return buffer, frames
