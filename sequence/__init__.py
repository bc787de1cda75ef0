"""
sequence/
---------
Core data layer.  Public API:

    from sequence import Buffer, generate
"""

from sequence.buffer    import Buffer
from sequence.generator import generate

__all__ = [
    "Buffer",
    "generate",
]
