from __future__ import annotations


class PearlsError(Exception):
    """Base class for errors raised by the Pearls engine."""


class MalformedGridError(PearlsError, ValueError):
    """Grid description is empty, ragged, or otherwise unusable."""


class IndexOutOfRangeError(PearlsError, IndexError):
    """Cell coordinates fall outside the grid."""


class NoReachableBoundaryError(PearlsError, RuntimeError):
    """A traversal ran past its step bound without meeting a boundary cell."""
