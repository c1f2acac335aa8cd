"""
Exceptions raised by the seam carver.

Each error also derives from the builtin exception a caller would naturally
expect (IndexError for coordinates, ValueError for bad seams), so generic
handlers keep working.
"""


class SeamCarvingError(Exception):
    """Base class for all seam carving errors."""


class OutOfRangeError(SeamCarvingError, IndexError):
    """A coordinate, node id or seam entry lies outside the current grid."""


class InvalidSeamError(SeamCarvingError, ValueError):
    """Seam has the wrong length or jumps by more than one between entries."""


class DegenerateGridError(SeamCarvingError, ValueError):
    """The grid has no extent in the dimension an operation needs."""
