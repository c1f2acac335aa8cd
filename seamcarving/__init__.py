"""
Content-aware image resizing by seam carving.

Repeatedly finds the connected path of lowest-energy pixels (a seam)
across the image and removes it, shrinking the image one row or column
at a time while keeping visually important content.
"""

__version__ = "0.1.0"

from .errors import (SeamCarvingError, OutOfRangeError, InvalidSeamError,
                     DegenerateGridError)
from .picture import Picture
from .energy import BORDER_ENERGY, pixel_energy, energy_map
from .graph import SeamGraph
from .seam import shortest_vertical_seam, validate_seam, remove_seam
from .carver import SeamCarver
from .carving import carve_picture, overlay_seam

__all__ = [
    'SeamCarvingError',
    'OutOfRangeError',
    'InvalidSeamError',
    'DegenerateGridError',
    'Picture',
    'BORDER_ENERGY',
    'pixel_energy',
    'energy_map',
    'SeamGraph',
    'shortest_vertical_seam',
    'validate_seam',
    'remove_seam',
    'SeamCarver',
    'carve_picture',
    'overlay_seam',
]
