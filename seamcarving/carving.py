"""
High-level resizing built on SeamCarver.
"""

import logging
from typing import Callable, Optional, Sequence

import torch

from .carver import SeamCarver
from .picture import Color, Picture

logger = logging.getLogger(__name__)

SeamCallback = Callable[[SeamCarver, torch.Tensor, str], None]


def _check_target(name: str, target: Optional[int], current: int) -> int:
    if target is None:
        return current
    if target < 1:
        raise ValueError(f"Target {name} must be at least 1, got {target}")
    if target > current:
        raise ValueError(f"Target {name} {target} exceeds current {name} {current}; "
                         f"enlarging is not supported")
    return target


def carve_picture(picture: Picture, width: Optional[int] = None,
                  height: Optional[int] = None, order: str = 'topological',
                  callback: Optional[SeamCallback] = None) -> Picture:
    """
    Shrink a picture to the target size by removing seams.

    Vertical seams are removed first until the width matches, then
    horizontal seams until the height matches. Energy is recomputed
    after every removal.

    Args:
        picture: Picture to carve (left unchanged)
        width: Target width, or None to keep the current width
        height: Target height, or None to keep the current height
        order: Node order for the seam search, 'topological' or 'rows'
        callback: Called as callback(carver, seam, direction) after each removal

    Returns:
        Carved picture
    """
    target_w = _check_target('width', width, picture.width)
    target_h = _check_target('height', height, picture.height)

    carver = SeamCarver(picture, order=order)
    n_vertical = carver.width - target_w
    n_horizontal = carver.height - target_h
    logger.info("Carving %d x %d -> %d x %d", carver.width, carver.height, target_w, target_h)

    for i in range(n_vertical):
        seam = carver.find_vertical_seam()
        carver.remove_vertical_seam(seam)
        if callback is not None:
            callback(carver, seam, 'vertical')
        if (i + 1) % 20 == 0:
            logger.info("Removed %d/%d vertical seams, size: %d x %d",
                        i + 1, n_vertical, carver.width, carver.height)

    for i in range(n_horizontal):
        seam = carver.find_horizontal_seam()
        carver.remove_horizontal_seam(seam)
        if callback is not None:
            callback(carver, seam, 'horizontal')
        if (i + 1) % 20 == 0:
            logger.info("Removed %d/%d horizontal seams, size: %d x %d",
                        i + 1, n_horizontal, carver.width, carver.height)

    return carver.picture()


def overlay_seam(picture: Picture, seam: Sequence[int], direction: str = 'vertical',
                 color: Color = (255, 0, 0)) -> Picture:
    """Copy of picture with the seam painted in color (for visualization only)."""
    marked = picture.copy()

    if direction == 'vertical':
        for row, col in enumerate(seam):
            marked.set(int(col), row, color)
    elif direction == 'horizontal':
        for col, row in enumerate(seam):
            marked.set(col, int(row), color)
    else:
        raise ValueError(f"Invalid direction: {direction}")

    return marked
