"""
SeamCarver: owns a picture and shrinks it one seam at a time.
"""

import logging
from typing import Sequence, Union

import numpy as np
import torch

from .energy import energy_map, pixel_energy
from .errors import DegenerateGridError
from .picture import Picture
from .seam import remove_seam, shortest_vertical_seam

logger = logging.getLogger(__name__)


class SeamCarver:
    """
    Content-aware resizing of a single picture.

    The carver keeps its own copy of the picture: the constructor copies
    its input and picture() hands out copies, so the grid only changes
    through seam removal. Energies are recomputed from the current grid
    on every call.

    Not thread-safe; serialize calls on a shared instance.
    """

    def __init__(self, picture: Union[Picture, torch.Tensor, np.ndarray], order: str = 'topological'):
        """
        Args:
            picture: Picture, image tensor (3, H, W) / (H, W), or numpy array (H, W, 3)
            order: Node order used by the seam search, 'topological' or 'rows'
        """
        if isinstance(picture, Picture):
            self._pic = picture.copy()
        elif isinstance(picture, torch.Tensor):
            self._pic = Picture.from_tensor(picture)
        else:
            self._pic = Picture.from_array(picture)
        self.order = order

    def picture(self) -> Picture:
        """Copy of the current picture."""
        return self._pic.copy()

    @property
    def width(self) -> int:
        return self._pic.width

    @property
    def height(self) -> int:
        return self._pic.height

    def energy(self, col: int, row: int) -> float:
        """Energy of pixel at column col and row row."""
        return pixel_energy(self._pic._pixels, col, row)

    def find_vertical_seam(self) -> torch.Tensor:
        """
        Returns:
            Seam (height,) with the column to remove in each row
        """
        return shortest_vertical_seam(energy_map(self._pic._pixels), order=self.order)

    def find_horizontal_seam(self) -> torch.Tensor:
        """
        Returns:
            Seam (width,) with the row to remove in each column
        """
        if self.width == 0 or self.height == 0:
            raise DegenerateGridError(f"Cannot find a seam in a {self.width} x {self.height} picture")

        # Search the transposed grid, then restore it exactly
        self._transpose()
        try:
            seam = self.find_vertical_seam()
        finally:
            self._transpose()
        return seam

    def _transpose(self):
        self._pic = self._pic.transposed()

    def remove_vertical_seam(self, seam: Sequence[int]):
        """Remove one pixel per row; width shrinks by one."""
        carved = remove_seam(self._pic._pixels, seam, direction='vertical')
        self._pic = Picture._wrap(carved)
        logger.debug("Removed vertical seam, now %d x %d", self.width, self.height)

    def remove_horizontal_seam(self, seam: Sequence[int]):
        """Remove one pixel per column; height shrinks by one."""
        carved = remove_seam(self._pic._pixels, seam, direction='horizontal')
        self._pic = Picture._wrap(carved)
        logger.debug("Removed horizontal seam, now %d x %d", self.width, self.height)

    def __repr__(self):
        return f"SeamCarver(width={self.width}, height={self.height})"
