"""
Pixel grid used by the seam carver.

A Picture owns a (3, H, W) uint8 tensor, channels first, the same layout
used for images everywhere else in the package. Pixels are addressed as
(col, row), i.e. (x, y).
"""

from pathlib import Path
from typing import Tuple, Union

import numpy as np
import torch
from PIL import Image

from .errors import OutOfRangeError

Color = Tuple[int, int, int]


class Picture:
    """
    Mutable rectangular grid of RGB pixels.

    Width and height may be zero; a seam carver can shrink a picture
    down to an empty grid.
    """

    def __init__(self, width: int, height: int):
        """
        Create a black picture.

        Args:
            width: Number of columns (>= 0)
            height: Number of rows (>= 0)
        """
        if width < 0 or height < 0:
            raise ValueError(f"Picture size must be non-negative, got {width} x {height}")
        self._pixels = torch.zeros(3, height, width, dtype=torch.uint8)

    @classmethod
    def _wrap(cls, pixels: torch.Tensor) -> 'Picture':
        # Adopts the tensor without copying; callers pass fresh tensors only.
        picture = cls.__new__(cls)
        picture._pixels = pixels
        return picture

    @classmethod
    def from_tensor(cls, tensor: torch.Tensor) -> 'Picture':
        """
        Build a picture from an image tensor.

        Args:
            tensor: RGB image (3, H, W) or grayscale (H, W). Floating point
                    tensors are read as values in [0, 1].

        Returns:
            New picture holding a copy of the data
        """
        if tensor.dim() == 2:
            tensor = tensor.unsqueeze(0).expand(3, -1, -1)
        elif tensor.dim() != 3 or tensor.shape[0] != 3:
            raise ValueError(f"Expected image of shape (3, H, W) or (H, W), got {tuple(tensor.shape)}")

        if tensor.is_floating_point():
            tensor = (tensor * 255.0).round().clamp(0, 255)
        elif tensor.dtype != torch.uint8 and tensor.numel() > 0:
            if tensor.min().item() < 0 or tensor.max().item() > 255:
                raise ValueError(f"Integer image values must lie in 0..255, got "
                                 f"{tensor.min().item()}..{tensor.max().item()}")

        return cls._wrap(tensor.to(device='cpu', dtype=torch.uint8).contiguous().clone())

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Picture':
        """
        Build a picture from an (H, W, 3) or (H, W) numpy array.

        Dtypes are treated as in from_tensor: floats in [0, 1], integers in 0..255.
        """
        array = np.asarray(array)
        if array.ndim == 3:
            if array.shape[2] != 3:
                raise ValueError(f"Expected 3 color channels, got {array.shape[2]}")
            tensor = torch.from_numpy(np.ascontiguousarray(array)).permute(2, 0, 1)
        elif array.ndim == 2:
            tensor = torch.from_numpy(np.ascontiguousarray(array))
        else:
            raise ValueError(f"Expected array of shape (H, W, 3) or (H, W), got {array.shape}")
        return cls.from_tensor(tensor)

    @classmethod
    def open(cls, path: Union[str, Path]) -> 'Picture':
        """Load an image file as RGB."""
        with Image.open(path) as img:
            array = np.array(img.convert('RGB'), dtype=np.uint8)
        return cls.from_array(array)

    def save(self, path: Union[str, Path]):
        """Write the picture to an image file; the format follows the suffix."""
        Image.fromarray(self.to_array()).save(path)

    @property
    def width(self) -> int:
        return self._pixels.shape[2]

    @property
    def height(self) -> int:
        return self._pixels.shape[1]

    def _check_bounds(self, col: int, row: int):
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise OutOfRangeError(
                f"Pixel ({col}, {row}) outside {self.width} x {self.height} picture")

    def get(self, col: int, row: int) -> Color:
        """Color of the pixel at column col and row row."""
        self._check_bounds(col, row)
        r, g, b = self._pixels[:, row, col].tolist()
        return r, g, b

    def set(self, col: int, row: int, color: Color):
        """Paint the pixel at column col and row row."""
        self._check_bounds(col, row)
        if len(color) != 3 or any(not 0 <= int(c) <= 255 for c in color):
            raise ValueError(f"Color must be three channels in 0..255, got {color}")
        self._pixels[:, row, col] = torch.tensor([int(c) for c in color], dtype=torch.uint8)

    def copy(self) -> 'Picture':
        return Picture._wrap(self._pixels.clone())

    def transposed(self) -> 'Picture':
        """New picture with rows and columns swapped: (col, row) -> (row, col)."""
        return Picture._wrap(self._pixels.transpose(1, 2).clone(memory_format=torch.contiguous_format))

    def to_tensor(self) -> torch.Tensor:
        """Copy of the pixel data as a (3, H, W) uint8 tensor."""
        return self._pixels.clone()

    def to_array(self) -> np.ndarray:
        """Copy of the pixel data as an (H, W, 3) uint8 numpy array."""
        return self._pixels.permute(1, 2, 0).contiguous().numpy().copy()

    def __eq__(self, other):
        if not isinstance(other, Picture):
            return NotImplemented
        return (self._pixels.shape == other._pixels.shape
                and torch.equal(self._pixels, other._pixels))

    def __repr__(self):
        return f"Picture(width={self.width}, height={self.height})"
