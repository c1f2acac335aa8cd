"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarving.picture import Picture


def make_uniform_picture(W, H, color=(120, 80, 40)):
    """Solid-color picture."""
    pixels = torch.tensor(color, dtype=torch.uint8).view(3, 1, 1).expand(3, H, W)
    return Picture.from_tensor(pixels)


def make_random_picture(W, H, seed=0):
    """Random RGB noise, reproducible."""
    gen = torch.Generator().manual_seed(seed)
    pixels = torch.randint(0, 256, (3, H, W), generator=gen, dtype=torch.int64)
    return Picture.from_tensor(pixels.to(torch.uint8))


def make_flat_and_noise_picture(W, H, flat_cols, seed=0):
    """Flat gray in the leftmost flat_cols columns, random noise elsewhere."""
    gen = torch.Generator().manual_seed(seed)
    pixels = torch.randint(0, 256, (3, H, W), generator=gen, dtype=torch.int64)
    pixels[:, :, :flat_cols] = 128
    return Picture.from_tensor(pixels.to(torch.uint8))


def is_connected(seam):
    """Adjacent seam entries differ by at most one."""
    values = [int(v) for v in seam]
    return all(abs(a - b) <= 1 for a, b in zip(values, values[1:]))


@pytest.fixture
def random_picture():
    """Standard 12x9 noise picture."""
    return make_random_picture(12, 9, seed=42)
