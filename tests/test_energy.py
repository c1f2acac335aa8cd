"""Tests for the dual-gradient energy functions."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarving.energy import BORDER_ENERGY, pixel_energy, energy_map
from seamcarving.errors import OutOfRangeError
from seamcarving.picture import Picture

from conftest import make_uniform_picture, make_random_picture


class TestPixelEnergy:
    def test_border_constant(self):
        assert BORDER_ENERGY == 195075.0

    def test_border_pixels_ignore_content(self):
        """Every pixel on the outer edge has the border energy."""
        W, H = 6, 5
        pixels = make_random_picture(W, H).to_tensor()
        for col in range(W):
            for row in range(H):
                if col in (0, W - 1) or row in (0, H - 1):
                    assert pixel_energy(pixels, col, row) == BORDER_ENERGY

    def test_uniform_interior_is_zero(self):
        pixels = make_uniform_picture(5, 4).to_tensor()
        for col in range(1, 4):
            for row in range(1, 3):
                assert pixel_energy(pixels, col, row) == 0.0

    def test_known_gradient(self):
        """Squared differences summed over channels and both axes."""
        pic = Picture(3, 3)
        pic.set(0, 1, (255, 200, 100))   # left
        pic.set(2, 1, (255, 205, 255))   # right
        pic.set(1, 0, (255, 255, 255))   # above
        pic.set(1, 2, (0, 0, 0))         # below
        expected = (0 + 5 ** 2 + 155 ** 2) + 3 * 255 ** 2
        assert pixel_energy(pic.to_tensor(), 1, 1) == expected

    def test_no_uint8_wraparound(self):
        """Black on one side, white on the other gives the full difference."""
        pic = Picture(3, 3)
        pic.set(2, 1, (255, 255, 255))
        assert pixel_energy(pic.to_tensor(), 1, 1) == BORDER_ENERGY

    @pytest.mark.parametrize("col,row", [(-1, 1), (1, -1), (4, 1), (1, 3)])
    def test_out_of_range(self, col, row):
        pixels = make_uniform_picture(4, 3).to_tensor()
        with pytest.raises(OutOfRangeError):
            pixel_energy(pixels, col, row)


class TestEnergyMap:
    def test_output_shape(self):
        pixels = make_random_picture(7, 4).to_tensor()
        assert energy_map(pixels).shape == (4, 7)

    def test_matches_pixel_energy(self):
        pixels = make_random_picture(9, 6, seed=1).to_tensor()
        energy = energy_map(pixels)
        for col in range(9):
            for row in range(6):
                assert energy[row, col].item() == pixel_energy(pixels, col, row)

    @pytest.mark.parametrize("W,H", [(1, 1), (2, 5), (5, 2), (1, 4)])
    def test_thin_grids_are_all_border(self, W, H):
        energy = energy_map(make_random_picture(W, H).to_tensor())
        assert (energy == BORDER_ENERGY).all()

    def test_energy_nonnegative(self):
        energy = energy_map(make_random_picture(20, 20, seed=7).to_tensor())
        assert (energy >= 0).all()
