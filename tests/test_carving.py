"""Tests for the resize driver and seam overlay."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarving.carving import carve_picture, overlay_seam
from seamcarving.picture import Picture

from conftest import make_random_picture, make_flat_and_noise_picture, is_connected


class TestCarvePicture:
    def test_reduces_to_target(self):
        pic = make_random_picture(15, 10)
        carved = carve_picture(pic, width=11, height=7)
        assert (carved.width, carved.height) == (11, 7)

    def test_width_only(self):
        carved = carve_picture(make_random_picture(10, 6), width=4)
        assert (carved.width, carved.height) == (4, 6)

    def test_height_only(self):
        carved = carve_picture(make_random_picture(10, 6), height=2)
        assert (carved.width, carved.height) == (10, 2)

    def test_no_targets_is_a_copy(self):
        pic = make_random_picture(5, 5)
        carved = carve_picture(pic)
        assert carved == pic
        assert carved is not pic

    def test_input_untouched(self):
        pic = make_random_picture(10, 8)
        carve_picture(pic, width=5, height=5)
        assert pic == make_random_picture(10, 8)

    def test_shrinks_to_single_pixel(self):
        carved = carve_picture(make_random_picture(4, 3), width=1, height=1)
        assert (carved.width, carved.height) == (1, 1)

    @pytest.mark.parametrize("width,height", [(0, None), (None, 0), (11, None), (None, 9)])
    def test_rejects_bad_targets(self, width, height):
        with pytest.raises(ValueError):
            carve_picture(make_random_picture(10, 8), width=width, height=height)

    def test_preserves_noisy_region(self):
        """Seams come out of the flat region first; the noise survives intact."""
        pic = make_flat_and_noise_picture(12, 6, flat_cols=6)
        carved = carve_picture(pic, width=10)
        original = pic.to_tensor()
        assert torch.equal(carved.to_tensor()[:, 1:-1, -6:], original[:, 1:-1, -6:])

    def test_callback_sees_every_seam(self):
        calls = []

        def record(carver, seam, direction):
            calls.append((direction, carver.width, carver.height, is_connected(seam)))

        carve_picture(make_random_picture(6, 5), width=4, height=4, callback=record)
        assert calls == [
            ('vertical', 5, 5, True),
            ('vertical', 4, 5, True),
            ('horizontal', 4, 4, True),
        ]

    def test_rows_order(self):
        carved = carve_picture(make_random_picture(8, 8), width=6, order='rows')
        assert carved.width == 6


class TestOverlaySeam:
    def test_paints_vertical_seam(self):
        pic = Picture(3, 3)
        marked = overlay_seam(pic, [0, 1, 2])
        assert marked.get(0, 0) == (255, 0, 0)
        assert marked.get(1, 1) == (255, 0, 0)
        assert marked.get(2, 2) == (255, 0, 0)
        assert marked.get(1, 0) == (0, 0, 0)
        assert pic.get(0, 0) == (0, 0, 0)

    def test_paints_horizontal_seam(self):
        pic = Picture(3, 2)
        marked = overlay_seam(pic, torch.tensor([1, 0, 1]), direction='horizontal', color=(0, 255, 0))
        assert marked.get(0, 1) == (0, 255, 0)
        assert marked.get(1, 0) == (0, 255, 0)
        assert marked.get(2, 1) == (0, 255, 0)
        assert marked.get(0, 0) == (0, 0, 0)

    def test_invalid_direction(self):
        with pytest.raises(ValueError):
            overlay_seam(Picture(2, 2), [0, 0], direction='sideways')
