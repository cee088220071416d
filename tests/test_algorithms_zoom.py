# -*- coding: utf-8 -*-
"""
Zoom Tests - Nearest-neighbor and bilinear scaling.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-09

Modified
--------
2026-03-02
"""

import numpy as np
import pytest

from dipkit.algorithms.zoom import (
    BilinearZoom,
    NearestNeighborZoom,
    bilinear_zoom,
    nearest_neighbor_zoom,
)
from dipkit.core.image import Image
from dipkit.core.types import ElementType, Size
from dipkit.exceptions import InvalidArgumentError


@pytest.fixture
def diagonal():
    """4x4 UINT8 image with pixel (x, y) = x + y."""
    y, x = np.mgrid[0:4, 0:4]
    return Image.from_array((x + y).astype(np.uint8))


@pytest.fixture
def ramp():
    """6x3 FLOAT64 image with pixel (x, y) = x."""
    return Image.from_array(np.tile(np.arange(6, dtype=np.float64), (3, 1)))


class TestNearestNeighborZoom:

    def test_double(self, diagonal):
        out = nearest_neighbor_zoom(diagonal, 2.0)
        assert out.size == Size(8, 8)
        for x in range(4):
            for y in range(4):
                assert out.pixel(2 * x, 2 * y) == x + y

    def test_output_values_come_from_source(self, diagonal):
        out = nearest_neighbor_zoom(diagonal, 1.7)
        assert set(np.unique(out.pixels)) <= set(np.unique(diagonal.pixels))

    def test_rounds_half_up(self):
        img = Image.from_array(np.array([[10, 20, 30]], dtype=np.uint8))
        out = nearest_neighbor_zoom(img, 2.0)
        # d / 2 + 0.5 -> 0, 1, 1, 2, 2, 3 (clamped to 2)
        np.testing.assert_array_equal(out.to_array(),
                                      [[10, 20, 20, 30, 30, 30]] * 2)

    def test_shrink_size_is_floor(self):
        img = Image(5, 5)
        img.zeros()
        assert nearest_neighbor_zoom(img, 0.5).size == Size(2, 2)

    def test_shrink_to_nothing(self):
        img = Image(1, 1, 3, ElementType.FLOAT32)
        img.zeros()
        out = nearest_neighbor_zoom(img, 0.5)
        assert out.empty
        assert out.channels == 3

    def test_keeps_channels_and_type(self):
        img = Image.from_array(np.full((2, 3, 3), -4, dtype=np.int16))
        out = nearest_neighbor_zoom(img, 3.0)
        assert out.channels == 3
        assert out.element_type is ElementType.INT16
        assert np.all(out.pixels == -4)

    @pytest.mark.parametrize("scale", [0.0, -1.0])
    def test_non_positive_scale(self, diagonal, scale):
        with pytest.raises(InvalidArgumentError):
            nearest_neighbor_zoom(diagonal, scale)

    def test_source_unchanged(self, diagonal):
        before = diagonal.clone()
        nearest_neighbor_zoom(diagonal, 2.0)
        assert diagonal == before


class TestBilinearZoom:

    def test_identity_scale(self, diagonal):
        assert bilinear_zoom(diagonal, 1.0) == diagonal

    def test_linear_ramp_interior(self, ramp):
        out = bilinear_zoom(ramp, 2.0)
        assert out.size == Size(12, 6)
        np.testing.assert_allclose(out.to_array()[:, :11],
                                   np.tile(np.arange(11) / 2.0, (6, 1)))

    def test_last_column_clamps(self, ramp):
        out = bilinear_zoom(ramp, 2.0)
        # 11 / 2 = 5.5 blends pixel 5 with itself
        assert out.pixel(11, 0) == 5.0

    def test_integer_truncation(self):
        img = Image.from_array(np.array([[0, 3]], dtype=np.uint8))
        out = bilinear_zoom(img, 2.0)
        # 0, 1.5, 3, 3 -> truncated
        np.testing.assert_array_equal(out.to_array(), [[0, 1, 3, 3]] * 2)

    def test_multi_channel(self):
        data = np.zeros((2, 2, 3), dtype=np.float32)
        data[..., 1] = 4.0
        out = bilinear_zoom(Image.from_array(data), 1.5)
        assert out.size == Size(3, 3)
        assert np.all(out.pixels[..., 1] == 4.0)
        assert np.all(out.pixels[..., 0] == 0.0)

    def test_non_positive_scale(self, diagonal):
        with pytest.raises(InvalidArgumentError):
            bilinear_zoom(diagonal, 0.0)


class TestZoomTransforms:

    def test_defaults(self):
        assert NearestNeighborZoom().scale == 2.0
        assert BilinearZoom().get_params() == {'scale': 2.0}

    def test_apply_matches_function(self, diagonal):
        assert NearestNeighborZoom(scale=3.0).apply(diagonal) == \
            nearest_neighbor_zoom(diagonal, 3.0)
        assert BilinearZoom(scale=0.5)(diagonal) == bilinear_zoom(diagonal, 0.5)

    def test_runtime_override(self, diagonal):
        out = NearestNeighborZoom().apply(diagonal, scale=1.0)
        assert out == diagonal

    def test_zero_scale_rejected(self):
        with pytest.raises(InvalidArgumentError, match="greater than"):
            BilinearZoom(scale=0.0)

    def test_bool_scale_rejected(self):
        with pytest.raises(TypeError):
            NearestNeighborZoom(scale=True)
