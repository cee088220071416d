# -*- coding: utf-8 -*-
"""
Downsample Tests - Block averaging.

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
2026-02-12

Modified
--------
2026-03-02
"""

import numpy as np
import pytest

from dipkit.algorithms.downsample import Downsample, downsample
from dipkit.core.image import Image
from dipkit.core.types import ElementType, Size
from dipkit.exceptions import InvalidArgumentError


@pytest.fixture
def blocks():
    """4x4 UINT8 image of values 0..15."""
    return Image.from_array(np.arange(16, dtype=np.uint8).reshape(4, 4))


class TestDownsample:

    def test_factor_two(self, blocks):
        out = downsample(blocks, 2)
        assert out.size == Size(2, 2)
        # means 2.5, 4.5, 10.5, 12.5 floored
        np.testing.assert_array_equal(out.to_array(), [[2, 4], [10, 12]])

    def test_float_keeps_mean(self, blocks):
        out = downsample(blocks.convert_to(ElementType.FLOAT32), 2)
        np.testing.assert_allclose(out.to_array(), [[2.5, 4.5], [10.5, 12.5]])

    def test_partial_blocks_dropped(self):
        img = Image.from_array(np.ones((5, 7), dtype=np.uint8))
        assert downsample(img, 2).size == Size(3, 2)

    @pytest.mark.parametrize("factor", [1, 0, -2])
    def test_small_factor_copies(self, blocks, factor):
        out = downsample(blocks, factor)
        assert out == blocks
        out.put_pixel(0, 0, 0, 99)
        assert blocks.pixel(0, 0) == 0

    def test_factor_larger_than_image(self, blocks):
        out = downsample(blocks, 5)
        assert out.empty

    def test_signed_mean_truncates_toward_zero(self):
        img = Image.from_array(np.array([[-1, -2], [-2, -2]], dtype=np.int16))
        out = downsample(img, 2)
        assert out.element_type is ElementType.INT16
        # -7 / 4 = -1.75
        assert out.pixel(0, 0) == -1

    def test_multi_channel(self):
        data = np.zeros((2, 2, 3), dtype=np.uint8)
        data[..., 2] = [[10, 20], [30, 40]]
        out = downsample(Image.from_array(data), 2)
        assert out.pixel_vec(0, 0) == (0, 0, 25)


class TestDownsampleTransform:

    def test_default_factor(self, blocks):
        assert Downsample()(blocks) == downsample(blocks, 2)

    def test_factor_below_one_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Downsample(factor=0)
