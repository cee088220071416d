# -*- coding: utf-8 -*-
"""
Connectivity Tests - Neighborhoods, adjacency and component labeling.

Author
------
Steven Siebert

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

from dipkit.algorithms.connectivity import (
    NeighborhoodType,
    get_neighbors,
    is_connected,
    label_components,
)
from dipkit.core.image import Image
from dipkit.core.types import Point
from dipkit.exceptions import InvalidArgumentError


@pytest.fixture
def diagonal_pair():
    return Image.from_array(np.array([[1, 0, 0],
                                      [0, 1, 1],
                                      [0, 0, 0]], dtype=np.uint8))


@pytest.fixture
def corner_case():
    """Center pixel touches (2, 0) through the 4-neighbor (1, 0)."""
    return Image.from_array(np.array([[0, 1, 1],
                                      [0, 1, 0],
                                      [0, 0, 1]], dtype=np.uint8))


class TestGetNeighbors:

    def test_n4_order(self, diagonal_pair):
        assert get_neighbors(diagonal_pair, 1, 1, NeighborhoodType.N4) == [
            Point(2, 1), Point(0, 1), Point(1, 2), Point(1, 0)]

    def test_n8_appends_diagonals(self, diagonal_pair):
        neighbors = get_neighbors(diagonal_pair, 1, 1, NeighborhoodType.N8)
        assert len(neighbors) == 8
        assert neighbors[4:] == [Point(2, 2), Point(2, 0),
                                 Point(0, 2), Point(0, 0)]

    def test_corner_drops_outside(self, diagonal_pair):
        assert get_neighbors(diagonal_pair, 0, 0) == [Point(1, 0), Point(0, 1)]
        assert get_neighbors(diagonal_pair, 0, 0, NeighborhoodType.N8) == [
            Point(1, 0), Point(0, 1), Point(1, 1)]

    def test_m_rejects_diagonal_with_shared_neighbor(self, corner_case):
        neighbors = get_neighbors(corner_case, 1, 1, NeighborhoodType.M)
        assert Point(2, 0) not in neighbors
        assert Point(2, 2) in neighbors
        assert neighbors[:4] == get_neighbors(corner_case, 1, 1)

    def test_single_pixel_image(self):
        img = Image(1, 1)
        img.zeros()
        for kind in NeighborhoodType:
            assert get_neighbors(img, 0, 0, kind) == []


class TestIsConnected:

    def test_diagonal_needs_n8(self, diagonal_pair):
        assert not is_connected(diagonal_pair, 0, 0, 1, 1,
                                NeighborhoodType.N4, 1)
        assert is_connected(diagonal_pair, 0, 0, 1, 1, NeighborhoodType.N8, 1)
        assert is_connected(diagonal_pair, 0, 0, 1, 1, NeighborhoodType.M, 1)

    def test_m_adjacency(self, corner_case):
        assert is_connected(corner_case, 1, 1, 2, 0, NeighborhoodType.N8, 1)
        assert not is_connected(corner_case, 1, 1, 2, 0, NeighborhoodType.M, 1)
        assert is_connected(corner_case, 1, 1, 2, 2, NeighborhoodType.M, 1)

    def test_value_must_match(self, diagonal_pair):
        assert not is_connected(diagonal_pair, 0, 0, 1, 0,
                                NeighborhoodType.N4, 1)
        assert not is_connected(diagonal_pair, 1, 1, 2, 1,
                                NeighborhoodType.N4, 0)

    def test_outside_is_false(self, diagonal_pair):
        assert not is_connected(diagonal_pair, 0, 0, -1, 0,
                                NeighborhoodType.N8, 1)
        assert not is_connected(diagonal_pair, 5, 5, 2, 1,
                                NeighborhoodType.N8, 1)

    def test_not_adjacent(self, diagonal_pair):
        # same value but two columns apart
        assert not is_connected(diagonal_pair, 0, 0, 2, 1,
                                NeighborhoodType.N8, 1)


class TestLabelComponents:

    def test_n4_splits_diagonal(self, diagonal_pair):
        labels, count = label_components(diagonal_pair, 1, NeighborhoodType.N4)
        assert count == 2
        np.testing.assert_array_equal(labels, [[1, 0, 0],
                                               [0, 2, 2],
                                               [0, 0, 0]])

    def test_n8_joins_diagonal(self, diagonal_pair):
        labels, count = label_components(diagonal_pair, 1)
        assert count == 1
        assert labels.dtype == np.int32
        assert labels[0, 0] == labels[1, 2] == 1

    def test_m_matches_n8(self, corner_case):
        assert label_components(corner_case, 1, NeighborhoodType.M)[1] == \
            label_components(corner_case, 1, NeighborhoodType.N8)[1]

    def test_background_value(self, diagonal_pair):
        _, count = label_components(diagonal_pair, 0, NeighborhoodType.N4)
        assert count == 2

    def test_empty_image(self):
        with pytest.raises(InvalidArgumentError):
            label_components(Image(), 1)
