# -*- coding: utf-8 -*-
"""
Connectivity - Pixel neighborhoods, adjacency and connected components.

Three neighborhood definitions are supported:

- ``N4``: the horizontal and vertical neighbors.
- ``N8``: ``N4`` plus the four diagonal neighbors.
- ``M`` (mixed): ``N4`` plus a diagonal neighbor only when neither of
  the two pixels it shares with the center as 4-neighbors has the
  center's value. This removes the double paths that 8-adjacency
  creates.

Values are read from channel 0 through the lenient accessor.

Dependencies
------------
scipy

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

# Standard library
import logging
from enum import Enum
from typing import List, Tuple

# Third-party
import numpy as np
from scipy import ndimage

# dipkit internal
from dipkit.core.image import Image
from dipkit.core.types import Point
from dipkit.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class NeighborhoodType(Enum):
    """Pixel adjacency definition."""

    N4 = "n4"
    N8 = "n8"
    M = "m"


def _four_neighbors(x: int, y: int) -> List[Point]:
    return [Point(x + 1, y), Point(x - 1, y), Point(x, y + 1), Point(x, y - 1)]


def _diagonal_neighbors(x: int, y: int) -> List[Point]:
    return [Point(x + 1, y + 1), Point(x + 1, y - 1),
            Point(x - 1, y + 1), Point(x - 1, y - 1)]


def get_neighbors(
    image: Image,
    x: int,
    y: int,
    neighborhood: NeighborhoodType = NeighborhoodType.N4,
) -> List[Point]:
    """In-bounds neighbors of pixel ``(x, y)``.

    Parameters
    ----------
    image : Image
        Source image. Only its size (and, for ``M``, channel 0) is used.
    x, y : int
        Center pixel.
    neighborhood : NeighborhoodType
        Adjacency definition.

    Returns
    -------
    List[Point]
        4-neighbors first (right, left, down, up), then the accepted
        diagonals (down-right, up-right, down-left, up-left).
    """
    width, height = image.width, image.height

    def inside(p: Point) -> bool:
        return 0 <= p.x < width and 0 <= p.y < height

    neighbors = [p for p in _four_neighbors(x, y) if inside(p)]
    if neighborhood is NeighborhoodType.N4:
        return neighbors

    diagonals = [q for q in _diagonal_neighbors(x, y) if inside(q)]
    if neighborhood is NeighborhoodType.N8:
        return neighbors + diagonals

    center = image.get_pixel(x, y, 0)
    for q in diagonals:
        shared = (Point(q.x, y), Point(x, q.y))
        if all(image.get_pixel(p.x, p.y, 0) != center for p in shared):
            neighbors.append(q)
    return neighbors


def is_connected(
    image: Image,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    neighborhood: NeighborhoodType,
    value: int,
) -> bool:
    """Whether two pixels of value *value* are adjacent.

    Both pixels must lie inside the image and hold *value* on channel 0,
    and ``(x2, y2)`` must be in the *neighborhood* of ``(x1, y1)``.
    """
    width, height = image.width, image.height
    if not (0 <= x1 < width and 0 <= y1 < height
            and 0 <= x2 < width and 0 <= y2 < height):
        return False
    if image.get_pixel(x1, y1, 0) != value or image.get_pixel(x2, y2, 0) != value:
        return False
    return Point(x2, y2) in get_neighbors(image, x1, y1, neighborhood)


def label_components(
    image: Image,
    value: int,
    neighborhood: NeighborhoodType = NeighborhoodType.N8,
) -> Tuple[np.ndarray, int]:
    """Label connected regions of pixels equal to *value*.

    Parameters
    ----------
    image : Image
        Source image; channel 0 is used.
    value : int
        Foreground value.
    neighborhood : NeighborhoodType
        Adjacency used to join pixels. ``M`` produces the same
        components as ``N8``; it differs only in which paths exist.

    Returns
    -------
    labels : np.ndarray
        int32 array of shape ``(H, W)``; 0 is background, regions are
        numbered from 1 in raster order.
    count : int
        Number of regions.

    Raises
    ------
    InvalidArgumentError
        If *image* is empty.
    """
    if image.empty:
        raise InvalidArgumentError("Cannot label an empty image")
    mask = image.pixels[:, :, 0] == value
    rank = 1 if neighborhood is NeighborhoodType.N4 else 2
    structure = ndimage.generate_binary_structure(2, rank)
    labels, count = ndimage.label(mask, structure=structure)
    logger.debug("label_components: %d regions of value %r (%s)",
                 count, value, neighborhood.name)
    return labels.astype(np.int32), int(count)
