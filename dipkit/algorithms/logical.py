# -*- coding: utf-8 -*-
"""
Logical Operations - Pixel-wise AND, OR and XOR of binary images.

Inputs are UINT8 images whose samples are expected to be 0 or 1. AND
and OR test for the value 1 exactly; XOR tests for inequality. Outputs
are UINT8 images of 0 and 1.

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
2026-02-11

Modified
--------
2026-03-02
"""

# Standard library
import logging

# Third-party
import numpy as np

# dipkit internal
from dipkit.core.image import Image, same_geometry
from dipkit.core.types import ElementType
from dipkit.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def _check_pair(a: Image, b: Image, operation: str) -> None:
    logger.info("Applying logical %s to %dx%d and %dx%d images", operation,
                a.width, a.height, b.width, b.height)
    if a.empty or b.empty:
        logger.error("One or both input images are empty")
        raise InvalidArgumentError(
            f"logical {operation}: one or both input images are empty"
        )
    if not same_geometry(a, b, check_type=False):
        logger.error("Input images must have the same dimensions and channels")
        raise InvalidArgumentError(
            f"logical {operation}: images differ in size or channels "
            f"({a!r} vs {b!r})"
        )


def _binary_image(mask: np.ndarray, like: Image) -> Image:
    result = Image(like.width, like.height, like.channels, ElementType.UINT8)
    result.pixels[...] = mask.astype(np.uint8)
    return result


def logical_and(a: Image, b: Image) -> Image:
    """1 where both samples are 1, else 0.

    Raises
    ------
    InvalidArgumentError
        If either image is empty or the images differ in width, height or
        channel count.
    """
    _check_pair(a, b, 'AND')
    return _binary_image((a.pixels == 1) & (b.pixels == 1), a)


def logical_or(a: Image, b: Image) -> Image:
    """1 where either sample is 1, else 0."""
    _check_pair(a, b, 'OR')
    return _binary_image((a.pixels == 1) | (b.pixels == 1), a)


def logical_xor(a: Image, b: Image) -> Image:
    """1 where the samples differ, else 0."""
    _check_pair(a, b, 'XOR')
    return _binary_image(a.pixels != b.pixels, a)
