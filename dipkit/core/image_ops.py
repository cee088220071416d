# -*- coding: utf-8 -*-
"""
Image Operations - Construction helpers and lossless geometric edits.

Convenience constructors for solid gray and color images, a truncating
nearest-lookup resize, and the exact flips and quarter-turn rotation.
None of these interpolate; every output sample is a copy of a source
sample.

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

# Standard library
from typing import Sequence, Union

# Third-party
import numpy as np

# dipkit internal
from dipkit.core.image import Image, allocate_like
from dipkit.core.types import ElementType, Size
from dipkit.exceptions import InvalidArgumentError

Number = Union[int, float]


def create_gray_image(size: Size, value: Number = 0) -> Image:
    """Single-channel UINT8 image filled with *value*."""
    width, height = size
    image = Image(width, height, 1, ElementType.UINT8)
    image.fill(value)
    return image


def create_color_image(size: Size, color: Sequence[Number]) -> Image:
    """UINT8 image with one channel per component of *color*.

    Parameters
    ----------
    size : Size
        Width and height in pixels.
    color : sequence of int
        One to four channel values, e.g. ``Vec(255, 0, 0)``.

    Returns
    -------
    Image
    """
    if not 1 <= len(color) <= 4:
        raise InvalidArgumentError(
            f"color must have 1 to 4 components, got {len(color)}"
        )
    width, height = size
    image = Image(width, height, len(color), ElementType.UINT8)
    if not image.empty:
        image.pixels[...] = np.array(list(color)).astype(np.uint8)
    return image


def resize(src: Image, new_size: Size) -> Image:
    """Resize by truncating nearest lookup.

    Destination pixel ``(x, y)`` copies source pixel
    ``(int(x * W / new_w), int(y * H / new_h))``.

    Raises
    ------
    InvalidArgumentError
        If *new_size* has a negative dimension.
    """
    new_w, new_h = new_size
    if new_w < 0 or new_h < 0:
        raise InvalidArgumentError(f"Invalid target size {new_w}x{new_h}")
    dst = allocate_like(src, new_w, new_h)
    if dst.empty or src.empty:
        return dst
    xs = (np.arange(new_w) * (src.width / new_w)).astype(np.intp)
    ys = (np.arange(new_h) * (src.height / new_h)).astype(np.intp)
    dst.pixels[...] = src.pixels[ys[:, np.newaxis], xs[np.newaxis, :]]
    return dst


def flip_horizontal(src: Image) -> Image:
    """Mirror left to right."""
    return Image.from_array(src.pixels[:, ::-1]) if not src.empty else src.clone()


def flip_vertical(src: Image) -> Image:
    """Mirror top to bottom."""
    return Image.from_array(src.pixels[::-1]) if not src.empty else src.clone()


def rotate90(src: Image, clockwise: bool = True) -> Image:
    """Rotate by a quarter turn; the output is ``H x W``."""
    if src.empty:
        return allocate_like(src, src.height, src.width)
    k = -1 if clockwise else 1
    return Image.from_array(np.rot90(src.pixels, k=k, axes=(0, 1)))
