# -*- coding: utf-8 -*-
"""
Bilinear Interpolation - Four-neighbor weighted sampling of an Image.

``bilinear_interp`` samples one channel at a real-valued coordinate.
``bilinear_sample`` is the vectorized form used by the resampling
algorithms; both share the same arithmetic so a scalar sample and the
corresponding element of a vectorized sample are bit-identical.

Neighbor coordinates are clamped independently into the image, so
sampling never fails on coordinates. The fractional weights are taken
from the unclamped floor, which makes samples outside the image
extrapolate from the edge pixels rather than snapping to them.

Dependencies
------------
numpy

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
import logging
from typing import Union

# Third-party
import numpy as np

# dipkit internal
from dipkit.core.image import Image
from dipkit.core.types import ElementType
from dipkit.exceptions import ChannelOutOfRangeError, InvalidArgumentError

logger = logging.getLogger(__name__)

Number = Union[int, float]


def bilinear_sample(
    image: Image,
    xs: np.ndarray,
    ys: np.ndarray,
) -> np.ndarray:
    """Blend the four neighbors of every ``(xs, ys)`` coordinate.

    Parameters
    ----------
    image : Image
        Non-empty source image.
    xs, ys : np.ndarray
        Source coordinates, broadcastable to a common shape ``S``.

    Returns
    -------
    np.ndarray
        float64 array of shape ``S + (channels,)`` holding the unrounded
        blend for every channel.

    Raises
    ------
    InvalidArgumentError
        If *image* is empty or a coordinate is NaN or infinite.
    """
    if image.empty:
        raise InvalidArgumentError("Cannot interpolate an empty image")
    xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=np.float64),
                                 np.asarray(ys, dtype=np.float64))
    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise InvalidArgumentError("Sample coordinates must be finite")
    width, height = image.width, image.height
    src = image.pixels

    fx = np.floor(xs)
    fy = np.floor(ys)
    # Clamp in float space so huge coordinates cannot overflow the index cast
    x1 = np.clip(fx, 0, width - 1).astype(np.intp)
    x2 = np.clip(fx + 1, 0, width - 1).astype(np.intp)
    y1 = np.clip(fy, 0, height - 1).astype(np.intp)
    y2 = np.clip(fy + 1, 0, height - 1).astype(np.intp)

    wx = (xs - fx)[..., np.newaxis]
    wy = (ys - fy)[..., np.newaxis]

    tl = src[y1, x1].astype(np.float64)
    tr = src[y1, x2].astype(np.float64)
    bl = src[y2, x1].astype(np.float64)
    br = src[y2, x2].astype(np.float64)

    return ((1.0 - wx) * (1.0 - wy) * tl + (1.0 - wx) * wy * bl
            + wx * (1.0 - wy) * tr + wx * wy * br)


def to_element_type(values: np.ndarray, element_type: ElementType) -> np.ndarray:
    """Store blended values in *element_type*; integer types truncate."""
    if element_type.is_integer:
        return np.trunc(values).astype(element_type.dtype)
    return values.astype(element_type.dtype)


def bilinear_interp(image: Image, x: float, y: float, channel: int = 0) -> Number:
    """Sample one channel of *image* at a real-valued coordinate.

    Parameters
    ----------
    image : Image
        Source image.
    x, y : float
        Column and row coordinate. Any finite value is accepted.
    channel : int
        Channel to sample.

    Returns
    -------
    int or float
        Blend of the four neighbors, truncated for integer element types.

    Raises
    ------
    ChannelOutOfRangeError
        If *channel* is outside ``[0, channels)``.
    InvalidArgumentError
        If *x* or *y* is NaN or infinite.

    Examples
    --------
    >>> img = Image.from_array(np.array([[0, 100], [100, 200]], np.uint8))
    >>> bilinear_interp(img, 0.5, 0.5)
    100
    """
    if not 0 <= channel < image.channels:
        raise ChannelOutOfRangeError(
            f"Channel {channel} out of range [0, {image.channels})"
        )
    blended = bilinear_sample(image, np.array([x]), np.array([y]))[0, channel]
    return to_element_type(blended, image.element_type).item()
