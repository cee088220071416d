# -*- coding: utf-8 -*-
"""
Zoom - Nearest-neighbor and bilinear image scaling by inverse mapping.

For every destination pixel ``(dx, dy)`` the source coordinate is
``(dx / scale, dy / scale)``. The destination is
``floor(W * scale) x floor(H * scale)`` with the source's channel count
and element type.

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
from typing import Annotated, Any, Tuple

# Third-party
import numpy as np

# dipkit internal
from dipkit.algorithms.base import ImageTransform
from dipkit.algorithms.interpolation import bilinear_sample, to_element_type
from dipkit.algorithms.params import Desc, Range
from dipkit.algorithms.versioning import processor_tags, processor_version
from dipkit.core.image import Image, allocate_like
from dipkit.exceptions import InvalidArgumentError
from dipkit.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def _zoomed_size(image: Image, scale: float) -> Tuple[int, int]:
    if not scale > 0:
        raise InvalidArgumentError(f"Scale must be positive, got {scale!r}")
    return int(image.width * scale), int(image.height * scale)


def nearest_neighbor_zoom(image: Image, scale: float) -> Image:
    """Scale an image by nearest-neighbor lookup.

    The source coordinate ``d / scale`` is rounded with
    ``floor(v + 0.5)`` and clamped into the image. Every output sample is
    a copy of a source sample.

    Parameters
    ----------
    image : Image
        Source image, any element type.
    scale : float
        Zoom factor. Must be positive.

    Returns
    -------
    Image
        ``floor(W * scale) x floor(H * scale)`` image.

    Raises
    ------
    InvalidArgumentError
        If *scale* is not positive.
    """
    new_w, new_h = _zoomed_size(image, scale)
    logger.debug("nearest_neighbor_zoom %dx%d -> %dx%d",
                 image.width, image.height, new_w, new_h)
    dst = allocate_like(image, new_w, new_h)
    if dst.empty or image.empty:
        return dst

    xs = np.floor(np.arange(new_w) / scale + 0.5)
    ys = np.floor(np.arange(new_h) / scale + 0.5)
    xs = np.clip(xs, 0, image.width - 1).astype(np.intp)
    ys = np.clip(ys, 0, image.height - 1).astype(np.intp)

    dst.pixels[...] = image.pixels[ys[:, np.newaxis], xs[np.newaxis, :]]
    return dst


def bilinear_zoom(image: Image, scale: float) -> Image:
    """Scale an image with bilinear interpolation.

    Parameters
    ----------
    image : Image
        Source image, any element type.
    scale : float
        Zoom factor. Must be positive.

    Returns
    -------
    Image
        ``floor(W * scale) x floor(H * scale)`` image. Integer element
        types hold the truncated blend.

    Raises
    ------
    InvalidArgumentError
        If *scale* is not positive.
    """
    new_w, new_h = _zoomed_size(image, scale)
    logger.debug("bilinear_zoom %dx%d -> %dx%d",
                 image.width, image.height, new_w, new_h)
    dst = allocate_like(image, new_w, new_h)
    if dst.empty or image.empty:
        return dst

    xs = np.arange(new_w) / scale
    ys = np.arange(new_h) / scale
    blended = bilinear_sample(image, xs[np.newaxis, :], ys[:, np.newaxis])
    dst.pixels[...] = to_element_type(blended, image.element_type)
    return dst


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.GEOMETRY,
                description='Nearest-neighbor zoom')
class NearestNeighborZoom(ImageTransform):
    """Nearest-neighbor zoom as a configurable transform.

    Parameters
    ----------
    scale : float
        Zoom factor, strictly positive. Default 2.0.
    """

    scale: Annotated[float, Range(min=0.0, exclusive_min=True),
                     Desc('Zoom factor')] = 2.0

    def apply(self, source: Image, **kwargs: Any) -> Image:
        params = self._resolve_params(kwargs)
        return nearest_neighbor_zoom(source, params['scale'])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.GEOMETRY,
                description='Bilinear zoom')
class BilinearZoom(ImageTransform):
    """Bilinear zoom as a configurable transform.

    Parameters
    ----------
    scale : float
        Zoom factor, strictly positive. Default 2.0.
    """

    scale: Annotated[float, Range(min=0.0, exclusive_min=True),
                     Desc('Zoom factor')] = 2.0

    def apply(self, source: Image, **kwargs: Any) -> Image:
        params = self._resolve_params(kwargs)
        return bilinear_zoom(source, params['scale'])
