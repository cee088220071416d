# -*- coding: utf-8 -*-
"""
Rotate - Rotation about the image center by inverse mapping.

Each output pixel ``(xo, yo)`` is mapped back into the source with

    x =  (xo - cx) * cos(t) + (yo - cy) * sin(t) + cx
    y = -(xo - cx) * sin(t) + (yo - cy) * cos(t) + cy

where ``(cx, cy) = (W / 2, H / 2)``. Pixels whose source coordinate
falls outside ``[0, W) x [0, H)`` are zero in every channel; the rest
are sampled bilinearly. The output keeps the source size, so corners
are cut for angles that are not multiples of a full turn.

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
import math
from typing import Annotated, Any

# Third-party
import numpy as np

# dipkit internal
from dipkit.algorithms.base import ImageTransform
from dipkit.algorithms.interpolation import bilinear_sample, to_element_type
from dipkit.algorithms.params import Desc
from dipkit.algorithms.versioning import processor_tags, processor_version
from dipkit.core.image import Image, allocate_like
from dipkit.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def rotate(image: Image, theta: float) -> Image:
    """Rotate an image by *theta* radians about its center.

    Parameters
    ----------
    image : Image
        Source image, any element type.
    theta : float
        Rotation angle in radians. Any real value.

    Returns
    -------
    Image
        Same size, channels and element type as *image*.
    """
    width, height = image.width, image.height
    logger.debug("rotate %dx%d by %.6f rad", width, height, theta)
    dst = allocate_like(image)
    if image.empty:
        return dst

    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    cx = width / 2.0
    cy = height / 2.0

    xo = np.arange(width, dtype=np.float64)[np.newaxis, :]
    yo = np.arange(height, dtype=np.float64)[:, np.newaxis]
    xs = (xo - cx) * cos_t + (yo - cy) * sin_t + cx
    ys = -(xo - cx) * sin_t + (yo - cy) * cos_t + cy

    inside = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
    samples = to_element_type(bilinear_sample(image, xs, ys),
                              image.element_type)
    samples[~inside] = 0
    dst.pixels[...] = samples
    return dst


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.GEOMETRY,
                description='Rotation about the image center')
class Rotate(ImageTransform):
    """Rotation as a configurable transform.

    Parameters
    ----------
    theta : float
        Angle in radians. Default 0.0.
    """

    theta: Annotated[float, Desc('Rotation angle in radians')] = 0.0

    def apply(self, source: Image, **kwargs: Any) -> Image:
        params = self._resolve_params(kwargs)
        return rotate(source, params['theta'])
