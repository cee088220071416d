# -*- coding: utf-8 -*-
"""
Downsample - Integer-factor reduction by block averaging.

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
2026-02-11

Modified
--------
2026-03-02
"""

# Standard library
import logging
from typing import Annotated, Any

# Third-party
import numpy as np

# dipkit internal
from dipkit.algorithms.base import ImageTransform
from dipkit.algorithms.params import Desc, Range
from dipkit.algorithms.versioning import processor_tags, processor_version
from dipkit.core.image import Image, allocate_like
from dipkit.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def downsample(image: Image, factor: int) -> Image:
    """Reduce an image by averaging ``factor x factor`` blocks.

    Parameters
    ----------
    image : Image
        Source image, any element type.
    factor : int
        Reduction factor. ``factor <= 1`` returns a copy.

    Returns
    -------
    Image
        ``(W // factor) x (H // factor)`` image. Integer element types
        hold the block mean truncated toward zero; float types hold the
        mean.
    """
    if factor <= 1:
        return image.clone()

    new_w = image.width // factor
    new_h = image.height // factor
    logger.debug("downsample %dx%d by %d -> %dx%d",
                 image.width, image.height, factor, new_w, new_h)
    dst = allocate_like(image, new_w, new_h)
    if dst.empty:
        return dst

    block = image.pixels[:new_h * factor, :new_w * factor]
    block = block.reshape(new_h, factor, new_w, factor, image.channels)
    if image.element_type.is_integer:
        sums = block.astype(np.int64).sum(axis=(1, 3))
        # Integer division truncating toward zero, also for negative sums
        means = np.sign(sums) * (np.abs(sums) // (factor * factor))
        dst.pixels[...] = means.astype(image.element_type.dtype)
    else:
        dst.pixels[...] = block.astype(np.float64).mean(axis=(1, 3)).astype(
            image.element_type.dtype)
    return dst


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.SAMPLING,
                description='Block-average downsampling')
class Downsample(ImageTransform):
    """Block-average downsampling as a configurable transform.

    Parameters
    ----------
    factor : int
        Reduction factor. Default 2.
    """

    factor: Annotated[int, Range(min=1), Desc('Reduction factor')] = 2

    def apply(self, source: Image, **kwargs: Any) -> Image:
        params = self._resolve_params(kwargs)
        return downsample(source, params['factor'])
