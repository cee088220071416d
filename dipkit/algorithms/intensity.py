# -*- coding: utf-8 -*-
"""
Intensity Transforms - Gray-level quantization, inversion and set complement.

Point operations on UINT8 images:

- ``quantize``: reduce to *levels* evenly spaced gray levels, each bin
  represented by its midpoint.
- ``invert_image``: photographic negative, ``max_gray - p``.
- ``set_complement``: ``K - p`` for an arbitrary constant ``K``.

Results are stored as UINT8 with modular wrap-around, so out-of-range
intermediate values wrap rather than saturate.

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
from typing import Annotated, Any

# Third-party
import numpy as np

# dipkit internal
from dipkit.algorithms.base import ImageTransform
from dipkit.algorithms.params import Desc, Range
from dipkit.algorithms.versioning import processor_tags, processor_version
from dipkit.core.image import Image
from dipkit.core.types import ElementType
from dipkit.exceptions import InvalidArgumentError, UnsupportedTypeError
from dipkit.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def _require_uint8(image: Image, operation: str) -> None:
    if image.empty:
        logger.error("%s: input image is empty", operation)
        raise InvalidArgumentError(f"{operation}: input image is empty")
    if image.element_type is not ElementType.UINT8:
        raise UnsupportedTypeError(
            f"{operation} supports UINT8 images only, got "
            f"{image.element_type.name}"
        )


def _wrap_to_image(values: np.ndarray, like: Image) -> Image:
    """Store int values in a new UINT8 image shaped like *like* (mod 256)."""
    result = Image(like.width, like.height, like.channels, ElementType.UINT8)
    result.pixels[...] = values.astype(np.uint8)
    return result


def quantize(image: Image, levels: int) -> Image:
    """Uniformly quantize a UINT8 image to *levels* gray levels.

    With ``step = 256 // levels`` every sample becomes
    ``(p // step) * step + step // 2``.

    Parameters
    ----------
    image : Image
        UINT8 source image, any channel count.
    levels : int
        Number of gray levels in ``[1, 256]``.

    Returns
    -------
    Image
        Quantized UINT8 image.

    Raises
    ------
    InvalidArgumentError
        If *levels* is outside ``[1, 256]`` or the image is empty.
    UnsupportedTypeError
        If the image is not UINT8.
    """
    if not 1 <= levels <= 256:
        raise InvalidArgumentError(
            f"Levels must be between 1 and 256, got {levels}"
        )
    _require_uint8(image, 'quantize')
    logger.info("Quantizing %dx%d image to %d levels",
                image.width, image.height, levels)
    step = 256 // levels
    src = image.pixels.astype(np.int32)
    return _wrap_to_image((src // step) * step + step // 2, image)


def set_complement(image: Image, k: int) -> Image:
    """Complement every sample with respect to *k*: ``k - p`` (mod 256).

    Raises
    ------
    InvalidArgumentError
        If the image is empty.
    UnsupportedTypeError
        If the image is not UINT8.
    """
    _require_uint8(image, 'set_complement')
    logger.info("Applying set complement to %dx%d image with K=%d",
                image.width, image.height, k)
    return _wrap_to_image(k - image.pixels.astype(np.int64), image)


def invert_image(image: Image, max_gray: int = 255) -> Image:
    """Negative of a UINT8 image: ``max_gray - p`` (mod 256).

    Raises
    ------
    InvalidArgumentError
        If the image is empty.
    UnsupportedTypeError
        If the image is not UINT8.
    """
    _require_uint8(image, 'invert_image')
    logger.info("Inverting %dx%d image with max_gray=%d",
                image.width, image.height, max_gray)
    return _wrap_to_image(max_gray - image.pixels.astype(np.int64), image)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.ENHANCE,
                description='Uniform gray-level quantization')
class Quantize(ImageTransform):
    """Gray-level quantization as a configurable transform.

    Parameters
    ----------
    levels : int
        Number of output gray levels, ``1..256``. Default 8.
    """

    levels: Annotated[int, Range(min=1, max=256),
                      Desc('Number of gray levels')] = 8

    def apply(self, source: Image, **kwargs: Any) -> Image:
        params = self._resolve_params(kwargs)
        return quantize(source, params['levels'])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.ENHANCE,
                description='Image negative')
class Invert(ImageTransform):
    """Image negative as a configurable transform.

    Parameters
    ----------
    max_gray : int
        Value subtracted from. Default 255.
    """

    max_gray: Annotated[int, Range(min=0, max=255),
                        Desc('Maximum gray value')] = 255

    def apply(self, source: Image, **kwargs: Any) -> Image:
        params = self._resolve_params(kwargs)
        return invert_image(source, params['max_gray'])
