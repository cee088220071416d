# -*- coding: utf-8 -*-
"""
dipkit - Digital Image Processing toolkit.

A typed, strided pixel buffer (``Matrix`` / ``Image``) and classical
algorithms on it: nearest-neighbor and bilinear zoom, rotation by
inverse mapping, quantization, inversion, logical operations,
downsampling, connectivity analysis and least-squares fitting.

Dependencies
------------
numpy
scipy
Pillow

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
2026-02-06

Modified
--------
2026-03-02
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from dipkit.exceptions import (
    DipkitError,
    InvalidArgumentError,
    OutOfRangeError,
    ChannelOutOfRangeError,
    InvalidRegionError,
    UnsupportedTypeError,
    UnsupportedConversionError,
    ChannelMismatchError,
    ProcessorError,
)
from dipkit.vocabulary import ProcessorCategory
from dipkit.core import (
    ElementType,
    Image,
    Matrix,
    Point,
    Rect,
    Scalar,
    Size,
    Vec,
)

__all__ = [
    'DipkitError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'ChannelOutOfRangeError',
    'InvalidRegionError',
    'UnsupportedTypeError',
    'UnsupportedConversionError',
    'ChannelMismatchError',
    'ProcessorError',
    'ProcessorCategory',
    'ElementType',
    'Image',
    'Matrix',
    'Point',
    'Rect',
    'Scalar',
    'Size',
    'Vec',
]
