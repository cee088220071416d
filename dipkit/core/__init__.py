# -*- coding: utf-8 -*-
"""
Core Module - Typed pixel buffers and the value types around them.

Sub-modules
-----------
types.py
    ``ElementType`` tag and ``Size`` / ``Point`` / ``Rect`` geometry.
vector.py
    ``Vec`` and ``Scalar`` value types.
matrix.py
    ``Matrix`` typed strided buffer and matrix arithmetic helpers.
image.py
    ``Image`` channel-interleaved buffer.
image_ops.py
    Solid-color constructors, resize, flips and quarter-turn rotation.

Usage
-----
    >>> from dipkit.core import Image, ElementType, Rect
    >>> img = Image(64, 48, channels=3, element_type=ElementType.UINT8)
    >>> img.zeros()
    >>> patch = img.sub_image(Rect(8, 8, 16, 16))

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

from dipkit.core.types import ElementType, Point, Rect, Size
from dipkit.core.vector import Scalar, Vec
from dipkit.core.matrix import Matrix, add, eye, subtract, transpose, zeros
from dipkit.core.image import Image
from dipkit.core.image_ops import (
    create_color_image,
    create_gray_image,
    flip_horizontal,
    flip_vertical,
    resize,
    rotate90,
)

__all__ = [
    'ElementType',
    'Point',
    'Rect',
    'Size',
    'Scalar',
    'Vec',
    'Matrix',
    'Image',
    'zeros',
    'eye',
    'transpose',
    'add',
    'subtract',
    'create_color_image',
    'create_gray_image',
    'resize',
    'flip_horizontal',
    'flip_vertical',
    'rotate90',
]
