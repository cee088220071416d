# -*- coding: utf-8 -*-
"""
IO Module - Reading and writing images.

Readers and writers convert between files and ``Image`` objects with
the row-major, channel-interleaved layout. Encoding and decoding is
delegated to Pillow.

Dependencies
------------
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
2026-01-30

Modified
--------
2026-03-02
"""

from dipkit.IO.base import ImageReader, ImageWriter
from dipkit.IO.raster import (
    RasterReader,
    RasterWriter,
    get_image_info,
    is_supported_format,
    load_image,
    save_image,
)

__all__ = [
    'ImageReader',
    'ImageWriter',
    'RasterReader',
    'RasterWriter',
    'load_image',
    'save_image',
    'is_supported_format',
    'get_image_info',
]
