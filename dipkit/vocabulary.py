# -*- coding: utf-8 -*-
"""
dipkit Vocabulary - Shared enumerations for processor tagging.

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
2026-02-10

Modified
--------
2026-03-02
"""

from enum import Enum


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    Each value corresponds to a functional grouping of image processing
    operations.
    """

    GEOMETRY = "geometry"
    SAMPLING = "sampling"
    ENHANCE = "enhance"
    MATH = "math"
    BINARY = "binary"
    ANALYZE = "analyze"
