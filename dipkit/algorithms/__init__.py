# -*- coding: utf-8 -*-
"""
Algorithms Module - Resampling, point operations and analysis on Images.

Every image-to-image algorithm is available both as a plain function and
as a configurable ``ImageTransform`` with declared tunable parameters.
All algorithms allocate and return a new image; sources are never
modified.

Sub-modules
-----------
interpolation.py
    ``bilinear_interp`` primitive and its vectorized form.
zoom.py
    ``nearest_neighbor_zoom``, ``bilinear_zoom`` and their transforms.
rotate.py
    ``rotate`` about the image center and ``Rotate``.
intensity.py
    ``quantize``, ``invert_image``, ``set_complement``; ``Quantize``,
    ``Invert``.
logical.py
    ``logical_and``, ``logical_or``, ``logical_xor`` on binary images.
downsample.py
    Block-average ``downsample`` and ``Downsample``.
connectivity.py
    ``NeighborhoodType``, ``get_neighbors``, ``is_connected``,
    ``label_components``.
least_squares.py
    ``linear_fit``, ``polynomial_fit``, ``calculate_r_squared``,
    ``predict``.
base.py, params.py, versioning.py, pipeline.py
    Processor framework: ``ImageProcessor``, ``ImageTransform``,
    ``Range`` / ``Options`` / ``Desc``, ``@processor_version``,
    ``@processor_tags``, ``Pipeline``.

Usage
-----
    >>> from dipkit.algorithms import bilinear_zoom, Pipeline, Rotate, Quantize
    >>> big = bilinear_zoom(image, 2.0)
    >>> pipe = Pipeline([Rotate(theta=0.25), Quantize(levels=4)])
    >>> out = pipe.apply(image)

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

from dipkit.algorithms.params import Desc, Options, ParamSpec, Range
from dipkit.algorithms.base import ImageProcessor, ImageTransform
from dipkit.algorithms.versioning import processor_tags, processor_version
from dipkit.algorithms.pipeline import Pipeline
from dipkit.algorithms.interpolation import bilinear_interp, bilinear_sample
from dipkit.algorithms.zoom import (
    BilinearZoom,
    NearestNeighborZoom,
    bilinear_zoom,
    nearest_neighbor_zoom,
)
from dipkit.algorithms.rotate import Rotate, rotate
from dipkit.algorithms.intensity import (
    Invert,
    Quantize,
    invert_image,
    quantize,
    set_complement,
)
from dipkit.algorithms.logical import logical_and, logical_or, logical_xor
from dipkit.algorithms.downsample import Downsample, downsample
from dipkit.algorithms.connectivity import (
    NeighborhoodType,
    get_neighbors,
    is_connected,
    label_components,
)
from dipkit.algorithms.least_squares import (
    LinearFitResult,
    calculate_r_squared,
    linear_fit,
    polynomial_fit,
    predict,
)

__all__ = [
    'Desc',
    'Options',
    'ParamSpec',
    'Range',
    'ImageProcessor',
    'ImageTransform',
    'processor_tags',
    'processor_version',
    'Pipeline',
    'bilinear_interp',
    'bilinear_sample',
    'nearest_neighbor_zoom',
    'bilinear_zoom',
    'NearestNeighborZoom',
    'BilinearZoom',
    'rotate',
    'Rotate',
    'quantize',
    'invert_image',
    'set_complement',
    'Quantize',
    'Invert',
    'logical_and',
    'logical_or',
    'logical_xor',
    'downsample',
    'Downsample',
    'NeighborhoodType',
    'get_neighbors',
    'is_connected',
    'label_components',
    'LinearFitResult',
    'linear_fit',
    'polynomial_fit',
    'calculate_r_squared',
    'predict',
]
