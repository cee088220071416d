# -*- coding: utf-8 -*-
"""
Processor Framework Tests - Version stamping, capability tags, the
missing-version warning and sequential pipelines.

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
2026-02-10

Modified
--------
2026-03-02
"""

import warnings

import numpy as np
import pytest

from dipkit.algorithms import (
    BilinearZoom,
    Downsample,
    Invert,
    NearestNeighborZoom,
    Pipeline,
    Quantize,
    Rotate,
)
from dipkit.algorithms.base import ImageProcessor, ImageTransform
from dipkit.algorithms.versioning import processor_tags, processor_version
from dipkit.core.image import Image
from dipkit.core.types import Size
from dipkit.exceptions import InvalidArgumentError
from dipkit.vocabulary import ProcessorCategory


def _version_warnings(records):
    return [
        x for x in records
        if issubclass(x.category, UserWarning)
        and 'processor version' in str(x.message).lower()
    ]


class TestProcessorVersion:

    def test_stamps_version(self):
        @processor_version('2.1.0')
        class _Versioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        assert _Versioned.__processor_version__ == '2.1.0'

    def test_returns_same_class(self):
        class _Original(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        assert processor_version('1.0.0')(_Original) is _Original

    def test_builtin_transforms_are_versioned(self):
        for cls in (NearestNeighborZoom, BilinearZoom, Rotate, Quantize,
                    Invert, Downsample, Pipeline):
            assert cls.__processor_version__


class TestMissingVersionWarning:

    def test_warns_once_for_undecorated_class(self):
        class _Unversioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        ImageProcessor._version_warned_classes.discard(_Unversioned)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Unversioned()
            _Unversioned()
            found = _version_warnings(w)
            assert len(found) == 1
            assert '_Unversioned' in str(found[0].message)

    def test_no_warning_for_decorated_class(self):
        @processor_version('1.0.0')
        class _Versioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Versioned()
            assert _version_warnings(w) == []

    def test_abstract_transform_not_instantiable(self):
        with pytest.raises(TypeError):
            ImageTransform()


class TestProcessorTags:

    def test_stamps_tags(self):
        assert Rotate.__processor_tags__['category'] is ProcessorCategory.GEOMETRY
        assert Downsample.__processor_tags__['category'] is \
            ProcessorCategory.SAMPLING
        assert Quantize.__processor_tags__['description']

    def test_rejects_non_category(self):
        with pytest.raises(TypeError, match="ProcessorCategory"):
            processor_tags(category='geometry')


class TestPipeline:

    @pytest.fixture
    def image(self):
        return Image.from_array(np.arange(64, dtype=np.uint8).reshape(8, 8))

    def test_runs_in_order(self, image):
        pipe = Pipeline([NearestNeighborZoom(scale=2.0), Downsample(factor=4)])
        out = pipe.apply(image)
        assert out.size == Size(4, 4)

    def test_matches_manual_chain(self, image):
        pipe = Pipeline([Invert(), Quantize(levels=4)])
        assert pipe(image) == Quantize(levels=4)(Invert()(image))

    def test_kwargs_forwarded(self, image):
        pipe = Pipeline([NearestNeighborZoom(), BilinearZoom()])
        # every step picks up scale=1.0
        assert pipe.apply(image, scale=1.0) == image

    def test_nested(self, image):
        inner = Pipeline([Invert()])
        outer = Pipeline([inner, Invert()])
        assert outer(image) == image

    def test_len_and_repr(self):
        pipe = Pipeline([Rotate(), Invert()])
        assert len(pipe) == 2
        assert repr(pipe) == "Pipeline(['Rotate', 'Invert'])"

    def test_steps_is_copy(self):
        pipe = Pipeline([Rotate()])
        pipe.steps.clear()
        assert len(pipe) == 1

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Pipeline([])

    def test_non_transform_rejected(self):
        with pytest.raises(TypeError, match="Step 1"):
            Pipeline([Rotate(), object()])
