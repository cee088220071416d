# -*- coding: utf-8 -*-
"""
Tunable Parameter Tests.

Tests for the typing.Annotated-based parameter system: constraint markers
(Range, Options, Desc), ParamSpec validation, annotation collection,
auto-generated __init__ and _resolve_params runtime resolution.

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

import inspect
from typing import Annotated

import pytest

from dipkit.algorithms.base import ImageTransform
from dipkit.algorithms.params import (
    Desc,
    Options,
    ParamMeta,
    ParamSpec,
    Range,
    collect_param_specs,
)
from dipkit.algorithms.versioning import processor_version
from dipkit.exceptions import InvalidArgumentError


# ---------------------------------------------------------------------------
# Constraint markers
# ---------------------------------------------------------------------------

class TestMarkers:

    def test_range_defaults(self):
        r = Range()
        assert r.min is None
        assert r.max is None
        assert r.exclusive_min is False

    def test_range_repr(self):
        assert 'exclusive_min=True' in repr(Range(min=0, exclusive_min=True))
        assert 'min=0' in repr(Range(min=0, max=1))
        assert repr(Range(min=0, max=1)) == 'Range(min=0, max=1)'
        assert repr(Range(max=5)) == 'Range(max=5)'

    def test_options(self):
        assert Options('a', 'b').choices == ('a', 'b')

    def test_options_empty_raises(self):
        with pytest.raises(InvalidArgumentError, match="at least one"):
            Options()

    def test_options_empty_is_value_error(self):
        with pytest.raises(ValueError):
            Options()

    def test_all_are_param_meta(self):
        for meta in (Range(), Options('x'), Desc('x')):
            assert isinstance(meta, ParamMeta)


# ---------------------------------------------------------------------------
# ParamSpec validation
# ---------------------------------------------------------------------------

class TestParamSpecValidate:

    def _spec(self, param_type=float, min_value=None, max_value=None,
              choices=None, exclusive_min=False):
        return ParamSpec('p', param_type, None, True, '', min_value,
                         max_value, choices, exclusive_min)

    def test_int_accepted_as_float(self):
        self._spec(float).validate(3)

    def test_bool_rejected_for_numbers(self):
        with pytest.raises(TypeError, match="bool"):
            self._spec(float).validate(True)
        with pytest.raises(TypeError, match="bool"):
            self._spec(int).validate(False)

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            self._spec(int).validate(2.5)

    def test_inclusive_bounds(self):
        spec = self._spec(int, min_value=1, max_value=3)
        spec.validate(1)
        spec.validate(3)
        with pytest.raises(InvalidArgumentError, match="below minimum"):
            spec.validate(0)
        with pytest.raises(InvalidArgumentError, match="above maximum"):
            spec.validate(4)

    def test_exclusive_min(self):
        spec = self._spec(float, min_value=0.0, exclusive_min=True)
        spec.validate(1e-9)
        with pytest.raises(InvalidArgumentError, match="greater than"):
            spec.validate(0.0)

    def test_choices(self):
        spec = self._spec(str, choices=('n4', 'n8'))
        spec.validate('n8')
        with pytest.raises(InvalidArgumentError, match="allowed choices"):
            spec.validate('m')

    def test_repr(self):
        text = repr(self._spec(int, min_value=1))
        assert "name='p'" in text
        assert 'min_value=1' in text


# ---------------------------------------------------------------------------
# Annotation collection
# ---------------------------------------------------------------------------

class TestCollectParamSpecs:

    def test_plain_annotations_ignored(self):
        class C:
            x: int = 1
        assert collect_param_specs(C) == ()

    def test_fields_collected_in_order(self):
        class C:
            a: Annotated[int, Range(min=0), Desc('first')] = 1
            b: Annotated[str, Options('x', 'y')] = 'x'
        specs = collect_param_specs(C)
        assert [s.name for s in specs] == ['a', 'b']
        assert specs[0].description == 'first'
        assert specs[0].min_value == 0
        assert specs[1].choices == ('x', 'y')

    def test_required_without_default(self):
        class C:
            a: Annotated[float, Desc('needed')]
        assert collect_param_specs(C)[0].required

    def test_range_and_options_exclusive(self):
        with pytest.raises(TypeError, match="mutually exclusive"):
            class C:
                a: Annotated[int, Range(min=0), Options(1, 2)] = 1
            collect_param_specs(C)

    def test_inheritance(self):
        class Parent:
            a: Annotated[int, Desc('a')] = 1

        class Child(Parent):
            b: Annotated[int, Desc('b')] = 2
        assert [s.name for s in collect_param_specs(Child)] == ['a', 'b']


# ---------------------------------------------------------------------------
# Generated __init__ and runtime resolution
# ---------------------------------------------------------------------------

@processor_version('1.0.0')
class _Scaled(ImageTransform):
    factor: Annotated[float, Range(min=0.0, max=10.0), Desc('Factor')] = 1.5
    mode: Annotated[str, Options('fast', 'exact')] = 'fast'

    def apply(self, source, **kwargs):
        return source


class TestGeneratedInit:

    def test_defaults(self):
        p = _Scaled()
        assert p.factor == 1.5
        assert p.mode == 'fast'

    def test_custom_values(self):
        p = _Scaled(factor=2, mode='exact')
        assert p.get_params() == {'factor': 2, 'mode': 'exact'}

    def test_validation_in_init(self):
        with pytest.raises(InvalidArgumentError):
            _Scaled(factor=11.0)
        with pytest.raises(InvalidArgumentError):
            _Scaled(mode='slow')

    def test_unexpected_kwargs(self):
        with pytest.raises(TypeError, match="unexpected"):
            _Scaled(gain=2.0)

    def test_required_missing(self):
        @processor_version('1.0.0')
        class _Needs(ImageTransform):
            level: Annotated[int, Desc('Level')]

            def apply(self, source, **kwargs):
                return source

        with pytest.raises(TypeError, match="missing required"):
            _Needs()
        assert _Needs(level=3).level == 3
        level = inspect.signature(_Needs.__init__).parameters['level']
        assert level.default is inspect.Parameter.empty

    def test_signature_introspectable(self):
        sig = inspect.signature(_Scaled.__init__)
        assert sig.parameters['factor'].default == 1.5
        assert sig.parameters['mode'].kind is inspect.Parameter.KEYWORD_ONLY

    def test_custom_init_not_replaced(self):
        @processor_version('1.0.0')
        class _Custom(ImageTransform):
            gain: Annotated[float, Desc('Gain')] = 1.0

            def __init__(self, gain_db):
                self.gain = 10 ** (gain_db / 20)

            def apply(self, source, **kwargs):
                return source

        assert _Custom(20).gain == pytest.approx(10.0)


class TestResolveParams:

    def test_instance_values(self):
        assert _Scaled(factor=3.0)._resolve_params({}) == {
            'factor': 3.0, 'mode': 'fast'}

    def test_kwargs_override(self):
        resolved = _Scaled()._resolve_params({'mode': 'exact', 'other': 1})
        assert resolved == {'factor': 1.5, 'mode': 'exact'}

    def test_override_validated(self):
        with pytest.raises(InvalidArgumentError):
            _Scaled()._resolve_params({'factor': -1.0})
