# -*- coding: utf-8 -*-
"""
Processor Parameters - Constrained keyword parameters for image transforms.

A transform declares each tunable value once, as an ``Annotated`` class
attribute whose metadata carries ``Range``, ``Options`` and ``Desc``
markers. ``ImageProcessor.__init_subclass__`` turns those declarations
into ``ParamSpec`` records, and unless the class writes its own
constructor, into a keyword-only ``__init__`` that validates every value.
The CLI builds its ``--option`` flags from the same records::

    class Quantize(ImageTransform):
        levels: Annotated[int, Range(min=1, max=256), Desc('Gray levels')] = 8

    Quantize(levels=4)     # ok
    Quantize(levels=0)     # InvalidArgumentError
    Quantize(levels=True)  # TypeError

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
2026-03-09
"""

# Standard library
import inspect
from typing import (
    Annotated,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# dipkit internal
from dipkit.exceptions import InvalidArgumentError

Number = Union[int, float]


# =====================================================================
# Markers
# =====================================================================

class ParamMeta:
    """Common base of the markers recognized inside ``Annotated``."""


class Range(ParamMeta):
    """Numeric bounds for a parameter.

    Parameters
    ----------
    min : int or float, optional
        Lowest accepted value.
    max : int or float, optional
        Highest accepted value.
    exclusive_min : bool
        If True, *min* itself is rejected. Zoom scales use this to demand
        a strictly positive factor.
    """

    __slots__ = ('min', 'max', 'exclusive_min')

    def __init__(
        self,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
        exclusive_min: bool = False,
    ) -> None:
        self.min = min
        self.max = max
        self.exclusive_min = exclusive_min

    def __repr__(self) -> str:
        fields = [f"{key}={getattr(self, key)!r}" for key in ('min', 'max')
                  if getattr(self, key) is not None]
        if self.exclusive_min:
            fields.append("exclusive_min=True")
        return f"Range({', '.join(fields)})"


class Options(ParamMeta):
    """Closed set of accepted values, e.g. ``Options('n4', 'n8', 'm')``."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise InvalidArgumentError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """One-line help text for a parameter."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

_MISSING = object()


class ParamSpec:
    """One declared parameter of a processor class.

    Attributes
    ----------
    name : str
        Keyword accepted by the constructor and by ``apply`` overrides.
    param_type : type
        Declared type. The CLI also uses it to convert option strings.
    default : Any
        Class-level default; ``None`` when the parameter is required.
    description : str
        Text from ``Desc``, or ``''``.
    min_value, max_value : int, float, or None
        Bounds from ``Range``.
    exclusive_min : bool
        True when *min_value* itself is out of range.
    choices : tuple or None
        Values from ``Options``.
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'exclusive_min', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str,
        min_value: Optional[Number],
        max_value: Optional[Number],
        choices: Optional[Tuple],
        exclusive_min: bool = False,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.exclusive_min = exclusive_min
        self.choices = choices

    @property
    def required(self) -> bool:
        return not self._has_default

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type, bounds and choices.

        A ``float`` parameter also takes ``int``; numeric parameters
        never take ``bool``.

        Raises
        ------
        TypeError
            On a type mismatch.
        InvalidArgumentError
            When the value falls outside the bounds or choices.
        """
        self._check_type(value)
        self._check_bounds(value)
        if self.choices is not None and value not in self.choices:
            raise InvalidArgumentError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def _check_type(self, value: Any) -> None:
        numeric = self.param_type in (int, float)
        if numeric and isinstance(value, bool):
            got = 'bool'
        elif self.param_type is float:
            ok = isinstance(value, (int, float))
            got = None if ok else type(value).__name__
        elif self.param_type is object or isinstance(value, self.param_type):
            got = None
        else:
            got = type(value).__name__
        if got is not None:
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {got}"
            )

    def _check_bounds(self, value: Any) -> None:
        low, high = self.min_value, self.max_value
        if low is not None and self.exclusive_min and value <= low:
            raise InvalidArgumentError(
                f"Parameter '{self.name}' value {value!r} "
                f"must be greater than {low!r}"
            )
        if low is not None and value < low:
            raise InvalidArgumentError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {low!r}"
            )
        if high is not None and value > high:
            raise InvalidArgumentError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {high!r}"
            )

    def __repr__(self) -> str:
        fields = [
            f"name={self.name!r}",
            f"param_type={self.param_type.__name__}",
            f"required={self.required!r}",
        ]
        if not self.required:
            fields.append(f"default={self.default!r}")
        for key in ('min_value', 'max_value', 'choices'):
            if getattr(self, key) is not None:
                fields.append(f"{key}={getattr(self, key)!r}")
        return f"ParamSpec({', '.join(fields)})"


# =====================================================================
# Collection from class annotations
# =====================================================================

def _declared_names(cls: type, hints: Dict[str, Any]) -> List[str]:
    # Base classes first; each class in its own declaration order
    names: List[str] = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in names:
                names.append(name)
    return names


def _spec_from_hint(cls: type, name: str, hint: Any) -> Optional[ParamSpec]:
    if get_origin(hint) is not Annotated:
        return None
    markers = {type(m): m for m in hint.__metadata__ if isinstance(m, ParamMeta)}
    if not markers:
        return None

    bounds = markers.get(Range)
    options = markers.get(Options)
    desc = markers.get(Desc)
    if bounds is not None and options is not None:
        raise TypeError(
            f"Parameter '{name}' on {cls.__qualname__}: "
            f"Range and Options are mutually exclusive."
        )

    default = getattr(cls, name, _MISSING)
    return ParamSpec(
        name=name,
        param_type=hint.__args__[0],
        default=None if default is _MISSING else default,
        has_default=default is not _MISSING,
        description=desc.text if desc is not None else '',
        min_value=bounds.min if bounds is not None else None,
        max_value=bounds.max if bounds is not None else None,
        choices=options.choices if options is not None else None,
        exclusive_min=bounds.exclusive_min if bounds is not None else False,
    )


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build the ``ParamSpec`` tuple for every marked attribute of *cls*.

    Attributes without a ``ParamMeta`` marker are ignored. Inherited
    parameters come before the ones *cls* declares itself.

    Raises
    ------
    TypeError
        If one attribute carries both ``Range`` and ``Options``.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except NameError:
        # Unresolvable forward reference; treat the class as parameterless
        return ()

    specs = (_spec_from_hint(cls, name, hints[name])
             for name in _declared_names(cls, hints))
    return tuple(spec for spec in specs if spec is not None)


# =====================================================================
# Generated constructor
# =====================================================================

def _make_init(param_specs: Tuple[ParamSpec, ...]) -> Callable[..., None]:
    """Return a keyword-only ``__init__`` that validates and stores each
    parameter, falling back to the class default."""
    known = {spec.name for spec in param_specs}

    def __init__(self, **kwargs):
        unexpected = sorted(set(kwargs) - known)
        for spec in param_specs:
            value = kwargs.get(spec.name, _MISSING)
            if value is _MISSING:
                if spec.required:
                    raise TypeError(
                        f"{type(self).__name__}() missing required "
                        f"keyword argument: '{spec.name}'"
                    )
                value = spec.default
            spec.validate(value)
            object.__setattr__(self, spec.name, value)
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(unexpected)}"
            )

    keyword = inspect.Parameter.KEYWORD_ONLY
    __init__.__signature__ = inspect.Signature(
        [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        + [inspect.Parameter(spec.name, keyword,
                             default=(inspect.Parameter.empty if spec.required
                                      else spec.default))
           for spec in param_specs]
    )
    __init__.__qualname__ = '__init__'
    return __init__
