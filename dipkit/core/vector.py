# -*- coding: utf-8 -*-
"""
Vector Types - Fixed-arity pixel values and fill constants.

``Vec`` holds 2, 3 or 4 numeric components (a multi-channel pixel, a
direction, a color). ``Scalar`` always holds four floats and is what
fill operations consume; unspecified components are zero.

Both are pure values: freely copyable, compared by content, never
aliased to a buffer.

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
2026-02-06

Modified
--------
2026-03-02
"""

# Standard library
import math
from typing import Iterator, Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

# dipkit internal
from dipkit.core.types import ElementType
from dipkit.exceptions import InvalidArgumentError

Number = Union[int, float]

VEC_ARITIES = (2, 3, 4)


class Vec:
    """Fixed-length numeric tuple with element-wise arithmetic.

    Parameters
    ----------
    *values : int or float
        Two to four components.
    element_type : ElementType, optional
        When given, every component is cast through the element type's
        NumPy dtype (e.g. ``UINT8`` wraps 256 to 0). Arithmetic results
        keep the same element type.

    Raises
    ------
    InvalidArgumentError
        If the number of components is not 2, 3 or 4.

    Examples
    --------
    >>> v = Vec(3, 4)
    >>> v.length()
    5.0
    >>> Vec(255, 0, 0, element_type=ElementType.UINT8) + Vec(1, 0, 0)
    Vec(0, 0, 0, element_type=UINT8)
    """

    __slots__ = ('_values', '_element_type')

    def __init__(
        self,
        *values: Number,
        element_type: Optional[ElementType] = None,
    ) -> None:
        if len(values) not in VEC_ARITIES:
            raise InvalidArgumentError(
                f"Vec requires {VEC_ARITIES} components, got {len(values)}"
            )
        if element_type is not None:
            cast = np.array(values).astype(element_type.dtype)
            values = tuple(v.item() for v in cast)
        self._values: Tuple[Number, ...] = tuple(values)
        self._element_type = element_type

    # -----------------------------------------------------------------
    # Factories
    # -----------------------------------------------------------------
    @classmethod
    def zeros(cls, n: int, element_type: Optional[ElementType] = None) -> 'Vec':
        return cls.fill(n, 0, element_type)

    @classmethod
    def ones(cls, n: int, element_type: Optional[ElementType] = None) -> 'Vec':
        return cls.fill(n, 1, element_type)

    @classmethod
    def fill(
        cls,
        n: int,
        value: Number,
        element_type: Optional[ElementType] = None,
    ) -> 'Vec':
        """Vector of *n* copies of *value*."""
        return cls(*([value] * n), element_type=element_type)

    @classmethod
    def unit(cls, n: int, axis: int) -> 'Vec':
        """Unit vector of length *n* along *axis* (0 = x, 1 = y, 2 = z)."""
        values = [0] * n
        if axis < n:
            values[axis] = 1
        return cls(*values)

    # -----------------------------------------------------------------
    # Sequence protocol
    # -----------------------------------------------------------------
    @property
    def element_type(self) -> Optional[ElementType]:
        return self._element_type

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Number:
        return self._values[index]

    def __iter__(self) -> Iterator[Number]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vec):
            return self._values == other._values
        if isinstance(other, (tuple, list)):
            return self._values == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        body = ', '.join(repr(v) for v in self._values)
        if self._element_type is not None:
            return f"Vec({body}, element_type={self._element_type.name})"
        return f"Vec({body})"

    def to_tuple(self) -> Tuple[Number, ...]:
        return self._values

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------
    def _same(self, values: Sequence[Number]) -> 'Vec':
        return Vec(*values, element_type=self._element_type)

    def _check_arity(self, other: 'Vec') -> None:
        if len(other) != len(self):
            raise InvalidArgumentError(
                f"Vec arity mismatch: {len(self)} vs {len(other)}"
            )

    def __add__(self, other: 'Vec') -> 'Vec':
        self._check_arity(other)
        return self._same([a + b for a, b in zip(self, other)])

    def __sub__(self, other: 'Vec') -> 'Vec':
        self._check_arity(other)
        return self._same([a - b for a, b in zip(self, other)])

    def __mul__(self, scale: Number) -> 'Vec':
        return self._same([a * scale for a in self])

    __rmul__ = __mul__

    def __truediv__(self, scale: Number) -> 'Vec':
        return self._same([a / scale for a in self])

    def __neg__(self) -> 'Vec':
        return self._same([-a for a in self])

    def mul(self, other: 'Vec') -> 'Vec':
        """Element-wise product."""
        self._check_arity(other)
        return self._same([a * b for a, b in zip(self, other)])

    def div(self, other: 'Vec') -> 'Vec':
        """Element-wise quotient."""
        self._check_arity(other)
        return self._same([a / b for a, b in zip(self, other)])

    def dot(self, other: 'Vec') -> Number:
        self._check_arity(other)
        return sum(a * b for a, b in zip(self, other))

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def length_squared(self) -> Number:
        return self.dot(self)

    def normalized(self) -> 'Vec':
        """Unit-length copy; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return Vec(*[a / length for a in self])
        return Vec.zeros(len(self))

    def norm(self, p: int = 2) -> float:
        """L1 (``p=1``), L2 (``p=2``) or L-infinity (``p=0``) norm."""
        if p == 1:
            return float(sum(abs(a) for a in self))
        if p == 2:
            return self.length()
        if p == 0:
            return float(max(abs(a) for a in self))
        raise InvalidArgumentError(f"norm order must be 0, 1 or 2, got {p}")

    def min(self) -> Number:
        return min(self._values)

    def max(self) -> Number:
        return max(self._values)

    def argmin(self) -> int:
        return self._values.index(self.min())

    def argmax(self) -> int:
        return self._values.index(self.max())

    def subvec(self, length: int, start: int = 0) -> 'Vec':
        """Sub-vector of *length* components starting at *start*.

        Components past the end of this vector are zero.
        """
        values = [0] * length
        for i in range(length):
            if start + i < len(self):
                values[i] = self._values[start + i]
        return self._same(values)

    def astype(self, element_type: ElementType) -> 'Vec':
        return Vec(*self._values, element_type=element_type)


class Scalar:
    """Four-component float value used as a fill constant.

    Parameters
    ----------
    *values : int or float
        Zero to four components; missing components are ``0.0``.

    Raises
    ------
    InvalidArgumentError
        If more than four components are given.
    """

    __slots__ = ('_values',)

    def __init__(self, *values: Number) -> None:
        if len(values) > 4:
            raise InvalidArgumentError(
                f"Scalar holds at most 4 components, got {len(values)}"
            )
        padded = [float(v) for v in values] + [0.0] * (4 - len(values))
        self._values: Tuple[float, ...] = tuple(padded)

    @classmethod
    def from_vec(cls, vec: Vec) -> 'Scalar':
        return cls(*vec)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __len__(self) -> int:
        return 4

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return all(abs(a - b) <= 1e-10 for a, b in zip(self, other))

    # Tolerant equality cannot be hashed consistently.
    __hash__ = None

    def __add__(self, other: 'Scalar') -> 'Scalar':
        return Scalar(*[a + b for a, b in zip(self, other)])

    def __sub__(self, other: 'Scalar') -> 'Scalar':
        return Scalar(*[a - b for a, b in zip(self, other)])

    def __mul__(self, scale: Number) -> 'Scalar':
        return Scalar(*[a * scale for a in self])

    def to_vec(self, n: int) -> Vec:
        """First *n* components as a ``Vec``."""
        return Vec(*self._values[:n])

    def __repr__(self) -> str:
        return f"Scalar({', '.join(repr(v) for v in self._values)})"
