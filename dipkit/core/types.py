# -*- coding: utf-8 -*-
"""
Core Types - Element type tag and 2D geometry value types.

Defines the closed ``ElementType`` enumeration that tags every buffer
with its numeric representation, and the ``Size``, ``Point`` and
``Rect`` named tuples used to describe shapes, addresses and regions.
All geometry types are plain immutable values with no ownership
implications.

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

# Standard library
from enum import Enum
from typing import NamedTuple, Optional, Union

# Third-party
import numpy as np

# dipkit internal
from dipkit.exceptions import UnsupportedTypeError

Number = Union[int, float]


class ElementType(Enum):
    """Numeric representation of a buffer element.

    The set is closed: every type-sensitive operation dispatches over
    these six members and rejects the ones it does not implement.
    """

    UINT8 = "uint8"
    INT8 = "int8"
    UINT16 = "uint16"
    INT16 = "int16"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> np.dtype:
        """NumPy dtype for this element type."""
        return np.dtype(self.value)

    @property
    def itemsize(self) -> int:
        """Width of one element in bytes."""
        return self.dtype.itemsize

    @property
    def is_integer(self) -> bool:
        """Whether this is one of the integer element types."""
        return np.issubdtype(self.dtype, np.integer)

    @property
    def display_name(self) -> str:
        """Upper-case name used in logs and ``repr`` output."""
        return self.name

    @classmethod
    def from_dtype(cls, dtype: Union[np.dtype, type, str]) -> 'ElementType':
        """Look up the element type matching a NumPy dtype.

        Parameters
        ----------
        dtype : np.dtype, type or str
            Anything accepted by ``np.dtype``.

        Returns
        -------
        ElementType

        Raises
        ------
        UnsupportedTypeError
            If the dtype has no element type counterpart (e.g. int32,
            complex64, bool).
        """
        name = np.dtype(dtype).name
        for member in cls:
            if member.value == name:
                return member
        raise UnsupportedTypeError(
            f"dtype {name!r} has no matching ElementType; supported: "
            f"{[m.value for m in cls]}"
        )


class Size(NamedTuple):
    """Width and height of a 2D extent."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Point(NamedTuple):
    """2D coordinate. Integer or floating-point components."""

    x: Number
    y: Number

    def __add__(self, other: 'Point') -> 'Point':  # type: ignore[override]
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other[0], self.y - other[1])

    def __mul__(self, scale: Number) -> 'Point':  # type: ignore[override]
        return Point(self.x * scale, self.y * scale)

    def __truediv__(self, scale: Number) -> 'Point':
        return Point(self.x / scale, self.y / scale)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Rect(NamedTuple):
    """Axis-aligned rectangle given by its top-left corner and size.

    The rectangle covers columns ``[x, x + width)`` and rows
    ``[y, y + height)``.

    Attributes
    ----------
    x : int
        Left column (inclusive).
    y : int
        Top row (inclusive).
    width : int
        Number of columns.
    height : int
        Number of rows.
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_points(cls, tl: Point, br: Point) -> 'Rect':
        """Build a rectangle from its top-left and exclusive bottom-right."""
        return cls(tl[0], tl[1], br[0] - tl[0], br[1] - tl[1])

    @property
    def tl(self) -> Point:
        return Point(self.x, self.y)

    @property
    def tr(self) -> Point:
        return Point(self.x + self.width, self.y)

    @property
    def bl(self) -> Point:
        return Point(self.x, self.y + self.height)

    @property
    def br(self) -> Point:
        return Point(self.x + self.width, self.y + self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        """Whether *point* lies inside the half-open rectangle."""
        px, py = point[0], point[1]
        return (self.x <= px < self.x + self.width
                and self.y <= py < self.y + self.height)

    def contains_rect(self, other: 'Rect') -> bool:
        """Whether *other* lies entirely inside this rectangle."""
        return (other.x >= self.x and other.y >= self.y
                and other.x + other.width <= self.x + self.width
                and other.y + other.height <= self.y + self.height)

    def __and__(self, other: 'Rect') -> 'Rect':
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.x + self.width, other.x + other.width)
        y2 = min(self.y + self.height, other.y + other.height)
        if x2 <= x1 or y2 <= y1:
            return Rect(0, 0, 0, 0)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def __or__(self, other: 'Rect') -> 'Rect':
        if self.empty:
            return other
        if other.empty:
            return self
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.x + self.width, other.x + other.width)
        y2 = max(self.y + self.height, other.y + other.height)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def inflate(self, dx: int, dy: Optional[int] = None) -> 'Rect':
        """Grow the rectangle by *dx* / *dy* on every side."""
        if dy is None:
            dy = dx
        return Rect(self.x - dx, self.y - dy,
                    self.width + 2 * dx, self.height + 2 * dy)

    def translate(self, dx: int, dy: int) -> 'Rect':
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def __str__(self) -> str:
        return f"Rect({self.x}, {self.y}, {self.width}, {self.height})"
