# -*- coding: utf-8 -*-
"""
Matrix - Typed, row-strided 2D pixel buffer.

A ``Matrix`` exclusively owns one contiguous byte region of
``rows * step`` bytes and interprets it under a single ``ElementType``.
Rows may carry trailing padding (``step`` larger than
``cols * itemsize``); padding bytes never take part in equality or
copies.

Two accessor tiers are provided:

- **Checked**: ``at`` / ``set`` validate the row and column and, when an
  element type is requested explicitly, the declared type tag.
- **Unchecked**: ``ptr`` returns a raw typed view of one row's bytes in
  whatever element type the caller asks for, and ``array`` exposes the
  logical content as a ``(rows, cols)`` NumPy view. Algorithms use these
  in their inner loops; callers are responsible for matching the
  declared element type.

Sub-regions are materialized as independent, tightly packed copies
(``extract_subregion``); they never alias the parent's storage.

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
import copy
import logging
from typing import Any, Optional, Tuple, Union

# Third-party
import numpy as np

# dipkit internal
from dipkit.core.types import ElementType, Rect, Size
from dipkit.core.vector import Scalar, Vec
from dipkit.exceptions import (
    InvalidArgumentError,
    InvalidRegionError,
    OutOfRangeError,
    UnsupportedConversionError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)

FillValue = Union[Scalar, Vec, int, float]

# Element types each type-sensitive operation implements.
FILL_TYPES = frozenset({
    ElementType.UINT8, ElementType.FLOAT32, ElementType.FLOAT64,
})
CONVERT_TARGETS = frozenset({
    ElementType.UINT8, ElementType.INT16,
    ElementType.FLOAT32, ElementType.FLOAT64,
})
ARITHMETIC_TYPES = frozenset({ElementType.FLOAT32, ElementType.FLOAT64})


def _cast_value(value: Any, element_type: ElementType) -> np.ndarray:
    """Cast a Python number with C-style semantics (wrap / truncate)."""
    return np.asarray(value).astype(element_type.dtype)


class Matrix:
    """Typed, row-strided 2D buffer.

    Parameters
    ----------
    rows : int
        Number of rows. ``0`` yields the empty buffer.
    cols : int
        Number of columns (elements per row). ``0`` yields the empty
        buffer.
    element_type : ElementType
        Numeric interpretation of the bytes. Default ``UINT8``.
    step : int, optional
        Bytes per row. Defaults to ``cols * itemsize`` (packed). Must be
        a whole multiple of the element width and at least the packed
        row size.

    Raises
    ------
    InvalidArgumentError
        If *rows* or *cols* is negative, or *step* is invalid.
    UnsupportedTypeError
        If *element_type* is not an ``ElementType``.

    Notes
    -----
    Freshly allocated memory is not initialized. Call ``zeros()`` or
    ``fill()`` when defined contents are needed.

    Examples
    --------
    >>> m = Matrix(2, 3, ElementType.FLOAT32)
    >>> m.zeros()
    >>> m.set(1, 2, 4.5)
    >>> m.at(1, 2)
    4.5
    """

    def __init__(
        self,
        rows: int = 0,
        cols: int = 0,
        element_type: ElementType = ElementType.UINT8,
        step: Optional[int] = None,
    ) -> None:
        self._allocate(rows, cols, element_type, step)

    def _allocate(
        self,
        rows: int,
        cols: int,
        element_type: ElementType,
        step: Optional[int],
    ) -> None:
        if not isinstance(element_type, ElementType):
            raise UnsupportedTypeError(
                f"element_type must be an ElementType, got {element_type!r}"
            )
        if rows < 0 or cols < 0:
            raise InvalidArgumentError(
                f"Matrix dimensions must be non-negative, got "
                f"rows={rows}, cols={cols}"
            )
        self._element_type = element_type
        if rows == 0 or cols == 0:
            self._rows = 0
            self._cols = 0
            self._step = 0
            self._data = np.empty(0, dtype=np.uint8)
            return

        itemsize = element_type.itemsize
        packed = cols * itemsize
        if step is None:
            step = packed
        elif step < packed or step % itemsize != 0:
            raise InvalidArgumentError(
                f"step must be a multiple of {itemsize} and >= {packed}, "
                f"got {step}"
            )
        self._rows = int(rows)
        self._cols = int(cols)
        self._step = int(step)
        self._data = np.empty(self._rows * self._step, dtype=np.uint8)

    # -----------------------------------------------------------------
    # Construction helpers
    # -----------------------------------------------------------------
    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Matrix':
        """Copy a 2D NumPy array into a new packed ``Matrix``.

        Parameters
        ----------
        array : np.ndarray
            Shape ``(rows, cols)`` with a dtype matching one of the
            ``ElementType`` members.

        Returns
        -------
        Matrix

        Raises
        ------
        InvalidArgumentError
            If *array* is not 2D.
        UnsupportedTypeError
            If the dtype has no ``ElementType`` counterpart.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise InvalidArgumentError(
                f"Matrix.from_array expects a 2D array, got shape {array.shape}"
            )
        element_type = ElementType.from_dtype(array.dtype)
        result = cls(array.shape[0], array.shape[1], element_type)
        if not result.empty:
            result.array[...] = array
        return result

    def create(
        self,
        rows: int,
        cols: int,
        element_type: ElementType = ElementType.UINT8,
    ) -> None:
        """Replace the owned region with a new packed allocation."""
        self._allocate(rows, cols, element_type, None)

    def release(self) -> None:
        """Drop the owned region; the buffer becomes empty."""
        self._allocate(0, 0, self._element_type, None)

    def clone(self) -> 'Matrix':
        """Deep copy, including row padding."""
        result = copy.copy(self)
        result._data = self._data.copy()
        return result

    # -----------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """``(rows, cols)``."""
        return (self._rows, self._cols)

    @property
    def size(self) -> Size:
        """``Size(width=cols, height=rows)``."""
        return Size(self._cols, self._rows)

    @property
    def element_type(self) -> ElementType:
        return self._element_type

    @property
    def elem_size(self) -> int:
        """Bytes per element."""
        return self._element_type.itemsize

    @property
    def step(self) -> int:
        """Bytes per row, including padding."""
        return self._step

    @property
    def empty(self) -> bool:
        return self._rows == 0 or self._cols == 0

    @property
    def total(self) -> int:
        """Number of logical elements."""
        return self._rows * self._cols

    @property
    def nbytes(self) -> int:
        """Size of the owned byte region."""
        return self._data.nbytes

    # -----------------------------------------------------------------
    # Unchecked tier
    # -----------------------------------------------------------------
    @property
    def array(self) -> np.ndarray:
        """Writable ``(rows, cols)`` view of the logical content.

        The view aliases the owned storage and excludes row padding.
        """
        dtype = self._element_type.dtype
        if self.empty:
            return np.empty((0, 0), dtype=dtype)
        full = self._data.view(dtype).reshape(
            self._rows, self._step // dtype.itemsize
        )
        return full[:, :self._cols]

    def as_array(self) -> np.ndarray:
        """Same as :attr:`array`."""
        return self.array

    def ptr(
        self,
        row: int = 0,
        element_type: Optional[ElementType] = None,
    ) -> np.ndarray:
        """Raw typed view over one row's bytes.

        The element type is not checked against the declared type:
        requesting a different type reinterprets the row's bytes. The
        view covers the whole row, including padding.

        Parameters
        ----------
        row : int
            Row index.
        element_type : ElementType, optional
            Interpretation of the bytes. Defaults to the declared type.

        Raises
        ------
        OutOfRangeError
            If *row* is outside ``[0, rows)``.
        UnsupportedTypeError
            If the row length is not a whole number of elements of the
            requested type.
        """
        if not 0 <= row < self._rows:
            raise OutOfRangeError(
                f"Row index {row} out of range [0, {self._rows})"
            )
        dtype = (element_type or self._element_type).dtype
        start = row * self._step
        try:
            return self._data[start:start + self._step].view(dtype)
        except ValueError as exc:
            raise UnsupportedTypeError(
                f"Row of {self._step} bytes cannot be viewed as {dtype.name}"
            ) from exc

    # -----------------------------------------------------------------
    # Checked tier
    # -----------------------------------------------------------------
    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfRangeError(
                f"Index ({row}, {col}) out of range for "
                f"{self._rows}x{self._cols} matrix"
            )

    def at(
        self,
        row: int,
        col: int,
        element_type: Optional[ElementType] = None,
    ) -> Union[int, float]:
        """Read one element.

        Parameters
        ----------
        row, col : int
            Element address.
        element_type : ElementType, optional
            When given, must equal the declared element type.

        Raises
        ------
        OutOfRangeError
            If the address is outside the buffer.
        UnsupportedTypeError
            If *element_type* does not match the declared type.
        """
        self._check_index(row, col)
        if element_type is not None and element_type is not self._element_type:
            raise UnsupportedTypeError(
                f"Requested {element_type.name} from a "
                f"{self._element_type.name} matrix"
            )
        return self.array[row, col].item()

    def set(self, row: int, col: int, value: Union[int, float]) -> None:
        """Write one element, cast to the declared element type.

        Raises
        ------
        OutOfRangeError
            If the address is outside the buffer.
        """
        self._check_index(row, col)
        self.array[row, col] = _cast_value(value, self._element_type)

    def __getitem__(self, index: Tuple[int, int]) -> Union[int, float]:
        row, col = index
        return self.at(row, col)

    def __setitem__(self, index: Tuple[int, int], value: Union[int, float]) -> None:
        row, col = index
        self.set(row, col, value)

    # -----------------------------------------------------------------
    # Regions
    # -----------------------------------------------------------------
    def contains(self, region: Rect) -> bool:
        """Whether *region* lies entirely inside ``[0, cols) x [0, rows)``."""
        x, y, width, height = region
        return (x >= 0 and y >= 0 and width >= 0 and height >= 0
                and x + width <= self._cols and y + height <= self._rows)

    def extract_subregion(self, region: Rect) -> 'Matrix':
        """Copy a rectangular region into a new, packed ``Matrix``.

        The result never aliases this buffer; writes to either side are
        not visible to the other.

        Parameters
        ----------
        region : Rect
            Region in element coordinates (``x`` = column, ``y`` = row).

        Returns
        -------
        Matrix
            Independent copy. Zero-area regions yield an empty matrix of
            the same element type.

        Raises
        ------
        InvalidRegionError
            If *region* is not fully contained in the buffer.
        """
        region = Rect(*region)
        if not self.contains(region):
            raise InvalidRegionError(
                f"{region} is not contained in {self._cols}x{self._rows} matrix"
            )
        if region.empty:
            return Matrix(0, 0, self._element_type)
        block = self.array[region.y:region.y + region.height,
                           region.x:region.x + region.width]
        return Matrix.from_array(block)

    roi = extract_subregion

    # -----------------------------------------------------------------
    # Type conversion and fill
    # -----------------------------------------------------------------
    def convert_to(self, element_type: ElementType) -> 'Matrix':
        """Numerically cast every element into a new buffer.

        Narrowing casts truncate toward zero and integer overflow wraps,
        following NumPy's C-style ``astype`` rules.

        Raises
        ------
        UnsupportedConversionError
            If *element_type* is not a supported conversion target.
        """
        if element_type is self._element_type:
            return self.clone()
        if element_type not in CONVERT_TARGETS:
            raise UnsupportedConversionError(
                f"Conversion {self._element_type.name} -> "
                f"{element_type.name} is not supported"
            )
        logger.debug("convert_to %s -> %s (%dx%d)", self._element_type.name,
                     element_type.name, self._rows, self._cols)
        result = Matrix(self._rows, self._cols, element_type)
        if not self.empty:
            with np.errstate(invalid='ignore', over='ignore'):
                result.array[...] = self.array.astype(element_type.dtype)
        return result

    def fill(self, value: FillValue) -> None:
        """Set every element from the first component of *value*.

        Raises
        ------
        UnsupportedTypeError
            If the element type is not UINT8, FLOAT32 or FLOAT64.
        """
        if self._element_type not in FILL_TYPES:
            raise UnsupportedTypeError(
                f"fill is not supported for {self._element_type.name}"
            )
        first = value[0] if isinstance(value, (Scalar, Vec)) else value
        if not self.empty:
            self.array[...] = _cast_value(first, self._element_type)

    set_to = fill

    def zeros(self) -> None:
        self.fill(Scalar(0))

    def ones(self) -> None:
        self.fill(Scalar(1))

    # -----------------------------------------------------------------
    # Comparison and display
    # -----------------------------------------------------------------
    def tobytes(self) -> bytes:
        """Logical content as packed row-major bytes (no padding)."""
        return self.array.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.shape == other.shape
                and self._element_type is other._element_type
                and self.tobytes() == other.tobytes())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (f"Matrix({self._rows}x{self._cols}, "
                f"type={self._element_type.name}, step={self._step})")


# =====================================================================
# Matrix operations
# =====================================================================

def zeros(
    rows: int,
    cols: int,
    element_type: ElementType = ElementType.FLOAT32,
) -> Matrix:
    """New zero-filled matrix."""
    m = Matrix(rows, cols, element_type)
    m.zeros()
    return m


def eye(size: int, element_type: ElementType = ElementType.FLOAT32) -> Matrix:
    """Identity matrix. UINT8 uses 255 on the diagonal.

    Raises
    ------
    UnsupportedTypeError
        For element types other than UINT8, FLOAT32 and FLOAT64.
    """
    m = zeros(size, size, element_type)
    diag = 255 if element_type is ElementType.UINT8 else 1.0
    np.fill_diagonal(m.array, diag)
    return m


def _check_arithmetic(*matrices: Matrix) -> None:
    for m in matrices:
        if m.element_type not in ARITHMETIC_TYPES:
            raise UnsupportedTypeError(
                f"Matrix arithmetic is not supported for {m.element_type.name}"
            )


def transpose(src: Matrix) -> Matrix:
    """Transposed copy of a FLOAT32 or FLOAT64 matrix."""
    _check_arithmetic(src)
    return Matrix.from_array(np.ascontiguousarray(src.array.T))


def _check_compatible(a: Matrix, b: Matrix) -> None:
    if a.shape != b.shape or a.element_type is not b.element_type:
        raise InvalidArgumentError(
            f"Matrix sizes or types don't match: {a!r} vs {b!r}"
        )


def add(a: Matrix, b: Matrix) -> Matrix:
    """Element-wise sum of two FLOAT32/FLOAT64 matrices."""
    _check_compatible(a, b)
    _check_arithmetic(a)
    return Matrix.from_array(a.array + b.array)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """Element-wise difference of two FLOAT32/FLOAT64 matrices."""
    _check_compatible(a, b)
    _check_arithmetic(a)
    return Matrix.from_array(a.array - b.array)
