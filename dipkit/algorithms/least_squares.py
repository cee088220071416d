# -*- coding: utf-8 -*-
"""
Least Squares - Straight-line and polynomial curve fitting.

``linear_fit`` uses the closed-form normal equations for a line and
reports failure through ``LinearFitResult.success`` rather than raising,
so it can be called on arbitrary measurement data. ``polynomial_fit``
solves the ``(degree + 1)``-square normal equations with an LU
factorization and raises on malformed or degenerate input.

Coefficients are always in ascending order: ``c[0] + c[1] x + ...``.

Dependencies
------------
numpy
scipy

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
2026-02-12

Modified
--------
2026-03-02
"""

# Standard library
import logging
import warnings
from dataclasses import dataclass
from typing import Sequence

# Third-party
import numpy as np
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

# dipkit internal
from dipkit.exceptions import InvalidArgumentError, ProcessorError

logger = logging.getLogger(__name__)

#: Pivots and denominators below this magnitude are treated as zero.
SINGULAR_TOL = 1e-10


@dataclass
class LinearFitResult:
    """Outcome of a straight-line fit ``y = slope * x + intercept``.

    Attributes
    ----------
    slope : float
    intercept : float
    r_squared : float
        Coefficient of determination of the fitted line.
    success : bool
        False when the input was mismatched, shorter than two points, or
        had (near) zero spread in ``x``. All other fields are 0.0 then.
    """

    slope: float = 0.0
    intercept: float = 0.0
    r_squared: float = 0.0
    success: bool = False


def calculate_r_squared(
    y_true: Sequence[float],
    y_pred: Sequence[float],
) -> float:
    """Coefficient of determination ``1 - SSE / SST``.

    Returns 0.0 for mismatched or empty input, and when ``SST`` is
    (near) zero.
    """
    y_true = np.asarray(y_true, dtype=np.float64)
    y_pred = np.asarray(y_pred, dtype=np.float64)
    if y_true.shape != y_pred.shape or y_true.size == 0:
        return 0.0
    sst = float(np.sum((y_true - y_true.mean()) ** 2))
    sse = float(np.sum((y_true - y_pred) ** 2))
    if sst <= SINGULAR_TOL:
        return 0.0
    return 1.0 - sse / sst


def linear_fit(x: Sequence[float], y: Sequence[float]) -> LinearFitResult:
    """Fit a straight line by ordinary least squares.

    Parameters
    ----------
    x, y : sequence of float
        Sample coordinates, equal length of at least two.

    Returns
    -------
    LinearFitResult

    Examples
    --------
    >>> fit = linear_fit([0, 1, 2, 3], [1, 3, 5, 7])
    >>> fit.slope, fit.intercept, fit.success
    (2.0, 1.0, True)
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.shape != y.shape or x.ndim != 1 or x.size < 2:
        logger.debug("linear_fit: need two equal-length 1D sequences")
        return LinearFitResult()

    n = x.size
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xx = np.dot(x, x)
    sum_xy = np.dot(x, y)

    denominator = n * sum_xx - sum_x * sum_x
    if abs(denominator) < SINGULAR_TOL:
        logger.debug("linear_fit: x has no spread, cannot fit")
        return LinearFitResult()

    slope = float((n * sum_xy - sum_x * sum_y) / denominator)
    intercept = float((sum_y - slope * sum_x) / n)
    r_squared = calculate_r_squared(y, slope * x + intercept)
    return LinearFitResult(slope, intercept, r_squared, True)


def polynomial_fit(
    x: Sequence[float],
    y: Sequence[float],
    degree: int,
) -> np.ndarray:
    """Fit a polynomial of *degree* by solving the normal equations.

    Parameters
    ----------
    x, y : sequence of float
        Sample coordinates, equal length of at least ``degree + 1``.
    degree : int
        Polynomial degree, at least 1.

    Returns
    -------
    np.ndarray
        ``degree + 1`` coefficients in ascending order.

    Raises
    ------
    InvalidArgumentError
        If the input lengths differ, *degree* is below 1, or there are
        fewer than ``degree + 1`` samples.
    ProcessorError
        If the normal-equation matrix is singular.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if degree < 1:
        raise InvalidArgumentError(f"degree must be >= 1, got {degree}")
    if x.shape != y.shape or x.ndim != 1:
        raise InvalidArgumentError(
            f"x and y must be 1D sequences of equal length, got "
            f"{x.shape} and {y.shape}"
        )
    if x.size < degree + 1:
        raise InvalidArgumentError(
            f"degree {degree} fit needs at least {degree + 1} samples, "
            f"got {x.size}"
        )

    # Vandermonde columns x^0 .. x^degree
    vander = np.vander(x, degree + 1, increasing=True)
    normal = vander.T @ vander
    rhs = vander.T @ y

    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(normal)
    if np.min(np.abs(np.diag(lu))) < SINGULAR_TOL:
        raise ProcessorError(
            f"Normal equations for degree {degree} fit are singular"
        )
    return lu_solve((lu, piv), rhs)


def predict(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate ascending *coefficients* at *x*. Empty coefficients give 0.0."""
    result = 0.0
    x_pow = 1.0
    for coeff in coefficients:
        result += coeff * x_pow
        x_pow *= x
    return float(result)
