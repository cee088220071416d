# -*- coding: utf-8 -*-
"""
Least Squares Tests - Line and polynomial fitting.

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
2026-02-13

Modified
--------
2026-03-02
"""

import numpy as np
import pytest

from dipkit.algorithms.least_squares import (
    LinearFitResult,
    calculate_r_squared,
    linear_fit,
    polynomial_fit,
    predict,
)
from dipkit.exceptions import InvalidArgumentError, ProcessorError


class TestLinearFit:

    def test_exact_line(self):
        fit = linear_fit([0, 1, 2, 3], [1, 3, 5, 7])
        assert fit.success
        assert fit.slope == pytest.approx(2.0)
        assert fit.intercept == pytest.approx(1.0)
        assert fit.r_squared == pytest.approx(1.0)

    def test_noisy_line(self):
        rng = np.random.default_rng(7)
        x = np.linspace(0, 10, 50)
        y = -0.5 * x + 4 + rng.normal(0, 0.1, x.size)
        fit = linear_fit(x, y)
        assert fit.slope == pytest.approx(-0.5, abs=0.05)
        assert fit.intercept == pytest.approx(4.0, abs=0.2)
        assert 0.9 < fit.r_squared < 1.0

    @pytest.mark.parametrize("x, y", [
        ([1, 2, 3], [1, 2]),
        ([1], [1]),
        ([], []),
        ([2, 2, 2], [1, 2, 3]),
    ])
    def test_failure_returns_default(self, x, y):
        assert linear_fit(x, y) == LinearFitResult()


class TestRSquared:

    def test_perfect(self):
        assert calculate_r_squared([1, 2, 3], [1, 2, 3]) == 1.0

    def test_mean_predictor(self):
        assert calculate_r_squared([1, 2, 3], [2, 2, 2]) == pytest.approx(0.0)

    def test_can_be_negative(self):
        assert calculate_r_squared([1, 2, 3], [3, 2, 1]) < 0

    def test_degenerate_inputs(self):
        assert calculate_r_squared([1, 2], [1]) == 0.0
        assert calculate_r_squared([], []) == 0.0
        assert calculate_r_squared([4, 4, 4], [4, 4, 4]) == 0.0


class TestPolynomialFit:

    def test_recovers_quadratic(self):
        x = np.arange(-3, 4, dtype=np.float64)
        y = 2.0 - x + 0.5 * x ** 2
        np.testing.assert_allclose(polynomial_fit(x, y, 2), [2.0, -1.0, 0.5],
                                   atol=1e-9)

    def test_degree_one_matches_linear_fit(self):
        x = [0.0, 1.0, 2.0, 4.0]
        y = [1.0, 2.5, 2.9, 5.2]
        intercept, slope = polynomial_fit(x, y, 1)
        fit = linear_fit(x, y)
        assert slope == pytest.approx(fit.slope)
        assert intercept == pytest.approx(fit.intercept)

    def test_singular_system(self):
        with pytest.raises(ProcessorError, match="singular"):
            polynomial_fit([1.0, 1.0, 1.0], [1.0, 2.0, 3.0], 1)

    def test_bad_degree(self):
        with pytest.raises(InvalidArgumentError, match="degree"):
            polynomial_fit([0, 1, 2], [0, 1, 2], 0)

    def test_too_few_samples(self):
        with pytest.raises(InvalidArgumentError, match="samples"):
            polynomial_fit([0, 1], [0, 1], 2)

    def test_length_mismatch(self):
        with pytest.raises(InvalidArgumentError):
            polynomial_fit([0, 1, 2], [0, 1], 1)


class TestPredict:

    def test_ascending_coefficients(self):
        assert predict(2.0, [1.0, -1.0, 0.5]) == pytest.approx(1.0)

    def test_empty_coefficients(self):
        assert predict(3.0, []) == 0.0

    def test_roundtrip_with_fit(self):
        coeffs = polynomial_fit([0, 1, 2, 3], [1, 3, 5, 7], 1)
        assert predict(10.0, coeffs) == pytest.approx(21.0)
