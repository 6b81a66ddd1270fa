"""Tests for the numpy bridge."""

from fractions import Fraction

import numpy as np
import pytest
from numpy.polynomial import Polynomial as NpPolynomial

from polynomial import Polynomial, PolynomialError
from polynomial_numeric import evaluate_many, from_numpy, roots, to_numpy


class TestDense:
    def test_to_numpy(self):
        p = Polynomial.from_coefficients([0, 0, 3, 0, -1])
        np.testing.assert_array_equal(to_numpy(p), np.array([0, 0, 3, 0, -1]))

    def test_to_numpy_zero(self):
        np.testing.assert_array_equal(to_numpy(Polynomial()), np.array([0.0]))

    def test_to_numpy_dtype(self):
        p = Polynomial.from_coefficients([Fraction(1, 2), Fraction(1, 4)])
        np.testing.assert_allclose(to_numpy(p, dtype=float), [0.5, 0.25])

    def test_from_numpy(self):
        p = from_numpy(np.array([1, 0, 2]))
        assert p == Polynomial({0: 1, 2: 2})
        assert p.carrier is int


class TestEvaluateMany:
    def test_matches_numpy(self):
        coeffs = [5.0, 3.0, 2.0, 0.0, -1.0]
        p = Polynomial.from_coefficients(coeffs)
        xs = np.linspace(-2.0, 2.0, 9)
        np.testing.assert_allclose(evaluate_many(p, xs), NpPolynomial(coeffs)(xs))

    def test_matches_eval(self):
        p = Polynomial.from_coefficients([5, 3, 2])
        np.testing.assert_allclose(evaluate_many(p, [4]), [p(4)])

    def test_zero(self):
        np.testing.assert_array_equal(evaluate_many(Polynomial(), [1.0, 2.0]), [0.0, 0.0])


class TestRoots:
    def test_quadratic(self):
        p = Polynomial.from_coefficients([-1, 0, 1])
        np.testing.assert_allclose(np.sort(roots(p).real), [-1.0, 1.0])

    def test_sparse_cubic(self):
        p = Polynomial({3: 1, 0: -8})
        r = roots(p)
        assert len(r) == 3
        np.testing.assert_allclose(np.abs(r), [2.0, 2.0, 2.0])

    def test_constant_has_no_roots(self):
        assert len(roots(Polynomial.constant(3))) == 0

    def test_zero_raises(self):
        with pytest.raises(PolynomialError):
            roots(Polynomial())
