from __future__ import annotations
from typing import Any, Optional

import numpy as np

from polynomial import Polynomial, PolynomialError


def to_numpy(p: Polynomial, dtype: Optional[Any] = None) -> np.ndarray:
    """Dense coefficients in ascending order, ``numpy.polynomial`` style.

    The zero polynomial becomes ``[0]``.
    """
    if p.is_zero():
        return np.zeros(1, dtype=dtype)
    return np.array([p.coefficient(i) for i in range(p.degree() + 1)], dtype=dtype)


def from_numpy(coeffs: np.ndarray) -> Polynomial:
    return Polynomial.from_coefficients(np.asarray(coeffs).tolist())


def evaluate_many(p: Polynomial, xs: Any) -> np.ndarray:
    """Evaluate at every point of ``xs`` with Horner's scheme."""
    x = np.asarray(xs, dtype=float)
    out = np.zeros_like(x)
    for i in range(p.degree(), -1, -1):
        out = out * x + float(p.coefficient(i))
    return out


def roots(p: Polynomial) -> np.ndarray:
    """Numerical roots via ``numpy.roots``.

    Coefficients are converted to float first, so exact carriers lose precision.
    """
    if p.is_zero():
        raise PolynomialError("zero polynomial has no finite set of roots")
    # numpy wants highest degree first
    coeffs_float = [float(p.coefficient(i)) for i in range(p.degree(), -1, -1)]
    return np.roots(coeffs_float)
