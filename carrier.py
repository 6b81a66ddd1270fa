"""Carrier capabilities for polynomial coefficients.

A carrier is the scalar type N a polynomial is built over. The library only
ever relies on the operations declared by ``Ring`` (and ``Field`` for division
and GCD), plus construction of the zero and one of N.
"""
from __future__ import annotations
import numbers
from typing import Any, Iterable, Optional, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Ring(Protocol):
    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __eq__(self, other: object) -> bool: ...
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...


@runtime_checkable
class Field(Ring, Protocol):
    def __truediv__(self, other: Any) -> Any: ...


N = TypeVar("N", bound=Ring)
F = TypeVar("F", bound=Field)


def zero(carrier: type) -> Any:
    return carrier()


def one(carrier: type) -> Any:
    return carrier(1)


def is_zero(value: Any) -> bool:
    return value == 0


def is_integral(carrier: type) -> bool:
    return issubclass(carrier, numbers.Integral)


def exact_quotient(a: Any, b: Any) -> Any:
    """Divide leading coefficients.

    Integral values divide with truncation toward zero, the way fixed-width
    integer arithmetic does; every other carrier uses its own ``/``.
    """
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        q = abs(int(a)) // abs(int(b))
        return type(a)(q if (a < 0) == (b < 0) else -q)
    return a / b


def infer(values: Iterable[Any], default: type = int) -> type:
    for v in values:
        return type(v)
    return default


def promote(a: type, b: type) -> type:
    """Pick the carrier of a result combining carriers ``a`` and ``b``."""
    if a is b:
        return a
    if is_integral(a) and not is_integral(b):
        return b
    return a


def resolve(carrier: Optional[type], values: Iterable[Any]) -> type:
    if carrier is not None:
        return carrier
    return infer(values)
