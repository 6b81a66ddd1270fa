from __future__ import annotations
from fractions import Fraction
from typing import Union

RationalLike = Union["Rational", Fraction, int]

def _frac(value: RationalLike) -> Fraction:
	if isinstance(value, Rational):
		return value._f
	if isinstance(value, (Fraction, int)):
		return Fraction(value)
	raise TypeError(f"cannot use {type(value).__name__} as a rational")

class Rational:
	"""Exact field carrier backed by ``fractions.Fraction``."""
	__slots__ = ("_f",)
	def __init__(self, num: int | Fraction | Rational = 0, den: int | None = None) -> None:
		if isinstance(num, Rational):
			num = num._f
		if isinstance(num, Fraction) and den is None:
			self._f = num
		else:
			self._f = Fraction(num, 1 if den is None else den)
	def __add__(self, other: RationalLike) -> Rational:
		try:
			return Rational(self._f + _frac(other))
		except TypeError:
			return NotImplemented
	__radd__ = __add__
	def __sub__(self, other: RationalLike) -> Rational:
		try:
			return Rational(self._f - _frac(other))
		except TypeError:
			return NotImplemented
	def __rsub__(self, other: RationalLike) -> Rational:
		try:
			return Rational(_frac(other) - self._f)
		except TypeError:
			return NotImplemented
	def __mul__(self, other: RationalLike) -> Rational:
		try:
			return Rational(self._f * _frac(other))
		except TypeError:
			return NotImplemented
	__rmul__ = __mul__
	def __truediv__(self, other: RationalLike) -> Rational:
		try:
			d = _frac(other)
		except TypeError:
			return NotImplemented
		if d == 0:
			raise ZeroDivisionError("division by zero")
		return Rational(self._f / d)
	def __rtruediv__(self, other: RationalLike) -> Rational:
		try:
			n = _frac(other)
		except TypeError:
			return NotImplemented
		if self._f == 0:
			raise ZeroDivisionError("division by zero")
		return Rational(n / self._f)
	def __neg__(self) -> Rational:
		return Rational(-self._f)
	def __abs__(self) -> Rational:
		return Rational(abs(self._f))
	def __pow__(self, exp: int) -> Rational:
		if exp == 0:
			return Rational(1,1)
		return Rational(self._f ** exp)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, (Rational, Fraction, int)):
			return NotImplemented
		return self._f == _frac(other)
	def __hash__(self) -> int:
		return hash(self._f)
	def __lt__(self, other: RationalLike) -> bool:
		return self._f < _frac(other)
	def __le__(self, other: RationalLike) -> bool:
		return self._f <= _frac(other)
	def __gt__(self, other: RationalLike) -> bool:
		return self._f > _frac(other)
	def __ge__(self, other: RationalLike) -> bool:
		return self._f >= _frac(other)
	def __bool__(self) -> bool:
		return self._f != 0
	def is_zero(self) -> bool:
		return self._f == 0
	def is_int(self) -> bool:
		return self._f.denominator == 1
	def numerator(self) -> int:
		return self._f.numerator
	def denominator(self) -> int:
		return self._f.denominator
	def to_fraction(self) -> Fraction:
		return self._f
	def __float__(self) -> float:
		return float(self._f)
	def to_string(self) -> str:
		if self._f.denominator == 1:
			return str(self._f.numerator)
		return f"{self._f.numerator}/{self._f.denominator}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		if self.is_int():
			return f"Rational({self._f.numerator})"
		return f"Rational({self._f.numerator}, {self._f.denominator})"
