from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Any

def check_exponent(e: Any) -> int:
	if isinstance(e, bool) or not isinstance(e, numbers.Integral):
		raise ValueError(f"Exponent must be an integer, got {e!r}")
	if e < 0:
		raise ValueError("Exponent must be non-negative integer")
	return int(e)

@dataclass(frozen=True)
class Monomial:
	"""A single term ``coeff * x^exp``."""
	coeff: Any = 0
	exp: int = 0
	def __post_init__(self) -> None:
		object.__setattr__(self, "exp", check_exponent(self.exp))
	def mul_m(self, other: Monomial) -> Monomial:
		return Monomial(self.coeff * other.coeff, self.exp + other.exp)
	def __neg__(self) -> Monomial:
		return Monomial(-self.coeff, self.exp)
	def to_string(self, leading: bool = True) -> str:
		# A negative term carries its own sign; a positive one after the first gets "+"
		if self.coeff > 0:
			sign = "" if leading else "+"
			mag = self.coeff
		else:
			sign = "-"
			mag = -self.coeff
		body = ""
		if mag != 1:
			body += str(mag)
			if self.exp > 0:
				body += "*"
		elif self.exp == 0:
			body += "1"
		if self.exp > 0:
			body += "x"
			if self.exp > 1:
				body += f"^{self.exp}"
		return f"{sign}{body}"
	def __str__(self) -> str:
		return self.to_string()
