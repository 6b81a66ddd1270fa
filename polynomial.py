"""Sparse univariate polynomials over an arbitrary numeric carrier.

A ``Polynomial`` stores only its nonzero terms, as a mapping from exponent to
coefficient kept in ascending exponent order. Every constructor and every
in-place operator re-normalizes the mapping, so two polynomials are equal
exactly when their mappings are.

Division and GCD treat the carrier as a field. Over integral carriers the
leading-coefficient quotient truncates, and long division drops a remainder
term it cannot cancel; the result is then not a true Euclidean remainder.
"""
from __future__ import annotations
import logging
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple

import carrier as carriers
from carrier import F, N
from monomial import Monomial, check_exponent

logger = logging.getLogger(__name__)


class PolynomialError(Exception):
    pass


class PolynomialZeroDivisionError(PolynomialError, ZeroDivisionError):
    pass


@dataclass(eq=False)
class Polynomial(Generic[N]):
    coef: Dict[int, N] = field(default_factory=dict)
    carrier: Optional[type] = None

    def __post_init__(self):
        self.coef = {check_exponent(e): c for e, c in dict(self.coef).items()}
        self.carrier = carriers.resolve(self.carrier, self.coef.values())
        self.normalize()

    # -- construction ------------------------------------------------------

    @staticmethod
    def constant(c: N, carrier: Optional[type] = None) -> "Polynomial[N]":
        return Polynomial({0: c}, carrier if carrier is not None else type(c))

    @staticmethod
    def from_coefficients(coeffs: Iterable[N], carrier: Optional[type] = None) -> "Polynomial[N]":
        """Build from dense coefficients ``c0, c1, ...`` (exponent i gets ``ci``)."""
        return Polynomial(dict(enumerate(coeffs)), carrier)

    @staticmethod
    def monomial(c: N, exp: int, carrier: Optional[type] = None) -> "Polynomial[N]":
        return Polynomial({exp: c}, carrier if carrier is not None else type(c))

    @staticmethod
    def from_monomials(monoms: Iterable[Monomial], carrier: Optional[type] = None) -> "Polynomial[N]":
        acc: Dict[int, Any] = {}
        for m in monoms:
            acc[m.exp] = acc[m.exp] + m.coeff if m.exp in acc else m.coeff
        return Polynomial(acc, carrier)

    @staticmethod
    def variable(carrier: type = int) -> "Polynomial":
        return Polynomial({1: carrier(1)}, carrier)

    def copy(self) -> "Polynomial[N]":
        return Polynomial(dict(self.coef), self.carrier)

    def normalize(self) -> None:
        # drop zero terms and restore ascending exponent order
        self.coef = {e: c for e, c in sorted(self.coef.items()) if not carriers.is_zero(c)}

    # -- access ------------------------------------------------------------

    def zero(self) -> N:
        return carriers.zero(self.carrier)

    def one(self) -> N:
        return carriers.one(self.carrier)

    def coefficient(self, i: int) -> N:
        return self.coef.get(i, self.zero())

    def __getitem__(self, i: int) -> N:
        return self.coefficient(i)

    def degree(self) -> int:
        if not self.coef:
            return -1
        return next(reversed(self.coef))

    def leading_coefficient(self) -> N:
        if not self.coef:
            return self.zero()
        return self.coef[next(reversed(self.coef))]

    def is_zero(self) -> bool:
        return len(self.coef) == 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __len__(self) -> int:
        return len(self.coef)

    def __iter__(self) -> Iterator[Tuple[int, N]]:
        return iter(list(self.coef.items()))

    def __reversed__(self) -> Iterator[Tuple[int, N]]:
        return iter(list(reversed(self.coef.items())))

    def monomials(self) -> List[Monomial]:
        return [Monomial(c, e) for e, c in self.coef.items()]

    # -- equality ----------------------------------------------------------

    def _coerce(self, other: Any) -> Optional["Polynomial"]:
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, (numbers.Number, carriers.Ring)):
            return Polynomial.constant(other, type(other))
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.coef == rhs.coef

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    __hash__ = None  # mutable through the in-place operators

    # -- additive arithmetic -----------------------------------------------

    def __iadd__(self, other: Any) -> "Polynomial[N]":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        for e, c in list(rhs.coef.items()):
            self.coef[e] = self.coefficient(e) + c
        self.carrier = carriers.promote(self.carrier, rhs.carrier)
        self.normalize()
        return self

    def __isub__(self, other: Any) -> "Polynomial[N]":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        for e, c in list(rhs.coef.items()):
            self.coef[e] = self.coefficient(e) - c
        self.carrier = carriers.promote(self.carrier, rhs.carrier)
        self.normalize()
        return self

    def __add__(self, other: Any) -> "Polynomial[N]":
        return self.copy().__iadd__(other)

    def __radd__(self, other: Any) -> "Polynomial[N]":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Polynomial[N]":
        return self.copy().__isub__(other)

    def __rsub__(self, other: Any) -> "Polynomial[N]":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.copy().__isub__(self)

    def __neg__(self) -> "Polynomial[N]":
        return Polynomial.from_monomials((-m for m in self.monomials()), self.carrier)

    def __pos__(self) -> "Polynomial[N]":
        return self.copy()

    def add(self, other: Any) -> "Polynomial[N]":
        return self + other

    def sub(self, other: Any) -> "Polynomial[N]":
        return self - other

    # -- multiplication ----------------------------------------------------

    def __mul__(self, other: Any) -> "Polynomial[N]":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        prods: List[Monomial] = []
        for a in self.monomials():
            for b in rhs.monomials():
                prods.append(a.mul_m(b))
        return Polynomial.from_monomials(prods, carriers.promote(self.carrier, rhs.carrier))

    def __rmul__(self, other: Any) -> "Polynomial[N]":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__mul__(self)

    def __imul__(self, other: Any) -> "Polynomial[N]":
        product = self.__mul__(other)
        if product is NotImplemented:
            return NotImplemented
        self.coef, self.carrier = product.coef, product.carrier
        return self

    def mul(self, other: Any) -> "Polynomial[N]":
        return self * other

    def pow(self, exp: int) -> "Polynomial[N]":
        if exp < 0:
            raise ValueError("Exponent must be non-negative integer")
        res = Polynomial.constant(self.one(), self.carrier)
        for _ in range(exp):
            res = res * self
        return res

    def __pow__(self, exp: int) -> "Polynomial[N]":
        if not isinstance(exp, numbers.Integral):
            return NotImplemented
        return self.pow(int(exp))

    # -- evaluation and composition ----------------------------------------

    def eval(self, x: N) -> N:
        ans = self.zero()
        px = self.one()
        k = 0
        for e, c in self.coef.items():
            while k < e:
                px = px * x
                k += 1
            ans = ans + px * c
        return ans

    def compose(self, other: "Polynomial") -> "Polynomial":
        """Return the polynomial ``self(other(x))``."""
        result = Polynomial(carrier=carriers.promote(self.carrier, other.carrier))
        other_pow = Polynomial.constant(self.one(), self.carrier)
        cur_pow = 0
        for e, c in self.coef.items():
            while cur_pow < e:
                other_pow = other_pow * other
                cur_pow += 1
            result += other_pow * c
        return result

    def __call__(self, x: Any) -> Any:
        if isinstance(x, Polynomial):
            return self.compose(x)
        return self.eval(x)

    # -- division ----------------------------------------------------------

    def div_mod(self: "Polynomial[F]", other: Any) -> Tuple["Polynomial[F]", "Polynomial[F]"]:
        """Long division: return ``(q, r)`` with ``self == q * other + r``.

        ``deg r < deg other`` whenever the carrier is a field. Dividing by the
        zero polynomial gives ``(0, self)``.
        """
        divisor = self._coerce(other)
        if divisor is None:
            raise TypeError(f"cannot divide Polynomial by {type(other).__name__}")
        res_carrier = carriers.promote(self.carrier, divisor.carrier)
        div = Polynomial(carrier=res_carrier)
        rem = Polynomial(dict(self.coef), res_carrier)
        if divisor.is_zero():
            return div, rem
        d_deg = divisor.degree()
        d_lead = divisor.leading_coefficient()
        while rem.degree() >= d_deg:
            old_rem_deg = rem.degree()
            r_lead = rem.leading_coefficient()
            factor = Polynomial.monomial(carriers.exact_quotient(r_lead, d_lead), old_rem_deg - d_deg, res_carrier)
            div += factor
            rem -= divisor * factor
            if rem.degree() == old_rem_deg:
                logger.debug(
                    "div_mod: %s does not cancel %s, dropping x^%d from remainder",
                    d_lead, r_lead, old_rem_deg,
                )
                del rem.coef[old_rem_deg]
        rem.normalize()
        div.normalize()
        return div, rem

    def checked_div_mod(self, other: Any) -> Tuple["Polynomial[N]", "Polynomial[N]"]:
        divisor = self._coerce(other)
        if divisor is not None and divisor.is_zero():
            raise PolynomialZeroDivisionError("divide by zero")
        return self.div_mod(other)

    def __floordiv__(self, other: Any) -> "Polynomial[N]":
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_mod(other)[0]

    __truediv__ = __floordiv__

    def __mod__(self, other: Any) -> "Polynomial[N]":
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_mod(other)[1]

    def __divmod__(self, other: Any) -> Tuple["Polynomial[N]", "Polynomial[N]"]:
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_mod(other)

    def __ifloordiv__(self, other: Any) -> "Polynomial[N]":
        q = self.__floordiv__(other)
        if q is NotImplemented:
            return NotImplemented
        self.coef, self.carrier = q.coef, q.carrier
        return self

    __itruediv__ = __ifloordiv__

    def __imod__(self, other: Any) -> "Polynomial[N]":
        r = self.__mod__(other)
        if r is NotImplemented:
            return NotImplemented
        self.coef, self.carrier = r.coef, r.carrier
        return self

    # -- gcd ---------------------------------------------------------------

    def monic(self: "Polynomial[F]") -> "Polynomial[F]":
        """Scale so the leading coefficient is one; zero stays zero."""
        if self.is_zero():
            return self.copy()
        lead = self.leading_coefficient()
        return Polynomial({e: carriers.exact_quotient(c, lead) for e, c in self.coef.items()}, self.carrier)

    def gcd(self: "Polynomial[F]", other: "Polynomial[F]") -> "Polynomial[F]":
        return gcd(self, other)

    # -- formatting --------------------------------------------------------

    def to_string(self) -> str:
        if self.is_zero():
            return "0"
        parts: List[str] = []
        for e, c in reversed(self.coef.items()):
            parts.append(Monomial(c, e).to_string(leading=not parts))
        return "".join(parts)

    def write(self, out: Any) -> None:
        out.write(self.to_string())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({self.coef!r})"


def gcd(a: Polynomial[F], b: Polynomial[F]) -> Polynomial[F]:
    """Monic greatest common divisor of ``a`` and ``b``; ``gcd(0, 0) == 0``."""
    u, v = a.copy(), b.copy()
    steps = 0
    while not v.is_zero():
        u, v = v, u % v
        steps += 1
    logger.debug("gcd: %d remainder steps, degree %d", steps, u.degree())
    return u.monic()
