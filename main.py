#!/usr/bin/env python3
from polynomial import Polynomial, gcd
from rational import Rational

def main():
    x = Polynomial.variable()
    f1 = Polynomial.from_coefficients([0, 0, 3, 0, -1])
    print(f1)
    print((x - 1) * (x + 1))
    q, r = (x ** 3 - 1).div_mod(x - 1)
    print(q, r)
    print((x ** 2 + 1)(x + 1))
    print(Polynomial.from_coefficients([5, 3, 2])(4))
    xr = Polynomial.variable(Rational)
    print(gcd(xr ** 2 - 1, xr ** 2 - 2 * xr + 1))

if __name__ == "__main__":
    main()
