# pellsolver/bigint.py
# Thin arbitrary-precision integer layer over gmpy2.
# Everything the solver needs beyond the native mpz operators lives here.

from __future__ import annotations
import gmpy2
from gmpy2 import mpz

ZERO = mpz(0)
ONE = mpz(1)

def big(n) -> mpz:
    """Coerce an int, mpz or decimal string to mpz."""
    if isinstance(n, str):
        return mpz(n.strip(), 10)
    return mpz(n)

def isqrt(n) -> mpz:
    """Floor square root. Raises ValueError for n < 0."""
    n = big(n)
    if n < 0:
        raise ValueError("isqrt of negative number")
    return gmpy2.isqrt(n)

def is_square(n) -> bool:
    n = big(n)
    if n < 0: return False
    return bool(gmpy2.is_square(n))

def sign(n) -> int:
    return gmpy2.sign(big(n))

def exact_div(num, den) -> mpz:
    """Quotient num/den; raises ArithmeticError unless den divides num."""
    den = big(den)
    if den == 0:
        raise ArithmeticError("division by zero")
    q, r = gmpy2.t_divmod(big(num), den)
    if r:
        raise ArithmeticError(f"{num} is not divisible by {den}")
    return q

def to_bounded(n, cap: int) -> int:
    """Non-negative n as a Python int, saturating at cap."""
    n = big(n)
    if n <= 0: return 0
    if n >= cap: return cap
    return int(n)
