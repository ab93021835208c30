# pellsolver/verify.py
# Independent checks on a claimed Pell solution.

from __future__ import annotations
from typing import Tuple

from sympy.solvers.diophantine.diophantine import diop_DN

from .bigint import big, is_square

BRUTE_LIMIT = 1_000_000

def is_solution(n, x, y) -> bool:
    """x^2 - N*y^2 == 1 with exact arithmetic (trivial (1, 0) excluded)."""
    x, y = big(x), big(y)
    return x > 1 and y > 0 and x * x - big(n) * y * y == 1

def is_fundamental(n, x, y, *, brute_limit: int = BRUTE_LIMIT) -> bool:
    """
    True when (x, y) solves the equation and no 0 < y' < y does.
    Brute force, so y must not exceed brute_limit.
    """
    if not is_solution(n, x, y):
        return False
    if y > brute_limit:
        raise ValueError(f"y={y} exceeds brute-force limit {brute_limit}")
    n = big(n)
    for yy in range(1, int(y)):
        if is_square(n * yy * yy + 1):
            return False
    return True

def reference_solution(n) -> Tuple[int, int]:
    """Fundamental solution computed by sympy's continued-fraction solver."""
    sols = diop_DN(int(n), 1)
    if not sols:
        raise ValueError(f"sympy found no solution for N={n}")
    x, y = sols[0]
    return int(x), int(y)
