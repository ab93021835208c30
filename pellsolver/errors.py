# pellsolver/errors.py
from __future__ import annotations

class PellError(Exception):
    """Base class for everything solve_pell can raise."""

    def __init__(self, n, message: str):
        super().__init__(message)
        self.n = n

class InvalidInput(PellError, ValueError):
    def __init__(self, n, message: str | None = None):
        super().__init__(n, message or f"N must be a positive integer, got {n!r}")

class PerfectSquare(PellError, ValueError):
    """N = s*s: only the trivial solution (1, 0) exists."""

    def __init__(self, n, root):
        super().__init__(n, f"N={n} is a perfect square ({root}^2). No solution exists.")
        self.root = root

class InternalError(PellError):
    """A solver invariant broke; carries the triple it broke on."""

    def __init__(self, n, a, b, k, reason: str):
        super().__init__(n, f"{reason} (N={n}, a={a}, b={b}, k={k})")
        self.a, self.b, self.k = a, b, k
        self.reason = reason

class NoConvergence(PellError):
    def __init__(self, n, max_iterations: int):
        super().__init__(n, f"N={n}: no convergence within {max_iterations} iterations")
        self.max_iterations = max_iterations
