# pellsolver/chakravala.py
# Fundamental solution of x^2 - N*y^2 = 1 by the Chakravala (cyclic) method.
# - validation + starting triple (a, 1, a^2 - N) with a the integer closest to sqrt(N)
# - multiplier search: k | (a + b*m), |m^2 - N| minimal
# - Bhaskara's samasa composition until k == 1

from __future__ import annotations
import logging, time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from gmpy2 import mpz

from .bigint import ONE, big, exact_div, is_square, isqrt, to_bounded
from .errors import InternalError, InvalidInput, NoConvergence, PerfectSquare

logger = logging.getLogger(__name__)

SEARCH_CAP = 1 << 20      # max offsets tried around floor(sqrt(N)) per multiplier search
MAX_ITERATIONS = 10_000   # safety net for the main loop

_INT_TYPES = (int, type(mpz(0)))

# ---------- Triples ----------

@dataclass(frozen=True)
class Triple:
    """(a, b, k) with a^2 - N*b^2 == k."""
    a: mpz
    b: mpz
    k: mpz

    @classmethod
    def from_pair(cls, n, a, b) -> "Triple":
        a, b = big(a), big(b)
        return cls(a, b, a * a - big(n) * b * b)

    def residual(self, n) -> mpz:
        """a^2 - N*b^2 - k; zero whenever the invariant holds."""
        return self.a * self.a - big(n) * self.b * self.b - self.k

    def __str__(self):
        return f"(a={self.a}, b={self.b}, k={self.k})"

def validate(n) -> mpz:
    """Return N as mpz, or raise InvalidInput / PerfectSquare."""
    if isinstance(n, bool) or not isinstance(n, _INT_TYPES):
        raise InvalidInput(n, f"N must be an integer, got {type(n).__name__}")
    n = big(n)
    if n <= 0:
        raise InvalidInput(int(n))
    if is_square(n):
        raise PerfectSquare(int(n), int(isqrt(n)))
    return n

def initial_triple(n) -> Triple:
    """Start from b = 1 and whichever of s, s+1 (s = floor(sqrt N)) gives the smaller |k|."""
    n = validate(n)
    s = isqrt(n)
    d1 = n - s * s
    d2 = (s + 1) * (s + 1) - n
    a = s + 1 if d2 < d1 else s
    return Triple(a, ONE, a * a - n)

# ---------- Multiplier search ----------

def find_m(n, a, b, k, *, search_cap: int = SEARCH_CAP) -> mpz:
    """
    Smallest-|m^2 - N| positive m with (a + b*m) % |k| == 0.

    Candidates are visited by distance from t = floor(sqrt N): t, t-1, t+1,
    t-2, t+2, ...  Past offset 0 every candidate lies strictly on one side of
    sqrt(N), so the best |c^2 - N| still reachable at a given offset only grows;
    the walk stops as soon as that floor exceeds the best hit. Hard limit is
    offset min(|k| + 1, search_cap). Ties resolve to the smaller m.
    """
    n, a, b, k = big(n), big(a), big(b), big(k)
    abs_k = abs(k)
    if abs_k == 0:
        raise InternalError(int(n), a, b, k, "k is zero")
    t = isqrt(n)
    limit = to_bounded(abs_k + 1, search_cap)

    best_m: Optional[mpz] = None
    best_diff: Optional[mpz] = None
    for offset in range(limit + 1):
        if best_m is not None:
            hi = t + offset
            reachable = hi * hi - n
            lo = t - offset
            if lo > 0:
                reachable = min(reachable, n - lo * lo)
            if reachable > best_diff:
                break
        candidates = (t,) if offset == 0 else (t - offset, t + offset)
        for c in candidates:
            if c <= 0:
                continue
            if (a + b * c) % abs_k:
                continue
            diff = abs(c * c - n)
            if best_m is None or diff < best_diff or (diff == best_diff and c < best_m):
                best_m, best_diff = c, diff

    if best_m is None:
        raise InternalError(int(n), a, b, k, f"no multiplier within {limit} of {t}")
    return best_m

# ---------- Composition ----------

def compose(n, triple: Triple, m) -> Triple:
    """Bhaskara's samasa of (a, b, k) with (m, 1, m^2 - N), scaled down by k."""
    n, m = big(n), big(m)
    a, b, k = triple.a, triple.b, triple.k
    abs_k = abs(k)
    try:
        return Triple(
            exact_div(a * m + n * b, abs_k),
            exact_div(a + b * m, abs_k),
            exact_div(m * m - n, k),
        )
    except ArithmeticError as e:
        raise InternalError(int(n), a, b, k, f"inexact samasa division with m={m}") from e

# ---------- Driver ----------

def _drive(n: mpz, triple: Triple, max_iterations: int, search_cap: int) -> Iterator[Tuple[Optional[mpz], Triple]]:
    yield None, triple
    iterations = 0
    while triple.k != 1:
        if iterations >= max_iterations:
            raise NoConvergence(int(n), max_iterations)
        m = find_m(n, triple.a, triple.b, triple.k, search_cap=search_cap)
        triple = compose(n, triple, m)
        iterations += 1
        logger.debug("N=%s step %d: m=%s -> %s", n, iterations, m, triple)
        yield m, triple

def iterate_triples(n, *, max_iterations: int = MAX_ITERATIONS,
                    search_cap: int = SEARCH_CAP) -> Iterator[Triple]:
    """
    Every triple the driver visits, starting triple first and the k == 1
    triple last. Input is validated before the iterator is returned.
    """
    start = initial_triple(n)
    n = big(n)
    logger.debug("N=%s starting triple %s", n, start)
    return (t for _, t in _drive(n, start, max_iterations, search_cap))

@dataclass
class PellResult:
    n: int
    x: int
    y: int
    iterations: int
    triples: List[Triple] = field(default_factory=list)
    multipliers: List[int] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

def solve_pell_traced(n, *, max_iterations: int = MAX_ITERATIONS,
                      search_cap: int = SEARCH_CAP) -> PellResult:
    """solve_pell, but also keeps every triple, multiplier and a readable step log."""
    t0 = time.perf_counter()
    start = initial_triple(n)
    n = big(n)
    triples: List[Triple] = []
    multipliers: List[int] = []
    steps: List[str] = []
    for m, triple in _drive(n, start, max_iterations, search_cap):
        triples.append(triple)
        if m is None:
            steps.append(f"start {triple}")
        else:
            multipliers.append(int(m))
            steps.append(f"m={m} -> {triple}")

    final = triples[-1]
    if final.residual(n) or final.k != 1:
        raise InternalError(int(n), final.a, final.b, final.k, "final triple is not a Pell solution")
    ms = (time.perf_counter() - t0) * 1000
    logger.info("N=%s solved in %d iterations (%.3f ms)", n, len(multipliers), ms)
    return PellResult(
        n=int(n), x=int(final.a), y=int(final.b), iterations=len(multipliers),
        triples=triples, multipliers=multipliers, steps=steps, elapsed_ms=ms,
    )

def solve_pell(n, *, max_iterations: int = MAX_ITERATIONS,
               search_cap: int = SEARCH_CAP) -> Tuple[int, int]:
    """Fundamental solution (x, y) of x^2 - N*y^2 = 1 as plain ints."""
    start = initial_triple(n)
    n = big(n)
    final = start
    for _, final in _drive(n, start, max_iterations, search_cap):
        pass
    if final.residual(n):
        raise InternalError(int(n), final.a, final.b, final.k, "final triple is not a Pell solution")
    return int(final.a), int(final.b)
