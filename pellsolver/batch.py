# pellsolver/batch.py
# Independent solves over many N, optionally across worker processes.

from __future__ import annotations
import concurrent.futures
import logging, os
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from .bigint import is_square
from .chakravala import MAX_ITERATIONS, solve_pell
from .errors import PellError

logger = logging.getLogger(__name__)

@dataclass
class PellOutcome:
    n: int
    x: Optional[int] = None
    y: Optional[int] = None
    error: Optional[str] = None      # exception class name
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

def non_squares(lo: int, hi: int) -> Iterator[int]:
    """Admissible N in [lo, hi]."""
    for n in range(max(lo, 2), hi + 1):
        if not is_square(n):
            yield n

def _solve_one(n: int, max_iterations: int) -> PellOutcome:
    try:
        x, y = solve_pell(n, max_iterations=max_iterations)
    except PellError as e:
        return PellOutcome(n=n, error=type(e).__name__, detail=str(e))
    return PellOutcome(n=n, x=x, y=y)

def solve_many(ns: Iterable[int], *, workers: int = 1,
               max_iterations: int = MAX_ITERATIONS) -> Dict[int, PellOutcome]:
    """
    Solve each N independently. A failure is recorded in its own outcome and
    never stops the rest of the batch. Results keep the input order.
    """
    ns: List[int] = list(ns)
    if workers <= 1 or len(ns) <= 1:
        return {n: _solve_one(n, max_iterations) for n in ns}

    num_workers = min(workers, os.cpu_count() or 1, len(ns))
    logger.debug("solving %d values on %d workers", len(ns), num_workers)
    with concurrent.futures.ProcessPoolExecutor(max_workers=num_workers) as executor:
        futures = {n: executor.submit(_solve_one, n, max_iterations) for n in ns}
        return {n: fut.result() for n, fut in futures.items()}
