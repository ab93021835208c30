from .chakravala import (
    PellResult,
    Triple,
    find_m,
    initial_triple,
    iterate_triples,
    solve_pell,
    solve_pell_traced,
)
from .errors import InternalError, InvalidInput, NoConvergence, PellError, PerfectSquare
__all__ = [
    "PellResult", "Triple", "find_m", "initial_triple", "iterate_triples",
    "solve_pell", "solve_pell_traced",
    "InternalError", "InvalidInput", "NoConvergence", "PellError", "PerfectSquare",
]
