# pellsolver/cli.py
# pell [N ...]  -- solve x^2 - N*y^2 = 1, one N per argument or per stdin line.
import sys, argparse, logging

from .chakravala import MAX_ITERATIONS, solve_pell_traced
from .errors import PellError
from .verify import is_solution, reference_solution

def process(n: int, args, out=None, err=None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        res = solve_pell_traced(n, max_iterations=args.max_iterations)
    except PellError as e:
        print(f"{n}\terror\t{type(e).__name__}: {e}", file=err)
        return 1

    if not is_solution(n, res.x, res.y):
        print(f"{n}\terror\tverification failed for x={res.x} y={res.y}", file=err)
        return 1
    if args.check:
        ref = reference_solution(n)
        if ref != (res.x, res.y):
            print(f"{n}\terror\tmismatch with sympy: {ref}", file=err)
            return 1

    if args.tsv:
        print(f"{n}\t{res.x}\t{res.y}\t{res.iterations}", file=out)
    else:
        print(f"N = {n}", file=out)
        if args.trace:
            for s in res.steps:
                print("  -", s, file=out)
        print(f"x = {res.x}", file=out)
        print(f"y = {res.y}", file=out)
        print(f"check: x^2 - {n}*y^2 = {res.x * res.x - n * res.y * res.y}"
              f"  ({res.iterations} iterations, {res.elapsed_ms:.3f} ms)", file=out)
    return 0

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pell",
                                 description="Fundamental solution of x^2 - N*y^2 = 1 (Chakravala method).")
    ap.add_argument("N", nargs="*", type=int, help="values of N; read from stdin when omitted")
    ap.add_argument("--tsv", action="store_true", help="print 'N<TAB>x<TAB>y<TAB>iterations' rows")
    ap.add_argument("--trace", action="store_true", help="print every intermediate triple")
    ap.add_argument("--check", action="store_true", help="cross-check against sympy's diop_DN")
    ap.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS,
                    help=f"safety cap on iterations (default {MAX_ITERATIONS})")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    rc = 0
    if args.N:
        for n in args.N:
            rc |= process(n, args)
    else:
        for line in sys.stdin:
            line = line.strip()
            if not line or line.startswith("#"): continue
            try: n = int(line, 10)
            except ValueError:
                print(f"# skip: {line}", file=sys.stderr); rc |= 1; continue
            rc |= process(n, args)
    return rc

if __name__ == "__main__":
    raise SystemExit(main())
