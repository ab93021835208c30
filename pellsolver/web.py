# pellsolver/web.py
# JSON API:  GET /api/pell?n=61[&trace=1]   POST /api/pell {"n": 61}
import os, time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from .chakravala import solve_pell_traced
from .errors import InvalidInput, PellError, PerfectSquare

DEFAULT_MAX_BITS = 256

def _parse_n(raw, max_bits: int) -> int:
    if raw is None or str(raw).strip() == "":
        raise BadRequest("missing n")
    try:
        n = int(str(raw).strip(), 10)
    except ValueError:
        raise BadRequest("n must be integer")
    if n.bit_length() > max_bits:
        raise BadRequest(f"n must fit in {max_bits} bits")
    return n

def _truthy(v) -> bool:
    return str(v).strip().lower() in ("1", "true", "yes", "on")

def _solve(n: int, trace: bool):
    t0 = time.perf_counter()
    try:
        res = solve_pell_traced(n)
    except (InvalidInput, PerfectSquare) as e:
        return jsonify({"ok": False, "n": str(n), "kind": type(e).__name__, "error": str(e)}), 422
    except PellError as e:
        return jsonify({"ok": False, "n": str(n), "kind": type(e).__name__, "error": str(e)}), 500
    body = {
        "ok": True,
        "n": str(n),
        "x": str(res.x),
        "y": str(res.y),
        "iterations": res.iterations,
    }
    if trace:
        body["triples"] = [{"a": str(t.a), "b": str(t.b), "k": str(t.k)} for t in res.triples]
        body["multipliers"] = [str(m) for m in res.multipliers]
    d = jsonify(body)
    d.headers["X-Compute-ms"] = str(int((time.perf_counter() - t0) * 1000))
    return d

def create_app(config=None) -> Flask:
    app = Flask(__name__)
    app.config["PELL_MAX_BITS"] = int(os.getenv("PELL_MAX_BITS", DEFAULT_MAX_BITS))
    if config:
        app.config.update(config)

    @app.get("/api/health")
    def health():
        return jsonify({"ok": True, "time": int(time.time())})

    @app.get("/api/pell")
    def pell_query():
        n = _parse_n(request.args.get("n"), app.config["PELL_MAX_BITS"])
        return _solve(n, _truthy(request.args.get("trace", "")))

    @app.post("/api/pell")
    def pell_post():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise BadRequest("expected a JSON object")
        n = _parse_n(data.get("n"), app.config["PELL_MAX_BITS"])
        return _solve(n, bool(data.get("trace", False)))

    return app

if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080)
