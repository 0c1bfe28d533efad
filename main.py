"""
main.py — Algorithm Trace Engine Flask App
============================================
Thin JSON surface over the engine.  The presentation layer (canvas,
bars, graph drawing, timers) lives elsewhere; it asks this server for
traces and renders them itself.

Routes:
  GET  /                          – service card (families, endpoints)
  GET  /api/algorithms            – algorithm catalogue (?family= filter)
  POST /api/<family>/run          – run to completion → all steps + metrics
  POST /api/<family>/frame        – one step + cumulative visited set / path
  POST /api/compare               – two algorithms on the same input

Request bodies:
  run / frame : {"algorithm": "astar", "input": <family input>, "index": 12}
  compare     : {"family": "sorting", "input": [...], "left": "quick", "right": "heap"}

  where <family input> is
    pathfinding : ["S..#", "...E"]  or  {"rows", "cols", "walls", "start", "end"}
    sorting     : [5, 2, 9, 1]
    graph       : {"nodes": [{"id": "A"}, ...], "edges": [{"source", "target", "weight"}, ...]}

Errors:
  Every failure answers {"error": message}: 400 for bad input or an
  unknown algorithm, 404 for an unknown family, 413 when the input is
  larger than the configured limits.

Configuration:
  Config below, then TRACER_* environment variables (e.g.
  TRACER_MAX_GRID_CELLS=40000), then the mapping passed to create_app().
  Nothing is kept between requests; every call recomputes its trace.
"""

import logging
from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request

from algorithms import Family, build_input, catalogue, list_algorithms, resolve_family
from algorithms.registry import UnknownAlgorithmError
from engine import DEFAULT_SPEED, SPEED_PRESETS, Recorder, compare, frame_at

logger = logging.getLogger(__name__)

__version__ = "1.0.0"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
class Config:
    MAX_GRID_CELLS   = 10_000      # rows × cols
    MAX_ARRAY_LENGTH = 2_000
    MAX_GRAPH_NODES  = 500
    DEFAULT_SPEED    = DEFAULT_SPEED


class ApiError(Exception):
    """An error that maps straight onto an HTTP status + JSON body."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status  = status


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ApiError("request body must be a JSON object")
    return data


def _family(name: str) -> Family:
    try:
        return resolve_family(name)
    except UnknownAlgorithmError as e:
        raise ApiError(str(e), 404) from None


_LIMITS = {
    Family.PATHFINDING: ("MAX_GRID_CELLS",   "grid cells"),
    Family.SORTING:     ("MAX_ARRAY_LENGTH", "array elements"),
    Family.GRAPH:       ("MAX_GRAPH_NODES",  "graph nodes"),
}


def _input_size(fam: Family, raw: Any) -> int:
    """Size of a raw payload, read off its shape without building the model."""
    if fam is Family.PATHFINDING:
        if isinstance(raw, dict):
            try:
                return max(int(raw["rows"]), 0) * max(int(raw["cols"]), 0)
            except (KeyError, TypeError, ValueError, OverflowError):
                return 0
        lines = raw.splitlines() if isinstance(raw, str) else raw
        if not isinstance(lines, list):
            return 0
        widths = [len(l.replace(" ", "").strip()) for l in lines if isinstance(l, str) and l.strip()]
        return len(widths) * max(widths, default=0)
    if fam is Family.SORTING:
        return len(raw) if isinstance(raw, list) else 0
    nodes = raw.get("nodes") if isinstance(raw, dict) else None
    return len(nodes) if isinstance(nodes, list) else 0


def _check_limits(fam: Family, raw: Any) -> None:
    key, what = _LIMITS[fam]
    size, limit = _input_size(fam, raw), current_app.config[key]
    if size > limit:
        raise ApiError(f"too many {what}: {size} (limit {limit})", 413)


def _load_input(fam: Family, raw: Any) -> Any:
    if raw is None:
        raise ApiError("missing 'input'")
    _check_limits(fam, raw)
    try:
        return build_input(fam, raw)
    except ValueError as e:
        logger.warning("rejected %s input: %s", fam.value, e)
        raise ApiError(str(e)) from None


def _record(fam: Family, data: Any, algorithm: Optional[str]) -> Recorder:
    if not algorithm:
        raise ApiError("missing 'algorithm'")
    rec = Recorder()
    try:
        rec.start(fam, data, algorithm)
    except ValueError as e:
        raise ApiError(str(e)) from None
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("TRACER")
    if overrides:
        app.config.update(overrides)
    app.json.sort_keys = False

    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return jsonify({"error": e.message}), e.status

    @app.errorhandler(404)
    def handle_not_found(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(405)
    def handle_bad_method(e):
        return jsonify({"error": "method not allowed"}), 405

    # -----------------------------------------------------------------------
    # Service card
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        return jsonify({
            "name":     "algorithm-trace-engine",
            "version":  __version__,
            "families": [f.value for f in Family],
            "speed":    {"default": app.config["DEFAULT_SPEED"], "levels": SPEED_PRESETS},
            "limits": {
                "max_grid_cells":   app.config["MAX_GRID_CELLS"],
                "max_array_length": app.config["MAX_ARRAY_LENGTH"],
                "max_graph_nodes":  app.config["MAX_GRAPH_NODES"],
            },
            "endpoints": [
                "GET /api/algorithms",
                "POST /api/<family>/run",
                "POST /api/<family>/frame",
                "POST /api/compare",
            ],
        })

    # -----------------------------------------------------------------------
    # API: Catalogue
    # -----------------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        family = request.args.get("family")
        if family is None:
            return jsonify(catalogue())
        fam = _family(family)
        return jsonify({fam.value: [a.to_dict() for a in list_algorithms(fam)]})

    # -----------------------------------------------------------------------
    # API: Run
    # -----------------------------------------------------------------------
    @app.route("/api/<family>/run", methods=["POST"])
    def api_run(family: str):
        fam  = _family(family)
        body = _body()
        data = _load_input(fam, body.get("input"))
        rec  = _record(fam, data, body.get("algorithm"))

        return jsonify({
            "family":      fam.value,
            "algorithm":   rec.metrics.algorithm,
            "total_steps": len(rec.steps),
            "steps":       [s.to_dict() for s in rec.steps],
            "metrics":     rec.metrics.to_dict(),
        })

    # -----------------------------------------------------------------------
    # API: Seek
    # -----------------------------------------------------------------------
    @app.route("/api/<family>/frame", methods=["POST"])
    def api_frame(family: str):
        fam   = _family(family)
        body  = _body()
        index = body.get("index", 0)
        if isinstance(index, bool) or not isinstance(index, int):
            raise ApiError("'index' must be an integer")

        data = _load_input(fam, body.get("input"))
        rec  = _record(fam, data, body.get("algorithm"))

        frame = frame_at(rec.steps, index)
        if frame is None:
            raise ApiError(f"index {index} out of range (trace has {len(rec.steps)} step(s))")
        return jsonify(frame.to_dict())

    # -----------------------------------------------------------------------
    # API: Comparison
    # -----------------------------------------------------------------------
    @app.route("/api/compare", methods=["POST"])
    def api_compare():
        body = _body()
        if not body.get("family"):
            raise ApiError("missing 'family'")
        fam  = _family(body["family"])
        data = _load_input(fam, body.get("input"))

        left  = _record(fam, data, body.get("left"))
        right = _record(fam, data, body.get("right"))
        return jsonify(compare(left, right).to_dict())

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("  Algorithm Trace Engine")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
