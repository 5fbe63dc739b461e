"""Flask backend running grid A* searches and benchmarks.

Single searches are answered synchronously over HTTP.  Benchmarks can take a while,
so they run as a background task and their result is pushed through Socket.IO
(``bench_result`` event), falling back to polling if WebSocket is unavailable.
"""
from __future__ import annotations

import logging
import os
from threading import Lock
from typing import Any, Dict

from flask import Flask, request, jsonify
from flask_socketio import SocketIO
from flask_cors import CORS

from backend.algorithms.bench import AStarBench, STRATEGIES
from backend.algorithms.grid_astar import Cell, Size

_logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["SECRET_KEY"] = os.environ.get("ASTAR_SECRET_KEY", "change-me")
app.config["BENCH_MAX_SIZE"] = int(os.environ.get("ASTAR_BENCH_MAX_SIZE", "256"))
socketio = SocketIO(app, cors_allowed_origins="*")

# Enable CORS for /api/* endpoints so that a local frontend can POST
CORS(app, resources={r"/api/*": {"origins": "*"}})

# run id -> summary of the run (result filled in when done)
_runs: Dict[str, Dict[str, Any]] = {}
_runs_lock = Lock()


class RequestError(ValueError):
    pass


@app.errorhandler(RequestError)
def _bad_request(err):
    return jsonify({"error": str(err)}), 400


def _parse_cell(raw, size: Size, field_name: str) -> Cell:
    try:
        x, y = (int(v) for v in raw)
    except (TypeError, ValueError):
        raise RequestError(f"{field_name} must be [x, y]") from None
    if not (0 <= x < size.w and 0 <= y < size.h):
        raise RequestError(f"{field_name} {(x, y)} outside {size.w}x{size.h} grid")
    return Cell(x, y)


def _parse_size(raw) -> Size:
    try:
        w, h = (int(v) for v in raw)
        size = Size(w, h)
    except (TypeError, ValueError) as exc:
        raise RequestError(f"invalid size: {exc}") from None
    if max(size.w, size.h) > app.config["BENCH_MAX_SIZE"]:
        raise RequestError(f"size exceeds {app.config['BENCH_MAX_SIZE']}")
    return size


@app.route("/api/run/astar", methods=["POST"])
def run_astar():
    data = request.get_json(force=True)

    size = _parse_size(data.get("size", [16, 16]))
    start = _parse_cell(data.get("start", [0, 0]), size, "start")
    goal = _parse_cell(data.get("goal", [size.w - 1, size.h - 1]), size, "goal")
    strategy = data.get("strategy", "index")
    if strategy not in STRATEGIES:
        raise RequestError(f"unknown strategy {strategy!r}")

    try:
        engine = STRATEGIES[strategy](size, start, goal, costs=data.get("costs"), seed=data.get("seed"))
    except (TypeError, ValueError) as exc:
        raise RequestError(str(exc)) from None

    path = engine.calc()
    _logger.info("astar run: strategy=%s size=%dx%d found=%s", strategy, size.w, size.h, path is not None)
    return jsonify({
        "strategy": strategy,
        "path": [list(c) for c in path] if path is not None else None,
        "costs": list(engine.costs),
    })


def _bench_task(run_id: str, bench: AStarBench):
    try:
        results = [r.as_dict() for r in bench.run()]
    except Exception as exc:
        _logger.exception("bench %s failed", run_id)
        with _runs_lock:
            _runs[run_id]["status"] = "error"
            _runs[run_id]["error"] = str(exc)
        socketio.emit("bench_error", {"run_id": run_id, "error": str(exc)})
        return
    with _runs_lock:
        _runs[run_id]["status"] = "done"
        _runs[run_id]["results"] = results
    socketio.emit("bench_result", {"run_id": run_id, "results": results})


@app.route("/api/run/bench", methods=["POST"])
def run_bench():
    data = request.get_json(force=True)

    try:
        bench = AStarBench(
            nsize=int(data.get("nsize", 64)),
            iterations=int(data.get("iterations", 10)),
            seed=data.get("seed"),
        )
    except (TypeError, ValueError) as exc:
        raise RequestError(str(exc)) from None
    if bench.nsize > app.config["BENCH_MAX_SIZE"]:
        raise RequestError(f"nsize exceeds {app.config['BENCH_MAX_SIZE']}")

    run_id = data.get("run_id", f"bench_{id(bench)}")
    with _runs_lock:
        _runs[run_id] = {"status": "running", "nsize": bench.nsize, "iterations": bench.iterations}
    _logger.info("bench %s started: nsize=%d iterations=%d", run_id, bench.nsize, bench.iterations)

    socketio.start_background_task(_bench_task, run_id, bench)

    return jsonify({"status": "started", "run_id": run_id})


@app.route("/api/runs", methods=["GET"])
def list_runs():
    with _runs_lock:
        return jsonify(list(_runs.keys()))


@app.route("/api/runs/<run_id>", methods=["GET"])
def get_run(run_id):
    with _runs_lock:
        run = _runs.get(run_id)
        if run is None:
            return jsonify({"error": f"unknown run {run_id!r}"}), 404
        return jsonify(dict(run, run_id=run_id))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    socketio.run(app, host="0.0.0.0", port=5000, debug=True)
