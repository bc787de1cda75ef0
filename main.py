"""
main.py — Sorting Visualizer Flask App
=======================================
JSON control surface over the single process-wide RunController.

Routes:
  GET  /api/algorithms         – registry metadata (labels, pseudocode, …)
  GET  /api/state              – run state + current values (read-only)
  POST /api/tick               – advance a running sort by one frame if
                                 its delay has elapsed, then return state
  POST /api/run                – start a run  {algorithm}
  POST /api/cancel             – request a cooperative stop
  POST /api/reset              – generate a new array  {size?, seed?}
  POST /api/config/speed       – pacing for the next run  {speed | preset}
  POST /api/record             – whole frame list + metrics for the
                                 current array, computed offline

State management:
  One RunController lives at module level.  There is exactly one
  RunState per process, so every client sees (and drives) the same run.
  The browser posts to /api/tick on a timer; each call runs
  controller.tick(), which is what moves a live run forward at the
  configured pace.  The controller serialises concurrent requests on its
  own lock, so the threaded dev server never steps the generator twice
  at once.
"""

import logging

from flask import Flask, jsonify, request

from algorithms import get_algorithm, list_algorithms
from algorithms.pacing import PacingConfig
from config import (
    DEFAULT_ALGORITHM,
    DEFAULT_ARRAY_SIZE,
    DEFAULT_SPEED,
    MAX_ARRAY_SIZE,
    MIN_ARRAY_SIZE,
)
from engine import Recorder, RunController
from sequence import generate


logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["DEFAULT_ALGORITHM"] = DEFAULT_ALGORITHM

controller = RunController(generate(DEFAULT_ARRAY_SIZE), pacing=PacingConfig.from_speed(DEFAULT_SPEED))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _payload() -> dict:
    return request.get_json(silent=True) or {}


def _state_json() -> dict:
    frame = controller.last_frame
    return {
        "state":          controller.state.to_dict(),
        "values":         controller.sequence,
        "frame":          frame.to_dict() if frame else None,
        "frames_emitted": controller.frames_emitted,
        "delay_ms":       controller.pacing.delay_ms,
    }


# ---------------------------------------------------------------------------
# API: Registry & State
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/state")
def api_state():
    return jsonify(_state_json())


@app.route("/api/tick", methods=["POST"])
def api_tick():
    advanced = controller.tick()
    return jsonify({"advanced": advanced, **_state_json()})


# ---------------------------------------------------------------------------
# API: Run lifecycle
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    algo_key = _payload().get("algorithm", app.config["DEFAULT_ALGORITHM"])
    if get_algorithm(algo_key) is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400

    if not controller.start(algo_key):
        return jsonify({"error": "A run is already active", **_state_json()}), 409
    return jsonify(_state_json())


@app.route("/api/cancel", methods=["POST"])
def api_cancel():
    controller.cancel()
    return jsonify(_state_json())


@app.route("/api/reset", methods=["POST"])
def api_reset():
    data = _payload()
    size = data.get("size", DEFAULT_ARRAY_SIZE)
    if not isinstance(size, int) or not MIN_ARRAY_SIZE <= size <= MAX_ARRAY_SIZE:
        return jsonify({
            "error": f"size must be an integer in [{MIN_ARRAY_SIZE}, {MAX_ARRAY_SIZE}]"
        }), 400

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"error": "seed must be an integer"}), 400

    if not controller.reset(generate(size, seed=seed)):
        return jsonify({"error": "Cannot reset while a run is active", **_state_json()}), 409
    return jsonify(_state_json())


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    data = _payload()
    try:
        if "preset" in data:
            pacing = PacingConfig.from_preset(data["preset"])
        else:
            pacing = PacingConfig.from_speed(data.get("speed", DEFAULT_SPEED))
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    controller.set_pacing(pacing)
    return jsonify({"delay_ms": pacing.delay_ms})


# ---------------------------------------------------------------------------
# API: Offline recording
# ---------------------------------------------------------------------------
@app.route("/api/record", methods=["POST"])
def api_record():
    algo_key = _payload().get("algorithm", app.config["DEFAULT_ALGORITHM"])
    if get_algorithm(algo_key) is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400

    rec = Recorder()
    rec.start(algo_key, controller.sequence)
    rec.run_to_completion()
    return jsonify(rec.export())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Sorting Visualizer listening on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
