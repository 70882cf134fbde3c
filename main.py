"""
main.py — Graph Algorithm Engine Flask App
============================================
Thin HTTP boundary around the engine, for server-side execution.

Routes:
  GET  /api/algorithms         – registry listing
  GET  /api/graph/sample       – the demo graph the editor opens with
  POST /api/run                – run an algorithm, store the trace
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  GET  /api/state              – current run id and cursor

State management:
  Completed results live in an in-process RunStore (bounded, oldest run
  evicted first).  The Flask session only remembers which run the user
  is looking at and where the cursor is:
    • run_id
    • current_step
  Results are immutable, so a user can keep paging through one run while
  another request computes a new one.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Optional

from flask import Flask, jsonify, request, session

import config
from graph import EngineError, Graph
from algorithms import list_algorithms
from engine import AlgorithmRequest, AlgorithmResult, Stepper, execute

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Run store
# ---------------------------------------------------------------------------
class RunStore:
    """Thread-safe, size-bounded map of run id → AlgorithmResult."""

    def __init__(self, max_runs: int = config.MAX_STORED_RUNS):
        self.max_runs = max(1, max_runs)
        self._runs: "OrderedDict[str, AlgorithmResult]" = OrderedDict()
        self._lock = threading.Lock()

    def add(self, result: AlgorithmResult) -> str:
        run_id = uuid.uuid4().hex
        with self._lock:
            self._runs[run_id] = result
            while len(self._runs) > self.max_runs:
                evicted, _ = self._runs.popitem(last=False)
                logger.debug(f"Evicted run {evicted}")
        return run_id

    def get(self, run_id: Optional[str]) -> Optional[AlgorithmResult]:
        if run_id is None:
            return None
        with self._lock:
            return self._runs.get(run_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._runs)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config_overrides: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.secret_key = config.SECRET_KEY
    app.config["MAX_STORED_RUNS"] = config.MAX_STORED_RUNS
    if config_overrides:
        app.config.update(config_overrides)

    store = RunStore(app.config["MAX_STORED_RUNS"])
    app.extensions["run_store"] = store

    # -----------------------------------------------------------------
    # Session helpers
    # -----------------------------------------------------------------
    def current_stepper() -> Optional[Stepper]:
        result = store.get(session.get("run_id"))
        if result is None:
            return None
        return Stepper(result, start_idx=session.get("current_step", 0))

    def step_payload(stepper: Stepper):
        step = stepper.current_step
        return jsonify({
            "step":            step.to_dict() if step else None,
            "currentStep":     stepper.current_idx,
            "totalSteps":      stepper.total_steps,
            "canStepForward":  stepper.can_step_forward,
            "canStepBackward": stepper.can_step_backward,
        })

    # -----------------------------------------------------------------
    # Error mapping
    # -----------------------------------------------------------------
    @app.errorhandler(EngineError)
    def handle_engine_error(exc: EngineError):
        logger.warning(f"Rejected run request: {exc}")
        return jsonify({"error": str(exc)}), 400

    # -----------------------------------------------------------------
    # API: Metadata
    # -----------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([a.to_dict() for a in list_algorithms()])

    @app.route("/api/graph/sample")
    def api_graph_sample():
        return jsonify(Graph.sample().to_dict())

    # -----------------------------------------------------------------
    # API: Run Algorithm
    # -----------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        if not data.get("algorithm") or not data.get("startNodeId"):
            return jsonify({"error": "algorithm and startNodeId are required"}), 400

        try:
            req = AlgorithmRequest.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            return jsonify({"error": f"Invalid graph data: {e}"}), 400

        result = execute(req)
        run_id = store.add(result)
        session["run_id"] = run_id
        session["current_step"] = 0

        payload = result.to_dict()
        payload.update({"runId": run_id, "currentStep": 0, "totalSteps": len(result.steps)})
        return jsonify(payload)

    # -----------------------------------------------------------------
    # API: Step Navigation
    # -----------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        stepper = current_stepper()
        if stepper is None:
            return jsonify({"error": "No run in progress"}), 404
        if not stepper.next_step():
            return jsonify({"error": "Already at last step"}), 400
        session["current_step"] = stepper.current_idx
        return step_payload(stepper)

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        stepper = current_stepper()
        if stepper is None:
            return jsonify({"error": "No run in progress"}), 404
        if not stepper.prev_step():
            return jsonify({"error": "Already at first step"}), 400
        session["current_step"] = stepper.current_idx
        return step_payload(stepper)

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        stepper = current_stepper()
        if stepper is None:
            return jsonify({"error": "No run in progress"}), 404
        idx = (request.get_json(silent=True) or {}).get("index", 0)
        if not isinstance(idx, int) or not stepper.goto_step(idx):
            return jsonify({"error": "Invalid step index"}), 400
        session["current_step"] = stepper.current_idx
        return step_payload(stepper)

    @app.route("/api/state")
    def api_state():
        stepper = current_stepper()
        if stepper is None:
            return jsonify({"runId": None, "currentStep": 0, "totalSteps": 0})
        return jsonify({
            "runId":       session.get("run_id"),
            "algorithm":   stepper.result.algorithm,
            "currentStep": stepper.current_idx,
            "totalSteps":  stepper.total_steps,
        })

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting graph algorithm engine on http://{config.HOST}:{config.PORT}")
    create_app().run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
