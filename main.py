"""
main.py — Sort Step Visualizer Flask App
==========================================
The web server that feeds a renderer with playback events.

Routes:
  GET  /                       – summary of the current playback
  GET  /api/state              – current playback state (for polling)
  GET  /api/algorithms         – registry cards (label, tags, pseudocode, …)
  POST /api/playback/next      – pull one raw event from the controller
  POST /api/playback/poll      – pull the next event that is due (or null)
  POST /api/playback/reset     – start a fresh controller
  POST /api/playback/play      – toggle play/pause
  POST /api/config/speed       – set the speed preset
  POST /api/run                – record one full run of one algorithm
  POST /api/compare            – record two algorithms on the same input

State management:
  One PlaybackController + Pacer pair lives in-process (module level).
  The controller is not thread-safe; run the dev server single-threaded.
"""

import argparse
import logging
import random
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from algorithms import get_algorithm, list_algorithms
from config import PlaybackConfig, load_config
from engine import Pacer, PlaybackController, Recorder, compare


log = logging.getLogger(__name__)

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Runtime state
# ---------------------------------------------------------------------------
class Runtime:
    """The single controller/pacer pair the routes talk to."""

    def __init__(self, cfg: PlaybackConfig):
        self.cfg = cfg
        self.controller = PlaybackController(
            cfg.data_count,
            seed=cfg.seed,
            step_duration=cfg.step_duration,
            intermission=cfg.intermission,
        )
        self.pacer = Pacer(self.controller)
        self.pacer.set_speed(cfg.speed)
        self.speed_preset = cfg.speed


_runtime: Optional[Runtime] = None


def configure(cfg: Optional[PlaybackConfig] = None) -> Runtime:
    """(Re)build the runtime from a config.  Returns the new runtime."""
    global _runtime
    cfg = cfg or PlaybackConfig()
    _runtime = Runtime(cfg)
    app.config["PLAYBACK"] = cfg.to_dict()
    log.info(
        "Playback ready: %d element(s), %d algorithm(s), seed=%s",
        cfg.data_count, _runtime.controller.algorithm_count, cfg.seed,
    )
    return _runtime


def get_runtime() -> Runtime:
    if _runtime is None:
        return configure()
    return _runtime


def get_state() -> Dict[str, Any]:
    """Return current playback state as a dict."""
    rt   = get_runtime()
    ctrl = rt.controller
    return {
        "algorithm":        ctrl.current_algorithm.label,
        "algorithm_key":    ctrl.current_algorithm.key,
        "algorithm_index":  ctrl.algorithm_index,
        "phase":            ctrl.phase.value,
        "cycles_completed": ctrl.cycles_completed,
        "data_count":       ctrl.data_count,
        "initial_data":     list(ctrl.initial_data),
        "is_playing":       rt.pacer.is_playing,
        "speed":            rt.speed_preset,
    }


def _json_body() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def _input_data(body: Dict[str, Any]) -> List[int]:
    """Explicit `data`, or a shuffled permutation of `data_count` elements."""
    cfg = get_runtime().cfg
    if "data" in body:
        data = body["data"]
        if not isinstance(data, list) or not all(isinstance(v, int) for v in data):
            raise ValueError("data must be a list of integers")
        cfg.check_data_count(len(data))
        return data
    count = cfg.check_data_count(body.get("data_count", cfg.data_count))
    seed = body.get("seed")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        raise ValueError("seed must be an integer")
    data = list(range(count))
    random.Random(seed).shuffle(data)
    return data


def _algo_card(info) -> Dict[str, Any]:
    return {
        "key":              info.key,
        "label":            info.label,
        "tags":             list(info.tags),
        "complexity_time":  info.complexity_time,
        "complexity_space": info.complexity_space,
        "description":      info.description,
        "pseudocode":       list(info.pseudocode),
    }


# ---------------------------------------------------------------------------
# Summary / State
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()
    state["algorithms"] = [a.label for a in list_algorithms()]
    return jsonify(state)


@app.route("/api/state")
def api_state():
    return jsonify(get_state())


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([_algo_card(a) for a in list_algorithms()])


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/playback/next", methods=["POST"])
def api_playback_next():
    event = get_runtime().controller.next()
    return jsonify({"event": event.to_dict(), "state": get_state()})


@app.route("/api/playback/poll", methods=["POST"])
def api_playback_poll():
    body = _json_body()
    rt = get_runtime()
    if "elapsed" in body:
        elapsed = body["elapsed"]
        if not isinstance(elapsed, (int, float)):
            return jsonify({"error": "elapsed must be a number"}), 400
        event = rt.pacer.poll(float(elapsed))
    else:
        event = rt.pacer.tick()
    return jsonify({
        "event":    event.to_dict() if event is not None else None,
        "deadline": rt.pacer.deadline,
    })


@app.route("/api/playback/reset", methods=["POST"])
def api_playback_reset():
    body = _json_body()
    try:
        cfg = load_config(overrides={
            **get_runtime().cfg.to_dict(),
            "data_count": body.get("data_count"),
            "seed":       body.get("seed"),
        })
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400
    configure(cfg)
    return jsonify(get_state())


@app.route("/api/playback/play", methods=["POST"])
def api_playback_play():
    pacer = get_runtime().pacer
    pacer.toggle_play()
    return jsonify({"is_playing": pacer.is_playing})


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = _json_body().get("speed", "normal")
    rt = get_runtime()
    try:
        rt.pacer.set_speed(speed)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    rt.speed_preset = speed
    return jsonify({"speed": speed})


# ---------------------------------------------------------------------------
# API: Run & Compare
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    body = _json_body()
    try:
        data = _input_data(body)
        rec = Recorder()
        rec.start(body.get("algo", "bubble"), data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    rec.run_to_completion()
    return jsonify(rec.export())


@app.route("/api/compare", methods=["POST"])
def api_compare():
    body = _json_body()
    left_key  = body.get("left", "bubble")
    right_key = body.get("right", "quick")
    for key in (left_key, right_key):
        if get_algorithm(key) is None:
            return jsonify({"error": f"Unknown algorithm: {key}"}), 400

    try:
        data = _input_data(body)
        left, right = Recorder(), Recorder()
        left.start(left_key, data)
        right.start(right_key, data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    left.run_to_completion()
    right.run_to_completion()
    result = compare(left, right)
    return jsonify({
        "left":         result.left.__dict__,
        "right":        result.right.__dict__,
        "winner_swaps": result.winner_swaps,
        "winner_time":  result.winner_time,
    })


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def _configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sort Step Visualizer server")
    parser.add_argument("--config", help="JSON file with playback settings")
    parser.add_argument("--data-count", type=int, dest="data_count")
    parser.add_argument("--max-data-count", type=int, dest="max_data_count")
    parser.add_argument("--step-duration", type=float, dest="step_duration")
    parser.add_argument("--intermission", type=float)
    parser.add_argument("--speed", choices=["slow", "normal", "fast", "turbo"])
    parser.add_argument("--seed", type=int)
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    parser.add_argument("--debug", action="store_true", default=None)
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = _parse_args()
    overrides = {k: v for k, v in vars(args).items() if k != "config"}
    cfg = load_config(args.config, overrides=overrides)
    _configure_logging(cfg.debug)
    configure(cfg)

    log.info("Sort Step Visualizer listening on http://%s:%d", cfg.host, cfg.port)
    app.run(debug=cfg.debug, host=cfg.host, port=cfg.port, threaded=False)
