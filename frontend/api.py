# frontend/api.py

import threading
import uuid

from flask import Blueprint, request, jsonify

from backend.config import load_config
from backend.game import GameSession

api_blueprint = Blueprint("api", __name__)

# session_id -> (lock, GameSession). A session's board is only touched
# while holding its lock. Finished sessions are dropped after the selection
# that ends them, so the registry only holds games still in play.
_sessions = {}
_registry_lock = threading.Lock()


def _get_session(session_id):
    with _registry_lock:
        return _sessions.get(session_id)


def _drop_session(session_id):
    with _registry_lock:
        _sessions.pop(session_id, None)


def session_count():
    with _registry_lock:
        return len(_sessions)


def clear_sessions():
    with _registry_lock:
        _sessions.clear()


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    data = request.get_json(silent=True) or {}
    try:
        config = load_config(
            data.get("profile", "classic"),
            rows=data.get("rows"),
            cols=data.get("cols"),
            mine_divisor=data.get("mine_divisor"),
            seed=data.get("seed"),
        )
        game = GameSession.from_config(config)
    except KeyError as e:
        return jsonify({"error": str(e.args[0])}), 400
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    session_id = uuid.uuid4().hex
    with _registry_lock:
        _sessions[session_id] = (threading.Lock(), game)

    return jsonify({"session_id": session_id, **game.get_state()})


@api_blueprint.route("/select", methods=["POST"])
def select():
    data = request.get_json(silent=True) or {}
    session_id = data.get("session_id")
    row = data.get("row")
    col = data.get("col")

    if not isinstance(session_id, str) or row is None or col is None:
        return jsonify({"error": "Invalid input"}), 400

    entry = _get_session(session_id)
    if entry is None:
        return jsonify({"error": f"Unknown session '{session_id}'"}), 404

    lock, game = entry
    with lock:
        result = game.select(row, col)
        state = game.get_state()
        if game.is_game_over():
            _drop_session(session_id)

    return jsonify({
        "outcome": result.outcome.value,
        "proximity": result.proximity,
        **state,
    })


@api_blueprint.route("/state/<session_id>", methods=["GET"])
def get_state(session_id):
    entry = _get_session(session_id)
    if entry is None:
        return jsonify({"error": f"Unknown session '{session_id}'"}), 404

    lock, game = entry
    with lock:
        return jsonify(game.get_state())
