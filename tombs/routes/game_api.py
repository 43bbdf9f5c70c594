"""
project: Tombs of the Ancient Kings
module: game_api.py
License: MIT

Game session JSON API.

Endpoints create a session, return its current frame, accept one key press
per request, list the inventory menu, and answer "what is under the cursor"
queries. Sessions live only in this process; nothing is persisted.
"""

import threading
from collections import OrderedDict

from flask import Blueprint, current_app, jsonify, request

from tombs.config import GameRules
from tombs.dungeon.config import DungeonConfig
from tombs.logging_utils import get_logger
from tombs.models.game_session import GameSession
from tombs.services import item_service
from tombs.services.turn_service import decode_key, play_turn
from tombs.services.view import build_frame, names_under

log = get_logger("game_api")

bp_game = Blueprint("game", __name__)

# Simple in-process registry id->GameSession. Lock because the dev server may
# serve requests from several threads.
_sessions: "OrderedDict[str, GameSession]" = OrderedDict()
_sessions_lock = threading.Lock()


def _register(session: GameSession) -> None:
    cap = int(current_app.config.get("TOMBS_MAX_SESSIONS", 8))
    with _sessions_lock:
        _sessions[session.id] = session
        while len(_sessions) > max(1, cap):
            evicted, _ = _sessions.popitem(last=False)
            log.info(event="session_evicted", session=evicted)


def _lookup(session_id: str):
    with _sessions_lock:
        return _sessions.get(session_id)


def clear_sessions():
    with _sessions_lock:
        _sessions.clear()


def _unknown():
    return jsonify({"error": "unknown session"}), 404


@bp_game.route("/api/game", methods=["POST"])
def new_game():
    """Create a session. Body (optional): {"seed": int}."""
    payload = request.get_json(silent=True) or {}
    seed = payload.get("seed")
    if seed is not None and not isinstance(seed, int):
        return jsonify({"error": "seed must be an integer"}), 400
    session = GameSession.new(DungeonConfig.from_env(), GameRules.from_env(), seed=seed)
    _register(session)
    with session.lock:
        frame = build_frame(session).to_dict()
    return jsonify({"id": session.id, "frame": frame}), 201


@bp_game.route("/api/game/<session_id>")
def game_state(session_id):
    session = _lookup(session_id)
    if session is None:
        return _unknown()
    with session.lock:
        frame = build_frame(session).to_dict()
    return jsonify({"id": session.id, "frame": frame})


@bp_game.route("/api/game/<session_id>/action", methods=["POST"])
def game_action(session_id):
    """Resolve one key press.

    Body: {"key": "k"}, or for the inventory {"key": "i", "choice": 0} or
    {"key": "i", "letter": "a"}. The session lock is held for the whole turn.
    """
    session = _lookup(session_id)
    if session is None:
        return _unknown()
    payload = request.get_json(silent=True) or {}
    key = payload.get("key")
    choice = payload.get("choice")
    letter = payload.get("letter")
    if not isinstance(key, str) or not key:
        return jsonify({"error": "key is required"}), 400
    if choice is not None and (not isinstance(choice, int) or isinstance(choice, bool)):
        return jsonify({"error": "choice must be an integer"}), 400
    if letter is not None and (not isinstance(letter, str) or choice is not None):
        return jsonify({"error": "letter must be a string and cannot be combined with choice"}), 400
    with session.lock:
        if letter is not None:
            choice = item_service.letter_to_index(letter, len(session.inventory))
        result = play_turn(session, decode_key(key, choice))
        frame = build_frame(session).to_dict()
        turn = session.turn
    log.info(event="action", session=session.id, key=key, result=result.value, turn=turn)
    return jsonify({"id": session.id, "result": result.value, "frame": frame})


@bp_game.route("/api/game/<session_id>/inventory")
def game_inventory(session_id):
    session = _lookup(session_id)
    if session is None:
        return _unknown()
    with session.lock:
        count = len(session.inventory)
        options = item_service.menu_options(item_service.inventory_options(session))
    return jsonify({"count": count, "capacity": session.rules.inventory_capacity, "options": options})


@bp_game.route("/api/game/<session_id>/look")
def game_look(session_id):
    session = _lookup(session_id)
    if session is None:
        return _unknown()
    x = request.args.get("x", type=int)
    y = request.args.get("y", type=int)
    if x is None or y is None:
        return jsonify({"error": "x and y are required integers"}), 400
    with session.lock:
        names = names_under(session, x, y)
    return jsonify({"x": x, "y": y, "names": names})


@bp_game.route("/api/game/<session_id>", methods=["DELETE"])
def end_game(session_id):
    with _sessions_lock:
        session = _sessions.pop(session_id, None)
    if session is None:
        return _unknown()
    log.info(event="session_closed", session=session_id, turn=session.turn)
    return jsonify({"ok": True})
