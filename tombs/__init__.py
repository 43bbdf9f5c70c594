"""
project: Tombs of the Ancient Kings
module: __init__.py
License: MIT

Flask application factory.

The simulation itself (``tombs.dungeon``, ``tombs.models``, ``tombs.services``)
has no web dependency; this module only wires the JSON API blueprint that
exposes sessions to a remote renderer. Configuration comes from environment
variables, with a local ``.env`` loaded first when present.
"""

import logging
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so HOST, PORT, TOMBS_* etc. can be supplied without
# exporting shell variables during development.
load_dotenv()


def create_app(config: dict | None = None) -> Flask:
    """Build the Flask app and register the game blueprint."""
    from tombs.config import env_int

    app = Flask(__name__)
    app.config.update(TOMBS_MAX_SESSIONS=env_int("TOMBS_MAX_SESSIONS", 8))
    if config:
        app.config.update(config)

    from tombs.routes.game_api import bp_game

    app.register_blueprint(bp_game)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app


__all__ = ["create_app"]
