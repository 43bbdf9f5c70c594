"""
project: Tombs of the Ancient Kings
module: server.py
License: MIT

Server bootstrap: logging configuration and the HTTP API runner.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from tombs import create_app


def start_server(host="0.0.0.0", port=5000, debug: bool = False, log_dir: str = "instance"):  # pragma: no cover
    """Configure logging and serve the JSON API with Flask's built-in server."""
    _configure_logging(log_dir)
    app = create_app()
    try:
        print(f"[INFO] Starting game API on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(log_dir: str = "instance", level: int = logging.INFO) -> str:
    """Send stdlib logging to the console and to a rotating <log_dir>/tombs.log.

    Safe to call more than once: existing root handlers are replaced. Returns the log file path.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "tombs.log")
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    handlers = [
        RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3),
        logging.StreamHandler(),
    ]
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return log_path
