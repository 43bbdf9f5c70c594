import os
import sys

import pytest

# Ensure project root on path so ``tombs`` and ``run`` import without an install.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tombs import create_app  # noqa: E402
from tombs.routes import game_api  # noqa: E402


@pytest.fixture()
def test_app():
    app = create_app({"TESTING": True, "TOMBS_MAX_SESSIONS": 3})
    yield app
    game_api.clear_sessions()


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    """Keep structured event lines out of captured output unless a test opts in."""
    monkeypatch.setenv("TOMBS_LOG_LEVEL", "error")
    yield
