import importlib
import os
import sys

import pytest

# Import run.py as a module and exercise parse_args + main with a patched
# start_server so we do not actually start networking.


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "Tombs of the Ancient Kings" in out


def test_default_command_is_server(run_module):
    assert run_module.parse_args([]).command == "server"


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setenv("HOST", "127.0.0.1")
    import tombs.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    assert run_module.main(["server"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": False}


def test_server_flags_beat_env(monkeypatch, run_module):
    calls = {}
    monkeypatch.setenv("PORT", "5555")
    import tombs.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", lambda host, port, debug: calls.update(port=port, debug=debug))
    run_module.main(["server", "--port", "6001", "--debug"])
    assert calls == {"port": 6001, "debug": True}


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / ".env"
    env_file.write_text("TOMBS_TEST_MARKER=loaded\n")
    import tombs.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", lambda host, port, debug: None)
    try:
        run_module.main(["--env-file", str(env_file), "server"])
        assert os.environ.get("TOMBS_TEST_MARKER") == "loaded"
    finally:
        os.environ.pop("TOMBS_TEST_MARKER", None)


def test_simulate_prints_map_and_status(run_module, capsys):
    assert run_module.main(["simulate", "--seed", "3", "--turns", "25"]) == 0
    out = capsys.readouterr().out
    assert "HP:" in out
    assert "Seed" in out and "3" in out
    assert "@" in out or "%" in out
