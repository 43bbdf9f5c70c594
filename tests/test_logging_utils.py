import json

from tombs.logging_utils import get_logger


def test_key_value_format(monkeypatch, capsys):
    monkeypatch.setenv("TOMBS_LOG_LEVEL", "debug")
    monkeypatch.delenv("TOMBS_LOG_JSON", raising=False)
    get_logger("combat").info(event="monster_death", name="big orc", x=4, skipped=None)
    out = capsys.readouterr().out.strip()
    assert "level=info" in out
    assert "logger=combat" in out
    assert "event=monster_death" in out
    assert "name=big_orc" in out
    assert "x=4" in out
    assert "skipped" not in out


def test_json_format(monkeypatch, capsys):
    monkeypatch.setenv("TOMBS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TOMBS_LOG_JSON", "1")
    get_logger("turns").debug(event="turn", turn=3)
    rec = json.loads(capsys.readouterr().out.strip())
    assert rec["level"] == "debug"
    assert rec["event"] == "turn"
    assert rec["turn"] == 3
    assert rec["logger"] == "turns"


def test_level_filter_and_stderr_for_errors(monkeypatch, capsys):
    monkeypatch.setenv("TOMBS_LOG_LEVEL", "warn")
    log = get_logger("config")
    log.info(event="hidden")
    log.error(event="boom")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=boom" in captured.err


def test_loggers_are_cached():
    assert get_logger("a") is get_logger("a")
