from tombs.config import GameRules, env_bool, env_int
from tombs.dungeon import DungeonConfig


def test_rules_defaults():
    rules = GameRules()
    assert (rules.heal_amount, rules.lightning_damage, rules.lightning_range) == (4, 40, 5)
    assert (rules.confuse_range, rules.confuse_num_turns, rules.torch_radius) == (8, 10, 10)
    assert rules.inventory_capacity == 26
    assert rules.fov_light_walls is True


def test_rules_env_overrides(monkeypatch):
    monkeypatch.setenv("TOMBS_HEAL_AMOUNT", "6")
    monkeypatch.setenv("TOMBS_TORCH_RADIUS", "4")
    monkeypatch.setenv("TOMBS_FOV_LIGHT_WALLS", "0")
    monkeypatch.setenv("TOMBS_LIGHTNING_DAMAGE", "lots")
    rules = GameRules.from_env()
    assert rules.heal_amount == 6
    assert rules.torch_radius == 4
    assert rules.fov_light_walls is False
    assert rules.lightning_damage == 40


def test_dungeon_config_env_overrides(monkeypatch):
    monkeypatch.setenv("TOMBS_MAP_WIDTH", "60")
    monkeypatch.setenv("TOMBS_MAX_ROOMS", "12")
    monkeypatch.setenv("TOMBS_SEED", "9")
    config = DungeonConfig.from_env()
    assert config.width == 60
    assert config.height == 43
    assert config.max_rooms == 12
    assert config.seed == 9


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("TOMBS_X", " ")
    assert env_int("TOMBS_X", 3) == 3
    assert env_bool("TOMBS_X", True) is True
    monkeypatch.setenv("TOMBS_X", "yes")
    assert env_bool("TOMBS_X", False) is True
    monkeypatch.delenv("TOMBS_X")
    assert env_int("TOMBS_X", None) is None


def test_app_session_cap_from_env(monkeypatch):
    from tombs import create_app

    monkeypatch.setenv("TOMBS_MAX_SESSIONS", "5")
    assert create_app().config["TOMBS_MAX_SESSIONS"] == 5
    monkeypatch.setenv("TOMBS_MAX_SESSIONS", "lots")
    app = create_app()
    assert app.config["TOMBS_MAX_SESSIONS"] == 8
    assert app.config["SECRET_KEY"] is None
