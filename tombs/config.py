"""Gameplay rule constants with environment overrides.

Effect magnitudes, ranges and view settings are global to a session rather than
carried per item. Every knob can be overridden through a ``TOMBS_*`` variable,
e.g. ``TOMBS_HEAL_AMOUNT=6``. Unparseable values fall back to the default and
emit a warn-level log line.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional

from tombs.logging_utils import get_logger

log = get_logger("config")

_TRUTHY = {"1", "true", "yes", "on"}


def env_int(key: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        log.warn(event="config_ignored", key=key, value=raw)
        return default


def env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class GameRules:
    heal_amount: int = 4
    lightning_damage: int = 40
    lightning_range: int = 5
    confuse_range: int = 8
    confuse_num_turns: int = 10
    torch_radius: int = 10
    fov_light_walls: bool = True
    inventory_capacity: int = 26
    message_tail: int = 6

    @classmethod
    def from_env(cls) -> "GameRules":
        """Build rules from defaults, applying ``TOMBS_<FIELD>`` overrides."""
        values = {}
        for f in fields(cls):
            key = f"TOMBS_{f.name.upper()}"
            if f.type in (bool, "bool"):
                values[f.name] = env_bool(key, f.default)
            else:
                values[f.name] = env_int(key, f.default)
        return cls(**values)


__all__ = ["GameRules", "env_int", "env_bool"]
