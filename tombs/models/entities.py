"""Entity record and its optional capability components.

An ``Entity`` is anything on the map: the player, monsters, items and the
corpses monsters leave behind. Capabilities are plain optional fields:

- ``fighter``: combat stats plus the ``DeathKind`` tag picking the death routine.
- ``ai``: a ``BasicAi`` or ``ConfusedAi`` value (monsters only).
- ``item``: an ``ItemKind`` tag (items only).

AI values are immutable; a turn replaces the entity's AI with the value the
step function returns. ``ConfusedAi`` keeps the AI it wraps so expiry restores
exactly that value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from .colors import Color, WHITE


class DeathKind(str, Enum):
    PLAYER = "player"
    MONSTER = "monster"


class ItemKind(str, Enum):
    HEAL = "heal"
    LIGHTNING = "lightning"
    CONFUSE = "confuse"


@dataclass
class Fighter:
    max_hp: int
    hp: int
    defense: int
    power: int
    on_death: DeathKind

    def to_dict(self):
        return {
            "max_hp": self.max_hp,
            "hp": self.hp,
            "defense": self.defense,
            "power": self.power,
            "on_death": self.on_death.value,
        }


@dataclass(frozen=True)
class BasicAi:
    kind = "basic"


@dataclass(frozen=True)
class ConfusedAi:
    previous_ai: "Ai"
    remaining_turns: int
    kind = "confused"


Ai = Union[BasicAi, ConfusedAi]


@dataclass(eq=False)
class Entity:
    x: int
    y: int
    char: str
    name: str
    color: Color = WHITE
    blocks: bool = False
    alive: bool = False
    fighter: Optional[Fighter] = None
    ai: Optional[Ai] = None
    item: Optional[ItemKind] = field(default=None)

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def distance(self, x: int, y: int) -> float:
        return math.hypot(x - self.x, y - self.y)

    def distance_to(self, other: "Entity") -> float:
        return self.distance(other.x, other.y)

    def to_dict(self):
        return {
            "x": self.x,
            "y": self.y,
            "char": self.char,
            "name": self.name,
            "color": list(self.color),
            "blocks": self.blocks,
            "alive": self.alive,
            "fighter": self.fighter.to_dict() if self.fighter else None,
            "ai": self.ai.kind if self.ai else None,
            "item": self.item.value if self.item else None,
        }


__all__ = ["DeathKind", "ItemKind", "Fighter", "BasicAi", "ConfusedAi", "Ai", "Entity"]
