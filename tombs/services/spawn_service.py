"""Monster and item spawn tables.

Species and item kinds are picked by a weighted draw over a small table. The
weights need not sum to 1; a draw walks the cumulative weights against
``rng.random() * total`` so the defaults (orc 0.8 / troll 0.2, potion 0.7 /
lightning 0.1 / confusion 0.2) behave like a plain threshold roll.

This module is stateless; callers pass the RNG so generation stays seedable.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence, TypeVar

from tombs.models import colors
from tombs.models.entities import BasicAi, DeathKind, Entity, Fighter, ItemKind

T = TypeVar("T")


@dataclass(frozen=True)
class MonsterTemplate:
    slug: str
    char: str
    name: str
    color: colors.Color
    max_hp: int
    defense: int
    power: int
    weight: float


@dataclass(frozen=True)
class ItemTemplate:
    slug: str
    char: str
    name: str
    color: colors.Color
    kind: ItemKind
    weight: float


MONSTER_TABLE = (
    MonsterTemplate("orc", "o", "orc", colors.DESATURATED_GREEN, max_hp=10, defense=0, power=3, weight=0.8),
    MonsterTemplate("troll", "T", "troll", colors.DARKER_GREEN, max_hp=16, defense=1, power=4, weight=0.2),
)

ITEM_TABLE = (
    ItemTemplate("potion-healing", "!", "healing potion", colors.VIOLET, ItemKind.HEAL, weight=0.7),
    ItemTemplate("scroll-lightning", "#", "scroll of lightning bolt", colors.LIGHT_YELLOW, ItemKind.LIGHTNING, weight=0.1),
    ItemTemplate("scroll-confusion", "#", "scroll of confusion", colors.LIGHT_YELLOW, ItemKind.CONFUSE, weight=0.2),
)

PLAYER_STATS = {"max_hp": 30, "defense": 2, "power": 5}
CORPSE_CHAR = "%"
CORPSE_COLOR = colors.DARKER_RED


def weighted_choice(table: Sequence[T], rng: random.Random | None = None) -> T:
    if not table:
        raise ValueError("cannot choose from an empty spawn table")
    r = rng or random
    total = sum(entry.weight for entry in table)
    if total <= 0:
        raise ValueError("spawn table weights must be positive")
    roll = r.random() * total
    acc = 0.0
    for entry in table:
        acc += entry.weight
        if roll < acc:
            return entry
    # Float rounding can leave roll == total; the last entry owns the remainder.
    return table[-1]


def choose_monster(rng=None, table: Sequence[MonsterTemplate] = MONSTER_TABLE) -> MonsterTemplate:
    return weighted_choice(table, rng)


def choose_item(rng=None, table: Sequence[ItemTemplate] = ITEM_TABLE) -> ItemTemplate:
    return weighted_choice(table, rng)


def spawn_monster(template: MonsterTemplate, x: int, y: int) -> Entity:
    return Entity(
        x,
        y,
        template.char,
        template.name,
        template.color,
        blocks=True,
        alive=True,
        fighter=Fighter(
            max_hp=template.max_hp,
            hp=template.max_hp,
            defense=template.defense,
            power=template.power,
            on_death=DeathKind.MONSTER,
        ),
        ai=BasicAi(),
    )


def spawn_item(template: ItemTemplate, x: int, y: int) -> Entity:
    return Entity(x, y, template.char, template.name, template.color, blocks=False, item=template.kind)


def make_player(x: int = 0, y: int = 0) -> Entity:
    return Entity(
        x,
        y,
        "@",
        "player",
        colors.WHITE,
        blocks=True,
        alive=True,
        fighter=Fighter(hp=PLAYER_STATS["max_hp"], on_death=DeathKind.PLAYER, **PLAYER_STATS),
    )


__all__ = [
    "MonsterTemplate",
    "ItemTemplate",
    "MONSTER_TABLE",
    "ITEM_TABLE",
    "CORPSE_CHAR",
    "CORPSE_COLOR",
    "weighted_choice",
    "choose_monster",
    "choose_item",
    "spawn_monster",
    "spawn_item",
    "make_player",
]
