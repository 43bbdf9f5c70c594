"""Melee resolution, damage, healing and death transitions.

Responsibilities:
    * ``attack``: flat ``power - defense`` damage with a log line either way.
    * ``take_damage``: subtract hp and run the death routine the first time hp
      reaches zero or below.
    * ``heal``: raise hp, clamped to ``max_hp``.
    * Death routines selected by the fighter's ``DeathKind`` tag through
      ``DEATH_CALLBACKS`` rather than by subclassing.

Dead entities are never removed from the map. A dead monster becomes a
non-blocking corpse without fighter or AI; a dead player keeps its slot and
fighter so the frame can still show 0 hp.
"""

from __future__ import annotations

from typing import Callable, Dict

from tombs.logging_utils import get_logger
from tombs.models import colors
from tombs.models.entities import DeathKind, Entity

from .spawn_service import CORPSE_CHAR, CORPSE_COLOR

log = get_logger("combat")


def player_death(session, player: Entity) -> None:
    session.messages.add("You died!", colors.RED)
    player.char = CORPSE_CHAR
    player.color = CORPSE_COLOR
    log.debug(event="player_death", session=session.id, turn=session.turn)


def monster_death(session, monster: Entity) -> None:
    session.messages.add(f"{monster.name} is dead!", colors.ORANGE)
    log.debug(event="monster_death", session=session.id, name=monster.name, x=monster.x, y=monster.y)
    monster.char = CORPSE_CHAR
    monster.color = CORPSE_COLOR
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.name = f"remains of {monster.name}"


DEATH_CALLBACKS: Dict[DeathKind, Callable[[object, Entity], None]] = {
    DeathKind.PLAYER: player_death,
    DeathKind.MONSTER: monster_death,
}


def take_damage(session, entity: Entity, damage: int) -> bool:
    """Apply ``damage`` to ``entity``. Returns True if this call killed it."""
    fighter = entity.fighter
    if fighter is None:
        return False
    fighter.hp -= damage
    if fighter.hp <= 0 and entity.alive:
        entity.alive = False
        DEATH_CALLBACKS[fighter.on_death](session, entity)
        return True
    return False


def attack(session, attacker: Entity, defender: Entity) -> int:
    """Resolve one melee attack; returns the damage dealt (0 when it glances off)."""
    if attacker is defender:
        raise ValueError(f"{attacker.name} cannot attack itself")
    power = attacker.fighter.power if attacker.fighter else 0
    defense = defender.fighter.defense if defender.fighter else 0
    damage = power - defense
    if damage > 0:
        session.messages.add(f"{attacker.name} attacks {defender.name} for {damage} hit points.", colors.WHITE)
        take_damage(session, defender, damage)
        return damage
    session.messages.add(f"{attacker.name} attacks {defender.name}, but it has no effect!", colors.WHITE)
    return 0


def heal(entity: Entity, amount: int) -> int:
    """Heal without exceeding max hp; returns the hp actually restored."""
    fighter = entity.fighter
    if fighter is None:
        return 0
    before = fighter.hp
    fighter.hp = min(fighter.max_hp, fighter.hp + amount)
    return fighter.hp - before


__all__ = ["DEATH_CALLBACKS", "attack", "heal", "monster_death", "player_death", "take_damage"]
