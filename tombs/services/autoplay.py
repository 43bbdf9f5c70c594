"""Scripted agent for headless play.

Used by ``run.py simulate`` and by tests that need a game to progress without
a human. The agent is deterministic for a given session seed: every random
choice it makes goes through ``session.rng``.

Priorities each step:
    1. quaff a healing potion when at or below half health
    2. pick up an item underfoot while there is room
    3. walk toward (and so attack) the nearest visible monster
    4. walk toward the nearest visible item
    5. otherwise stumble in a random open direction
"""

from __future__ import annotations

from typing import List, Optional

from tombs.logging_utils import get_logger
from tombs.models.entities import Entity, ItemKind

from . import item_service
from .movement import step_towards
from .turn_service import Move, NoOp, OpenInventory, PickUp, PlayerAction, play_turn

log = get_logger("autoplay")

_DIRECTIONS = [(-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1)]


def _nearest(session, candidates: List[Entity]) -> Optional[Entity]:
    player = session.player
    best = None
    for entity in candidates:
        if best is None or player.distance_to(entity) < player.distance_to(best):
            best = entity
    return best


def choose_intent(session):
    player = session.player
    if not session.player_alive:
        return NoOp()
    fighter = player.fighter
    if fighter is not None and fighter.hp <= fighter.max_hp // 2:
        for idx, item in enumerate(session.inventory):
            if item.item is ItemKind.HEAL:
                return OpenInventory(idx)
    if (
        item_service.item_at(session, *player.pos) is not None
        and len(session.inventory) < session.rules.inventory_capacity
    ):
        return PickUp()

    visible = [e for e in session.entities if e is not player and session.is_visible(e.x, e.y)]
    target = _nearest(session, [e for e in session.monsters if e.fighter is not None and e in visible])
    if target is None and len(session.inventory) < session.rules.inventory_capacity:
        target = _nearest(session, [e for e in visible if e.item is not None])
    if target is not None:
        dx, dy = step_towards(player, target.x, target.y)
        if (dx, dy) != (0, 0) and not session.map.is_blocked(player.x + dx, player.y + dy):
            return Move(dx, dy)

    open_steps = [(dx, dy) for dx, dy in _DIRECTIONS if not session.map.is_blocked(player.x + dx, player.y + dy)]
    if not open_steps:
        return NoOp()
    return Move(*session.rng.choice(open_steps))


def simulate(session, steps: int) -> int:
    """Play up to ``steps`` agent decisions. Returns how many were played."""
    played = 0
    for _ in range(steps):
        if not session.player_alive:
            break
        intent = choose_intent(session)
        if play_turn(session, intent) is PlayerAction.EXIT:
            break
        played += 1
    log.info(
        event="simulation_finished",
        session=session.id,
        seed=session.seed,
        steps=played,
        turn=session.turn,
        alive=session.player_alive,
    )
    return played


__all__ = ["choose_intent", "simulate"]
