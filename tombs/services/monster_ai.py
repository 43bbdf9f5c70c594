"""Per-turn monster behaviour.

``take_turn`` lifts the AI value off the monster, hands it to the handler for
its variant, and stores whatever state the handler returns. While a handler
runs, the monster has no AI of its own, so handlers are free to move the
monster and mutate other entities (the player) without aliasing its state.

Handlers:
    * ``ai_basic``: if the monster is in the player's FOV, walk toward the
      player until adjacent (distance < 2), then attack while the player lives.
      Out of view it idles. Always stays ``BasicAi``.
    * ``ai_confused``: random single-tile stumble while the counter is >= 0,
      counting down; after that, announce recovery and return the wrapped AI.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from tombs.logging_utils import get_logger
from tombs.models import colors
from tombs.models.entities import Ai, BasicAi, ConfusedAi, Entity

from .combat_service import attack
from .movement import move_by, move_towards

log = get_logger("monster_ai")

ADJACENT_DISTANCE = 2.0


def ai_basic(session, monster: Entity, ai: BasicAi) -> Ai:
    player = session.player
    if session.is_visible(monster.x, monster.y):
        if monster.distance_to(player) >= ADJACENT_DISTANCE:
            move_towards(monster, player.x, player.y, session.map, session.entities)
        elif player.fighter is not None and player.fighter.hp > 0:
            attack(session, monster, player)
    return ai


def ai_confused(session, monster: Entity, ai: ConfusedAi) -> Ai:
    if ai.remaining_turns >= 0:
        dx = session.rng.randint(-1, 1)
        dy = session.rng.randint(-1, 1)
        move_by(monster, dx, dy, session.map, session.entities)
        return ConfusedAi(previous_ai=ai.previous_ai, remaining_turns=ai.remaining_turns - 1)
    session.messages.add(f"The {monster.name} is no longer confused!", colors.RED)
    log.debug(event="confusion_expired", session=session.id, name=monster.name)
    return ai.previous_ai


AI_HANDLERS: Dict[type, Callable[[object, Entity, Ai], Ai]] = {
    BasicAi: ai_basic,
    ConfusedAi: ai_confused,
}


def take_turn(session, monster: Entity) -> Optional[Ai]:
    """Run one AI step for ``monster``; returns its new AI (None if it had none)."""
    ai = monster.ai
    if ai is None:
        return None
    monster.ai = None
    handler = AI_HANDLERS[type(ai)]
    new_ai = handler(session, monster, ai)
    # A monster killed mid-turn keeps the cleared AI its death routine left.
    if monster.alive:
        monster.ai = new_ai
    return monster.ai


__all__ = ["AI_HANDLERS", "ai_basic", "ai_confused", "take_turn"]
