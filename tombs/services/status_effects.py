"""Confusion: a temporary AI overlay.

Confusing a monster wraps its current AI (``BasicAi`` if it had none) in a
``ConfusedAi`` carrying a turn counter. While the counter is >= 0 the monster
stumbles randomly and the counter drops by one per turn; once it goes
negative the wrapper is dropped and the wrapped AI comes back unchanged.

A monster that is already confused is not wrapped twice: its counter is reset
and the originally wrapped AI is kept, so expiry still restores the state from
before the first confusion.
"""

from __future__ import annotations

from tombs.models.entities import Ai, BasicAi, ConfusedAi, Entity


def confuse(entity: Entity, turns: int) -> ConfusedAi:
    current = entity.ai
    if isinstance(current, ConfusedAi):
        confused = ConfusedAi(previous_ai=current.previous_ai, remaining_turns=turns)
    else:
        confused = ConfusedAi(previous_ai=current if current is not None else BasicAi(), remaining_turns=turns)
    entity.ai = confused
    return confused


def is_confused(entity: Entity) -> bool:
    return isinstance(entity.ai, ConfusedAi)


def base_ai(ai: Ai) -> Ai:
    """Strip any confusion overlay."""
    while isinstance(ai, ConfusedAi):
        ai = ai.previous_ai
    return ai


__all__ = ["confuse", "is_confused", "base_ai"]
