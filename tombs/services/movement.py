"""Grid movement primitives shared by the player, monster AI and placement.

Moves that cannot happen (wall, off-map, another blocking entity in the way)
are silent no-ops. Callers that care can compare positions or use the boolean
return value.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from tombs.models.entities import Entity


def blocking_entity_at(x: int, y: int, entities: Iterable[Entity]) -> Optional[Entity]:
    for entity in entities:
        if entity.blocks and entity.pos == (x, y):
            return entity
    return None


def is_blocked(x: int, y: int, dungeon_map, entities: Iterable[Entity]) -> bool:
    if dungeon_map.is_blocked(x, y):
        return True
    return blocking_entity_at(x, y, entities) is not None


def move_by(entity: Entity, dx: int, dy: int, dungeon_map, entities: Iterable[Entity]) -> bool:
    x, y = entity.x + dx, entity.y + dy
    if is_blocked(x, y, dungeon_map, entities):
        return False
    entity.set_pos(x, y)
    return True


def step_towards(entity: Entity, target_x: int, target_y: int) -> tuple[int, int]:
    """Unit step (one of the 8 directions) from ``entity`` toward the target.

    Zero distance yields (0, 0) rather than dividing by zero.
    """
    dx = target_x - entity.x
    dy = target_y - entity.y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return 0, 0
    # round-half-away-from-zero, so a 45 degree vector (0.707) still moves diagonally
    return _round_away(dx / distance), _round_away(dy / distance)


def _round_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def move_towards(entity: Entity, target_x: int, target_y: int, dungeon_map, entities: Iterable[Entity]) -> bool:
    dx, dy = step_towards(entity, target_x, target_y)
    if (dx, dy) == (0, 0):
        return False
    return move_by(entity, dx, dy, dungeon_map, entities)


__all__ = ["blocking_entity_at", "is_blocked", "move_by", "step_towards", "move_towards"]
