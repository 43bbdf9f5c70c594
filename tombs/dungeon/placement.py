"""Per-room monster and item placement.

Each accepted room rolls a monster count in ``[0, max_room_monsters]`` and,
independently, an item count in ``[0, max_room_items]``. Every entity gets one
random interior tile; if that tile is already taken by a blocking entity the
entity is skipped (no retry), which keeps placement a single pass.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from tombs.models.entities import Entity
from tombs.services import spawn_service
from tombs.services.movement import is_blocked

from .rooms import Rect


def _random_interior(room: Rect, rng):
    return rng.randint(room.x1 + 1, room.x2 - 1), rng.randint(room.y1 + 1, room.y2 - 1)


def place_entities(
    room: Rect,
    dungeon_map,
    entities: List[Entity],
    max_monsters: int,
    max_items: int,
    rng,
    metrics: Dict[str, int | float] | None = None,
    monster_table: Sequence[spawn_service.MonsterTemplate] = spawn_service.MONSTER_TABLE,
    item_table: Sequence[spawn_service.ItemTemplate] = spawn_service.ITEM_TABLE,
) -> List[Entity]:
    """Populate ``room``, appending new entities to ``entities``.

    ``entities`` doubles as the occupancy list so later rooms (and the player,
    if already present) are respected. Returns only the entities added here.
    """
    metrics = metrics if metrics is not None else {}
    placed: List[Entity] = []

    for _ in range(rng.randint(0, max_monsters)):
        x, y = _random_interior(room, rng)
        if is_blocked(x, y, dungeon_map, entities):
            metrics["placements_skipped"] = metrics.get("placements_skipped", 0) + 1
            continue
        monster = spawn_service.spawn_monster(spawn_service.choose_monster(rng, monster_table), x, y)
        entities.append(monster)
        placed.append(monster)
        metrics["monsters_placed"] = metrics.get("monsters_placed", 0) + 1

    for _ in range(rng.randint(0, max_items)):
        x, y = _random_interior(room, rng)
        if is_blocked(x, y, dungeon_map, entities):
            metrics["placements_skipped"] = metrics.get("placements_skipped", 0) + 1
            continue
        item = spawn_service.spawn_item(spawn_service.choose_item(rng, item_table), x, y)
        entities.append(item)
        placed.append(item)
        metrics["items_placed"] = metrics.get("items_placed", 0) + 1

    return placed


__all__ = ["place_entities"]
