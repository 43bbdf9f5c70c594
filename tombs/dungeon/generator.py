"""Room-and-corridor map generation.

Phases, in order, for up to ``max_rooms`` attempts:
  * sample a room size and a top-left corner that keeps the room on the grid
  * reject the candidate (no retry) if it touches any accepted room
  * carve the room interior, leaving its boundary ring as wall
  * the first accepted room hosts the player at its center; every later room
    is joined to the previously accepted one by an L-shaped tunnel whose bend
    order is a coin flip
  * populate the room with monsters and items

The player's tile is reserved before the first room is populated, so nothing
spawns underneath the player.
"""

from __future__ import annotations

import random
import time
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from tombs.logging_utils import get_logger
from tombs.models.entities import Entity
from tombs.services import spawn_service

from .config import DungeonConfig
from .map import DungeonMap
from .metrics import init_metrics
from .placement import place_entities
from .rooms import Rect
from .tunnels import carve_l_tunnel

log = get_logger("dungeon")


class GenerationResult(NamedTuple):
    map: DungeonMap
    player_pos: Tuple[int, int]
    entities: List[Entity]
    rooms: List[Rect]
    seed: Optional[int]
    metrics: Dict[str, int | float]


class Generator:
    def __init__(
        self,
        config: DungeonConfig,
        rng: random.Random | None = None,
        monster_table: Sequence[spawn_service.MonsterTemplate] = spawn_service.MONSTER_TABLE,
        item_table: Sequence[spawn_service.ItemTemplate] = spawn_service.ITEM_TABLE,
    ):
        self.config = config
        self.seed = config.seed
        if rng is None:
            if self.seed is None:
                self.seed = random.randint(1, 1_000_000)
            rng = random.Random(self.seed)
        self.rng = rng
        self.monster_table = monster_table
        self.item_table = item_table

    def random_room(self) -> Rect:
        cfg, rng = self.config, self.rng
        w = rng.randint(cfg.room_min_size, cfg.room_max_size)
        h = rng.randint(cfg.room_min_size, cfg.room_max_size)
        x = rng.randint(0, cfg.width - w - 1)
        y = rng.randint(0, cfg.height - h - 1)
        return Rect.from_size(x, y, w, h)

    def run(self, occupants: Sequence[Entity] = ()) -> GenerationResult:
        """Build a map. ``occupants`` are pre-existing blockers (not moved, not returned)."""
        start = time.perf_counter()
        cfg, rng = self.config, self.rng
        metrics = init_metrics()
        dungeon_map = DungeonMap(cfg.width, cfg.height)
        rooms: List[Rect] = []
        placed: List[Entity] = []
        occupancy: List[Entity] = list(occupants)
        player_pos: Optional[Tuple[int, int]] = None

        for _ in range(cfg.max_rooms):
            metrics["rooms_attempted"] += 1
            room = self.random_room()
            if any(room.intersects(other) for other in rooms):
                metrics["rooms_rejected"] += 1
                continue
            for x, y in room.interior():
                dungeon_map.carve(x, y)
            center = room.center
            if not rooms:
                player_pos = center
                # Stand-in blocker so placement leaves the player's tile free.
                occupancy.append(Entity(center[0], center[1], "@", "player", blocks=True))
            else:
                horizontal_first = rng.random() < 0.5
                carve_l_tunnel(dungeon_map, rooms[-1].center, center, horizontal_first)
                metrics["tunnels_carved"] += 1
            before = len(occupancy)
            place_entities(
                room,
                dungeon_map,
                occupancy,
                cfg.max_room_monsters,
                cfg.max_room_items,
                rng,
                metrics,
                self.monster_table,
                self.item_table,
            )
            placed.extend(occupancy[before:])
            rooms.append(room)
            metrics["rooms_placed"] += 1

        if player_pos is None:
            raise ValueError("generation produced no rooms; max_rooms must be at least 1")
        metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
        log.debug(
            event="map_generated",
            seed=self.seed,
            rooms=metrics["rooms_placed"],
            rejected=metrics["rooms_rejected"],
            monsters=metrics["monsters_placed"],
            items=metrics["items_placed"],
            runtime_ms=metrics["runtime_ms"],
        )
        return GenerationResult(dungeon_map, player_pos, placed, rooms, self.seed, metrics)


def generate(
    width: int,
    height: int,
    room_count: int,
    room_size_range: Tuple[int, int],
    rng: random.Random | None = None,
    *,
    max_room_monsters: int = 3,
    max_room_items: int = 2,
    seed: Optional[int] = None,
) -> GenerationResult:
    """Functional wrapper over ``Generator`` taking the sizing knobs directly."""
    lo, hi = room_size_range
    config = DungeonConfig(
        width=width,
        height=height,
        max_rooms=room_count,
        room_min_size=lo,
        room_max_size=hi,
        max_room_monsters=max_room_monsters,
        max_room_items=max_room_items,
        seed=seed,
    )
    return Generator(config, rng).run()


__all__ = ["Generator", "GenerationResult", "generate"]
