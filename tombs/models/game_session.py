"""Game session: the single owner of all mutable simulation state.

A session holds the map, the ordered entity list, the inventory, the message
log, the rules and the RNG, and is passed explicitly to every service
function. The player is kept both as an explicit reference and, by
convention, in slot 0 of ``entities``; removals are by identity and keep the
relative order of everything else.
"""

from __future__ import annotations

import random
import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from tombs.config import GameRules
from tombs.dungeon.config import DungeonConfig
from tombs.dungeon.fov import FieldOfView, compute_fov, mark_explored
from tombs.dungeon.generator import Generator
from tombs.logging_utils import get_logger
from tombs.services.spawn_service import make_player

from . import colors
from .entities import Entity
from .messages import MessageLog

log = get_logger("session")

WELCOME_MESSAGE = "Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings!"


class GameSession:
    def __init__(
        self,
        dungeon_map,
        player: Entity,
        entities: Optional[List[Entity]] = None,
        rules: Optional[GameRules] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        metrics: Optional[Dict[str, int | float]] = None,
    ):
        self.id = uuid.uuid4().hex[:12]
        self.map = dungeon_map
        self.player = player
        others = [e for e in (entities or []) if e is not player]
        self.entities: List[Entity] = [player, *others]
        self.inventory: List[Entity] = []
        self.messages = MessageLog()
        self.rules = rules or GameRules()
        self.rng = rng or random.Random(seed)
        self.seed = seed
        self.metrics = metrics or {}
        self.turn = 0
        self.fullscreen = False
        self.fov: FieldOfView = FieldOfView.empty()
        self._fov_origin: Optional[Tuple[int, int]] = None
        # Held by adapters for the whole of a turn; the services themselves never lock.
        self.lock = threading.Lock()

    @classmethod
    def new(
        cls,
        config: Optional[DungeonConfig] = None,
        rules: Optional[GameRules] = None,
        seed: Optional[int] = None,
    ) -> "GameSession":
        """Create the player, generate a map around it and greet them."""
        config = config or DungeonConfig()
        if seed is not None:
            config = replace(config, seed=seed)
        generator = Generator(config)
        player = make_player()
        result = generator.run()
        player.set_pos(*result.player_pos)
        session = cls(
            result.map,
            player,
            result.entities,
            rules=rules,
            rng=generator.rng,
            seed=result.seed,
            metrics=result.metrics,
        )
        session.messages.add(WELCOME_MESSAGE, colors.RED)
        session.refresh_fov()
        log.info(event="session_created", session=session.id, seed=session.seed, entities=len(session.entities))
        return session

    # ---- field of view -------------------------------------------------

    def refresh_fov(self, force: bool = False) -> bool:
        """Recompute FOV if the player moved since the last computation.

        Every recompute also marks the newly visible tiles explored, so the
        remembered map is kept whether or not anything renders the turn.
        """
        if not force and self._fov_origin == self.player.pos:
            return False
        self.fov = compute_fov(self.map, self.player.pos, self.rules.torch_radius, self.rules.fov_light_walls)
        self._fov_origin = self.player.pos
        mark_explored(self.map, self.fov)
        return True

    def is_visible(self, x: int, y: int) -> bool:
        return self.fov.is_visible(x, y)

    # ---- entity collection ---------------------------------------------

    @property
    def monsters(self) -> List[Entity]:
        return [e for e in self.entities if e.ai is not None]

    def entities_at(self, x: int, y: int) -> List[Entity]:
        return [e for e in self.entities if e.pos == (x, y)]

    def remove_entity(self, entity: Entity) -> None:
        """Remove by identity, preserving the order of the remaining entities."""
        if entity is self.player:
            raise ValueError("the player cannot be removed from the entity list")
        for idx, candidate in enumerate(self.entities):
            if candidate is entity:
                del self.entities[idx]
                return
        raise ValueError(f"{entity.name} is not on the map")

    @property
    def player_alive(self) -> bool:
        return self.player.alive


__all__ = ["GameSession", "WELCOME_MESSAGE"]
