"""Turn orchestration: key -> intent -> player action -> monster turns.

A turn is fully synchronous. ``play_turn`` resolves the player's intent,
refreshes the FOV if the player moved, and then, only when the intent cost a
turn and the player is still alive, lets every AI-driven entity act once in
entity-list order.

The result is a ``PlayerAction``:
    * ``TOOK_TURN``: movement or an attack; monsters act afterwards.
    * ``DID_NOT_TAKE_TURN``: pick-up, inventory use, display toggles, unknown
      keys, or anything attempted while dead; monsters do not act.
    * ``EXIT``: the caller should leave its loop; nothing else happens.

Monsters act on ``TOOK_TURN`` only. Gating on "not DID_NOT_TAKE_TURN" would be
the same thing, because ``EXIT`` returns before monsters are considered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from tombs.logging_utils import get_logger

from . import item_service
from .combat_service import attack
from .monster_ai import take_turn
from .movement import move_by

log = get_logger("turns")


class PlayerAction(str, Enum):
    TOOK_TURN = "took_turn"
    DID_NOT_TAKE_TURN = "did_not_take_turn"
    EXIT = "exit"


@dataclass(frozen=True)
class Move:
    dx: int
    dy: int


@dataclass(frozen=True)
class PickUp:
    pass


@dataclass(frozen=True)
class OpenInventory:
    choice: Optional[int] = None


@dataclass(frozen=True)
class ToggleFullscreen:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class NoOp:
    pass


Intent = Union[Move, PickUp, OpenInventory, ToggleFullscreen, Exit, NoOp]

KEYMAP: Dict[str, Intent] = {
    "up": Move(0, -1),
    "down": Move(0, 1),
    "left": Move(-1, 0),
    "right": Move(1, 0),
    "k": Move(0, -1),
    "j": Move(0, 1),
    "h": Move(-1, 0),
    "l": Move(1, 0),
    "y": Move(-1, -1),
    "u": Move(1, -1),
    "b": Move(-1, 1),
    "n": Move(1, 1),
    "g": PickUp(),
    "i": OpenInventory(),
    "alt+enter": ToggleFullscreen(),
    "escape": Exit(),
}


def decode_key(key: str, choice: Optional[int] = None) -> Intent:
    """Map a key name to an intent. ``choice`` is the inventory menu pick for ``i``."""
    intent = KEYMAP.get((key or "").strip().lower(), NoOp())
    if isinstance(intent, OpenInventory):
        return OpenInventory(choice)
    return intent


def player_move_or_attack(session, dx: int, dy: int) -> None:
    """Attack whatever fighter occupies the destination, otherwise try to move."""
    player = session.player
    x, y = player.x + dx, player.y + dy
    target = next(
        (e for e in session.entities if e is not player and e.fighter is not None and e.pos == (x, y)),
        None,
    )
    if target is not None:
        attack(session, player, target)
    else:
        move_by(player, dx, dy, session.map, session.entities)


def handle_intent(session, intent: Intent) -> PlayerAction:
    if isinstance(intent, Exit):
        return PlayerAction.EXIT
    if isinstance(intent, ToggleFullscreen):
        session.fullscreen = not session.fullscreen
        return PlayerAction.DID_NOT_TAKE_TURN
    if not session.player_alive:
        return PlayerAction.DID_NOT_TAKE_TURN
    if isinstance(intent, Move):
        player_move_or_attack(session, intent.dx, intent.dy)
        return PlayerAction.TOOK_TURN
    if isinstance(intent, PickUp):
        item = item_service.item_at(session, *session.player.pos)
        if item is not None:
            item_service.pick_item_up(session, item)
        return PlayerAction.DID_NOT_TAKE_TURN
    if isinstance(intent, OpenInventory):
        # An empty inventory or an out-of-range pick is a dismissed menu.
        choice = intent.choice
        if choice is not None and 0 <= choice < len(session.inventory):
            item_service.use_item(session, choice)
        return PlayerAction.DID_NOT_TAKE_TURN
    return PlayerAction.DID_NOT_TAKE_TURN


def run_monster_turns(session) -> int:
    """Step every AI-driven entity once, in list order. Returns how many acted."""
    acted = 0
    # ``monsters`` is a fresh list, so removals during the pass cannot shift positions.
    for entity in session.monsters:
        # killed earlier in this pass
        if entity.ai is None:
            continue
        take_turn(session, entity)
        acted += 1
    return acted


def play_turn(session, intent: Intent) -> PlayerAction:
    result = handle_intent(session, intent)
    if result is PlayerAction.EXIT:
        return result
    session.refresh_fov()
    if result is PlayerAction.TOOK_TURN and session.player_alive:
        run_monster_turns(session)
        session.turn += 1
    log.debug(event="turn", session=session.id, intent=type(intent).__name__, result=result.value, turn=session.turn)
    return result


__all__ = [
    "Exit",
    "Intent",
    "KEYMAP",
    "Move",
    "NoOp",
    "OpenInventory",
    "PickUp",
    "PlayerAction",
    "ToggleFullscreen",
    "decode_key",
    "handle_intent",
    "play_turn",
    "player_move_or_attack",
    "run_monster_turns",
]
