"""Inventory pick-up and item effects.

Each ``ItemKind`` maps to an effect function in ``ITEM_EFFECTS``. An effect
returns ``UseResult.USED_UP`` (the item is consumed) or
``UseResult.CANCELLED`` (inventory untouched). Effects that cancel for a
specific reason log it themselves; otherwise ``use_item`` logs a generic
"Cancelled" line.

Targeted effects pick the closest fighting, AI-driven entity other than the
user that is in the player's FOV and within range. Ties go to the entity that
comes first in the entity list.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, List, Optional

from tombs.logging_utils import get_logger
from tombs.models import colors
from tombs.models.entities import Entity, ItemKind

from .combat_service import heal, take_damage
from .status_effects import confuse

log = get_logger("items")

MENU_LIMIT = 26
EMPTY_INVENTORY_OPTION = "Inventory is empty."
NO_TARGET_MESSAGE = "No enemy is close enough to strike."


class UseResult(str, Enum):
    USED_UP = "used_up"
    CANCELLED = "cancelled"


def closest_monster(session, max_range: float, source: Optional[Entity] = None) -> Optional[Entity]:
    source = source or session.player
    closest: Optional[Entity] = None
    closest_dist = math.inf
    for entity in session.entities:
        if entity is source or entity.fighter is None or entity.ai is None:
            continue
        if not session.is_visible(entity.x, entity.y):
            continue
        dist = source.distance_to(entity)
        if dist <= max_range and dist < closest_dist:
            closest = entity
            closest_dist = dist
    return closest


def cast_heal(session, item: Entity) -> UseResult:
    fighter = session.player.fighter
    if fighter is None:
        return UseResult.CANCELLED
    if fighter.hp >= fighter.max_hp:
        session.messages.add("You are already at full health.", colors.RED)
        return UseResult.CANCELLED
    session.messages.add("Your wounds start to feel better!", colors.LIGHT_VIOLET)
    heal(session.player, session.rules.heal_amount)
    return UseResult.USED_UP


def cast_lightning(session, item: Entity) -> UseResult:
    target = closest_monster(session, session.rules.lightning_range)
    if target is None:
        session.messages.add(NO_TARGET_MESSAGE, colors.RED)
        return UseResult.CANCELLED
    damage = session.rules.lightning_damage
    session.messages.add(
        f"A lightning bolt strikes the {target.name} with a loud thunder! The damage is {damage} hit points.",
        colors.LIGHT_BLUE,
    )
    take_damage(session, target, damage)
    return UseResult.USED_UP


def cast_confuse(session, item: Entity) -> UseResult:
    target = closest_monster(session, session.rules.confuse_range)
    if target is None:
        session.messages.add(NO_TARGET_MESSAGE, colors.RED)
        return UseResult.CANCELLED
    confuse(target, session.rules.confuse_num_turns)
    session.messages.add(
        f"The eyes of {target.name} look vacant, as he starts to stumble around!",
        colors.LIGHT_GREEN,
    )
    log.debug(event="confusion_applied", session=session.id, name=target.name)
    return UseResult.USED_UP


ITEM_EFFECTS: Dict[ItemKind, Callable[[object, Entity], UseResult]] = {
    ItemKind.HEAL: cast_heal,
    ItemKind.LIGHTNING: cast_lightning,
    ItemKind.CONFUSE: cast_confuse,
}


def use_item(session, inventory_index: int) -> UseResult:
    """Use the inventory item at ``inventory_index``.

    A bad index is a caller bug and raises ``IndexError``.
    """
    if not 0 <= inventory_index < len(session.inventory):
        raise IndexError(f"inventory index {inventory_index} out of range")
    item = session.inventory[inventory_index]
    logged_before = len(session.messages)
    result = ITEM_EFFECTS[item.item](session, item) if item.item is not None else UseResult.CANCELLED
    if result is UseResult.USED_UP:
        del session.inventory[inventory_index]
    elif len(session.messages) == logged_before:
        session.messages.add("Cancelled", colors.WHITE)
    log.debug(event="item_used", session=session.id, item=item.name, result=result.value)
    return result


def item_at(session, x: int, y: int) -> Optional[Entity]:
    for entity in session.entities_at(x, y):
        if entity.item is not None:
            return entity
    return None


def pick_item_up(session, item: Entity) -> bool:
    """Move ``item`` from the map into the inventory if there is room."""
    if len(session.inventory) >= session.rules.inventory_capacity:
        session.messages.add(f"Your inventory is full. You cannot pick up {item.name}.", colors.RED)
        return False
    session.remove_entity(item)
    session.inventory.append(item)
    session.messages.add(f"You picked up a {item.name}!", colors.GREEN)
    log.debug(event="pick_up", session=session.id, item=item.name, inventory=len(session.inventory))
    return True


def inventory_options(session) -> List[str]:
    """Option labels for the inventory menu (item names, or a placeholder)."""
    if not session.inventory:
        return [EMPTY_INVENTORY_OPTION]
    return [item.name for item in session.inventory]


def menu_options(options: List[str]) -> List[str]:
    """Prefix each option with its selection letter: ``(a) healing potion``."""
    if len(options) > MENU_LIMIT:
        raise ValueError(f"Cannot have a menu with more than {MENU_LIMIT} options.")
    return [f"({chr(ord('a') + idx)}) {text}" for idx, text in enumerate(options)]


def letter_to_index(letter: str, option_count: int) -> Optional[int]:
    """Translate a menu key press into an option index, or None."""
    if len(letter) != 1 or not letter.isalpha():
        return None
    idx = ord(letter.lower()) - ord("a")
    return idx if 0 <= idx < option_count else None


__all__ = [
    "ITEM_EFFECTS",
    "UseResult",
    "cast_confuse",
    "cast_heal",
    "cast_lightning",
    "closest_monster",
    "inventory_options",
    "item_at",
    "letter_to_index",
    "menu_options",
    "pick_item_up",
    "use_item",
]
