import pytest

from tombs.config import GameRules
from tombs.models.entities import BasicAi, ConfusedAi
from tombs.services import item_service
from tombs.services.item_service import NO_TARGET_MESSAGE, UseResult
from tests.factories import confusion_scroll, lightning_scroll, make_session, orc, potion

WALLED = [
    "#########",
    "#...#...#",
    "#...#...#",
    "#########",
]

LONG_HALL = [
    "#############",
    "#...........#",
    "#############",
]


def test_pick_up_moves_item_into_inventory():
    item = potion(2, 3)
    monster = orc(6, 3)
    session = make_session(player_at=(2, 3), entities=[item, monster])
    assert item_service.item_at(session, 2, 3) is item
    assert item_service.pick_item_up(session, item)
    assert session.inventory == [item]
    assert item not in session.entities
    assert session.entities == [session.player, monster]
    assert session.messages.last == "You picked up a healing potion!"


def test_full_inventory_refuses_27th_item():
    session = make_session(player_at=(2, 3))
    session.inventory.extend(potion() for _ in range(26))
    extra = potion(2, 3)
    session.entities.append(extra)
    assert not item_service.pick_item_up(session, extra)
    assert len(session.inventory) == 26
    assert extra in session.entities and extra.pos == (2, 3)
    assert session.messages.last == "Your inventory is full. You cannot pick up healing potion."


def test_heal_at_full_health_is_cancelled():
    session = make_session()
    session.inventory.append(potion())
    assert item_service.use_item(session, 0) is UseResult.CANCELLED
    assert len(session.inventory) == 1
    assert session.messages.texts() == ["You are already at full health."]


def test_heal_when_hurt_consumes_potion():
    session = make_session(rules=GameRules(heal_amount=4))
    session.player.fighter.hp = 20
    session.inventory.append(potion())
    assert item_service.use_item(session, 0) is UseResult.USED_UP
    assert session.player.fighter.hp == 24
    assert session.inventory == []
    assert session.messages.last == "Your wounds start to feel better!"


def test_lightning_without_target_is_cancelled():
    session = make_session()
    scroll = lightning_scroll()
    session.inventory.append(scroll)
    assert item_service.use_item(session, 0) is UseResult.CANCELLED
    assert session.inventory == [scroll]
    assert session.messages.last == NO_TARGET_MESSAGE
    assert "Cancelled" not in session.messages.texts()


def test_lightning_strikes_closest_visible_monster():
    near, far = orc(5, 3), orc(6, 3)
    session = make_session(player_at=(2, 3), entities=[far, near])
    session.inventory.append(lightning_scroll())
    assert item_service.use_item(session, 0) is UseResult.USED_UP
    assert session.inventory == []
    assert not near.alive and near.name == "remains of orc"
    assert far.alive
    assert (
        "A lightning bolt strikes the orc with a loud thunder! The damage is 40 hit points."
        in session.messages.texts()
    )


def test_lightning_range_is_inclusive():
    session = make_session(player_at=(2, 3), entities=[orc(7, 3)])
    assert item_service.closest_monster(session, 5) is not None
    session = make_session(player_at=(2, 3), entities=[orc(8, 3)])
    assert item_service.closest_monster(session, 5) is None


def test_targeting_ignores_monsters_out_of_view():
    session = make_session(rows=WALLED, player_at=(1, 1), entities=[orc(5, 1)])
    assert item_service.closest_monster(session, 8) is None


def test_targeting_ties_go_to_first_in_list():
    a, b = orc(4, 3), orc(2, 5)
    session = make_session(player_at=(2, 3), entities=[a, b])
    assert item_service.closest_monster(session, 5) is a


def test_targeting_skips_items_and_corpses():
    corpse = orc(3, 3)
    corpse.fighter = None
    corpse.ai = None
    session = make_session(player_at=(2, 3), entities=[corpse, potion(4, 3)])
    assert item_service.closest_monster(session, 5) is None


def test_confusion_wraps_current_ai():
    monster = orc(4, 3)
    original = monster.ai
    session = make_session(player_at=(2, 3), entities=[monster])
    session.inventory.append(confusion_scroll())
    assert item_service.use_item(session, 0) is UseResult.USED_UP
    assert isinstance(monster.ai, ConfusedAi)
    assert monster.ai.previous_ai is original
    assert monster.ai.remaining_turns == session.rules.confuse_num_turns
    assert session.messages.last == "The eyes of orc look vacant, as he starts to stumble around!"


def test_bad_inventory_index_raises():
    session = make_session()
    with pytest.raises(IndexError):
        item_service.use_item(session, 0)


def test_menu_helpers():
    session = make_session()
    assert item_service.inventory_options(session) == ["Inventory is empty."]
    session.inventory.extend([potion(), confusion_scroll()])
    options = item_service.inventory_options(session)
    assert item_service.menu_options(options) == ["(a) healing potion", "(b) scroll of confusion"]
    assert item_service.letter_to_index("B", 2) == 1
    assert item_service.letter_to_index("c", 2) is None
    assert item_service.letter_to_index("1", 2) is None
    with pytest.raises(ValueError):
        item_service.menu_options(["x"] * 27)


def test_basic_ai_value_is_shared_safely():
    assert BasicAi() == BasicAi()


def test_confusion_without_target_is_cancelled():
    session = make_session()
    scroll = confusion_scroll()
    session.inventory.append(scroll)
    assert item_service.use_item(session, 0) is UseResult.CANCELLED
    assert session.inventory == [scroll]
    assert session.messages.last == NO_TARGET_MESSAGE
    assert "Cancelled" not in session.messages.texts()


@pytest.mark.parametrize("orc_x, expected", [(9, UseResult.USED_UP), (10, UseResult.CANCELLED)])
def test_confusion_reaches_eight_tiles(orc_x, expected):
    monster = orc(orc_x, 1)
    session = make_session(rows=LONG_HALL, player_at=(1, 1), entities=[monster])
    assert session.rules.confuse_range == 8
    assert session.is_visible(orc_x, 1)
    session.inventory.append(confusion_scroll())
    assert item_service.use_item(session, 0) is expected
    assert isinstance(monster.ai, ConfusedAi) is (expected is UseResult.USED_UP)


def test_confusion_ignores_monsters_out_of_view():
    monster = orc(5, 1)
    session = make_session(rows=WALLED, player_at=(1, 1), entities=[monster])
    session.inventory.append(confusion_scroll())
    assert item_service.use_item(session, 0) is UseResult.CANCELLED
    assert isinstance(monster.ai, BasicAi)
    assert len(session.inventory) == 1
