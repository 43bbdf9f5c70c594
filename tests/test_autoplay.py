from tombs.models.game_session import GameSession
from tombs.services.autoplay import choose_intent, simulate
from tombs.services.turn_service import Move, NoOp, OpenInventory, PickUp
from tests.factories import make_session, orc, potion


def test_agent_drinks_potion_when_hurt():
    session = make_session()
    session.player.fighter.hp = 10
    session.inventory.append(potion())
    assert choose_intent(session) == OpenInventory(0)


def test_agent_picks_up_items_underfoot():
    session = make_session(player_at=(2, 3), entities=[potion(2, 3), orc(8, 3)])
    assert choose_intent(session) == PickUp()


def test_agent_heads_for_nearest_monster_before_items():
    session = make_session(player_at=(2, 3), entities=[potion(3, 3), orc(2, 5)])
    assert choose_intent(session) == Move(0, 1)


def test_agent_heads_for_items_when_no_monsters():
    session = make_session(player_at=(2, 3), entities=[potion(5, 3)])
    assert choose_intent(session) == Move(1, 0)


def test_dead_agent_waits():
    session = make_session()
    session.player.alive = False
    assert choose_intent(session) == NoOp()


def test_simulation_is_deterministic_per_seed():
    a = GameSession.new(seed=11)
    b = GameSession.new(seed=11)
    played_a = simulate(a, 60)
    played_b = simulate(b, 60)
    assert played_a == played_b
    assert a.player.pos == b.player.pos
    assert a.turn == b.turn
    assert a.messages.texts() == b.messages.texts()


def test_simulation_stops_when_player_dies():
    session = make_session()
    session.player.alive = False
    assert simulate(session, 10) == 0
