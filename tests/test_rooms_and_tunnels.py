import pytest

from tombs.dungeon import DungeonMap, Rect, carve_h_tunnel, carve_l_tunnel, carve_v_tunnel


def test_rect_geometry():
    room = Rect.from_size(2, 3, 4, 6)
    assert (room.x1, room.y1, room.x2, room.y2) == (2, 3, 6, 9)
    assert room.center == (4, 6)
    interior = set(room.interior())
    assert len(interior) == 3 * 5
    assert (2, 3) not in interior and (3, 4) in interior
    assert room.contains_interior(5, 8)
    assert not room.contains_interior(6, 8)


def test_rect_intersection_includes_shared_edges():
    a = Rect.from_size(0, 0, 5, 5)
    assert a.intersects(Rect.from_size(5, 0, 5, 5))
    assert a.intersects(Rect.from_size(2, 2, 1, 1))
    assert not a.intersects(Rect.from_size(6, 0, 5, 5))
    assert not a.intersects(Rect.from_size(0, 6, 5, 5))


def test_straight_tunnels_are_order_independent():
    fwd, back = DungeonMap(12, 12), DungeonMap(12, 12)
    assert set(carve_h_tunnel(fwd, 2, 7, 3)) == set(carve_h_tunnel(back, 7, 2, 3))
    assert set(carve_v_tunnel(fwd, 9, 1, 5)) == set(carve_v_tunnel(back, 1, 9, 5))
    assert fwd.to_rows() == back.to_rows()
    assert len(carve_h_tunnel(DungeonMap(12, 12), 2, 7, 3)) == 6


def test_l_tunnel_bend_order():
    m = DungeonMap(12, 12)
    carved = set(carve_l_tunnel(m, (1, 1), (6, 8), horizontal_first=True))
    assert (6, 1) in carved and (1, 8) not in carved
    m2 = DungeonMap(12, 12)
    carved2 = set(carve_l_tunnel(m2, (1, 1), (6, 8), horizontal_first=False))
    assert (1, 8) in carved2 and (6, 1) not in carved2
    assert not m.is_blocked(1, 1) and not m.is_blocked(6, 8)


def test_map_from_rows_round_trip_and_bounds():
    rows = ["####", "#..#", "####"]
    m = DungeonMap.from_rows(rows)
    assert (m.width, m.height) == (4, 3)
    assert m.to_rows() == ["####", "#..#", "####"]
    assert m.open_tiles() == [(1, 1), (2, 1)]
    assert m.is_blocked(-1, 0) and m.is_blocked(4, 1)
    with pytest.raises(IndexError):
        m.tile(4, 0)
