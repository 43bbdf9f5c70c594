import pytest

from tombs.dungeon import DungeonMap, Tile, compute_fov, mark_explored

PILLAR = [
    "#######",
    "#.....#",
    "#..#..#",
    "#.....#",
    "#######",
]

CORRIDOR = [
    "###########",
    "#.........#",
    "###########",
]


def test_origin_always_visible():
    m = DungeonMap.from_rows(PILLAR)
    fov = compute_fov(m, (1, 2), 10)
    assert fov.is_visible(1, 2)
    assert (1, 2) in fov


def test_pillar_casts_shadow():
    m = DungeonMap.from_rows(PILLAR)
    fov = compute_fov(m, (1, 2), 10)
    assert fov.is_visible(3, 2)  # the pillar's face is lit
    assert not fov.is_visible(4, 2)
    assert not fov.is_visible(5, 2)
    assert fov.is_visible(5, 1)
    assert fov.is_visible(5, 3)


def test_light_walls_off_hides_sight_blockers():
    m = DungeonMap.from_rows(PILLAR)
    lit = compute_fov(m, (1, 2), 10, light_walls=True)
    unlit = compute_fov(m, (1, 2), 10, light_walls=False)
    assert (3, 2) in lit and (3, 2) not in unlit
    assert all(not m.blocks_sight(x, y) for x, y in unlit)
    assert set(unlit) <= set(lit)


def test_radius_limits_sight():
    m = DungeonMap.from_rows(CORRIDOR)
    fov = compute_fov(m, (1, 1), 3)
    assert fov.is_visible(4, 1)
    assert not fov.is_visible(5, 1)
    unlimited = compute_fov(m, (1, 1), 0)
    assert unlimited.is_visible(9, 1)


def test_origin_off_map_raises():
    m = DungeonMap.from_rows(CORRIDOR)
    with pytest.raises(IndexError):
        compute_fov(m, (20, 1), 5)


def test_mark_explored_is_sticky_and_counts_new_tiles():
    m = DungeonMap.from_rows(CORRIDOR)
    fov = compute_fov(m, (1, 1), 3)
    flipped = mark_explored(m, fov)
    assert flipped == len(fov)
    assert mark_explored(m, fov) == 0
    far = compute_fov(m, (9, 1), 3)
    mark_explored(m, far)
    assert m[1][1].explored and m[9][1].explored
    assert not m[5][1].explored


def test_tile_sight_defaults_to_blocked():
    assert Tile(True).block_sight is True
    assert Tile(False).block_sight is False
    assert Tile(True, block_sight=False).block_sight is False
    assert Tile(False).explored is False
