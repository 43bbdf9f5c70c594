"""Straight and L-shaped corridor carving.

Corridors are one tile wide and axis aligned. Each straight run walks the
inclusive range between its endpoints using min/max, so carving A->B and B->A
produce the same tile set.
"""

from __future__ import annotations

from typing import List, Tuple

Coord = Tuple[int, int]


def carve_h_tunnel(dungeon_map, x1: int, x2: int, y: int) -> List[Coord]:
    carved = []
    for x in range(min(x1, x2), max(x1, x2) + 1):
        dungeon_map.carve(x, y)
        carved.append((x, y))
    return carved


def carve_v_tunnel(dungeon_map, y1: int, y2: int, x: int) -> List[Coord]:
    carved = []
    for y in range(min(y1, y2), max(y1, y2) + 1):
        dungeon_map.carve(x, y)
        carved.append((x, y))
    return carved


def carve_l_tunnel(dungeon_map, a: Coord, b: Coord, horizontal_first: bool) -> List[Coord]:
    """Connect ``a`` to ``b`` with an L-shaped corridor.

    horizontal_first: run along a's row to b's column, then down b's column.
    Otherwise run along a's column to b's row, then along b's row.
    """
    (ax, ay), (bx, by) = a, b
    if horizontal_first:
        return carve_h_tunnel(dungeon_map, ax, bx, ay) + carve_v_tunnel(dungeon_map, ay, by, bx)
    return carve_v_tunnel(dungeon_map, ay, by, ax) + carve_h_tunnel(dungeon_map, ax, bx, by)


__all__ = ["carve_h_tunnel", "carve_v_tunnel", "carve_l_tunnel"]
