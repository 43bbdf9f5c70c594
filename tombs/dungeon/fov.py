"""Field-of-view computation (recursive shadowcasting).

``compute_fov`` scans the eight octants around the origin, tracking the slopes
still open in each. A sight-blocking tile narrows the open range, so every tile
strictly behind it along a ray from the origin stays dark. Off-map tiles count
as sight-blocking.

The result is not guaranteed to be symmetric: A seeing B does not imply B sees
A. Callers only ever ask "what can the player see", so this is acceptable.

The function is pure; caching on the origin is the caller's job (see
``GameSession.refresh_fov``).
"""

from __future__ import annotations

from typing import FrozenSet, Iterator, Set, Tuple

Coord = Tuple[int, int]

# Octant transforms (xx, xy, yx, yy) mapping local (dx, dy) to map offsets.
_OCTANTS = (
    (1, 0, 0, 1),
    (0, 1, 1, 0),
    (0, -1, 1, 0),
    (-1, 0, 0, 1),
    (-1, 0, 0, -1),
    (0, -1, -1, 0),
    (0, 1, -1, 0),
    (1, 0, 0, -1),
)


class FieldOfView:
    """Immutable visible set for one origin."""

    __slots__ = ("origin", "radius", "_visible")

    def __init__(self, origin: Coord, radius: int, visible: FrozenSet[Coord]):
        self.origin = origin
        self.radius = radius
        self._visible = visible

    def is_visible(self, x: int, y: int) -> bool:
        return (x, y) in self._visible

    def __contains__(self, coord) -> bool:
        return coord in self._visible

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._visible)

    def __len__(self) -> int:
        return len(self._visible)

    @classmethod
    def empty(cls) -> "FieldOfView":
        return cls((-1, -1), 0, frozenset())


def compute_fov(dungeon_map, origin: Coord, radius: int, light_walls: bool = True) -> FieldOfView:
    """Return the tiles visible from ``origin`` within ``radius``.

    radius <= 0 means unlimited. With ``light_walls`` false, sight-blocking
    tiles are left out of the result even when their face is lit.
    """
    ox, oy = origin
    if not dungeon_map.in_bounds(ox, oy):
        raise IndexError(f"fov origin {origin} outside map")
    limit = radius if radius > 0 else max(dungeon_map.width, dungeon_map.height)
    visible: Set[Coord] = {origin}
    for xx, xy, yx, yy in _OCTANTS:
        _cast_light(dungeon_map, ox, oy, 1, 1.0, 0.0, limit, xx, xy, yx, yy, visible)
    if not light_walls:
        visible = {c for c in visible if c == origin or not dungeon_map.blocks_sight(*c)}
    return FieldOfView(origin, radius, frozenset(visible))


def _cast_light(m, ox, oy, row, start, end, radius, xx, xy, yx, yy, visible: Set[Coord]) -> None:
    if start < end:
        return
    radius_sq = radius * radius
    new_start = 0.0
    for j in range(row, radius + 1):
        dx, dy = -j - 1, -j
        blocked = False
        while dx <= 0:
            dx += 1
            mx, my = ox + dx * xx + dy * xy, oy + dx * yx + dy * yy
            l_slope = (dx - 0.5) / (dy + 0.5)
            r_slope = (dx + 0.5) / (dy - 0.5)
            if start < r_slope:
                continue
            if end > l_slope:
                break
            if dx * dx + dy * dy <= radius_sq and m.in_bounds(mx, my):
                visible.add((mx, my))
            if blocked:
                if m.blocks_sight(mx, my):
                    new_start = r_slope
                    continue
                blocked = False
                start = new_start
            elif m.blocks_sight(mx, my) and j < radius:
                blocked = True
                _cast_light(m, ox, oy, j + 1, start, l_slope, radius, xx, xy, yx, yy, visible)
                new_start = r_slope
        if blocked:
            break


def mark_explored(dungeon_map, fov: FieldOfView) -> int:
    """Set ``explored`` on every visible tile; returns how many flipped."""
    flipped = 0
    for x, y in fov:
        tile = dungeon_map.grid[x][y]
        if not tile.explored:
            tile.explored = True
            flipped += 1
    return flipped


__all__ = ["FieldOfView", "compute_fov", "mark_explored"]
