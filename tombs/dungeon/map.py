"""Dungeon grid container.

The grid is column-major (``grid[x][y]``) to match how generation carves by
x ranges. Out-of-bounds coordinates are a caller bug and raise ``IndexError``
from the underlying lists except where a predicate documents otherwise.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .tiles import Grid, Tile


class DungeonMap:
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid map size {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = [[Tile.wall() for _ in range(height)] for _ in range(width)]

    def __getitem__(self, x: int) -> List[Tile]:
        return self.grid[x]

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"tile ({x},{y}) outside {self.width}x{self.height} map")
        return self.grid[x][y]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def carve(self, x: int, y: int) -> None:
        self.tile(x, y).carve()

    def is_blocked(self, x: int, y: int) -> bool:
        """Tile-level movement check. Off-map counts as blocked."""
        if not self.in_bounds(x, y):
            return True
        return self.grid[x][y].blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self.grid[x][y].block_sight

    def coords(self) -> Iterator[Tuple[int, int]]:
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def open_tiles(self) -> List[Tuple[int, int]]:
        return [(x, y) for x, y in self.coords() if not self.grid[x][y].blocked]

    @classmethod
    def from_rows(cls, rows: List[str]) -> "DungeonMap":
        """Build a map from row strings, ``#`` wall and anything else floor.

        Handy for hand-made fixtures; rows are indexed ``rows[y][x]``.
        """
        height = len(rows)
        width = max(len(r) for r in rows) if rows else 0
        m = cls(width, height)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch != "#":
                    m.carve(x, y)
        return m

    def to_rows(self) -> List[str]:
        return ["".join("#" if self.grid[x][y].blocked else "." for x in range(self.width)) for y in range(self.height)]


__all__ = ["DungeonMap"]
