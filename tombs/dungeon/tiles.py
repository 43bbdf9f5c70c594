from typing import List, Optional, Tuple


class Tile:
    """One map cell: movement/sight blocking plus the sticky explored flag."""

    __slots__ = ("blocked", "block_sight", "explored")

    def __init__(self, blocked: bool, block_sight: Optional[bool] = None, explored: bool = False):
        self.blocked = blocked
        # Sight blocking defaults to movement blocking; the model allows them to differ.
        self.block_sight = blocked if block_sight is None else block_sight
        self.explored = explored

    @classmethod
    def wall(cls) -> "Tile":
        return cls(True, True)

    def carve(self) -> None:
        self.blocked = False
        self.block_sight = False

    def __repr__(self):
        return f"Tile(blocked={self.blocked}, block_sight={self.block_sight}, explored={self.explored})"


Grid = List[List[Tile]]
Coord = Tuple[int, int]

__all__ = ["Tile", "Grid", "Coord"]
