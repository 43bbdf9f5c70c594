from dataclasses import dataclass
from typing import Optional

from tombs.config import env_int


@dataclass
class DungeonConfig:
    width: int = 80
    height: int = 43
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10
    max_room_monsters: int = 3
    max_room_items: int = 2
    seed: Optional[int] = None

    def __post_init__(self):
        if self.room_min_size <= 0 or self.room_min_size > self.room_max_size:
            raise ValueError(f"invalid room size bounds {self.room_min_size}..{self.room_max_size}")
        if self.room_max_size >= self.width or self.room_max_size >= self.height:
            raise ValueError(f"rooms up to {self.room_max_size} do not fit a {self.width}x{self.height} map")
        if self.max_rooms < 0 or self.max_room_monsters < 0 or self.max_room_items < 0:
            raise ValueError("room and placement counts must be non-negative")

    @classmethod
    def from_env(cls) -> "DungeonConfig":
        defaults = cls()
        return cls(
            width=env_int("TOMBS_MAP_WIDTH", defaults.width),
            height=env_int("TOMBS_MAP_HEIGHT", defaults.height),
            max_rooms=env_int("TOMBS_MAX_ROOMS", defaults.max_rooms),
            room_min_size=env_int("TOMBS_ROOM_MIN_SIZE", defaults.room_min_size),
            room_max_size=env_int("TOMBS_ROOM_MAX_SIZE", defaults.room_max_size),
            max_room_monsters=env_int("TOMBS_MAX_ROOM_MONSTERS", defaults.max_room_monsters),
            max_room_items=env_int("TOMBS_MAX_ROOM_ITEMS", defaults.max_room_items),
            seed=env_int("TOMBS_SEED", None),
        )


__all__ = ["DungeonConfig"]
