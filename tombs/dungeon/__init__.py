"""Public dungeon package interface."""

from .config import DungeonConfig
from .fov import FieldOfView, compute_fov, mark_explored
from .generator import GenerationResult, Generator, generate
from .map import DungeonMap
from .rooms import Rect
from .tiles import Tile
from .tunnels import carve_h_tunnel, carve_l_tunnel, carve_v_tunnel

__all__ = [
    "DungeonConfig",
    "DungeonMap",
    "FieldOfView",
    "GenerationResult",
    "Generator",
    "Rect",
    "Tile",
    "carve_h_tunnel",
    "carve_l_tunnel",
    "carve_v_tunnel",
    "compute_fov",
    "generate",
    "mark_explored",
]
