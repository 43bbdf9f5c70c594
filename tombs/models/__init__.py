from .entities import Ai, BasicAi, ConfusedAi, DeathKind, Entity, Fighter, ItemKind  # noqa: F401
from .messages import MessageLog  # noqa: F401

__all__ = [
    "Ai",
    "BasicAi",
    "ConfusedAi",
    "DeathKind",
    "Entity",
    "Fighter",
    "ItemKind",
    "MessageLog",
]
