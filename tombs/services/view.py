"""Read-only per-frame view of a session for renderers.

``build_frame`` is what a display layer consumes each frame: tile flags with
visibility, the entities in view (non-blocking first so actors draw on top of
items and corpses), the message tail, player hp and the hp bar fill. Building
a frame refreshes the FOV first; the session marks explored tiles on refresh.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Tuple

from tombs.models import colors
from tombs.models.entities import Entity


class TileView(NamedTuple):
    blocked: bool
    block_sight: bool
    explored: bool
    visible: bool

    @property
    def color(self) -> colors.Color | None:
        if not self.explored:
            return None
        if self.visible:
            return colors.LIGHT_WALL if self.block_sight else colors.LIGHT_GROUND
        return colors.DARK_WALL if self.block_sight else colors.DARK_GROUND

    @property
    def code(self) -> str:
        """Compact cell code: ' ' unseen, '#'/'.' lit wall/floor, ':'/',' remembered."""
        if not self.explored:
            return " "
        if self.visible:
            return "#" if self.block_sight else "."
        return ":" if self.block_sight else ","


@dataclass
class Frame:
    width: int
    height: int
    tiles: List[List[TileView]]
    entities: List[Entity]
    messages: List[Tuple[str, colors.Color]]
    hp: int
    max_hp: int
    hp_bar_width: int
    player_alive: bool
    turn: int = 0
    extra: dict = field(default_factory=dict)

    def tile(self, x: int, y: int) -> TileView:
        return self.tiles[x][y]

    def to_dict(self):
        return {
            "width": self.width,
            "height": self.height,
            "rows": ["".join(self.tiles[x][y].code for x in range(self.width)) for y in range(self.height)],
            "entities": [e.to_dict() for e in self.entities],
            "messages": [{"text": text, "color": colors.to_hex(color)} for text, color in self.messages],
            "hp": self.hp,
            "max_hp": self.max_hp,
            "hp_bar_width": self.hp_bar_width,
            "player_alive": self.player_alive,
            "turn": self.turn,
            **self.extra,
        }


def bar_fill(value: int, maximum: int, total_width: int) -> int:
    if maximum <= 0:
        return 0
    return max(0, int(value / maximum * total_width))


def visible_entities(session) -> List[Entity]:
    shown = [e for e in session.entities if session.is_visible(e.x, e.y)]
    # stable sort: False (non-blocking) first
    shown.sort(key=lambda e: e.blocks)
    return shown


def names_under(session, x: int, y: int) -> str:
    if not session.is_visible(x, y):
        return ""
    return ", ".join(e.name for e in session.entities_at(x, y))


def build_frame(session, bar_width: int = 20) -> Frame:
    session.refresh_fov()
    m = session.map
    tiles = [
        [
            TileView(t.blocked, t.block_sight, t.explored, session.is_visible(x, y))
            for y, t in enumerate(column)
        ]
        for x, column in enumerate(m.grid)
    ]
    fighter = session.player.fighter
    hp = fighter.hp if fighter else 0
    max_hp = fighter.max_hp if fighter else 0
    return Frame(
        width=m.width,
        height=m.height,
        tiles=tiles,
        entities=visible_entities(session),
        messages=session.messages.tail(session.rules.message_tail),
        hp=hp,
        max_hp=max_hp,
        hp_bar_width=bar_fill(hp, max_hp, bar_width),
        player_alive=session.player_alive,
        turn=session.turn,
        extra={"seed": session.seed, "fullscreen": session.fullscreen, "inventory": len(session.inventory)},
    )


def render_ascii(session) -> List[str]:
    """Plain-text map: explored tiles plus visible entity glyphs on top."""
    frame = build_frame(session)
    rows = [[frame.tiles[x][y].code for x in range(frame.width)] for y in range(frame.height)]
    for entity in frame.entities:
        rows[entity.y][entity.x] = entity.char
    return ["".join(r) for r in rows]


__all__ = ["Frame", "TileView", "bar_fill", "build_frame", "names_under", "render_ascii", "visible_entities"]
