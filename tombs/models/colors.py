"""Named RGB colours used for glyphs and message log entries."""

from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
LIGHT_GREY: Color = (159, 159, 159)
RED: Color = (255, 0, 0)
LIGHT_RED: Color = (255, 115, 115)
DARKER_RED: Color = (127, 0, 0)
ORANGE: Color = (255, 127, 0)
GREEN: Color = (0, 255, 0)
LIGHT_GREEN: Color = (115, 255, 115)
DARKER_GREEN: Color = (0, 127, 0)
DESATURATED_GREEN: Color = (63, 127, 63)
LIGHT_BLUE: Color = (115, 115, 255)
VIOLET: Color = (127, 0, 255)
LIGHT_VIOLET: Color = (185, 115, 255)
LIGHT_YELLOW: Color = (255, 255, 115)

# Map tile shades (remembered vs lit)
DARK_WALL: Color = (0, 0, 100)
LIGHT_WALL: Color = (130, 110, 50)
DARK_GROUND: Color = (50, 50, 150)
LIGHT_GROUND: Color = (200, 180, 50)


def to_hex(color: Color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"
