"""Colour bytes: low nibble foreground (16 colours), high nibble background (8 colours)."""
from numbers import Integral

FGND_BLACK = 0x0
FGND_BLUE = 0x1
FGND_GREEN = 0x2
FGND_CYAN = 0x3
FGND_RED = 0x4
FGND_MAG = 0x5
FGND_BRWN = 0x6
FGND_LGRAY = 0x7
FGND_DGRAY = 0x8
FGND_BBLUE = 0x9
FGND_BGRN = 0xA
FGND_BCYAN = 0xB
FGND_PINK = 0xC
FGND_BMAG = 0xD
FGND_YLLW = 0xE
FGND_WHITE = 0xF

BGND_BLACK = 0x00
BGND_BLUE = 0x10
BGND_GREEN = 0x20
BGND_CYAN = 0x30
BGND_RED = 0x40
BGND_MAG = 0x50
BGND_BRWN = 0x60
BGND_LGRAY = 0x70

DEFAULT_COLOR = BGND_BLACK | FGND_LGRAY

# Tile value -> colour; anything larger uses TILE_COLOR_DEFAULT
TILE_COLORS = {
    2: BGND_BRWN | FGND_BLACK,
    4: BGND_CYAN | FGND_BLACK,
    8: BGND_BLUE | FGND_BLACK,
    16: BGND_GREEN | FGND_BLACK,
    32: BGND_RED | FGND_BLACK,
    64: BGND_MAG | FGND_BLACK,
}
TILE_COLOR_DEFAULT = BGND_MAG | FGND_WHITE


def is_valid_color(color: int) -> bool:
    return isinstance(color, Integral) and 0 <= color <= 0xFF


def foreground(color: int) -> int:
    return color & 0x0F


def background(color: int) -> int:
    return (color >> 4) & 0x07


def tile_color(value: int) -> int:
    return TILE_COLORS.get(value, TILE_COLOR_DEFAULT)
