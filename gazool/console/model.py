"""In-memory character console.

Screens are painted here first and then copied to a real terminal in one
go, which keeps animation frames from flickering.
"""
from numbers import Integral

import numpy as np

from gazool.console.palette import DEFAULT_COLOR, is_valid_color

CONSOLE_HEIGHT = 25
CONSOLE_WIDTH = 80

BLANK = ord(" ")


def _char_code(ch) -> int | None:
    """Return the byte value of a one-character string or an int, else None."""
    if isinstance(ch, str):
        if len(ch) != 1:
            return None
        ch = ord(ch)
    if isinstance(ch, Integral) and 0 <= ch <= 0xFF:
        return int(ch)
    return None


class Console:
    """
    Fixed-size grid of (character, colour) cells with a text cursor.

    Writing past the last cell scrolls: the top row is discarded and a
    blank row appears at the bottom. Out-of-range coordinates, characters
    and colours are ignored.
    """

    def __init__(
        self,
        height: int = CONSOLE_HEIGHT,
        width: int = CONSOLE_WIDTH,
        clear_color: int = DEFAULT_COLOR,
        term_color: int = DEFAULT_COLOR,
    ):
        self.height = height
        self.width = width
        self.clear_color = clear_color
        self.term_color = term_color
        self.cursor_row = 0
        self.cursor_col = 0
        self.chars = np.full((height, width), BLANK, dtype=np.uint8)
        self.colors = np.full((height, width), clear_color, dtype=np.uint8)

    def is_valid_index(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def put_glyph(self, row: int, col: int, ch, color: int) -> None:
        """Draw one character at (row, col) without moving the cursor."""
        code = _char_code(ch)
        if code is None or not is_valid_color(color) or not self.is_valid_index(row, col):
            return
        self.chars[row, col] = code
        self.colors[row, col] = color

    def read_cell(self, row: int, col: int) -> tuple[str, int] | None:
        """Return (character, colour) at a cell, or None when out of range."""
        if not self.is_valid_index(row, col):
            return None
        return chr(self.chars[row, col]), int(self.colors[row, col])

    def set_cursor(self, row: int, col: int) -> bool:
        if not self.is_valid_index(row, col):
            return False
        self.cursor_row = row
        self.cursor_col = col
        return True

    def clear(self) -> None:
        """Blank every cell with the clear colour and home the cursor."""
        self.chars.fill(BLANK)
        self.colors.fill(self.clear_color)
        self.cursor_row = 0
        self.cursor_col = 0

    def put_char(self, ch: str, color: int | None = None) -> None:
        """
        Write one character at the cursor and advance it.

        Handles '\\n' (next line), '\\r' (start of line) and '\\b' (erase
        the previous character).
        """
        color = self.term_color if color is None else color
        if ch == "\n":
            self._newline()
        elif ch == "\r":
            self.cursor_col = 0
        elif ch == "\b":
            if self.cursor_col > 0:
                self.cursor_col -= 1
            self.put_glyph(self.cursor_row, self.cursor_col, BLANK, color)
        else:
            if _char_code(ch) is None:
                return
            self.put_glyph(self.cursor_row, self.cursor_col, ch, color)
            self._advance()

    def write(self, text: str, color: int | None = None) -> None:
        """Write a string at the cursor, in `color` or the terminal colour."""
        if text is None:
            return
        for ch in text:
            self.put_char(ch, color)

    def _advance(self) -> None:
        if self.cursor_col < self.width - 1:
            self.cursor_col += 1
            return
        self.cursor_col = 0
        if self.cursor_row < self.height - 1:
            self.cursor_row += 1
        else:
            self._scroll()

    def _newline(self) -> None:
        self.cursor_col = 0
        if self.cursor_row < self.height - 1:
            self.cursor_row += 1
        else:
            self._scroll()

    def _scroll(self) -> None:
        self.chars[:-1] = self.chars[1:]
        self.colors[:-1] = self.colors[1:]
        self.chars[-1] = BLANK
        self.colors[-1] = self.clear_color

    def rows(self) -> list[str]:
        """Return the characters of every row as strings."""
        return [bytes(row).decode("latin-1") for row in self.chars]

    def to_text(self) -> str:
        """Render the console as plain text, trailing blanks stripped."""
        return "\n".join(row.rstrip() for row in self.rows()).rstrip("\n")
