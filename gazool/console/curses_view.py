"""Curses terminal view."""
import curses

from gazool.console import keys
from gazool.console.model import Console
from gazool.console.palette import background, foreground
from gazool.console.view import BaseView

# Palette index (0-7) -> curses colour
CURSES_COLORS = [
    curses.COLOR_BLACK,
    curses.COLOR_BLUE,
    curses.COLOR_GREEN,
    curses.COLOR_CYAN,
    curses.COLOR_RED,
    curses.COLOR_MAGENTA,
    curses.COLOR_YELLOW,
    curses.COLOR_WHITE,
]

KEY_MAP = {
    curses.KEY_UP: keys.KEY_UP,
    curses.KEY_DOWN: keys.KEY_DOWN,
    curses.KEY_LEFT: keys.KEY_LEFT,
    curses.KEY_RIGHT: keys.KEY_RIGHT,
}


class CursesView(BaseView):
    """Non-blocking curses screen; colour pairs are allocated on first use."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._pairs: dict[tuple[int, int], int] = {}
        self._has_colors = curses.has_colors()

        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.noecho()
        curses.cbreak()
        stdscr.nodelay(True)
        stdscr.keypad(True)
        if self._has_colors:
            curses.start_color()

    def poll_key(self) -> int:
        ch = self.stdscr.getch()
        if ch == -1:
            return keys.NO_KEY
        if ch in KEY_MAP:
            return KEY_MAP[ch]
        if 0 <= ch < 128:
            return ch
        return keys.NO_KEY

    def _attr(self, color: int) -> int:
        fg = foreground(color)
        attr = curses.A_BOLD if fg > 7 else curses.A_NORMAL
        if not self._has_colors:
            return attr

        key = (fg & 0x7, background(color))
        if key not in self._pairs:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return attr
            curses.init_pair(pair, CURSES_COLORS[key[0]], CURSES_COLORS[key[1]])
            self._pairs[key] = pair
        return attr | curses.color_pair(self._pairs[key])

    def present(self, console: Console) -> None:
        """Copy the console to the terminal, one run of equal colour at a time."""
        if console is None:
            return

        max_y, max_x = self.stdscr.getmaxyx()
        for row in range(min(console.height, max_y)):
            text = bytes(console.chars[row]).decode("latin-1")
            colors = console.colors[row]
            width = min(console.width, max_x)
            start = 0
            while start < width:
                end = start + 1
                while end < width and colors[end] == colors[start]:
                    end += 1
                try:
                    self.stdscr.addstr(row, start, text[start:end], self._attr(int(colors[start])))
                except curses.error:
                    # Writing the bottom-right cell moves the cursor off-screen
                    pass
                start = end
        self.stdscr.refresh()
