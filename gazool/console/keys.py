"""Key codes produced by input sources.

Printable keys are their ASCII code. The four arrows use the same values
as curses so a terminal key can be passed through unchanged.
"""

NO_KEY = -1

KEY_DOWN = 0x102
KEY_UP = 0x103
KEY_LEFT = 0x104
KEY_RIGHT = 0x105


def char_of(key: int) -> str | None:
    """Return the lower-cased character for an ASCII key code."""
    if 0 <= key < 128:
        return chr(key).lower()
    return None
