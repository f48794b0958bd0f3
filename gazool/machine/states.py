from enum import Enum


class GameState(Enum):
    """
    Screen-level game states.

    Most screens come as a pair: an ENTER state that draws the screen
    once, and an INPUT state that waits for a key.
    """
    TITLE_ENTER = 0x01
    TITLE_INPUT = 0x02
    INSTRUCTIONS_ENTER = 0x03
    INSTRUCTIONS_INPUT = 0x04
    DIFFICULTY_ENTER = 0x05
    DIFFICULTY_INPUT = 0x06
    ROUND_START = 0x07
    ROUND_ENTER = 0x08
    ROUND_INPUT = 0x09
    SHIFTING = 0x0B
    SHIFT_DONE = 0x0C
    VICTORY = 0x0D
    DEFEAT = 0x0E
    GAME_OVER_INPUT = 0x1F


INPUT_STATES = frozenset(
    {
        GameState.TITLE_INPUT,
        GameState.INSTRUCTIONS_INPUT,
        GameState.DIFFICULTY_INPUT,
        GameState.ROUND_INPUT,
        GameState.GAME_OVER_INPUT,
    }
)
