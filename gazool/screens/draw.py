"""Paint screens onto a Console.

Every function accepts a None console and then draws nothing.
"""
import numpy as np

from gazool.console.model import Console
from gazool.console.palette import tile_color
from gazool.fields.board import TILE_HEIGHT, TILE_WIDTH, display_col, display_row
from gazool.screens.art import (
    BANNER_POS,
    GAME_BACKGROUND,
    SCORE_POS,
    TITLE_SCORE_POS,
    TITLE_SCREEN,
    TOP_SCORE_POS,
)


def draw_background(console: Console | None, screen: str) -> None:
    """Clear the console and write a full-screen text from the top-left corner."""
    if console is None:
        return
    console.clear()
    console.write(screen)


def draw_text(console: Console | None, row: int, col: int, text: str, color: int | None = None) -> None:
    if console is None or not console.set_cursor(row, col):
        return
    console.write(text, color)


def draw_score(console: Console | None, row: int, col: int, score: int) -> None:
    draw_text(console, row, col, str(score))


def draw_block(console: Console | None, row: int, col: int, value: int) -> None:
    """
    Draw one tile with its top-left corner at console (row, col).

    The tile is TILE_HEIGHT x TILE_WIDTH cells, coloured by value, with
    the value centred on the middle line.
    """
    if console is None:
        return
    color = tile_color(value)
    blank = " " * TILE_WIDTH
    label = f"{value:^{TILE_WIDTH}}"[:TILE_WIDTH]
    for offset in range(TILE_HEIGHT):
        text = label if offset == TILE_HEIGHT // 2 else blank
        draw_text(console, row + offset, col, text, color)


def draw_blocks(console: Console | None, grid: np.ndarray) -> None:
    """Draw every non-empty cell of a grid at its resting position."""
    if console is None or grid is None:
        return
    rows, cols = grid.shape
    for r in range(rows):
        for c in range(cols):
            value = int(grid[r, c])
            if value > 0:
                draw_block(console, display_row(r), display_col(c), value)


def _draw_scores(console: Console, session) -> None:
    draw_score(console, *SCORE_POS, session.score.current)
    draw_score(console, *TOP_SCORE_POS, session.score.high)


def draw_title(console: Console | None, high_score: int) -> None:
    draw_background(console, TITLE_SCREEN)
    draw_score(console, *TITLE_SCORE_POS, high_score)


def draw_board(console: Console | None, session) -> None:
    """Draw the resting board: frame, scores and every tile."""
    if console is None or session is None:
        return
    draw_background(console, GAME_BACKGROUND)
    _draw_scores(console, session)
    draw_blocks(console, session.board)


def draw_animation_frame(console: Console | None, session) -> None:
    """
    Draw one frame of a shift.

    Two layers: the frame with the tiles that are not moving (the shadow
    board), then every animated block on top. Moving blocks show their
    value before the merge, idle blocks the value after.
    """
    if console is None or session is None:
        return
    draw_background(console, GAME_BACKGROUND)
    _draw_scores(console, session)
    draw_blocks(console, session.shadow)
    for block in session.animations.visible():
        draw_block(console, block.cur_row, block.cur_col, block.value)


def draw_banner(console: Console | None, banner: str) -> None:
    draw_text(console, *BANNER_POS, banner)
