"""Directional shift/merge engine.

The merge rule is written once, for a shift toward column 0. The other
three directions transform the board so that their target edge becomes
column 0, run the same pass, and transform the result back:

    LEFT   identity      / identity
    RIGHT  reverse_rows  / reverse_rows
    DOWN   rotate_right  / rotate_left
    UP     rotate_left   / rotate_right

Move events are mapped back to the caller's orientation through
`index_map` rather than a per-direction coordinate formula.
"""
import logging
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from gazool.fields.board import display_col, display_row
from gazool.fields.geometry import (
    Transform,
    identity,
    index_map,
    reverse_rows,
    rotate_left,
    rotate_right,
)

logger = logging.getLogger(__name__)


class Action(IntEnum):
    """Shift direction; the value is also the Gymnasium action index."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


NUM_ACTIONS = len(Action)


@dataclass(frozen=True)
class MoveEvent:
    """One tile's displacement during a shift."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int
    start_value: int
    end_value: int

    @property
    def merged(self) -> bool:
        return self.end_value != self.start_value

    def to_display_space(self) -> "MoveEvent":
        """Re-express grid coordinates as console coordinates."""
        return MoveEvent(
            start_row=display_row(self.start_row),
            start_col=display_col(self.start_col),
            end_row=display_row(self.end_row),
            end_col=display_col(self.end_col),
            start_value=self.start_value,
            end_value=self.end_value,
        )


@dataclass(frozen=True)
class Orientation:
    before: Transform
    after: Transform


ORIENTATIONS = {
    Action.LEFT: Orientation(identity, identity),
    Action.RIGHT: Orientation(reverse_rows, reverse_rows),
    Action.DOWN: Orientation(rotate_right, rotate_left),
    Action.UP: Orientation(rotate_left, rotate_right),
}


@dataclass
class ShiftResult:
    board: np.ndarray
    shadow: np.ndarray
    events: list[MoveEvent] = field(default_factory=list)
    gained: int = 0

    @property
    def moved(self) -> bool:
        return bool(self.events)


def shift_row_left(row: np.ndarray) -> tuple[list[tuple[int, int, int, int]], int]:
    """
    Slide and merge one row toward index 0, in place.

    Two cursors walk the row: `anchor` is the last settled cell and `scan`
    the next cell to look at. The anchor only moves forward, so a tile
    produced by a merge is never merged again in the same pass.

    Args:
        row: 1-D view of a board row

    Returns:
        tuple of (moves, score gained); each move is
        (from_col, to_col, start_value, end_value)
    """
    moves = []
    gained = 0
    anchor = 0

    for scan in range(1, len(row)):
        value = int(row[scan])
        if value == 0:
            continue

        anchor_value = int(row[anchor])
        if anchor_value == 0:
            row[anchor] = value
            row[scan] = 0
            moves.append((scan, anchor, value, value))
        elif anchor_value == value:
            merged_value = value * 2
            row[anchor] = merged_value
            row[scan] = 0
            gained += merged_value
            moves.append((scan, anchor, value, merged_value))
            anchor += 1
        else:
            anchor += 1
            # Already touching the anchor: nothing to do
            if anchor < scan:
                row[anchor] = value
                row[scan] = 0
                moves.append((scan, anchor, value, value))

    return moves, gained


def shift_board(board: np.ndarray, action: Action) -> ShiftResult:
    """
    Shift a whole board without touching the input array.

    Args:
        board: Square board
        action: Direction to shift

    Returns:
        ShiftResult holding the new board, the shadow board (cells that did
        not move), grid-space move events and the score gained
    """
    if action not in ORIENTATIONS:
        raise ValueError(f"Invalid action: {action}")

    orientation = ORIENTATIONS[action]
    size = board.shape[0]
    grid = orientation.before(board)
    shadow = grid.copy()
    cells = index_map(orientation.before, size)

    events = []
    gained = 0
    for row in range(size):
        moves, row_gained = shift_row_left(grid[row])
        gained += row_gained
        for from_col, to_col, start_value, end_value in moves:
            shadow[row, from_col] = 0
            start_row, start_col = divmod(int(cells[row, from_col]), size)
            end_row, end_col = divmod(int(cells[row, to_col]), size)
            events.append(
                MoveEvent(start_row, start_col, end_row, end_col, start_value, end_value)
            )

    return ShiftResult(
        board=orientation.after(grid),
        shadow=orientation.after(shadow),
        events=events,
        gained=gained,
    )


def shift(session, action: Action) -> bool:
    """
    Shift the session's board and queue the resulting animations.

    Nothing on the session changes when no tile can move.

    Args:
        session: GameSession to update; None is a no-op
        action: Direction to shift

    Returns:
        True if at least one tile moved
    """
    if session is None:
        return False

    result = shift_board(session.board, action)
    if not result.moved:
        return False

    session.board = result.board
    session.shadow = result.shadow
    session.score.update(session.score.current + result.gained)

    for event in result.events:
        if not session.animations.admit(event.to_display_space()):
            # Unanimated tile: show it settled instead of leaving a hole
            session.shadow[event.end_row, event.end_col] = event.end_value
            logger.debug("Animation pool full, dropped %s", event)

    logger.debug(
        "Shift %s: %d tiles moved, +%d points",
        Action(action).name, len(result.events), result.gained,
    )
    return True
