from gazool.fields.board import NUM_COLUMNS, NUM_ROWS, NUM_SQUARES
from gazool.fields.score import ScoreState
from gazool.fields.shift import NUM_ACTIONS, Action, MoveEvent, ShiftResult, shift, shift_board

__all__ = [
    "NUM_COLUMNS",
    "NUM_ROWS",
    "NUM_SQUARES",
    "Action",
    "NUM_ACTIONS",
    "ScoreState",
    "MoveEvent",
    "ShiftResult",
    "shift",
    "shift_board",
]
