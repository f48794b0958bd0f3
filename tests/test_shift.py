"""Tests for the directional shift engine."""
import numpy as np
import pytest

from gazool.animation import AnimationRegistry
from gazool.fields import Action, MoveEvent, shift, shift_board
from gazool.fields.board import display_col, display_row
from gazool.fields.geometry import reverse_rows, rotate_left, rotate_right, transpose
from gazool.fields.shift import shift_row_left
from gazool.machine import GameSession


def compress_line(line: list[int]) -> tuple[list[int], int]:
    """Textbook slide-and-merge of one line toward its first element."""
    non_zero = [v for v in line if v != 0]
    merged = []
    score = 0
    skip = False
    for i, value in enumerate(non_zero):
        if skip:
            skip = False
            continue
        if i + 1 < len(non_zero) and non_zero[i + 1] == value:
            merged.append(value * 2)
            score += value * 2
            skip = True
        else:
            merged.append(value)
    return merged + [0] * (len(line) - len(merged)), score


def reference_shift(board: np.ndarray, action: Action) -> tuple[np.ndarray, int]:
    result = board.copy()
    total = 0
    for i in range(board.shape[0]):
        if action == Action.LEFT:
            line, total_line = compress_line(list(board[i, :]))
            result[i, :] = line
        elif action == Action.RIGHT:
            line, total_line = compress_line(list(board[i, ::-1]))
            result[i, ::-1] = line
        elif action == Action.UP:
            line, total_line = compress_line(list(board[:, i]))
            result[:, i] = line
        else:
            line, total_line = compress_line(list(board[::-1, i]))
            result[::-1, i] = line
        total += total_line
    return result, total


class TestShiftRowLeft:
    """Test the single-row merge pass."""

    def test_four_equal_tiles(self):
        """[2,2,2,2] becomes [4,4,0,0]; each tile merges at most once."""
        row = np.array([2, 2, 2, 2], dtype=np.int32)
        moves, gained = shift_row_left(row)

        assert list(row) == [4, 4, 0, 0]
        assert gained == 8
        assert moves == [(1, 0, 2, 4), (2, 1, 2, 2), (3, 1, 2, 4)]

    def test_merged_tile_does_not_merge_again(self):
        """[4,4,8,0] becomes [8,8,0,0], not [16,0,0,0]."""
        row = np.array([4, 4, 8, 0], dtype=np.int32)
        _, gained = shift_row_left(row)

        assert list(row) == [8, 8, 0, 0]
        assert gained == 8

    def test_slide_over_gap(self):
        """A tile slides across empty cells and merges with the first match."""
        row = np.array([2, 0, 2, 4], dtype=np.int32)
        moves, gained = shift_row_left(row)

        assert list(row) == [4, 4, 0, 0]
        assert gained == 4
        assert moves == [(2, 0, 2, 4), (3, 1, 4, 4)]

    def test_touching_tiles_stay(self):
        """Tiles already packed and unequal produce no moves."""
        row = np.array([2, 4, 8, 0], dtype=np.int32)
        moves, gained = shift_row_left(row)

        assert moves == []
        assert gained == 0
        assert list(row) == [2, 4, 8, 0]


class TestShiftBoard:
    """Test whole-board shifts in every direction."""

    def test_shift_right(self):
        """[0,2,2,4] shifted right becomes [0,0,4,4]."""
        board = np.zeros((4, 4), dtype=np.int32)
        board[0] = [0, 2, 2, 4]
        result = shift_board(board, Action.RIGHT)

        assert list(result.board[0]) == [0, 0, 4, 4]
        assert result.gained == 4

    def test_input_not_mutated(self):
        board = np.array([
            [2, 2, 0, 0],
            [0, 4, 0, 4],
            [0, 0, 0, 0],
            [8, 0, 8, 0],
        ], dtype=np.int32)
        original = board.copy()
        for action in Action:
            shift_board(board, action)
        assert np.array_equal(board, original)

    @pytest.mark.parametrize("action", list(Action))
    def test_matches_textbook_merge(self, action, random_boards):
        """Every direction agrees with an independent per-line merge."""
        for board in random_boards:
            result = shift_board(board, action)
            expected, expected_score = reference_shift(board, action)
            assert np.array_equal(result.board, expected)
            assert result.gained == expected_score
            assert result.moved == (not np.array_equal(board, expected))

    def test_right_is_mirrored_left(self, random_boards):
        for board in random_boards:
            mirrored = reverse_rows(shift_board(reverse_rows(board), Action.LEFT).board)
            assert np.array_equal(shift_board(board, Action.RIGHT).board, mirrored)

    def test_down_is_rotated_left(self, random_boards):
        for board in random_boards:
            rotated = rotate_left(shift_board(rotate_right(board), Action.LEFT).board)
            assert np.array_equal(shift_board(board, Action.DOWN).board, rotated)

    def test_up_is_rotated_left(self, random_boards):
        for board in random_boards:
            rotated = rotate_right(shift_board(rotate_left(board), Action.LEFT).board)
            assert np.array_equal(shift_board(board, Action.UP).board, rotated)

    def test_up_is_transposed_left(self, random_boards):
        """UP is also LEFT on the transposed board."""
        for board in random_boards:
            transposed = transpose(shift_board(transpose(board), Action.LEFT).board)
            assert np.array_equal(shift_board(board, Action.UP).board, transposed)

    def test_invalid_action(self):
        board = np.zeros((4, 4), dtype=np.int32)
        with pytest.raises(ValueError, match="Invalid action"):
            shift_board(board, 7)


class TestMoveEvents:
    """Test the coordinates and values carried by move events."""

    @pytest.mark.parametrize("action", list(Action))
    def test_events_follow_direction(self, action, random_boards):
        """Events stay on their line and travel toward the target edge."""
        for board in random_boards:
            for event in shift_board(board, action).events:
                d_row = event.end_row - event.start_row
                d_col = event.end_col - event.start_col
                if action == Action.LEFT:
                    assert d_row == 0 and d_col < 0
                elif action == Action.RIGHT:
                    assert d_row == 0 and d_col > 0
                elif action == Action.UP:
                    assert d_col == 0 and d_row < 0
                else:
                    assert d_col == 0 and d_row > 0

    @pytest.mark.parametrize("action", list(Action))
    def test_events_match_boards(self, action, random_boards):
        """Start values come from the old board, the last event into a cell matches the new board."""
        for board in random_boards:
            result = shift_board(board, action)
            last_into = {}
            for event in result.events:
                assert board[event.start_row, event.start_col] == event.start_value
                assert event.end_value in (event.start_value, event.start_value * 2)
                last_into[(event.end_row, event.end_col)] = event.end_value
            for (row, col), value in last_into.items():
                assert result.board[row, col] == value

    @pytest.mark.parametrize("action", list(Action))
    def test_shadow_holds_unmoved_tiles(self, action, random_boards):
        """The shadow board is the old board minus every tile that moved."""
        for board in random_boards:
            result = shift_board(board, action)
            expected = board.copy()
            for event in result.events:
                expected[event.start_row, event.start_col] = 0
            assert np.array_equal(result.shadow, expected)

    def test_down_event_coordinates(self):
        board = np.zeros((4, 4), dtype=np.int32)
        board[0, 2] = 8
        result = shift_board(board, Action.DOWN)

        assert result.events == [MoveEvent(0, 2, 3, 2, 8, 8)]

    def test_up_merge_event_coordinates(self):
        board = np.zeros((4, 4), dtype=np.int32)
        board[1, 3] = 2
        board[3, 3] = 2
        result = shift_board(board, Action.UP)

        assert result.events == [MoveEvent(1, 3, 0, 3, 2, 2), MoveEvent(3, 3, 0, 3, 2, 4)]
        assert result.events[1].merged
        assert not result.events[0].merged

    def test_display_space(self):
        event = MoveEvent(1, 3, 0, 3, 2, 4).to_display_space()

        assert (event.start_row, event.start_col) == (7, 37)
        assert (event.end_row, event.end_col) == (1, 37)
        assert (event.start_value, event.end_value) == (2, 4)


class TestSessionShift:
    """Test shifting a GameSession."""

    def test_none_session(self):
        assert shift(None, Action.LEFT) is False

    def test_no_move_leaves_session_untouched(self, session):
        """A shift that moves nothing changes neither board, score nor shadow."""
        session.board = np.array([
            [2, 4, 8, 16],
            [4, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ], dtype=np.int32)
        session.shadow = session.board.copy()
        session.score.update(12)
        board, shadow = session.board, session.shadow

        assert shift(session, Action.LEFT) is False
        assert session.board is board
        assert session.shadow is shadow
        assert np.array_equal(board[0], [2, 4, 8, 16])
        assert session.score.current == 12
        assert len(session.animations) == 0

    def test_move_updates_score_and_animations(self, session):
        session.board = np.zeros((4, 4), dtype=np.int32)
        session.board[2] = [2, 2, 2, 2]

        assert shift(session, Action.LEFT) is True
        assert list(session.board[2]) == [4, 4, 0, 0]
        assert session.score.current == 8
        assert session.score.high == 8
        assert len(session.animations) == 3

        starts = {(b.cur_row, b.cur_col) for b in session.animations.visible()}
        assert starts == {(display_row(2), display_col(c)) for c in (1, 2, 3)}

    def test_score_accumulates(self, session):
        session.board = np.zeros((4, 4), dtype=np.int32)
        session.board[0] = [2, 2, 2, 2]
        shift(session, Action.LEFT)
        session.animations.clear()
        shift(session, Action.LEFT)

        assert list(session.board[0]) == [8, 0, 0, 0]
        assert session.score.current == 16

    def test_full_pool_drops_events_only(self):
        """Events past the pool's capacity are dropped; the board is still right."""
        session = GameSession.seeded(0, animations=AnimationRegistry(capacity=1))
        session.board = np.zeros((4, 4), dtype=np.int32)
        session.board[0] = [0, 0, 2, 2]
        session.board[3] = [0, 0, 0, 8]
        expected = shift_board(session.board, Action.LEFT)

        assert shift(session, Action.LEFT) is True
        assert np.array_equal(session.board, expected.board)
        assert len(session.animations) == 1
        # The dropped tile is shown at its destination
        assert session.shadow[3, 0] == 8

    def test_seventeenth_event_is_dropped(self, session):
        """With every default slot taken, a further shift still updates the board."""
        for _ in range(16):
            assert session.animations.admit(MoveEvent(1, 1, 1, 13, 2, 2))
        session.board = np.zeros((4, 4), dtype=np.int32)
        session.board[1] = [0, 4, 0, 4]
        expected = shift_board(session.board, Action.LEFT)

        assert shift(session, Action.LEFT) is True
        assert np.array_equal(session.board, expected.board)
        assert len(session.animations) == 16
        assert session.shadow[1, 0] == 8


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
