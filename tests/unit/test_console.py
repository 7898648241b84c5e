"""
Unit tests for the console front end.

Tests move parsing, board rendering and scripted games.
"""
import pytest
from minefield import Board, GameState, Move, MoveMode, ParseError
from minefield.console import (
    LOSS_MESSAGE,
    MINE_COUNT_PROMPT,
    MOVE_PROMPT,
    WIN_MESSAGE,
    parse_mine_count,
    parse_move,
    play_game,
    render_board,
    run,
)


# ============================================================================
# Parsing Tests
# ============================================================================

class TestParseMove:
    """Test turning typed lines into moves."""

    def test_free_is_reveal(self) -> None:
        """Column comes first, both 1-indexed."""
        assert parse_move("3 2 free") == Move(row=1, col=2, mode=MoveMode.REVEAL)

    @pytest.mark.parametrize("word", ["mine", "flag", "FREE", "x"])
    def test_other_words_toggle_flag(self, word: str) -> None:
        """Anything but 'free' toggles a flag."""
        assert parse_move(f"1 9 {word}").mode is MoveMode.TOGGLE_FLAG

    def test_extra_whitespace_is_ignored(self) -> None:
        """Tokens may be separated by runs of spaces."""
        assert parse_move("  9   9  free\n") == Move(8, 8, MoveMode.REVEAL)

    def test_range_is_left_to_board(self) -> None:
        """Zero coordinates parse; the board rejects them later."""
        assert parse_move("0 0 free") == Move(-1, -1, MoveMode.REVEAL)

    @pytest.mark.parametrize("line", ["", "1 2", "1 2 free extra"])
    def test_wrong_token_count_raises(self, line: str) -> None:
        """Exactly three tokens are required."""
        with pytest.raises(ParseError, match="Expected"):
            parse_move(line)

    @pytest.mark.parametrize("line", ["a 2 free", "1 b mine", "1.5 2 free"])
    def test_non_numeric_raises(self, line: str) -> None:
        """Coordinates must be integers."""
        with pytest.raises(ParseError, match="must be numbers"):
            parse_move(line)


class TestParseMineCount:
    """Test the startup mine count."""

    def test_number_is_parsed(self) -> None:
        """Surrounding whitespace is ignored."""
        assert parse_mine_count(" 12\n") == 12

    def test_text_raises(self) -> None:
        """Words are not counts."""
        with pytest.raises(ParseError):
            parse_mine_count("ten")


# ============================================================================
# Rendering Tests
# ============================================================================

class TestRenderBoard:
    """Test the framed text board."""

    def test_fresh_board(self, corner_mine_board: Board) -> None:
        """A fresh board shows only dots inside the frame."""
        lines = render_board(corner_mine_board).split("\n")
        assert lines[0] == " │123456789│"
        assert lines[1] == "—│—————————│"
        assert lines[2] == "1|.........|"
        assert lines[10] == "9|.........|"
        assert lines[11] == "—│—————————│"
        assert len(lines) == 12

    def test_after_flood(self, corner_mine_board: Board) -> None:
        """Opened cells show slashes and digits."""
        corner_mine_board.apply_move(8, 8, MoveMode.REVEAL)
        lines = render_board(corner_mine_board).split("\n")
        assert lines[2] == "1|.1///////|"
        assert lines[3] == "2|11///////|"

    def test_after_loss_mines_show(self, wall_board: Board) -> None:
        """Disclosed mines show as X."""
        wall_board.apply_move(0, 0, MoveMode.REVEAL)
        wall_board.apply_move(0, 4, MoveMode.REVEAL)
        lines = render_board(wall_board).split("\n")
        assert lines[2] == "1|///2X....|"


# ============================================================================
# Game Loop Tests
# ============================================================================

class TestPlayGame:
    """Test full scripted games."""

    def test_win_by_revealing(
        self, corner_mine_board: Board, scripted_input, output_lines
    ) -> None:
        """Opening every safe cell wins."""
        state = play_game(
            corner_mine_board, scripted_input(["9 9 free"]), output_lines.append
        )
        assert state == GameState.WON
        assert output_lines[-1] == WIN_MESSAGE
        assert output_lines[1] == MOVE_PROMPT

    def test_win_by_flagging(
        self, corner_mine_board: Board, scripted_input, output_lines
    ) -> None:
        """Flagging every mine wins."""
        state = play_game(
            corner_mine_board, scripted_input(["1 1 mine"]), output_lines.append
        )
        assert state == GameState.WON
        assert "1|*........|" in output_lines[-2]

    def test_loss(self, wall_board: Board, scripted_input, output_lines) -> None:
        """Stepping on a mine ends the game with full disclosure."""
        state = play_game(
            wall_board,
            scripted_input(["1 1 free", "5 1 free"]),
            output_lines.append,
        )
        assert state == GameState.LOST
        assert output_lines[-1] == LOSS_MESSAGE
        assert "9|///2X....|" in output_lines[-2]

    def test_first_move_on_mine_never_loses(
        self, corner_mine_board: Board, scripted_input, output_lines
    ) -> None:
        """The first reveal is safe even on a mine."""
        state = play_game(
            corner_mine_board,
            scripted_input(["1 1 free", "9 9 free", "2 1 free", "1 2 free"]),
            output_lines.append,
        )
        assert state == GameState.WON
        assert LOSS_MESSAGE not in output_lines

    def test_bad_input_reprompts(
        self, wall_board: Board, scripted_input, output_lines
    ) -> None:
        """Parse errors and off-board moves ask again."""
        state = play_game(
            wall_board,
            scripted_input(["nonsense", "10 1 free", "1 1 free", "5 1 free"]),
            output_lines.append,
        )
        assert state == GameState.LOST
        assert any("Expected" in line for line in output_lines)
        assert any("outside the board" in line for line in output_lines)

    def test_stale_flags_cleared_between_turns(
        self, wall_board: Board, scripted_input, output_lines
    ) -> None:
        """A flag inside an opened area is gone on the next redraw."""
        play_game(
            wall_board,
            scripted_input(["1 9 mine", "1 1 free", "5 1 free"]),
            output_lines.append,
        )
        boards = [line for line in output_lines if line.startswith(" │")]
        assert "9|*........|" in boards[1]
        assert "9|///2.....|" in boards[2]


class TestRun:
    """Test startup with a prompted mine count."""

    def test_prompts_until_valid_count(self, scripted_input, output_lines) -> None:
        """Invalid counts are reported and asked again."""
        state = run(
            scripted_input(["abc", "99", "0", "5 5 free"]),
            output_lines.append,
            seed=1,
        )
        assert state == GameState.WON
        assert output_lines.count(MINE_COUNT_PROMPT) == 3
        assert any("Too many mines" in line for line in output_lines)

    def test_given_count_skips_prompt(self, scripted_input, output_lines) -> None:
        """A preset mine count goes straight to the board."""
        state = run(
            scripted_input(["1 1 free"]),
            output_lines.append,
            num_mines=0,
        )
        assert state == GameState.WON
        assert MINE_COUNT_PROMPT not in output_lines
