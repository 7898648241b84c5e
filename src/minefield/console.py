"""
Console front end for the Minefield engine.

Parses typed moves, draws the board as text and runs the turn loop. Moves
are typed as ``<col> <row> <mode>`` with 1-indexed coordinates, the column
first to match the board header; ``free`` reveals a cell and any other
mode word toggles a flag.
"""
from typing import Callable, Optional

from .board import Board, BoardConfig, GameState, Move, MoveMode, MoveOutcome
from .errors import InvalidConfiguration, InvalidPosition, ParseError


# ============================================================================
# Constants
# ============================================================================

REVEAL_WORD = "free"

MINE_COUNT_PROMPT = "How many mines do you want on the field?"
MOVE_PROMPT = "Set/unset mines marks or claim a cell as free:"
LOSS_MESSAGE = "You stepped on a mine and failed!"
WIN_MESSAGE = "Congratulations! You found all the mines!"

HEADER = " │123456789│\n—│—————————│"
FOOTER = "—│—————————│"

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


# ============================================================================
# Parsing
# ============================================================================

def parse_move(line: str) -> Move:
    """
    Parse a typed move.

    Args:
        line: Text such as ``"3 2 free"`` or ``"3 2 mine"``.

    Returns:
        Zero-indexed move. Range checks are left to the board.

    Raises:
        ParseError: Wrong token count or non-numeric coordinates.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise ParseError(f"Expected '<col> <row> <mode>', got {line!r}")

    col_token, row_token, mode_token = tokens
    try:
        col = int(col_token) - 1
        row = int(row_token) - 1
    except ValueError:
        raise ParseError(f"Coordinates must be numbers, got {line!r}") from None

    mode = MoveMode.REVEAL if mode_token == REVEAL_WORD else MoveMode.TOGGLE_FLAG
    return Move(row=row, col=col, mode=mode)


def parse_mine_count(line: str) -> int:
    """Parse the mine count typed at startup."""
    try:
        return int(line.strip())
    except ValueError:
        raise ParseError(f"Mine count must be a number, got {line!r}") from None


# ============================================================================
# Rendering
# ============================================================================

def render_board(board: Board) -> str:
    """Render board with row labels and the column header."""
    lines = [HEADER]
    for number, symbols in enumerate(board.get_symbols(), start=1):
        lines.append(f"{number}|{symbols}|")
    lines.append(FOOTER)
    return "\n".join(lines)


# ============================================================================
# Turn Loop
# ============================================================================

def read_config(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    seed: Optional[int] = None,
) -> BoardConfig:
    """Ask for a mine count until a valid one is given."""
    while True:
        output_fn(MINE_COUNT_PROMPT)
        try:
            return BoardConfig(num_mines=parse_mine_count(input_fn()), seed=seed)
        except (ParseError, InvalidConfiguration) as exc:
            output_fn(str(exc))


def read_move(input_fn: InputFn = input, output_fn: OutputFn = print) -> Move:
    """Ask for a move until one parses."""
    while True:
        output_fn(MOVE_PROMPT)
        try:
            return parse_move(input_fn())
        except ParseError as exc:
            output_fn(str(exc))


def play_turn(
    board: Board,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> MoveOutcome:
    """Read moves until one lands on the board, then apply it."""
    while True:
        move = read_move(input_fn, output_fn)
        try:
            return board.play(move)
        except InvalidPosition as exc:
            output_fn(str(exc))


def play_game(
    board: Board,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> GameState:
    """
    Run one game to completion on an existing board.

    Flags touching opened areas are cleared before each redraw.

    Args:
        board: Freshly created board.
        input_fn: Source of typed lines.
        output_fn: Sink for prompts, boards and messages.

    Returns:
        GameState.WON or GameState.LOST.
    """
    output_fn(render_board(board))
    outcome = play_turn(board, input_fn, output_fn)
    while outcome is MoveOutcome.SAFE and not board.is_finished():
        board.reconcile_flags()
        output_fn(render_board(board))
        outcome = play_turn(board, input_fn, output_fn)

    if outcome is MoveOutcome.LOSS:
        output_fn(render_board(board))
        output_fn(LOSS_MESSAGE)
        return GameState.LOST

    board.reconcile_flags()
    output_fn(render_board(board))
    output_fn(WIN_MESSAGE)
    return GameState.WON


def run(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    num_mines: Optional[int] = None,
    seed: Optional[int] = None,
) -> GameState:
    """Set up a board, prompting for the mine count if needed, and play it."""
    if num_mines is None:
        config = read_config(input_fn, output_fn, seed=seed)
    else:
        config = BoardConfig(num_mines=num_mines, seed=seed)
    return play_game(Board(config), input_fn, output_fn)
