"""
Board module for the Minefield engine.

Implements the fixed 9x9 board with mine placement, hint computation,
the safe-first-move rule, flood-fill reveals, flag bookkeeping and
win/lose detection.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .errors import GameOverError, InvalidConfiguration, InvalidPosition


# ============================================================================
# Constants
# ============================================================================

GRID_SIZE = 9
CELL_COUNT = GRID_SIZE * GRID_SIZE
MAX_MINES = CELL_COUNT - 1
MINE_CONTENT = 9

Position = Tuple[int, int]


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class MoveMode(Enum):
    """What a move does to its target cell."""

    REVEAL = auto()
    TOGGLE_FLAG = auto()


class MoveOutcome(Enum):
    """Result of applying a single move."""

    SAFE = auto()
    LOSS = auto()


@dataclass(frozen=True)
class Move:
    """A zero-indexed move as handed to the engine."""

    row: int
    col: int
    mode: MoveMode


@dataclass
class BoardConfig:
    """
    Configuration for a Minefield board.

    Attributes:
        num_mines: Total mines to place.
        seed: Optional seed for reproducible mine placement.
    """

    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines > MAX_MINES:
            raise InvalidConfiguration(f"Too many mines (max {MAX_MINES})")


def is_valid_position(row: int, col: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield game board.

    Cells live in a flat list indexed by ``row * GRID_SIZE + col``. Mines
    are placed on construction; the first reveal of the game is guaranteed
    not to hit one.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    _layout: Optional[List[Position]] = field(default=None, repr=False)
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _opened: Set[int] = field(default_factory=set, repr=False)
    _first_move_taken: bool = False
    _lost: bool = False

    def __post_init__(self) -> None:
        """Place mines and compute hints after dataclass creation."""
        if self.rng is None:
            self.rng = np.random.default_rng(self.config.seed)
        self._init_grid()
        if self._layout is None:
            self._place_mines()
        else:
            self._place_layout(self._layout)
        self._calculate_hints()

    @classmethod
    def from_mines(cls, mines: Iterable[Position]) -> "Board":
        """
        Build a board with mines at exactly the given positions.

        Args:
            mines: Zero-indexed (row, col) mine positions.

        Returns:
            Board whose mine count equals the number of distinct positions.
        """
        positions = sorted(set(mines))
        for row, col in positions:
            if not is_valid_position(row, col):
                raise InvalidPosition(row, col)
        return cls(BoardConfig(num_mines=len(positions)), _layout=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._cells = [Cell() for _ in range(CELL_COUNT)]
        self._opened = set()
        self._first_move_taken = False
        self._lost = False

    def _place_mines(self) -> None:
        """Drop mines on uniformly random cells, resampling on collision."""
        placed = 0
        while placed < self.config.num_mines:
            index = int(self.rng.integers(CELL_COUNT))
            if self._cells[index].is_mine:
                continue
            self._cells[index].is_mine = True
            placed += 1

    def _place_layout(self, positions: List[Position]) -> None:
        """Place mines at fixed positions."""
        for row, col in positions:
            self._cells[_index(row, col)].is_mine = True

    def _calculate_hints(self) -> None:
        """Recompute every hint from the current mine layout."""
        for cell in self._cells:
            cell.adjacent_mines = 0
        for index, cell in enumerate(self._cells):
            if not cell.is_mine:
                continue
            for neighbor in self._get_neighbors(index):
                if not self._cells[neighbor].is_mine:
                    self._cells[neighbor].adjacent_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, index: int) -> List[int]:
        """
        Get flat indices of the in-range neighbors of a cell.

        Args:
            index: Flat index of center cell.

        Returns:
            Up to 8 neighbor indices; off-board positions are skipped.
        """
        row, col = _position(index)
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if is_valid_position(new_row, new_col):
                    neighbors.append(_index(new_row, new_col))
        return neighbors

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def apply_move(self, row: int, col: int, mode: MoveMode) -> MoveOutcome:
        """
        Apply one move to the board.

        The first reveal of the game relocates a mine away from the target
        if needed. Revealing a mine discloses every mine and loses the game;
        revealing an empty cell floods outward until hint cells stop it.

        Args:
            row: Row index, 0-8.
            col: Column index, 0-8.
            mode: Reveal the cell or toggle its flag.

        Returns:
            MoveOutcome.LOSS if a mine was revealed, MoveOutcome.SAFE otherwise.

        Raises:
            GameOverError: The game has already been lost.
            InvalidPosition: The position is off the board.
        """
        if self._lost:
            raise GameOverError("No moves are accepted after a loss")
        if not is_valid_position(row, col):
            raise InvalidPosition(row, col)

        index = _index(row, col)
        if mode is MoveMode.TOGGLE_FLAG:
            self._cells[index].toggle_flag()
            return MoveOutcome.SAFE

        if not self._first_move_taken:
            self._handle_first_reveal(index)
        return self._reveal(index)

    def play(self, move: Move) -> MoveOutcome:
        """Apply a parsed move."""
        return self.apply_move(move.row, move.col, move.mode)

    def _handle_first_reveal(self, index: int) -> None:
        """Move the mine away from the first revealed cell, if any."""
        self._first_move_taken = True
        if self._cells[index].is_mine:
            self._relocate_mine(index)

    def _relocate_mine(self, index: int) -> None:
        """Swap the mine at index onto another safe cell and rebuild hints."""
        self._cells[index].is_mine = False
        self._cells[self._find_relocation_target(index)].is_mine = True
        self._calculate_hints()

    def _find_relocation_target(self, index: int) -> int:
        """
        Pick the cell that receives a relocated mine.

        Scans in row-major order for the first safe cell sharing neither row
        nor column with the cleared cell. On boards too dense for that, takes
        the first safe cell other than the cleared one.
        """
        row, col = _position(index)
        fallback = None
        for candidate, cell in enumerate(self._cells):
            if cell.is_mine or candidate == index:
                continue
            candidate_row, candidate_col = _position(candidate)
            if candidate_row != row and candidate_col != col:
                return candidate
            if fallback is None:
                fallback = candidate
        return fallback

    def _reveal(self, index: int) -> MoveOutcome:
        """Reveal a single cell and handle consequences."""
        cell = self._cells[index]
        if cell.is_mine:
            self._disclose_mines()
            self._lost = True
            return MoveOutcome.LOSS

        if cell.is_hint:
            cell.reveal()
        else:
            self._flood_fill(index)
        return MoveOutcome.SAFE

    def _flood_fill(self, start: int) -> None:
        """
        Reveal the connected empty region around start.

        Each empty cell spreads to its neighbors once per game; hint cells
        are revealed but stop the spread. Mines are never touched.
        """
        stack = [start]
        while stack:
            index = stack.pop()
            cell = self._cells[index]
            if cell.is_mine:
                continue
            cell.reveal()
            if not cell.is_empty or index in self._opened:
                continue
            self._opened.add(index)
            stack.extend(self._get_neighbors(index))

    def _disclose_mines(self) -> None:
        """Reveal every mine on the board."""
        for cell in self._cells:
            if cell.is_mine:
                cell.reveal()

    def reconcile_flags(self) -> List[Position]:
        """
        Clear flags that touch an opened empty area.

        A cell counts as opened once the flood has spread from it, whatever
        its flag says now. Meant to run once per turn by whoever drives
        the game.

        Returns:
            Positions whose flag was cleared.
        """
        cleared = []
        for index, cell in enumerate(self._cells):
            if not cell.flagged:
                continue
            if any(n in self._opened for n in self._get_neighbors(index)):
                cell.flagged = False
                cleared.append(_position(index))
        return cleared

    # ========================================================================
    # Termination Checks
    # ========================================================================

    def _has_all_mines_flagged(self) -> bool:
        return all(cell.flagged for cell in self._cells if cell.is_mine)

    def _has_all_safe_cells_revealed(self) -> bool:
        return all(cell.revealed for cell in self._cells if not cell.is_mine)

    def is_finished(self) -> bool:
        """Check if every mine is flagged or every safe cell is revealed."""
        return self._has_all_mines_flagged() or self._has_all_safe_cells_revealed()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def num_mines(self) -> int:
        """Number of mines on the board."""
        return self.config.num_mines

    @property
    def first_move_taken(self) -> bool:
        """Whether the first reveal of the game has happened."""
        return self._first_move_taken

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._lost:
            return GameState.LOST
        if self.is_finished():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._lost

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not is_valid_position(row, col):
            return None
        return self._cells[_index(row, col)]

    def mine_positions(self) -> List[Position]:
        """List mine positions in row-major order."""
        return [
            _position(index)
            for index, cell in enumerate(self._cells)
            if cell.is_mine
        ]

    def count_revealed(self) -> int:
        """Count cells currently visible, flags included."""
        return sum(1 for cell in self._cells if cell.revealed)

    def get_content_grid(self) -> np.ndarray:
        """
        Get cell contents as a 9x9 array.

        Returns:
            int8 array with 0-8 for hint counts and 9 for mines.
        """
        values = [
            MINE_CONTENT if cell.is_mine else cell.adjacent_mines
            for cell in self._cells
        ]
        return np.array(values, dtype=np.int8).reshape(GRID_SIZE, GRID_SIZE)

    def get_revealed_grid(self) -> np.ndarray:
        """Get the revealed bits as a 9x9 boolean array."""
        values = [cell.revealed for cell in self._cells]
        return np.array(values, dtype=bool).reshape(GRID_SIZE, GRID_SIZE)

    def get_flagged_grid(self) -> np.ndarray:
        """Get the flagged bits as a 9x9 boolean array."""
        values = [cell.flagged for cell in self._cells]
        return np.array(values, dtype=bool).reshape(GRID_SIZE, GRID_SIZE)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self._cells]
        return np.array(values, dtype=np.int8).reshape(GRID_SIZE, GRID_SIZE)

    def get_symbols(self) -> List[str]:
        """Get one string of cell symbols per row."""
        return [
            "".join(
                self._cells[_index(row, col)].to_symbol()
                for col in range(GRID_SIZE)
            )
            for row in range(GRID_SIZE)
        ]


# ============================================================================
# Index Helpers
# ============================================================================

def _index(row: int, col: int) -> int:
    return row * GRID_SIZE + col


def _position(index: int) -> Position:
    return divmod(index, GRID_SIZE)
