"""
Cell module for the Minefield engine.

A cell carries its content (mine, empty or hint) plus the two player-facing
bits: whether it is revealed and whether it is flagged.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """Tag of a cell's content."""

    MINE = auto()
    EMPTY = auto()
    HINT = auto()


HIDDEN_SYMBOL = "."
FLAG_SYMBOL = "*"
EMPTY_SYMBOL = "/"
MINE_SYMBOL = "X"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        revealed: Whether the cell is visible to the player. Flagging a
            cell also makes it visible, as a flag.
        flagged: Whether the player marked this cell as a suspected mine.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    revealed: bool = False
    flagged: bool = False

    @property
    def kind(self) -> CellKind:
        """Content tag: MINE, EMPTY or HINT."""
        if self.is_mine:
            return CellKind.MINE
        if self.adjacent_mines == 0:
            return CellKind.EMPTY
        return CellKind.HINT

    @property
    def is_empty(self) -> bool:
        """Check if cell is a safe cell with no adjacent mines."""
        return self.kind is CellKind.EMPTY

    @property
    def is_hint(self) -> bool:
        """Check if cell is a safe cell with at least one adjacent mine."""
        return self.kind is CellKind.HINT

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was hidden before, False otherwise.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    def toggle_flag(self) -> None:
        """Flip the flag and its visibility together."""
        self.flagged = not self.flagged
        self.revealed = not self.revealed

    def to_symbol(self) -> str:
        """
        Convert cell to its single-character board symbol.

        Returns:
            '.' hidden, '*' flagged, '/' empty, '1'-'8' hint,
            'X' mine disclosed after a loss.
        """
        if not self.revealed:
            return HIDDEN_SYMBOL
        if self.flagged:
            return FLAG_SYMBOL
        if self.is_mine:
            return MINE_SYMBOL
        if self.adjacent_mines == 0:
            return EMPTY_SYMBOL
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if not self.revealed:
            return -1
        if self.flagged:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
