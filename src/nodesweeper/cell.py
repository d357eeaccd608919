"""
Cell module for Nodesweeper.

Defines the coordinate value type and the per-cell view handed to
presentation code (hidden/flagged/revealed plus content).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import NamedTuple


# ============================================================================
# Constants
# ============================================================================

HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


# ============================================================================
# Coordinate
# ============================================================================

class Coord(NamedTuple):
    """A (row, col) board position, 0-indexed."""

    row: int
    col: int


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What the player can see of a single cell.

    Attributes:
        state: Current visual state (hidden, flagged or revealed).
        is_mine: Whether a revealed cell is a mine. Always False for
            hidden and flagged cells so the view never leaks the layout.
        adjacent_mines: Count of mines in neighboring cells (0-8), only
            meaningful for revealed non-mine cells.
    """

    state: CellState = CellState.HIDDEN
    is_mine: bool = False
    adjacent_mines: int = 0

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    def to_observation(self) -> int:
        """
        Convert the view to its integer encoding.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.state == CellState.FLAGGED:
            return FLAGGED_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines
