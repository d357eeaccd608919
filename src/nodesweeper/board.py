"""
Board module for Nodesweeper.

Builds the hidden mine layout and the per-cell adjacency counts.
The resulting HiddenBoard is immutable; all per-game mutable state
lives in the session.
"""
import random
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from .cell import Coord
from .errors import InvalidConfiguration, OutOfBounds


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Nodesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 8
    cols: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
BEGINNER = BoardConfig(8, 8, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Neighbor Utilities (Low-level)
# ============================================================================

def in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < rows and 0 <= col < cols


def neighbors(coord: Coord, rows: int, cols: int) -> List[Coord]:
    """
    Get valid neighboring cell positions.

    Args:
        coord: Center cell.
        rows: Board height.
        cols: Board width.

    Returns:
        Up to 8 in-bounds Moore neighbors of the center cell.
    """
    row, col = coord
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if in_bounds(new_row, new_col, rows, cols):
                result.append(Coord(new_row, new_col))
    return result


# ============================================================================
# Hidden Board
# ============================================================================

@dataclass(frozen=True)
class HiddenBoard:
    """
    The concealed layout of a single game.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Coordinates holding a mine.
        counts: Adjacent mine count for every cell, indexed [row][col].
    """

    rows: int
    cols: int
    mines: FrozenSet[Coord]
    counts: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_mines(
        cls, rows: int, cols: int, mines: Iterable[Tuple[int, int]]
    ) -> "HiddenBoard":
        """
        Build a board from a fixed mine layout.

        Raises:
            InvalidConfiguration: If the layout doesn't describe a valid
                board (bad dimensions, too many mines).
            OutOfBounds: If a mine lies outside the board.
        """
        mine_set = frozenset(Coord(row, col) for row, col in mines)
        BoardConfig(rows, cols, len(mine_set))  # validates dimensions and count
        for mine in mine_set:
            if not in_bounds(mine.row, mine.col, rows, cols):
                raise OutOfBounds(mine.row, mine.col, rows, cols)
        counts = _calculate_adjacent_mines(rows, cols, mine_set)
        return cls(rows=rows, cols=cols, mines=mine_set, counts=counts)

    @property
    def num_mines(self) -> int:
        return len(self.mines)

    @property
    def safe_cell_count(self) -> int:
        """Number of cells that don't hold a mine."""
        return self.rows * self.cols - len(self.mines)

    def check_bounds(self, coord: Coord) -> Coord:
        """Return coord as a Coord, or raise OutOfBounds."""
        row, col = coord
        if not in_bounds(row, col, self.rows, self.cols):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return Coord(row, col)

    def is_mine(self, coord: Coord) -> bool:
        return coord in self.mines

    def adjacent_count(self, coord: Coord) -> int:
        return self.counts[coord[0]][coord[1]]

    def neighbors(self, coord: Coord) -> List[Coord]:
        return neighbors(coord, self.rows, self.cols)

    def coords(self) -> Iterator[Coord]:
        """Iterate over every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Coord(row, col)

    def safe_coords(self) -> Iterator[Coord]:
        for coord in self.coords():
            if coord not in self.mines:
                yield coord


# ============================================================================
# Generation
# ============================================================================

def generate(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> HiddenBoard:
    """
    Generate a random board for the given configuration.

    Mines are placed by rejection sampling: uniformly random positions
    are drawn until the requested number of distinct positions is
    collected. This is fast for the low mine densities of the standard
    difficulties.

    Args:
        config: Board dimensions and mine count.
        rng: Source of randomness. Pass a seeded random.Random for
            reproducible boards.

    Returns:
        A new immutable HiddenBoard.
    """
    rng = rng or random.Random()
    mines = _place_mines(config, rng)
    counts = _calculate_adjacent_mines(config.rows, config.cols, mines)
    return HiddenBoard(
        rows=config.rows, cols=config.cols, mines=mines, counts=counts
    )


def _place_mines(config: BoardConfig, rng: random.Random) -> FrozenSet[Coord]:
    """Sample distinct mine positions until the target count is reached."""
    mines: Set[Coord] = set()
    while len(mines) < config.num_mines:
        row = rng.randrange(config.rows)
        col = rng.randrange(config.cols)
        mines.add(Coord(row, col))
    return frozenset(mines)


def _calculate_adjacent_mines(
    rows: int, cols: int, mines: FrozenSet[Coord]
) -> Tuple[Tuple[int, ...], ...]:
    """Calculate adjacent mine counts for all cells."""
    return tuple(
        tuple(
            _count_adjacent_mines(Coord(row, col), rows, cols, mines)
            for col in range(cols)
        )
        for row in range(rows)
    )


def _count_adjacent_mines(
    coord: Coord, rows: int, cols: int, mines: FrozenSet[Coord]
) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor in neighbors(coord, rows, cols):
        if neighbor in mines:
            count += 1
    return count
