"""
Presentation-facing interface to the Nodesweeper core.

Thin functions a front end calls with plain (row, col) integers. All
coordinate arguments must lie on the board; anything else raises
OutOfBounds.
"""
import random
from typing import Optional

from .board import BoardConfig
from .cell import CellView, Coord
from .session import ClickOutcome, FlagOutcome, GameSession, GameStatus


def new_session(
    rows: int,
    cols: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> GameSession:
    """
    Start a new game.

    Raises:
        InvalidConfiguration: If the dimensions are not positive or the
            mine count doesn't leave at least one safe cell.
    """
    return GameSession(BoardConfig(rows, cols, mine_count), rng=rng)


def primary_click(session: GameSession, row: int, col: int) -> ClickOutcome:
    return session.primary_click(Coord(row, col))


def toggle_flag(session: GameSession, row: int, col: int) -> FlagOutcome:
    return session.toggle_flag(Coord(row, col))


def query_cell(session: GameSession, row: int, col: int) -> CellView:
    """Get the visible state of one cell for redrawing."""
    return session.query_cell(Coord(row, col))


def query_status(session: GameSession) -> GameStatus:
    return session.status
