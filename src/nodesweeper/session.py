"""
Game session for Nodesweeper.

Holds the mutable state of one game (revealed cells, flags, status)
on top of an immutable HiddenBoard, and evaluates win/loss.
"""
import random
from enum import Enum, auto
from typing import FrozenSet, Optional, Set, Tuple

import numpy as np

from .board import BoardConfig, HiddenBoard, generate
from .cell import CellState, CellView, Coord
from .reveal import chord_reveal, reveal


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class ClickOutcome(Enum):
    """Result of a primary click."""

    CONTINUE = auto()
    HIT_MINE = auto()
    WIN = auto()


class FlagOutcome(Enum):
    """Result of a flag toggle."""

    FLAGGED = auto()
    UNFLAGGED = auto()
    REJECTED = auto()


# ============================================================================
# Session Class
# ============================================================================

class GameSession:
    """
    A single game of Nodesweeper.

    Once the status is WON or LOST the session is frozen: clicks and
    flag toggles are no-ops until restart() builds a fresh game.
    Coordinates outside the board raise OutOfBounds.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a session with a freshly generated board.

        Args:
            config: Board configuration (default: beginner 8x8, 10 mines).
            rng: Source of randomness for mine placement.
        """
        self.config = config or BoardConfig()
        self._rng = rng
        self._start()

    @classmethod
    def from_board(cls, hidden: HiddenBoard) -> "GameSession":
        """Create a session over a fixed layout."""
        session = cls.__new__(cls)
        session.config = BoardConfig(hidden.rows, hidden.cols, hidden.num_mines)
        session._rng = None
        session._start(hidden)
        return session

    def _start(self, hidden: Optional[HiddenBoard] = None) -> None:
        self.hidden = hidden or generate(self.config, self._rng)
        self._revealed: Set[Coord] = set()
        self._flags: Set[Coord] = set()
        self._status = GameStatus.IN_PROGRESS

    def restart(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[BoardConfig] = None,
    ) -> None:
        """
        Discard the current game and generate a new board.

        Args:
            rng: Replace the source of randomness.
            config: Switch to a different board configuration.
        """
        if rng is not None:
            self._rng = rng
        if config is not None:
            self.config = config
        self._start()

    # ========================================================================
    # Game Actions
    # ========================================================================

    def primary_click(self, coord: Tuple[int, int]) -> ClickOutcome:
        """
        Handle a primary click on a cell.

        Clicking a revealed number chords it and clicking a mine loses
        the game. Flags don't protect against a direct click: a flagged
        cell is revealed and loses its flag.

        Args:
            coord: (row, col) position clicked.

        Returns:
            The outcome of the click.
        """
        coord = self.hidden.check_bounds(coord)
        if self._status != GameStatus.IN_PROGRESS:
            return ClickOutcome.CONTINUE

        if coord in self._revealed:
            _, hit_mine = chord_reveal(
                self.hidden, self._revealed, self._flags, coord
            )
            if hit_mine:
                self._status = GameStatus.LOST
                return ClickOutcome.HIT_MINE
            return self._outcome_after_reveal()

        if self.hidden.is_mine(coord):
            self._flags.discard(coord)
            self._revealed.add(coord)
            self._status = GameStatus.LOST
            return ClickOutcome.HIT_MINE

        reveal(self.hidden, self._revealed, coord, self._flags)
        return self._outcome_after_reveal()

    def _outcome_after_reveal(self) -> ClickOutcome:
        if self.check_win():
            self._status = GameStatus.WON
            return ClickOutcome.WIN
        return ClickOutcome.CONTINUE

    def toggle_flag(self, coord: Tuple[int, int]) -> FlagOutcome:
        """
        Toggle flag on a cell.

        Args:
            coord: (row, col) position.

        Returns:
            FLAGGED or UNFLAGGED, or REJECTED if the game is over or the
            cell is already revealed.
        """
        coord = self.hidden.check_bounds(coord)
        if self._status != GameStatus.IN_PROGRESS:
            return FlagOutcome.REJECTED
        if coord in self._revealed:
            return FlagOutcome.REJECTED

        if coord in self._flags:
            self._flags.remove(coord)
            outcome = FlagOutcome.UNFLAGGED
        else:
            self._flags.add(coord)
            outcome = FlagOutcome.FLAGGED

        if self.check_win():
            self._status = GameStatus.WON
        return outcome

    def check_win(self) -> bool:
        """
        Check both win conditions.

        The game is won when every safe cell is revealed, or when the
        flags mark exactly the mines (no more, no fewer).
        """
        mines = self.hidden.mines
        safe_revealed = len(self._revealed - mines)
        if safe_revealed == self.hidden.safe_cell_count:
            return True
        return self._flags == mines

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def rows(self) -> int:
        return self.hidden.rows

    @property
    def cols(self) -> int:
        return self.hidden.cols

    @property
    def revealed(self) -> FrozenSet[Coord]:
        return frozenset(self._revealed)

    @property
    def flags(self) -> FrozenSet[Coord]:
        return frozenset(self._flags)

    @property
    def revealed_count(self) -> int:
        return len(self._revealed)

    @property
    def flag_count(self) -> int:
        return len(self._flags)

    @property
    def mines_remaining(self) -> int:
        """Mines left to flag; negative when over-flagged."""
        return self.hidden.num_mines - len(self._flags)

    def query_cell(self, coord: Tuple[int, int]) -> CellView:
        """
        Get what the player sees at a position.

        After a loss every unflagged mine is shown as revealed.
        """
        coord = self.hidden.check_bounds(coord)
        if coord in self._flags:
            return CellView(CellState.FLAGGED)

        is_mine = self.hidden.is_mine(coord)
        exposed = coord in self._revealed or (is_mine and self.is_lost)
        if not exposed:
            return CellView(CellState.HIDDEN)
        if is_mine:
            return CellView(CellState.REVEALED, is_mine=True)
        return CellView(
            CellState.REVEALED,
            adjacent_mines=self.hidden.adjacent_count(coord),
        )

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.full((self.rows, self.cols), -1, dtype=np.int8)
        for coord in self.hidden.coords():
            obs[coord.row, coord.col] = self.query_cell(coord).to_observation()
        return obs
