"""
Unit tests for the presentation-facing API functions.
"""
import random

import pytest
from nodesweeper import (
    CellState,
    ClickOutcome,
    FlagOutcome,
    GameSession,
    GameStatus,
    InvalidConfiguration,
    OutOfBounds,
    new_session,
    primary_click,
    query_cell,
    query_status,
    toggle_flag,
)


class TestNewSession:
    """Test session creation through the API."""

    @pytest.mark.parametrize(
        "rows, cols, mines", [(8, 8, 10), (16, 16, 40), (16, 30, 99)]
    )
    def test_supported_difficulties(
        self, rows: int, cols: int, mines: int
    ) -> None:
        """Each preset difficulty starts an in-progress game."""
        session = new_session(rows, cols, mines)
        assert query_status(session) == GameStatus.IN_PROGRESS
        assert len(session.hidden.mines) == mines

    @pytest.mark.parametrize(
        "rows, cols, mines", [(0, 8, 1), (8, -1, 1), (2, 2, 4), (3, 3, -2)]
    )
    def test_invalid_configuration(
        self, rows: int, cols: int, mines: int
    ) -> None:
        """Bad dimensions or mine counts are rejected."""
        with pytest.raises(InvalidConfiguration):
            new_session(rows, cols, mines)

    def test_seeded_sessions_match(self) -> None:
        """Same seed, same mine layout."""
        first = new_session(16, 16, 40, rng=random.Random(3))
        second = new_session(16, 16, 40, rng=random.Random(3))
        assert first.hidden.mines == second.hidden.mines

    def test_sessions_are_independent(self) -> None:
        """Losing one session leaves another untouched."""
        first = new_session(8, 8, 10, rng=random.Random(1))
        second = new_session(8, 8, 10, rng=random.Random(1))
        mine = next(iter(first.hidden.mines))
        primary_click(first, *mine)
        assert query_status(first) == GameStatus.LOST
        assert query_status(second) == GameStatus.IN_PROGRESS


class TestSessionCalls:
    """Test the row/col wrappers around session methods."""

    def test_click_and_query(self, corner_session: GameSession) -> None:
        """A clicked number shows as revealed with its count."""
        assert primary_click(corner_session, 1, 1) == ClickOutcome.CONTINUE
        view = query_cell(corner_session, 1, 1)
        assert view.state == CellState.REVEALED
        assert view.adjacent_mines == 1

    def test_flag_and_query(self, beginner_session: GameSession) -> None:
        """Flagging shows as flagged and toggles back."""
        assert toggle_flag(beginner_session, 3, 4) == FlagOutcome.FLAGGED
        assert query_cell(beginner_session, 3, 4).state == CellState.FLAGGED
        assert toggle_flag(beginner_session, 3, 4) == FlagOutcome.UNFLAGGED

    def test_hit_mine(self, beginner_session: GameSession) -> None:
        """Clicking a mine through the API loses the game."""
        assert primary_click(beginner_session, 3, 3) == ClickOutcome.HIT_MINE
        assert query_status(beginner_session) == GameStatus.LOST

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, 8), (8, 8)])
    def test_out_of_bounds(
        self, beginner_session: GameSession, row: int, col: int
    ) -> None:
        """Every call rejects coordinates off the board."""
        with pytest.raises(OutOfBounds):
            primary_click(beginner_session, row, col)
        with pytest.raises(OutOfBounds):
            toggle_flag(beginner_session, row, col)
        with pytest.raises(OutOfBounds):
            query_cell(beginner_session, row, col)
