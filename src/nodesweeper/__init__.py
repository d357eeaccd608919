"""
Nodesweeper game module.

Provides the core game logic: board generation, reveal engine and
game session.
"""
from .cell import Coord, CellState, CellView
from .errors import NodesweeperError, InvalidConfiguration, OutOfBounds
from .board import (
    BoardConfig,
    HiddenBoard,
    generate,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
)
from .reveal import reveal, chord_reveal
from .session import GameSession, GameStatus, ClickOutcome, FlagOutcome
from .api import new_session, primary_click, toggle_flag, query_cell, query_status
from .render import render_text
from .environment import MinesweeperEnv

__all__ = [
    "Coord",
    "CellState",
    "CellView",
    "NodesweeperError",
    "InvalidConfiguration",
    "OutOfBounds",
    "BoardConfig",
    "HiddenBoard",
    "generate",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "reveal",
    "chord_reveal",
    "GameSession",
    "GameStatus",
    "ClickOutcome",
    "FlagOutcome",
    "new_session",
    "primary_click",
    "toggle_flag",
    "query_cell",
    "query_status",
    "render_text",
    "MinesweeperEnv",
]
