"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src (for the package) and the project root (for main.py) to path
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from nodesweeper import BoardConfig, GameSession, HiddenBoard


# Fixed 8x8 layout with 10 mines
BEGINNER_MINES = [
    (0, 0), (0, 7), (1, 1), (2, 5), (3, 3),
    (4, 6), (5, 0), (6, 4), (7, 2), (7, 7),
]


# ============================================================================
# Randomness Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def beginner_hidden() -> HiddenBoard:
    """8x8 board with a known layout of 10 mines."""
    return HiddenBoard.from_mines(8, 8, BEGINNER_MINES)


@pytest.fixture
def corner_hidden() -> HiddenBoard:
    """3x3 board with a single mine in the top-left corner."""
    return HiddenBoard.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def wall_hidden() -> HiddenBoard:
    """5x5 board split by a column of mines down the middle."""
    return HiddenBoard.from_mines(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def empty_hidden() -> HiddenBoard:
    """Board with no mines for cascade testing."""
    return HiddenBoard.from_mines(5, 5, [])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def beginner_session(beginner_hidden: HiddenBoard) -> GameSession:
    """Session over the fixed 8x8 layout."""
    return GameSession.from_board(beginner_hidden)


@pytest.fixture
def corner_session(corner_hidden: HiddenBoard) -> GameSession:
    return GameSession.from_board(corner_hidden)


@pytest.fixture
def chord_session() -> GameSession:
    """3x5 board with mines at opposite corners."""
    return GameSession.from_board(
        HiddenBoard.from_mines(3, 5, [(0, 0), (2, 4)])
    )


@pytest.fixture
def random_session(rng: random.Random) -> GameSession:
    """Beginner session with a seeded layout."""
    return GameSession(BoardConfig(8, 8, 10), rng=rng)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(8, 8, 10)


@pytest.fixture
def expert_config() -> BoardConfig:
    """Expert difficulty configuration."""
    return BoardConfig(16, 30, 99)

