"""
Reveal engine for Nodesweeper.

Computes which cells become visible after a click or a chord. Functions
operate on a HiddenBoard plus the caller's revealed/flag sets, mutating
those sets in place.
"""
from collections import deque
from typing import Optional, Set, Tuple

from .board import HiddenBoard
from .cell import Coord


# ============================================================================
# Flood Fill
# ============================================================================

def reveal(
    hidden: HiddenBoard,
    revealed: Set[Coord],
    coord: Coord,
    flags: Optional[Set[Coord]] = None,
) -> Set[Coord]:
    """
    Reveal a cell, cascading through zero-count regions.

    Mines are not special-cased here: callers check for a mine before
    revealing on a primary click.

    Args:
        hidden: The board layout.
        revealed: Revealed coordinates, updated in place.
        coord: Cell to reveal.
        flags: If given, flags on newly revealed cells are removed.

    Returns:
        The coordinates revealed by this call (empty if coord was
        already revealed).

    Raises:
        OutOfBounds: If coord is not on the board.
    """
    start = hidden.check_bounds(coord)
    if start in revealed:
        return set()

    newly_revealed = {start}
    revealed.add(start)
    pending = deque([start])

    while pending:
        current = pending.popleft()
        if hidden.adjacent_count(current) != 0 or hidden.is_mine(current):
            continue
        for neighbor in hidden.neighbors(current):
            if neighbor in revealed:
                continue
            revealed.add(neighbor)
            newly_revealed.add(neighbor)
            pending.append(neighbor)

    if flags is not None:
        flags -= newly_revealed
    return newly_revealed


# ============================================================================
# Chording
# ============================================================================

def chord_reveal(
    hidden: HiddenBoard,
    revealed: Set[Coord],
    flags: Set[Coord],
    coord: Coord,
) -> Tuple[Set[Coord], bool]:
    """
    Reveal every unrevealed, unflagged neighbor of a revealed number.

    The flag count around the cell is not compared to its number: a
    chord with misplaced flags exposes the mine and loses the game.

    Args:
        hidden: The board layout.
        revealed: Revealed coordinates, updated in place.
        flags: Flagged coordinates; flagged neighbors are skipped.
        coord: An already revealed cell with a non-zero count.

    Returns:
        Tuple of (newly revealed coordinates, hit_mine). Nothing changes
        if coord is hidden or shows zero.
    """
    center = hidden.check_bounds(coord)
    newly_revealed: Set[Coord] = set()
    hit_mine = False

    if center not in revealed or hidden.adjacent_count(center) == 0:
        return newly_revealed, hit_mine

    for neighbor in hidden.neighbors(center):
        if neighbor in revealed or neighbor in flags:
            continue
        if hidden.is_mine(neighbor):
            hit_mine = True
        newly_revealed |= reveal(hidden, revealed, neighbor, flags)

    return newly_revealed, hit_mine
