"""
Text rendering for Nodesweeper sessions.
"""
from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE
from .session import GameSession


def _symbol(value: int) -> str:
    """Map an observation value to its display character."""
    if value == HIDDEN_VALUE:
        return "."
    if value == FLAGGED_VALUE:
        return "F"
    if value == MINE_VALUE:
        return "*"
    if value == 0:
        return " "
    return str(value)


def render_text(session: GameSession, show_coords: bool = False) -> str:
    """
    Render the visible board as a string, one line per row.

    Args:
        session: Game to render.
        show_coords: Prefix rows and add a header with column indices.

    Returns:
        Multi-line string: '.' hidden, 'F' flag, '*' mine, ' ' empty,
        digits for adjacent counts.
    """
    lines = []
    obs = session.get_observation()
    width = len(str(max(session.rows, session.cols) - 1))

    if show_coords:
        header = " ".join(str(col).rjust(width) for col in range(session.cols))
        lines.append(" " * (width + 1) + header)

    for row in range(session.rows):
        cells = " ".join(
            _symbol(int(obs[row, col])).rjust(width)
            for col in range(session.cols)
        )
        if show_coords:
            cells = str(row).rjust(width) + " " + cells
        lines.append(cells)

    return "\n".join(lines)
