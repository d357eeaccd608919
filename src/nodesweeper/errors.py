"""Exceptions raised by the Nodesweeper core."""


class NodesweeperError(Exception):
    """Base class for all Nodesweeper errors."""


class InvalidConfiguration(NodesweeperError, ValueError):
    """Board dimensions or mine count are out of range."""


class OutOfBounds(NodesweeperError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col
