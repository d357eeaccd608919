#!/usr/bin/env python3
"""
Nodesweeper - terminal front end.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}]
    python main.py play --rows R --cols C --mines M [--seed S]
    python main.py difficulties
"""
import argparse
import random
import sys
from typing import Optional, TextIO

from src.nodesweeper import (
    DIFFICULTIES,
    BoardConfig,
    ClickOutcome,
    FlagOutcome,
    GameSession,
    NodesweeperError,
    render_text,
)


HELP_TEXT = (
    "Commands: r ROW COL (reveal / chord), f ROW COL (flag), "
    "n [DIFFICULTY] (new game), q (quit)"
)


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Resolve the board configuration from command-line flags."""
    custom = (args.rows, args.cols, args.mines)
    if any(value is not None for value in custom):
        if any(value is None for value in custom):
            raise NodesweeperError("--rows, --cols and --mines go together")
        return BoardConfig(args.rows, args.cols, args.mines)
    return DIFFICULTIES[args.difficulty]


def print_board(session: GameSession) -> None:
    """Print the board followed by the status line."""
    print(render_text(session, show_coords=True))
    print(
        f"Mines left: {session.mines_remaining} | "
        f"Status: {session.status.name}"
    )


def handle_command(session: GameSession, line: str) -> Optional[str]:
    """
    Apply one command to the session.

    Returns:
        A message for the player, or None when nothing needs saying.
    """
    parts = line.split()
    command = parts[0].lower()

    if command == "n":
        if len(parts) == 1:
            session.restart()
            return "New game. Good luck!"
        name = parts[1].lower()
        if len(parts) != 2 or name not in DIFFICULTIES:
            return f"Difficulties: {', '.join(DIFFICULTIES)}"
        session.restart(config=DIFFICULTIES[name])
        return f"New {name} game. Good luck!"

    if command not in ("r", "f") or len(parts) != 3:
        return HELP_TEXT

    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        return HELP_TEXT

    if command == "f":
        outcome = session.toggle_flag((row, col))
        if outcome == FlagOutcome.REJECTED:
            return "Can't flag that cell."
        if session.is_won:
            return "Congratulations! You've flagged every mine."
        return None

    outcome = session.primary_click((row, col))
    if outcome == ClickOutcome.HIT_MINE:
        return "Game Over! You hit a mine. Type n to restart."
    if outcome == ClickOutcome.WIN:
        return "Congratulations! You've cleared the board."
    return None


def play(
    config: BoardConfig,
    seed: Optional[int] = None,
    stream: TextIO = sys.stdin,
) -> None:
    """Run the interactive game loop until quit or end of input."""
    rng = random.Random(seed) if seed is not None else None
    session = GameSession(config, rng=rng)

    print(
        f"Board: {config.rows}x{config.cols} with {config.num_mines} mines"
    )
    print(HELP_TEXT)
    print_board(session)

    for line in stream:
        line = line.strip()
        if not line:
            continue
        if line.lower() == "q":
            break

        try:
            message = handle_command(session, line)
        except NodesweeperError as error:
            message = str(error)

        print_board(session)
        if message:
            print(message)


def list_difficulties(args: argparse.Namespace) -> None:
    """Print the preset difficulty levels."""
    for name, config in DIFFICULTIES.items():
        print(
            f"{name:<14} {config.rows}x{config.cols}, "
            f"{config.num_mines} mines"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Nodesweeper - minesweeper in the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size and mine count",
    )
    play_parser.add_argument("--rows", type=int, help="Custom board rows")
    play_parser.add_argument("--cols", type=int, help="Custom board columns")
    play_parser.add_argument("--mines", type=int, help="Custom mine count")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the board"
    )

    subparsers.add_parser("difficulties", help="List difficulty presets")

    args = parser.parse_args()

    if args.command == "play":
        try:
            config = build_config(args)
        except NodesweeperError as error:
            parser.error(str(error))
        play(config, seed=args.seed)
    elif args.command == "difficulties":
        list_difficulties(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
