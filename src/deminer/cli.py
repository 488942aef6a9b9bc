"""
deminer - play Minesweeper in the terminal.

Usage:
    deminer [--difficulty {beginner,intermediate,expert}]
            [--rows N] [--cols N] [--bombs N] [--seed N] [--ascii]

Commands during the game:
    o ROW COL   open a cell
    f ROW COL   toggle a flag
    h           show help
    q           quit
"""
import argparse
import logging
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from .board import (
    DIFFICULTIES,
    Board,
    BoardConfig,
    OutOfBoundsError,
    Position,
    Status,
)
from .placement import RngLike, plant_random_mines
from .render import ASCII, EMOJI, render_board


logger = logging.getLogger(__name__)

OPEN = "o"
FLAG = "f"
QUIT = "q"
HELP = "h"

HELP_TEXT = (
    "Commands:\n"
    "  o ROW COL   open a cell\n"
    "  f ROW COL   toggle a flag\n"
    "  h           show this help\n"
    "  q           quit"
)


# ============================================================================
# Command Parsing
# ============================================================================

def parse_command(line: str) -> Tuple[str, Optional[Position]]:
    """
    Parse one line of player input.

    Args:
        line: Raw input, e.g. "o 3 4".

    Returns:
        Tuple of (command, position). Position is None for q and h.

    Raises:
        ValueError: If the line is not a valid command.
    """
    parts = line.strip().lower().split()
    if not parts:
        raise ValueError("Empty command")

    command, args = parts[0], parts[1:]
    if command in (QUIT, HELP):
        if args:
            raise ValueError(f"'{command}' takes no arguments")
        return command, None

    if command not in (OPEN, FLAG):
        raise ValueError(f"Unknown command: {command}")
    if len(args) != 2:
        raise ValueError(f"'{command}' needs a row and a column")
    try:
        row, col = int(args[0]), int(args[1])
    except ValueError:
        raise ValueError("Row and column must be integers") from None
    return command, (row, col)


def describe_status(status: Status) -> str:
    """One-line summary of a status for the player."""
    if status.is_won:
        return "You won!"
    if status.is_lost:
        return "Boom! You lost."
    return f"Flags left: {status.flags_left}"


# ============================================================================
# Game Loop
# ============================================================================

def _can_open(board: Board, pos: Position) -> bool:
    """Check if opening pos would reveal a cell."""
    if not board.in_bounds(pos):
        return False
    cell = board.cell(pos)
    return not (cell.is_shown or cell.is_flagged)


def run_session(
    board: Board,
    read_line: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    style: str = EMOJI,
    rng: RngLike = None,
    mines_planted: bool = False,
) -> Status:
    """
    Play one game until it is won, lost, or the player quits.

    Args:
        board: Board to play on.
        read_line: Prompt function returning the next input line
            (default: input).
        write: Output function (default: print).
        style: Render style for the board.
        rng: Randomness for mine placement.
        mines_planted: Whether the board already holds its mines. If not,
            mines are planted on the first open, away from that cell.

    Returns:
        Status when the session ended.
    """
    read_line = read_line or input
    write = write or print

    status = board.status()
    write(render_board(board, style=style, coordinates=True))
    write(describe_status(status))

    while status.is_playing:
        try:
            line = read_line("> ")
        except EOFError:
            break

        try:
            command, pos = parse_command(line)
        except ValueError as error:
            write(f"Error: {error}")
            continue

        if command == QUIT:
            break
        if command == HELP:
            write(HELP_TEXT)
            continue

        try:
            if command == OPEN:
                if not mines_planted and _can_open(board, pos):
                    plant_random_mines(board, rng, exclude=[pos])
                    mines_planted = True
                status = board.open(pos)
            else:
                status = board.toggle_flag(pos)
        except OutOfBoundsError as error:
            write(f"Error: {error}")
            continue

        write(render_board(
            board, style=style, reveal=status.is_lost, coordinates=True
        ))
        write(describe_status(status))

    logger.info("Session ended: %s", status.state.name)
    return status


# ============================================================================
# Entry Point
# ============================================================================

def build_config(args: argparse.Namespace) -> BoardConfig:
    """Apply command line overrides to the chosen preset."""
    config = DIFFICULTIES[args.difficulty]
    overrides = {
        name: value
        for name, value in (
            ("rows", args.rows), ("cols", args.cols), ("bombs", args.bombs)
        )
        if value is not None
    }
    return replace(config, **overrides)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="deminer",
        description="Play Minesweeper in the terminal",
    )
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size and bomb count",
    )
    parser.add_argument("--rows", type=int, help="Override number of rows")
    parser.add_argument("--cols", type=int, help="Override number of columns")
    parser.add_argument("--bombs", type=int, help="Override number of bombs")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--ascii", action="store_true", help="Draw the board with ASCII only"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run one game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = build_config(args)
    except ValueError as error:
        parser.error(str(error))
    if config.bombs >= config.rows * config.cols:
        parser.error("At least one cell must be free of bombs")

    print(
        f"Board: {config.rows}x{config.cols} with {config.bombs} bombs. "
        "Type 'h' for help."
    )
    board = Board.from_config(config)
    status = run_session(
        board, style=ASCII if args.ascii else EMOJI, rng=args.seed
    )
    return 0 if status.is_won else 1


if __name__ == "__main__":
    raise SystemExit(main())
