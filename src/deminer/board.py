"""
Board module for Minesweeper game.

Implements the game board with mine planting, flagging, flood-fill
revealing, and game status derivation.
"""
import logging
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Deque, Dict, Iterator, List, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Grid sizes and bomb totals are stored as unsigned bytes.
MAX_DIMENSION = 255
MAX_BOMBS = 255


class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class Status:
    """
    Outcome of the game after a move.

    Attributes:
        state: Whether the game is in progress, won or lost.
        flags_left: Bombs minus placed flags. Negative when over-flagged,
            always 0 once the game is over.
    """

    state: GameState
    flags_left: int = 0

    @classmethod
    def in_progress(cls, flags_left: int) -> "Status":
        """Status of an unfinished game."""
        return cls(GameState.IN_PROGRESS, flags_left)

    @classmethod
    def lost(cls) -> "Status":
        """Status of a game ended by an opened mine."""
        return cls(GameState.LOST)

    @classmethod
    def won(cls) -> "Status":
        """Status of a game with every safe cell shown."""
        return cls(GameState.WON)

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.state == GameState.IN_PROGRESS

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.state == GameState.LOST

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.state == GameState.WON


class OutOfBoundsError(IndexError):
    """Raised when a position lies outside the board."""

    def __init__(self, position: Position, rows: int, cols: int) -> None:
        self.position = position
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Position {position} is outside the {rows}x{cols} board"
        )


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        bombs: Mines the caller is expected to plant. Drives the win
            condition and the flags-left counter.
    """

    rows: int = 9
    cols: int = 9
    bombs: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.rows > MAX_DIMENSION or self.cols > MAX_DIMENSION:
            raise ValueError(
                f"Board dimensions cannot exceed {MAX_DIMENSION}"
            )
        if self.bombs < 0:
            raise ValueError("Number of bombs cannot be negative")
        max_bombs = min(MAX_BOMBS, self.rows * self.cols)
        if self.bombs > max_bombs:
            raise ValueError(f"Too many bombs (max {max_bombs})")


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

DIFFICULTIES = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of cells for one game session. Mines are planted by
    the caller one at a time; afterwards the game is driven through
    toggle_flag() and open(), each returning the resulting Status.
    """

    def __init__(self, rows: int, cols: int, bombs: int) -> None:
        """
        Create a board with every cell hidden and empty.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            bombs: Number of mines the caller will plant.

        Raises:
            ValueError: If the dimensions or bomb total are invalid.
        """
        self.config = BoardConfig(rows, cols, bombs)
        self._cells: Dict[Position, Cell] = {
            (row, col): Cell() for row in range(rows) for col in range(cols)
        }
        self._lost = False

    @classmethod
    def from_config(cls, config: BoardConfig) -> "Board":
        """Create a board from a configuration or preset."""
        return cls(config.rows, config.cols, config.bombs)

    def __repr__(self) -> str:
        return (
            f"Board(rows={self.rows}, cols={self.cols}, "
            f"bombs={self.bombs}, status={self.status()})"
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, pos: Position) -> bool:
        """Check if position is within board bounds."""
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(pos, self.rows, self.cols)

    def neighbors(self, pos: Position) -> List[Position]:
        """
        Get valid neighboring cell positions.

        The 8-neighborhood is clipped at the edges: a corner has 3
        neighbors, an edge cell 5 and an interior cell 8.

        Raises:
            OutOfBoundsError: If pos is outside the board.
        """
        self._check_bounds(pos)
        return [
            neighbor
            for neighbor in self._block(pos)
            if neighbor != pos and self.in_bounds(neighbor)
        ]

    @staticmethod
    def _block(pos: Position) -> Iterator[Position]:
        """Yield the 3x3 block centered on pos, unclipped."""
        row, col = pos
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                yield row + delta_row, col + delta_col

    # ========================================================================
    # Mine Planting (Low-level)
    # ========================================================================

    def plant_mine(self, pos: Position) -> None:
        """
        Plant a mine and update the counts around it.

        Must be called at most once per position, before the game starts.

        Args:
            pos: (row, col) position of the mine.

        Raises:
            OutOfBoundsError: If pos is outside the board.
        """
        self._check_bounds(pos)
        self._cells[pos].plant_mine()
        for neighbor in self.neighbors(pos):
            cell = self._cells[neighbor]
            if not cell.is_mined:
                cell.increment_count()
        logger.debug("Planted mine at %s", pos)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def toggle_flag(self, pos: Position) -> Status:
        """
        Toggle the flag on a hidden cell.

        Shown cells and finished games are left untouched.

        Args:
            pos: (row, col) position to flag or unflag.

        Returns:
            Status after the move.

        Raises:
            OutOfBoundsError: If pos is outside the board.
        """
        self._check_bounds(pos)
        status = self.status()
        cell = self._cells[pos]
        if cell.is_shown or not status.is_playing:
            return status

        cell.toggle_flag()
        return self.status()

    def open(self, pos: Position) -> Status:
        """
        Open a cell.

        A mined cell explodes and loses the game. Any other cell is shown,
        and if it has no mined neighbors the reveal spreads through the
        connected zero-count region and its numbered border.

        Args:
            pos: (row, col) position to open.

        Returns:
            Status after the move.

        Raises:
            OutOfBoundsError: If pos is outside the board.
        """
        self._check_bounds(pos)
        status = self.status()
        cell = self._cells[pos]
        if cell.is_shown or cell.is_flagged or not status.is_playing:
            return status

        if cell.is_mined:
            cell.explode()
            cell.show()
            self._lost = True
            logger.debug("Mine exploded at %s", pos)

        self._flood_fill(pos)

        status = self.status()
        if status.is_won:
            logger.debug("All safe cells shown, game won")
        return status

    def _flood_fill(self, start: Position) -> None:
        """
        Reveal the zero-count region reachable from start.

        The shown flag doubles as the visited marker, so each cell is
        processed at most once. Mined and flagged cells are never shown.
        """
        pending: Deque[Position] = deque([start])
        while pending:
            pos = pending.popleft()
            if not self.in_bounds(pos):
                continue

            cell = self._cells[pos]
            if cell.is_shown or cell.is_mined or cell.is_flagged:
                continue

            cell.show()
            if cell.neighbor_mine_count == 0:
                pending.extend(self._block(pos))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.config.cols

    @property
    def bombs(self) -> int:
        """Number of bombs the board expects."""
        return self.config.bombs

    @property
    def shown_count(self) -> int:
        """Number of shown cells, exploded mine included."""
        return sum(1 for cell in self._cells.values() if cell.is_shown)

    @property
    def flagged_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self._cells.values() if cell.is_flagged)

    @property
    def flags_left(self) -> int:
        """Bombs minus flags, may be negative."""
        return self.bombs - self.flagged_count

    def status(self) -> Status:
        """
        Derive the game status from the grid.

        Returns:
            LOST once a mine was opened, WON when only mined cells are
            still hidden, IN_PROGRESS with the flags left otherwise.
        """
        if self._lost:
            return Status.lost()
        if self.rows * self.cols - self.shown_count == self.bombs:
            return Status.won()
        return Status.in_progress(self.flags_left)

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.status().is_playing

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.status().is_won

    @property
    def is_lost(self) -> bool:
        """Check if a mine was opened."""
        return self._lost

    def cell(self, pos: Position) -> Cell:
        """
        Get a copy of the cell at a position.

        Raises:
            OutOfBoundsError: If pos is outside the board.
        """
        self._check_bounds(pos)
        return replace(self._cells[pos])

    def cells(self) -> Dict[Position, Cell]:
        """Snapshot of every cell, keyed by (row, col)."""
        return {pos: replace(cell) for pos, cell in self._cells.items()}

    def hidden_positions(self) -> List[Position]:
        """
        Get positions that can still be opened.

        Returns:
            List of (row, col) positions that are hidden and unflagged,
            in row-major order.
        """
        return [
            pos
            for pos, cell in self._cells.items()
            if cell.is_hidden and not cell.is_flagged
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = shown with neighbor mine count
                9 = shown mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for (row, col), cell in self._cells.items():
            obs[row, col] = cell.to_observation()
        return obs
