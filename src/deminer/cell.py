"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/shown/flagged/exploded) and content (mine/empty/count).
"""
from dataclasses import dataclass, field
from typing import Union


# ============================================================================
# Constants
# ============================================================================

MAX_NEIGHBOR_MINES = 8


# ============================================================================
# Cell Content Variants
# ============================================================================

@dataclass(frozen=True)
class Mine:
    """Content of a cell holding a mine."""


@dataclass(frozen=True)
class Empty:
    """Content of a cell with no mine and no mined neighbors."""


@dataclass(frozen=True)
class Count:
    """
    Content of a cell with mined neighbors.

    Attributes:
        value: Number of mines among the 8 adjacent cells.
    """

    value: int

    def __post_init__(self) -> None:
        """Validate the neighbor count."""
        if not 0 <= self.value <= MAX_NEIGHBOR_MINES:
            raise ValueError(
                f"Neighbor mine count must be in 0..{MAX_NEIGHBOR_MINES}, "
                f"got {self.value}"
            )


CellContent = Union[Mine, Empty, Count]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    The cell has no knowledge of the grid; the board is responsible for
    only toggling the flag on hidden cells and only exploding mines.

    Attributes:
        shown: Whether the cell was revealed. Never goes back to False.
        flagged: Whether the player marked this cell.
        exploded: Whether this mine was opened by the player.
        content: Mine, Empty or Count(n).
    """

    shown: bool = False
    flagged: bool = False
    exploded: bool = False
    content: CellContent = field(default_factory=Empty)

    def show(self) -> None:
        """Reveal this cell."""
        self.shown = True

    def toggle_flag(self) -> None:
        """Flip the player's flag."""
        self.flagged = not self.flagged

    def plant_mine(self) -> None:
        """Turn this cell into a mine."""
        self.content = Mine()

    def increment_count(self) -> None:
        """Add one mined neighbor. Mines keep their content."""
        if self.is_mined:
            return
        self.content = Count(self.neighbor_mine_count + 1)

    def explode(self) -> None:
        """Mark this mine as the one that ended the game."""
        self.exploded = True

    @property
    def is_shown(self) -> bool:
        """Check if cell is shown."""
        return self.shown

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still hidden."""
        return not self.shown

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.flagged

    @property
    def is_mined(self) -> bool:
        """Check if cell holds a mine."""
        return isinstance(self.content, Mine)

    @property
    def is_exploded(self) -> bool:
        """Check if this mine was opened."""
        return self.exploded

    @property
    def neighbor_mine_count(self) -> int:
        """Number of mined neighbors, 0 unless content is a Count."""
        if isinstance(self.content, Count):
            return self.content.value
        return 0

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Shown cell with neighbor mine count
            9: Shown mine (game over state)
        """
        if self.flagged:
            return -2
        if not self.shown:
            return -1
        if self.is_mined:
            return 9
        return self.neighbor_mine_count
