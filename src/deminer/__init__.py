"""
Minesweeper game engine.

Provides the core game logic (cell state, board, flood-fill reveal and
status) plus random mine placement, text rendering and a Gymnasium
environment built on top of it.
"""
from .cell import Cell, CellContent, Count, Empty, Mine
from .board import (
    Board,
    BoardConfig,
    GameState,
    OutOfBoundsError,
    Position,
    Status,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .placement import plant_random_mines
from .render import cell_glyph, render_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellContent",
    "Count",
    "Empty",
    "Mine",
    "Board",
    "BoardConfig",
    "GameState",
    "OutOfBoundsError",
    "Position",
    "Status",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "plant_random_mines",
    "cell_glyph",
    "render_board",
    "MinesweeperEnv",
]
