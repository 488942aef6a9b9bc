"""
Random mine placement for Minesweeper boards.

The board only knows how to plant a single mine; this module decides
where the mines go.
"""
import logging
from typing import Iterable, List, Union

import numpy as np

from .board import Board, Position


logger = logging.getLogger(__name__)

RngLike = Union[np.random.Generator, int, None]


def get_valid_mine_positions(
    board: Board, exclude: Iterable[Position] = ()
) -> List[Position]:
    """Get all positions that may receive a mine, in row-major order."""
    excluded = set(exclude)
    positions = []
    for row in range(board.rows):
        for col in range(board.cols):
            if (row, col) not in excluded:
                positions.append((row, col))
    return positions


def plant_random_mines(
    board: Board,
    rng: RngLike = None,
    exclude: Iterable[Position] = (),
) -> List[Position]:
    """
    Plant board.bombs mines at distinct random positions.

    Args:
        board: Freshly created board to plant into.
        rng: numpy Generator, integer seed, or None for fresh entropy.
        exclude: Positions that must stay mine-free, e.g. the first click.

    Returns:
        The planted (row, col) positions.

    Raises:
        ValueError: If there are fewer free positions than bombs.
    """
    generator = np.random.default_rng(rng)
    positions = get_valid_mine_positions(board, exclude)
    if board.bombs > len(positions):
        raise ValueError(
            f"Cannot place {board.bombs} bombs in {len(positions)} free cells"
        )

    chosen = generator.choice(len(positions), size=board.bombs, replace=False)
    planted = [positions[index] for index in sorted(int(i) for i in chosen)]
    for pos in planted:
        board.plant_mine(pos)

    logger.debug("Planted %d random mines", len(planted))
    return planted
