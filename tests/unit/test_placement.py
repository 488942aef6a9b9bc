"""
Unit tests for random mine placement.
"""
import numpy as np
import pytest
from deminer import Board, plant_random_mines
from deminer.placement import get_valid_mine_positions


def mined_positions(board: Board):
    return {pos for pos, cell in board.cells().items() if cell.is_mined}


class TestValidMinePositions:
    """Test candidate position enumeration."""

    def test_all_positions_without_exclusions(self) -> None:
        """Every cell is a candidate by default."""
        board = Board(2, 3, 1)
        assert len(get_valid_mine_positions(board)) == 6

    def test_excluded_positions_removed(self) -> None:
        """Excluded cells are not candidates."""
        board = Board(2, 3, 1)
        positions = get_valid_mine_positions(board, exclude=[(0, 0), (1, 2)])
        assert (0, 0) not in positions
        assert (1, 2) not in positions
        assert len(positions) == 4


class TestPlantRandomMines:
    """Test random placement on a board."""

    def test_plants_exactly_bombs_mines(self) -> None:
        """The board receives its full bomb total."""
        board = Board(9, 9, 10)
        planted = plant_random_mines(board, rng=1)
        assert len(planted) == 10
        assert mined_positions(board) == set(planted)

    def test_first_click_is_never_mined(self) -> None:
        """Excluded positions stay safe on every seed."""
        for seed in range(50):
            board = Board(3, 3, 8)
            plant_random_mines(board, rng=seed, exclude=[(1, 1)])
            assert board.cell((1, 1)).is_mined is False
            assert board.cell((1, 1)).neighbor_mine_count == 8

    def test_same_seed_same_layout(self) -> None:
        """Placement is reproducible from a seed."""
        first = plant_random_mines(Board(9, 9, 10), rng=42)
        second = plant_random_mines(Board(9, 9, 10), rng=42)
        assert first == second

    def test_accepts_generator(self) -> None:
        """A numpy Generator can drive placement."""
        board = Board(5, 5, 4)
        planted = plant_random_mines(board, rng=np.random.default_rng(7))
        assert len(planted) == 4

    def test_counts_are_consistent(self) -> None:
        """Every safe cell counts the mines around it."""
        board = Board(8, 8, 12)
        plant_random_mines(board, rng=3)
        mines = mined_positions(board)
        for pos, cell in board.cells().items():
            if cell.is_mined:
                continue
            expected = sum(1 for n in board.neighbors(pos) if n in mines)
            assert cell.neighbor_mine_count == expected

    def test_too_few_free_cells_raises_error(self) -> None:
        """Cannot fit the bombs once exclusions are applied."""
        board = Board(2, 2, 4)
        with pytest.raises(ValueError, match="Cannot place 4 bombs"):
            plant_random_mines(board, exclude=[(0, 0)])
