"""
Unit tests for board and cell rendering.
"""
import pytest
from deminer import Board, Cell, Count, cell_glyph, render_board


class TestCellGlyph:
    """Test glyph precedence."""

    def test_hidden(self) -> None:
        assert cell_glyph(Cell()) == "🟧"
        assert cell_glyph(Cell(), style="ascii") == "."

    def test_flag_beats_everything(self) -> None:
        """A flag is drawn even over a mine."""
        cell = Cell()
        cell.plant_mine()
        cell.toggle_flag()
        assert cell_glyph(cell) == "🏳"
        assert cell_glyph(cell, reveal=True) == "🏳"

    def test_flag_on_shown_cell(self) -> None:
        """Flag precedence holds for every state combination."""
        cell = Cell(shown=True, flagged=True, content=Count(2))
        assert cell_glyph(cell, style="ascii") == "F"

    def test_empty(self) -> None:
        cell = Cell(shown=True)
        assert cell_glyph(cell) == "⬜"
        assert cell_glyph(cell, style="ascii") == " "

    def test_numbered(self) -> None:
        cell = Cell(shown=True, content=Count(3))
        assert cell_glyph(cell) == " 3"
        assert cell_glyph(cell, style="ascii") == "3"

    def test_exploded_mine(self) -> None:
        cell = Cell(shown=True, exploded=True)
        cell.plant_mine()
        assert cell_glyph(cell) == "💥"
        assert cell_glyph(cell, style="ascii") == "X"

    def test_mine(self) -> None:
        cell = Cell(shown=True)
        cell.plant_mine()
        assert cell_glyph(cell) == "💣"
        assert cell_glyph(cell, style="ascii") == "*"

    def test_reveal_shows_hidden_content(self) -> None:
        """The debug view draws hidden mines."""
        cell = Cell()
        cell.plant_mine()
        assert cell_glyph(cell, style="ascii", reveal=True) == "*"

    def test_unknown_style_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown render style"):
            cell_glyph(Cell(), style="braille")


class TestRenderBoard:
    """Test whole-board rendering."""

    def test_hidden_board(self) -> None:
        board = Board(2, 3, 1)
        assert render_board(board, style="ascii") == " .  .  .\n .  .  ."

    def test_after_open(self) -> None:
        board = Board(1, 3, 1)
        board.plant_mine((0, 2))
        board.open((0, 0))
        assert render_board(board, style="ascii") == "    1  ."

    def test_reveal_after_loss(self) -> None:
        board = Board(1, 3, 1)
        board.plant_mine((0, 2))
        board.open((0, 2))
        assert render_board(board, style="ascii", reveal=True) == "    1  X"

    def test_coordinates(self) -> None:
        board = Board(2, 2, 0)
        lines = render_board(board, style="ascii", coordinates=True).split("\n")
        assert lines[0] == "   0  1"
        assert lines[1] == "0  .  ."
        assert lines[2] == "1  .  ."

    def test_emoji_rows(self) -> None:
        board = Board(2, 2, 0)
        assert render_board(board) == "🟧 🟧\n🟧 🟧"

    def test_wide_board_header_aligns_with_cells(self) -> None:
        """Three-digit column labels keep the grid aligned."""
        board = Board(1, 101, 0)
        header, line = render_board(
            board, style="ascii", coordinates=True
        ).split("\n")
        assert len(header) == len(line)
        assert header.endswith(" 99 100")
        assert line.endswith("  .   .")
