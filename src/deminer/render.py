"""
Text rendering of Minesweeper boards.

Glyph precedence per cell: flagged > hidden > empty > numbered >
exploded mine > mine.
"""
from typing import Dict, List

from .board import Board
from .cell import Cell


# ============================================================================
# Glyph Tables
# ============================================================================

EMOJI = "emoji"
ASCII = "ascii"

GLYPHS: Dict[str, Dict[str, str]] = {
    EMOJI: {
        "flag": "🏳",
        "hidden": "🟧",
        "empty": "⬜",
        "exploded": "💥",
        "mine": "💣",
    },
    ASCII: {
        "flag": "F",
        "hidden": ".",
        "empty": " ",
        "exploded": "X",
        "mine": "*",
    },
}


def cell_glyph(cell: Cell, style: str = EMOJI, reveal: bool = False) -> str:
    """
    Pick the glyph for one cell.

    Args:
        cell: Cell to draw.
        style: "emoji" or "ascii".
        reveal: Draw the content of hidden cells too (debug view).

    Returns:
        Glyph string. Emoji glyphs and numbers are two columns wide.
    """
    if style not in GLYPHS:
        raise ValueError(f"Unknown render style: {style}")
    glyphs = GLYPHS[style]

    if cell.is_flagged:
        return glyphs["flag"]
    if cell.is_hidden and not reveal:
        return glyphs["hidden"]
    if not cell.is_mined:
        count = cell.neighbor_mine_count
        if count == 0:
            return glyphs["empty"]
        return f" {count}" if style == EMOJI else str(count)
    if cell.is_exploded:
        return glyphs["exploded"]
    return glyphs["mine"]


def render_board(
    board: Board,
    style: str = EMOJI,
    reveal: bool = False,
    coordinates: bool = False,
) -> str:
    """
    Render the whole board as text, one line per row.

    Args:
        board: Board to draw.
        style: "emoji" or "ascii".
        reveal: Show hidden content (debug view, or after a loss).
        coordinates: Prefix rows and head columns with their indices.
    """
    cells = board.cells()
    width = len(str(max(board.rows, board.cols) - 1))
    # Emoji glyphs and emoji-style numbers take two terminal columns.
    col_width = max(2, len(str(board.cols - 1))) if coordinates else 2
    lines: List[str] = []

    if coordinates:
        header = " ".join(
            str(col).rjust(col_width) for col in range(board.cols)
        )
        lines.append(" " * (width + 1) + header)

    for row in range(board.rows):
        glyphs = []
        for col in range(board.cols):
            glyph = cell_glyph(cells[(row, col)], style, reveal)
            if style == ASCII:
                glyph = glyph.rjust(col_width)
            else:
                glyph = " " * (col_width - 2) + glyph
            glyphs.append(glyph)
        line = " ".join(glyphs)
        if coordinates:
            line = f"{str(row).rjust(width)} {line}"
        lines.append(line)

    return "\n".join(lines)
