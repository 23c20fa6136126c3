# backend/utils.py

import numpy as np

from .board import MinesweeperBoard

HIDDEN = -3
MINE = -1

# Anything a single letter can never map to
NO_COORDINATE = -1


def parse_coordinate(text: str) -> int:
    """
    Map the first character of a line of input to a 0-based coordinate
    ('a' -> 0, 'b' -> 1, ...). Case is ignored; whitespace is not skipped.
    Empty input maps to -1 so the board rejects it as out of range; no
    bounds check happens here.
    """
    if not text:
        return NO_COORDINATE
    return ord(text[0].lower()) - ord("a")


def row_label(row: int) -> str:
    return chr(ord("a") + row)


def col_label(col: int) -> str:
    return chr(ord("A") + col)


def cell_glyph(board: MinesweeperBoard, row: int, col: int, xray: bool = False) -> str:
    cell = board.cell(row, col)
    if not (cell.revealed or xray):
        return "-"
    if cell.is_mine:
        return "*"
    if cell.proximity:
        return str(cell.proximity)
    return " "


def render_board(board: MinesweeperBoard, xray: bool = False) -> str:
    """
    Text grid: column letters above and below, row letters on both sides.
    With xray every cell is drawn as if revealed.
    """
    header = "  " + "".join(f"{col_label(c)} " for c in range(board.width))
    lines = [header]
    for r in range(board.height):
        cells = "".join(f"{cell_glyph(board, r, c, xray)} " for c in range(board.width))
        lines.append(f"{row_label(r)} {cells}{row_label(r)} ")
    lines.append(header)
    return "\n".join(lines)


def encode_board(board: MinesweeperBoard, xray: bool = False) -> np.ndarray:
    """
    Encode the board as an int array of shape (height, width):
    -3 hidden, -1 mine, 0-8 proximity of a shown cell.
    """
    encoded = np.full((board.height, board.width), HIDDEN, dtype=int)
    for r in range(board.height):
        for c in range(board.width):
            cell = board.cells[r][c]
            if not (cell.revealed or xray):
                continue
            encoded[r, c] = MINE if cell.is_mine else cell.proximity
    return encoded


def snapshot_board(board: MinesweeperBoard) -> np.ndarray:
    """
    Full internal state as a (height, width, 3) array of
    (is_mine, revealed, proximity). Two equal snapshots mean identical boards.
    """
    state = np.zeros((board.height, board.width, 3), dtype=int)
    for r in range(board.height):
        for c in range(board.width):
            cell = board.cells[r][c]
            state[r, c] = (cell.is_mine, cell.revealed, cell.proximity)
    return state
