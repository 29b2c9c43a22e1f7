"""
Move legality and move application for Othello.
"""
from typing import List, Tuple

from .board import (
    ALL_COORDS, DIRECTIONS, EMPTY, SIZE,
    Board, Coord, coord_to_index, in_bounds,
)


def _bracket_length(cells: Tuple[int, ...], x: int, y: int, dx: int, dy: int, player: int) -> int:
    """
    Length of the run of opponent pieces starting one step from (x, y) along
    (dx, dy) that is closed by a `player` piece. Returns 0 when the run is
    empty or ends at the edge or on an empty cell.
    """
    opponent = -player
    cx, cy = x + dx, y + dy
    run = 0
    # Row and column are checked separately so a ray never wraps to the next row
    while in_bounds(cx, cy) and cells[cx + cy * SIZE] == opponent:
        cx += dx
        cy += dy
        run += 1
    if run and in_bounds(cx, cy) and cells[cx + cy * SIZE] == player:
        return run
    return 0


def is_legal(board: Board, coord: Tuple[int, int], player: int) -> bool:
    """
    Check whether `player` may place a piece at `coord`.

    Args:
        board: The board to check against
        coord: (x, y) target; raises OutOfRange if off the board
        player: The player placing the piece

    Returns:
        True if the cell is empty and brackets at least one opponent run
    """
    if board.cell_at(coord) != EMPTY:
        return False
    x, y = coord
    cells = board.cells
    return any(_bracket_length(cells, x, y, dx, dy, player) for dx, dy in DIRECTIONS)


def legal_moves(board: Board, player: int) -> List[Coord]:
    """
    Get all legal moves for the given player, in index order.

    Returns:
        List of Coords; empty when the player has to pass
    """
    return [coord for coord in ALL_COORDS if is_legal(board, coord, player)]


def has_legal_move(board: Board, player: int) -> bool:
    return any(is_legal(board, coord, player) for coord in ALL_COORDS)


def flipped_cells(board: Board, coord: Tuple[int, int], player: int) -> List[Coord]:
    """Get the opponent pieces that placing at `coord` would flip."""
    x, y = coord
    cells = board.cells
    flipped = []
    for dx, dy in DIRECTIONS:
        run = _bracket_length(cells, x, y, dx, dy, player)
        for step in range(1, run + 1):
            flipped.append(Coord(x + dx * step, y + dy * step))
    return flipped


def apply_move(board: Board, coord: Tuple[int, int], player: int) -> Board:
    """
    Place a piece and flip every bracketed run.

    The move must already be known to be legal; it is not checked again here.
    Applying an illegal move gives a meaningless board.

    Returns:
        A new Board; the input board is left untouched
    """
    updates = [(coord_to_index(coord), player)]
    updates.extend((coord_to_index(c), player) for c in flipped_cells(board, coord, player))
    return board.replace(updates)
