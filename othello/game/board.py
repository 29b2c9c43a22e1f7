"""
Board module for Othello.
Holds the immutable board value, the player sign convention and coordinate helpers.
"""
from enum import IntEnum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple
import numpy as np

# Board dimensions
SIZE = 8
NUM_CELLS = SIZE * SIZE

EMPTY = 0


class OutOfRange(IndexError):
    """Raised for a coordinate or index outside the 8x8 grid."""


class Player(IntEnum):
    """
    Player constants. The two values are additive inverses of each other,
    so ``-player`` is always the opponent.
    """
    BLACK = 1   # Player A, moves first
    WHITE = -1  # Player B

    @property
    def opponent(self) -> 'Player':
        return Player(-self.value)

    def __str__(self) -> str:
        return self.name.capitalize()


class Coord(NamedTuple):
    """Board coordinate, x is the column and y is the row."""
    x: int
    y: int


# The 8 unit vectors used to scan rays from a placement
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]


def in_bounds(x: int, y: int) -> bool:
    """Check whether (x, y) lies on the board."""
    return 0 <= x < SIZE and 0 <= y < SIZE


def coord_to_index(coord: Tuple[int, int]) -> int:
    """Convert an (x, y) coordinate to its row-major index."""
    x, y = coord
    if not in_bounds(x, y):
        raise OutOfRange(f"Coordinate {tuple(coord)} is outside the board")
    return x + y * SIZE


def index_to_coord(index: int) -> Coord:
    """Convert a row-major index back to its (x, y) coordinate."""
    if not 0 <= index < NUM_CELLS:
        raise OutOfRange(f"Index {index} is outside the board")
    y, x = divmod(index, SIZE)
    return Coord(x, y)


# All coordinates in index order
ALL_COORDS: Tuple[Coord, ...] = tuple(index_to_coord(i) for i in range(NUM_CELLS))


def _starting_cells() -> Tuple[int, ...]:
    cells = [EMPTY] * NUM_CELLS
    mid = SIZE // 2 - 1
    cells[coord_to_index((mid, mid))] = Player.BLACK
    cells[coord_to_index((mid + 1, mid + 1))] = Player.BLACK
    cells[coord_to_index((mid + 1, mid))] = Player.WHITE
    cells[coord_to_index((mid, mid + 1))] = Player.WHITE
    return tuple(int(c) for c in cells)


_STARTING_CELLS = _starting_cells()


class Board:
    """
    Immutable Othello board.

    Cells are stored row-major (index = x + y * 8) as ints: 0 for empty,
    1 for black and -1 for white. Every transformation returns a new Board.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[Iterable[int]] = None):
        """
        Create a board.

        Args:
            cells: 64 cell values in row-major order. Defaults to the starting layout.
        """
        if cells is None:
            values = _STARTING_CELLS
        else:
            if isinstance(cells, np.ndarray):
                cells = cells.ravel()
            values = tuple(int(c) for c in cells)
            if len(values) != NUM_CELLS:
                raise ValueError(f"A board needs {NUM_CELLS} cells, got {len(values)}")
            if any(v not in (EMPTY, Player.BLACK, Player.WHITE) for v in values):
                raise ValueError("Cell values must be 0, 1 or -1")
        self._cells = values

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from 8 strings using 'B', 'W' and '.' (one string per row).
        """
        symbols = {'.': EMPTY, 'B': Player.BLACK, 'W': Player.WHITE}
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Expected 8 rows of 8 symbols")
        return cls(symbols[ch] for row in rows for ch in row)

    @property
    def cells(self) -> Tuple[int, ...]:
        return self._cells

    def cell_at(self, coord: Tuple[int, int]) -> int:
        """Get the cell value at (x, y)."""
        return self._cells[coord_to_index(coord)]

    def replace(self, updates: Iterable[Tuple[int, int]]) -> 'Board':
        """Return a new board with the given (index, value) pairs applied."""
        cells = list(self._cells)
        for index, value in updates:
            cells[index] = int(value)
        return Board(cells)

    def count(self, player: int) -> int:
        """Number of pieces belonging to `player`."""
        return self._cells.count(int(player))

    def empty_count(self) -> int:
        return self._cells.count(EMPTY)

    def score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.count(Player.BLACK), self.count(Player.WHITE)

    def to_array(self) -> np.ndarray:
        """
        Get the board as an 8x8 numpy array indexed [y, x].

        Returns:
            2D int8 numpy array
        """
        return np.array(self._cells, dtype=np.int8).reshape(SIZE, SIZE)

    def relative_to(self, player: int) -> np.ndarray:
        """
        Player-relative encoding: every cell multiplied by the player's sign,
        so the given player always appears as +1.
        """
        return np.array(self._cells, dtype=np.int8) * np.int8(int(player))

    def __iter__(self) -> Iterator[int]:
        return iter(self._cells)

    def __len__(self) -> int:
        return NUM_CELLS

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        black, white = self.score()
        return f"Board(black={black}, white={white}, empty={self.empty_count()})"

    def __str__(self) -> str:
        symbols = {EMPTY: '.', Player.BLACK: 'B', Player.WHITE: 'W'}
        rows = []
        for y in range(SIZE):
            rows.append(' '.join(symbols[self._cells[x + y * SIZE]] for x in range(SIZE)))
        black, white = self.score()
        rows.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(rows)


def starting_board() -> Board:
    """The standard opening layout."""
    return Board()
