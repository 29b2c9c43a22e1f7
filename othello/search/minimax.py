"""
Depth-limited negamax search for Othello with a positional heuristic.
"""
import random
from typing import List, NamedTuple, Optional, Sequence, TypeVar

import numpy as np

from ..game.board import Board, Coord
from ..game.rules import apply_move, legal_moves

T = TypeVar('T')


class EmptySelection(ValueError):
    """Raised when a choice is requested from an empty set of candidates."""


class ScoredMove(NamedTuple):
    move: Coord
    score: int


# Classic square weights, indexed [y, x]: corners are prized, the cells next
# to them are penalised
POSITION_WEIGHTS = np.array([
    [8, -4, 6, 4, 4, 6, -4, 8],
    [-4, -4, 0, 0, 0, 0, -4, -4],
    [6, 0, 2, 2, 2, 2, 0, 6],
    [4, 0, 2, 1, 1, 2, 0, 4],
    [4, 0, 2, 1, 1, 2, 0, 4],
    [6, 0, 2, 2, 2, 2, 0, 6],
    [-4, -4, 0, 0, 0, 0, -4, -4],
    [8, -4, 6, 4, 4, 6, -4, 8],
], dtype=np.int32)
POSITION_WEIGHTS.setflags(write=False)

_FLAT_WEIGHTS = POSITION_WEIGHTS.ravel()

# Must exceed any heuristic value: sum(|weights|) = 188 plus a mobility
# difference of at most 64
WIN_SCORE = 10_000


def random_choice(candidates: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Pick one element uniformly at random."""
    if not candidates:
        raise EmptySelection("Can't pick an element from an empty sequence")
    return (rng or random).choice(candidates)


def positional_score(board: Board, player: int) -> int:
    """Weighted piece balance from `player`'s point of view."""
    cells = np.fromiter(board.cells, dtype=np.int32, count=len(board))
    return int(player) * int(np.dot(_FLAT_WEIGHTS, cells))


def heuristic(board: Board, player: int) -> int:
    """
    Static evaluation: positional score plus mobility (the player's legal
    move count minus the opponent's, both counted on `board`).
    """
    mobility = len(legal_moves(board, player)) - len(legal_moves(board, -player))
    return positional_score(board, player) + mobility


def terminal_score(board: Board, player: int) -> int:
    """Score of a finished game: +WIN_SCORE, -WIN_SCORE or 0 for a draw."""
    diff = board.count(player) - board.count(-player)
    if diff > 0:
        return WIN_SCORE
    if diff < 0:
        return -WIN_SCORE
    return 0


def evaluate(board: Board, player: int, depth: int) -> int:
    """
    Negamax value of `board` for `player`, who has just moved.

    Args:
        board: Position after `player`'s move
        player: The player who made the last move
        depth: Remaining plies of lookahead

    Returns:
        Score from `player`'s point of view
    """
    if depth <= 0:
        return heuristic(board, player)

    opponent_moves = legal_moves(board, -player)
    if opponent_moves:
        return -max(s.score for s in score_moves(board, -player, opponent_moves, depth - 1))

    # The opponent passes without using up a ply; the player moves again
    own_moves = legal_moves(board, player)
    if own_moves:
        return max(s.score for s in score_moves(board, player, own_moves, depth - 1))

    return terminal_score(board, player)


def score_moves(board: Board, player: int, moves: Sequence[Coord], depth: int) -> List[ScoredMove]:
    """Score every candidate move by searching `depth` plies past it."""
    return [
        ScoredMove(Coord(*move), evaluate(apply_move(board, move, player), player, depth))
        for move in moves
    ]


def best_move(
    board: Board,
    player: int,
    moves: Sequence[Coord],
    depth: int,
    rng: Optional[random.Random] = None,
) -> Coord:
    """
    Choose the best move with a fixed-depth negamax search.

    Args:
        board: Current position
        player: Player to move
        moves: Legal moves for `player`; must not be empty
        depth: Plies searched beyond each candidate (0 = heuristic of the result)
        rng: Random source for breaking ties between equally scored moves

    Returns:
        One of the highest-scoring moves, picked uniformly at random
    """
    if not moves:
        raise EmptySelection("best_move needs at least one legal move")

    scored = score_moves(board, player, moves, depth)
    top = max(s.score for s in scored)
    return random_choice([s.move for s in scored if s.score == top], rng)
