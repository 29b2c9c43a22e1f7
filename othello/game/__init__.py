"""
Othello game module.
This package contains the core game logic for Othello.
"""

from .board import (
    DIRECTIONS, EMPTY, NUM_CELLS, SIZE,
    Board, Coord, OutOfRange, Player,
    coord_to_index, index_to_coord, starting_board,
)
from .rules import apply_move, flipped_cells, has_legal_move, is_legal, legal_moves
from .game import GameState, MatchResult, MoveRecord, OthelloGame, play_match, winner_of

__all__ = [
    'DIRECTIONS', 'EMPTY', 'NUM_CELLS', 'SIZE',
    'Board', 'Coord', 'OutOfRange', 'Player',
    'coord_to_index', 'index_to_coord', 'starting_board',
    'apply_move', 'flipped_cells', 'has_legal_move', 'is_legal', 'legal_moves',
    'GameState', 'MatchResult', 'MoveRecord', 'OthelloGame', 'play_match', 'winner_of',
]
