"""
Othello rules engine with a depth-limited negamax player.
"""
from .game import Board, Coord, OthelloGame, Player, apply_move, is_legal, legal_moves, play_match, starting_board
from .search import best_move

__version__ = "0.1.0"
__all__ = [
    'Board', 'Coord', 'OthelloGame', 'Player',
    'apply_move', 'is_legal', 'legal_moves', 'play_match', 'starting_board',
    'best_move',
]
