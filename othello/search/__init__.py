"""
Negamax search for Othello.
"""
from .minimax import (
    POSITION_WEIGHTS, WIN_SCORE,
    EmptySelection, ScoredMove,
    best_move, evaluate, heuristic, positional_score,
    random_choice, score_moves, terminal_score,
)

__all__ = [
    'POSITION_WEIGHTS', 'WIN_SCORE',
    'EmptySelection', 'ScoredMove',
    'best_move', 'evaluate', 'heuristic', 'positional_score',
    'random_choice', 'score_moves', 'terminal_score',
]
