"""
Strategies for choosing moves.
"""
from .players import (
    EvaluatorStrategy, HumanStrategy, MinimaxStrategy,
    RandomStrategy, Strategy, make_strategy,
)

__all__ = [
    'EvaluatorStrategy', 'HumanStrategy', 'MinimaxStrategy',
    'RandomStrategy', 'Strategy', 'make_strategy',
]
