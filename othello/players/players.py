"""
Move-choosing strategies that plug into the game driver.
"""
import inspect
import logging
import random
from typing import Awaitable, Callable, Optional, Sequence, Union

import numpy as np
import torch
import torch.nn as nn

from ..game.board import Board, Coord, Player, coord_to_index
from ..search import best_move, random_choice

logger = logging.getLogger(__name__)

Evaluator = Union[nn.Module, Callable[[np.ndarray], Union[Sequence[float], Awaitable[Sequence[float]]]]]
Prompt = Callable[[Board, Player, Sequence[Coord]], Awaitable[Coord]]


class Strategy:
    """Base class for anything that can pick a move for the game driver."""

    name = "strategy"

    async def choose_move(self, board: Board, player: Player, legal_moves: Sequence[Coord]) -> Coord:
        """
        Pick one move from `legal_moves`.

        Args:
            board: Current position (read-only)
            player: Player to move
            legal_moves: Non-empty list of legal moves for `player`

        Returns:
            An element of `legal_moves`
        """
        raise NotImplementedError

    def reset(self) -> None:
        """Clear any per-game state."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class RandomStrategy(Strategy):
    """Plays a uniformly random legal move."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    async def choose_move(self, board, player, legal_moves):
        return random_choice(legal_moves, self.rng)


class MinimaxStrategy(Strategy):
    """Plays the negamax best move at a fixed search depth."""

    def __init__(self, depth: int = 2, rng: Optional[random.Random] = None):
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.rng = rng
        self.name = f"minimax-{depth}"

    async def choose_move(self, board, player, legal_moves):
        return best_move(board, player, legal_moves, self.depth, rng=self.rng)


class EvaluatorStrategy(Strategy):
    """
    Plays the legal move an external evaluator scores highest.

    The evaluator gets the 64-cell board encoded relative to the mover (the
    mover is always +1) and returns 64 per-cell scores. It may be a
    torch.nn.Module or any callable, sync or async.
    """

    name = "evaluator"

    def __init__(self, evaluator: Evaluator, device: str = 'cpu'):
        self.evaluator = evaluator
        self.device = device
        if isinstance(evaluator, nn.Module):
            self.evaluator.eval()
            self.evaluator.to(device)

    async def _scores(self, encoded: np.ndarray) -> np.ndarray:
        if isinstance(self.evaluator, nn.Module):
            with torch.no_grad():
                inputs = torch.from_numpy(encoded).unsqueeze(0).to(self.device)
                return self.evaluator(inputs).squeeze(0).cpu().numpy()

        scores = self.evaluator(encoded)
        if inspect.isawaitable(scores):
            scores = await scores
        return np.asarray(scores, dtype=np.float32).ravel()

    async def choose_move(self, board, player, legal_moves):
        if not legal_moves:
            raise ValueError("EvaluatorStrategy needs at least one legal move")
        encoded = board.relative_to(player).astype(np.float32)
        scores = await self._scores(encoded)
        if scores.shape[0] != len(board):
            raise ValueError(f"Evaluator returned {scores.shape[0]} scores, expected {len(board)}")

        move = legal_moves[0]
        best = -np.inf
        for candidate in legal_moves:
            score = scores[coord_to_index(candidate)]
            if score > best:
                best = score
                move = candidate
        return move


class HumanStrategy(Strategy):
    """
    Asks an interactive prompt (provided by a renderer) for a move and asks
    again until the answer is legal.
    """

    name = "human"

    def __init__(self, prompt: Prompt):
        self.prompt = prompt

    async def choose_move(self, board, player, legal_moves):
        legal = set(legal_moves)
        while True:
            move = Coord(*await self.prompt(board, player, legal_moves))
            if move in legal:
                return move
            logger.info("Illegal move %s for %s, asking again", tuple(move), player)


def make_strategy(name: str, rng: Optional[random.Random] = None) -> Strategy:
    """
    Build a strategy from a short name: 'random' or 'minimax-<depth>'.
    """
    if name == 'random':
        return RandomStrategy(rng)
    if name.startswith('minimax-'):
        try:
            depth = int(name[len('minimax-'):])
        except ValueError:
            raise ValueError(f"Invalid search depth in strategy name: {name}") from None
        return MinimaxStrategy(depth, rng)
    raise ValueError(f"Unknown strategy: {name}")
