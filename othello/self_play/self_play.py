"""
Self-play implementation for generating training data.
"""
import asyncio
import logging
import random
from dataclasses import dataclass
from typing import AsyncIterator, Iterator, List, Optional, Tuple

import numpy as np
import torch
from torch.utils.data import IterableDataset, get_worker_info

from ..config import Config
from ..game import MatchResult, OthelloGame, Player, SIZE, coord_to_index, legal_moves
from ..players import MinimaxStrategy, Strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingSample:
    """
    One training pair.

    board: (64,) int8, the position encoded relative to the mover (+1 = mover)
    scores: (64,) float32, +1/-1 on the played cell depending on whether the
        mover went on to win, the opposite sign on every other legal cell and
        0 elsewhere
    """
    board: np.ndarray
    scores: np.ndarray


def label_match(result: MatchResult) -> List[TrainingSample]:
    """
    Turn a finished, decided match into one training sample per move.

    Every legal move other than the one played is assumed to have had the
    opposite outcome.
    """
    if result.winner is None:
        raise ValueError("Drawn matches carry no win/loss signal")

    samples = []
    for record in result.moves:
        moves = legal_moves(record.board, record.player)
        if not moves:
            raise RuntimeError("A recorded move was played from a position with no legal moves")

        outcome = 1.0 if record.player == result.winner else -1.0
        scores = np.zeros(len(record.board), dtype=np.float32)
        for move in moves:
            scores[coord_to_index(move)] = -outcome
        scores[coord_to_index(record.move)] = outcome

        samples.append(TrainingSample(record.board.relative_to(record.player), scores))
    return samples


def symmetries(sample: TrainingSample) -> List[TrainingSample]:
    """All 8 rotations and reflections of a sample. Othello rules are invariant under them."""
    board = sample.board.reshape(SIZE, SIZE)
    scores = sample.scores.reshape(SIZE, SIZE)
    variants = []
    for k in range(4):
        rotated_board = np.rot90(board, k)
        rotated_scores = np.rot90(scores, k)
        variants.append((rotated_board, rotated_scores))
        variants.append((np.fliplr(rotated_board), np.fliplr(rotated_scores)))
    return [
        TrainingSample(np.ascontiguousarray(b).ravel(), np.ascontiguousarray(s).ravel())
        for b, s in variants
    ]


class SelfPlay:
    """Self-play for generating training data."""

    def __init__(
        self,
        strategy: Optional[Strategy] = None,
        search_depth: int = 1,
        augment: bool = False,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the self-play generator.

        Args:
            strategy: Strategy used by both sides (default: minimax at `search_depth`)
            search_depth: Depth of the default minimax strategy
            augment: Expand every sample into its 8 board symmetries
            rng: Random source for the default strategy's tie-breaking
        """
        self.strategy = strategy if strategy is not None else MinimaxStrategy(search_depth, rng)
        self.augment = augment
        self.games_played = 0
        self.draws_skipped = 0

    @classmethod
    def from_config(cls, config: Config, rng: Optional[random.Random] = None) -> 'SelfPlay':
        """Create a minimax self-play generator from the self-play config section."""
        return cls(
            search_depth=config.self_play.search_depth,
            augment=config.self_play.augment_symmetries,
            rng=rng,
        )

    def reseed(self, seed: int) -> None:
        """Give the strategy a fresh random source, if it carries its own."""
        if getattr(self.strategy, 'rng', None) is not None:
            self.strategy.rng = random.Random(seed)

    async def play_match(self) -> MatchResult:
        """Play one match with the same strategy on both sides."""
        self.strategy.reset()
        game = OthelloGame()
        result = await game.play({Player.BLACK: self.strategy, Player.WHITE: self.strategy})
        self.games_played += 1
        return result

    def _samples(self, result: MatchResult) -> List[TrainingSample]:
        if result.winner is None:
            self.draws_skipped += 1
            logger.debug("Skipping drawn game %d", self.games_played)
            return []
        samples = label_match(result)
        if self.augment:
            samples = [variant for sample in samples for variant in symmetries(sample)]
        logger.debug("Game %d won by %s yielded %d samples", self.games_played, result.winner, len(samples))
        return samples

    async def generate(self) -> AsyncIterator[TrainingSample]:
        """Endless stream of training samples; each call starts a fresh stream."""
        while True:
            result = await self.play_match()
            for sample in self._samples(result):
                yield sample

    def __iter__(self) -> Iterator[TrainingSample]:
        """Synchronous version of `generate` for use outside an event loop."""
        while True:
            result = asyncio.run(self.play_match())
            yield from self._samples(result)


class SelfPlayDataset(IterableDataset):
    """
    Infinite torch dataset of (board, scores) float tensors from self-play.

    Under a multi-worker DataLoader every worker holds a copy of the same
    SelfPlay, so each one reseeds it from its worker seed.
    """

    def __init__(self, self_play: SelfPlay):
        super().__init__()
        self.self_play = self_play

    def __iter__(self) -> Iterator[Tuple[torch.Tensor, torch.Tensor]]:
        worker_info = get_worker_info()
        if worker_info is not None:
            self.self_play.reseed(worker_info.seed)
            logger.debug("Self-play worker %d seeded with %d", worker_info.id, worker_info.seed)

        for sample in self.self_play:
            yield (
                torch.from_numpy(sample.board.astype(np.float32)),
                torch.from_numpy(sample.scores),
            )
