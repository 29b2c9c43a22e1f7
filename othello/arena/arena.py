"""
Arena for pitting strategies against each other, with win rates and ELO ratings.
"""
import asyncio
import logging
import time
from typing import Dict, List, Optional

from tqdm import tqdm

from ..config import Config
from ..game import Board, Player, play_match
from ..players import Strategy

logger = logging.getLogger(__name__)


class ELORatingSystem:
    """ELO rating system for tracking strategy strength."""

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        """
        Initialize the ELO rating system.

        Args:
            k: K-factor, controls how much ratings change after each game
            initial_rating: Initial rating for new players
        """
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}
        self.history: List[Dict] = []

    def add_player(self, player_id: str, rating: Optional[float] = None):
        if player_id not in self.ratings:
            self.ratings[player_id] = rating if rating is not None else self.initial_rating
            self.games_played[player_id] = 0

    def get_rating(self, player_id: str) -> float:
        return self.ratings.get(player_id, self.initial_rating)

    @staticmethod
    def expected_score(rating_a: float, rating_b: float) -> float:
        """Expected score of player A against player B."""
        return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))

    def update_ratings(self, player_a: str, player_b: str, score_a: float) -> Dict:
        """
        Update ratings after a game.

        Args:
            player_a: ID of player A
            player_b: ID of player B
            score_a: 1.0 for an A win, 0.5 for a draw, 0.0 for a loss

        Returns:
            Record of the rating change
        """
        self.add_player(player_a)
        self.add_player(player_b)

        rating_a = self.ratings[player_a]
        rating_b = self.ratings[player_b]
        delta = self.k * (score_a - self.expected_score(rating_a, rating_b))

        # Zero-sum: B gains what A loses
        self.ratings[player_a] = rating_a + delta
        self.ratings[player_b] = rating_b - delta
        self.games_played[player_a] += 1
        self.games_played[player_b] += 1

        record = {
            'timestamp': time.time(),
            'player_a': player_a,
            'player_b': player_b,
            'score_a': score_a,
            'rating_a_before': rating_a,
            'rating_b_before': rating_b,
            'rating_a_after': self.ratings[player_a],
            'rating_b_after': self.ratings[player_b],
        }
        self.history.append(record)
        return record

    def get_leaderboard(self) -> List[Dict]:
        """Current standings sorted by rating (descending)."""
        leaderboard = [
            {'player_id': pid, 'rating': rating, 'games_played': self.games_played[pid]}
            for pid, rating in self.ratings.items()
        ]
        leaderboard.sort(key=lambda x: x['rating'], reverse=True)
        return leaderboard


class Arena:
    """Arena for running matches and tournaments between strategies."""

    def __init__(
        self,
        elo_system: Optional[ELORatingSystem] = None,
        board: Optional[Board] = None,
        num_matches: int = 100,
    ):
        """
        Initialize the arena.

        Args:
            elo_system: Optional ELO rating system to use
            board: Starting position for every game (default: standard opening)
            num_matches: Default number of matches for `win_rate`
        """
        self.elo = elo_system if elo_system is not None else ELORatingSystem()
        self.board = board
        self.num_matches = num_matches
        self.players: Dict[str, Strategy] = {}

    @classmethod
    def from_config(cls, config: Config, board: Optional[Board] = None) -> 'Arena':
        """Create an arena from the arena config section."""
        elo = ELORatingSystem(k=config.arena.elo_k, initial_rating=config.arena.initial_rating)
        return cls(elo_system=elo, board=board, num_matches=config.arena.num_matches)

    def add_player(self, strategy: Strategy, player_id: Optional[str] = None):
        """Register a strategy under `player_id` (default: its name)."""
        player_id = player_id or strategy.name
        if player_id in self.players:
            raise ValueError(f"Player already registered: {player_id}")
        self.players[player_id] = strategy
        self.elo.add_player(player_id)

    def _play(self, black: Strategy, white: Strategy) -> Optional[Player]:
        black.reset()
        white.reset()
        return asyncio.run(play_match(black, white, self.board)).winner

    def play_game(self, player1_id: str, player2_id: str) -> float:
        """
        Play a single game, player 1 with black.

        Returns:
            1.0 if player1 wins, 0.5 for a draw, 0.0 if player2 wins
        """
        if player1_id not in self.players or player2_id not in self.players:
            raise ValueError(f"One or both players not found: {player1_id}, {player2_id}")

        winner = self._play(self.players[player1_id], self.players[player2_id])
        logger.debug("%s (Black) vs %s (White): %s", player1_id, player2_id, winner or "draw")
        if winner is Player.BLACK:
            return 1.0
        if winner is Player.WHITE:
            return 0.0
        return 0.5

    def win_rate(
        self,
        a: Strategy,
        b: Strategy,
        num_matches: Optional[int] = None,
        progress: bool = False,
    ) -> float:
        """
        Fraction of matches won by `a` playing black against `b`. Draws count as non-wins.

        `num_matches` defaults to the arena's configured count.
        """
        if num_matches is None:
            num_matches = self.num_matches
        if num_matches <= 0:
            raise ValueError("num_matches must be positive")
        wins = 0
        for _ in tqdm(range(num_matches), desc=f"{a.name} vs {b.name}", disable=not progress):
            if self._play(a, b) is Player.BLACK:
                wins += 1
        rate = wins / num_matches
        logger.info("Win rate of %s against %s: %.3f over %d matches", a.name, b.name, rate, num_matches)
        return rate

    def run_tournament(self, rounds: int = 10, progress: bool = False) -> Dict:
        """
        Run a round-robin tournament; colours alternate between rounds.

        Args:
            rounds: Number of times each pair of players meets

        Returns:
            Dictionary with per-matchup results and the final leaderboard
        """
        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairs = [(player_ids[i], player_ids[j])
                 for i in range(len(player_ids)) for j in range(i + 1, len(player_ids))]
        matchups = {
            f"{p1}_vs_{p2}": {'player1': p1, 'player2': p2, 'wins1': 0, 'wins2': 0, 'draws': 0}
            for p1, p2 in pairs
        }
        start_time = time.time()
        games_played = 0

        for round_num in tqdm(range(rounds), desc="Tournament", disable=not progress):
            for p1, p2 in pairs:
                black, white = (p2, p1) if round_num % 2 else (p1, p2)
                result = self.play_game(black, white)
                self.elo.update_ratings(black, white, result)
                games_played += 1

                score_p1 = result if black == p1 else 1.0 - result
                stats = matchups[f"{p1}_vs_{p2}"]
                if score_p1 == 1.0:
                    stats['wins1'] += 1
                elif score_p1 == 0.0:
                    stats['wins2'] += 1
                else:
                    stats['draws'] += 1

            logger.debug("Round %d finished", round_num + 1)

        return {
            'games_played': games_played,
            'matchups': matchups,
            'duration': time.time() - start_time,
            'leaderboard': self.elo.get_leaderboard(),
        }

    def format_leaderboard(self) -> str:
        lines = ["Rank  Player ID               Rating  Games Played",
                 "----  ---------------------  -------  ------------"]
        for i, player in enumerate(self.elo.get_leaderboard(), 1):
            lines.append(f"{i:4d}  {player['player_id']:22s}  {player['rating']:7.1f}  {player['games_played']:12d}")
        return "\n".join(lines)
