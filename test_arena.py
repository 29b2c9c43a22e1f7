"""
Test script for the arena and ELO ratings.
"""
import random

import pytest

from othello.arena import Arena, ELORatingSystem
from othello.config import get_default_config
from othello.game import Board
from othello.players import RandomStrategy


def _black_always_wins() -> Board:
    rows = ["BW......"] + ["........"] * 5 + [".......W", ".......B"]
    return Board.from_rows(rows)


def test_elo_update():
    elo = ELORatingSystem(k=32, initial_rating=1500.0)

    assert elo.expected_score(1500.0, 1500.0) == pytest.approx(0.5)
    record = elo.update_ratings("a", "b", 1.0)

    assert elo.get_rating("a") == pytest.approx(1516.0)
    assert elo.get_rating("b") == pytest.approx(1484.0)
    assert record['rating_a_before'] == 1500.0
    assert elo.games_played == {"a": 1, "b": 1}
    assert [p['player_id'] for p in elo.get_leaderboard()] == ["a", "b"]


def test_play_game_result():
    arena = Arena(board=_black_always_wins())
    arena.add_player(RandomStrategy(), "first")
    arena.add_player(RandomStrategy(), "second")

    assert arena.play_game("first", "second") == 1.0
    assert arena.play_game("second", "first") == 1.0

    with pytest.raises(ValueError):
        arena.play_game("first", "nobody")


def test_duplicate_player_rejected():
    arena = Arena()
    arena.add_player(RandomStrategy())
    with pytest.raises(ValueError):
        arena.add_player(RandomStrategy())


def test_win_rate():
    arena = Arena(board=_black_always_wins())
    assert arena.win_rate(RandomStrategy(), RandomStrategy(), num_matches=3) == 1.0

    rng = random.Random(0)
    rate = Arena().win_rate(RandomStrategy(rng), RandomStrategy(rng), num_matches=4)
    assert 0.0 <= rate <= 1.0

    with pytest.raises(ValueError):
        arena.win_rate(RandomStrategy(), RandomStrategy(), num_matches=0)


class CountingStrategy(RandomStrategy):
    def __init__(self):
        super().__init__()
        self.resets = 0

    def reset(self):
        self.resets += 1


def test_win_rate_uses_configured_matches():
    config = get_default_config()
    config.arena.num_matches = 3
    config.arena.elo_k = 16.0
    config.arena.initial_rating = 1200.0
    arena = Arena.from_config(config, board=_black_always_wins())

    assert arena.num_matches == 3
    assert arena.elo.k == 16.0
    assert arena.elo.initial_rating == 1200.0

    a, b = CountingStrategy(), CountingStrategy()
    assert arena.win_rate(a, b) == 1.0
    # One reset per match
    assert a.resets == 3 and b.resets == 3


def test_tournament():
    rng = random.Random(1)
    arena = Arena(elo_system=ELORatingSystem(k=16))
    for name in ("a", "b", "c"):
        arena.add_player(RandomStrategy(rng), name)

    results = arena.run_tournament(rounds=2)

    assert results['games_played'] == 6
    for stats in results['matchups'].values():
        assert stats['wins1'] + stats['wins2'] + stats['draws'] == 2
    assert len(results['leaderboard']) == 3
    assert sum(p['rating'] for p in results['leaderboard']) == pytest.approx(4500.0)
    assert "Rank" in arena.format_leaderboard()


def test_tournament_needs_two_players():
    arena = Arena()
    arena.add_player(RandomStrategy())
    with pytest.raises(ValueError):
        arena.run_tournament(rounds=1)


def test_tournament_alternates_colours():
    arena = Arena(board=_black_always_wins())
    arena.add_player(RandomStrategy(), "a")
    arena.add_player(RandomStrategy(), "b")

    results = arena.run_tournament(rounds=2)
    stats = results['matchups']['a_vs_b']
    assert (stats['wins1'], stats['wins2'], stats['draws']) == (1, 1, 0)


if __name__ == "__main__":
    print("Running arena tests...\n")

    test_elo_update()
    test_play_game_result()
    test_win_rate()
    test_tournament()

    print("\nAll tests passed successfully!")
