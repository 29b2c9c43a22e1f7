"""
Script for running tournaments and win-rate matches between Othello strategies.
"""
import os
import argparse
import random

from othello.arena import Arena
from othello.config import Config, get_default_config, set_seed
from othello.logger import setup_logger
from othello.players import make_strategy

def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Othello strategies')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                       help='Path to config file')
    parser.add_argument('--players', type=str, default=None,
                       help="Comma-separated strategies, e.g. 'random,minimax-0,minimax-2'")
    parser.add_argument('--rounds', type=int, default=None,
                       help='Number of rounds to play')
    parser.add_argument('--win-rate', action='store_true',
                       help='Instead of a tournament, measure the win rate of the first player (Black) against the second')
    parser.add_argument('--num-matches', type=int, default=None,
                       help='Number of win-rate matches (default: arena.num_matches from the config)')
    parser.add_argument('--log-dir', type=str, default=None,
                       help='Directory for logs')
    parser.add_argument('--tensorboard', action='store_true',
                       help='Write metrics to TensorBoard')

    args = parser.parse_args()

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.players:
        config.arena.players = [name.strip() for name in args.players.split(',') if name.strip()]
    if args.rounds is not None:
        config.arena.rounds = args.rounds
    if args.num_matches is not None:
        config.arena.num_matches = args.num_matches
    if args.log_dir:
        config.logging.log_dir = args.log_dir
    if args.tensorboard:
        config.logging.use_tensorboard = True

    set_seed(config.seed)
    rng = random.Random(config.seed)
    logger = setup_logger(config)

    try:
        if len(config.arena.players) < 2:
            logger.logger.error("Need at least 2 players")
            return

        arena = Arena.from_config(config)
        strategies = [make_strategy(name, rng) for name in config.arena.players]

        if args.win_rate:
            rate = arena.win_rate(strategies[0], strategies[1], progress=config.logging.verbose)
            logger.log_metrics({'win_rate': rate}, step=0, prefix='arena/')
            return

        for index, strategy in enumerate(strategies):
            # Allow the same strategy to enter twice under distinct IDs
            player_id = strategy.name if strategy.name not in arena.players else f"{strategy.name}#{index}"
            arena.add_player(strategy, player_id)

        logger.logger.info(f"Starting tournament with {config.arena.rounds} rounds: "
                           f"{', '.join(arena.players)}")
        results = arena.run_tournament(rounds=config.arena.rounds, progress=config.logging.verbose)

        for entry in results['leaderboard']:
            logger.log_metrics({'rating': entry['rating']}, step=config.arena.rounds,
                               prefix=f"elo/{entry['player_id']}/")
        logger.logger.info("\n" + arena.format_leaderboard())
        logger.log_text('leaderboard', arena.format_leaderboard())
    finally:
        logger.close()

if __name__ == "__main__":
    main()
