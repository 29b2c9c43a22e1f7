"""
Play a single Othello match between two strategies and log every position.
"""
import argparse
import asyncio
import os
import random
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.absolute()))

from othello.config import Config, get_default_config, set_seed
from othello.game import OthelloGame, Player
from othello.logger import setup_logger
from othello.players import make_strategy


async def play_logged(game, strategies, logger):
    """Play to the end, logging the board after every move."""
    while not game.is_game_over():
        player = game.current_player
        move = await game.step(strategies)
        logger.logger.info(f"{player} ({strategies[player].name}) plays {tuple(move)}\n{game}")
    return game.result()


def main():
    parser = argparse.ArgumentParser(description='Play a single Othello match')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--black', type=str, default=None,
                        help="Black strategy: 'random' or 'minimax-<depth>' (default: minimax at config depth)")
    parser.add_argument('--white', type=str, default='random',
                        help="White strategy: 'random' or 'minimax-<depth>'")
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (default: config seed)')
    args = parser.parse_args()

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    seed = args.seed if args.seed is not None else config.seed
    set_seed(seed)
    rng = random.Random(seed)

    logger = setup_logger(config)
    black = make_strategy(args.black or f"minimax-{config.search.depth}", rng)
    white = make_strategy(args.white, rng)

    game = OthelloGame()
    logger.logger.info(f"{black.name} (Black) vs {white.name} (White)\n{game}")
    try:
        result = asyncio.run(play_logged(game, {Player.BLACK: black, Player.WHITE: white}, logger))
        black_count, white_count = result.score
        logger.log_metrics({'black': black_count, 'white': white_count, 'moves': len(result.moves)}, step=0)
    finally:
        logger.close()


if __name__ == "__main__":
    main()
