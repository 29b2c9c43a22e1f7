"""
Generate self-play training samples and log how many games they took.
"""
import argparse
import itertools
import os
import random

from tqdm import tqdm

from othello.config import Config, get_default_config, set_seed
from othello.logger import setup_logger
from othello.self_play import SelfPlay


def main():
    parser = argparse.ArgumentParser(description='Generate Othello self-play samples')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--samples', type=int, default=1000,
                        help='Number of training samples to generate')
    parser.add_argument('--depth', type=int, default=None,
                        help='Minimax depth for both sides (default: self_play.search_depth)')
    parser.add_argument('--augment', action='store_true',
                        help='Expand every sample into its 8 board symmetries')
    args = parser.parse_args()

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.depth is not None:
        config.self_play.search_depth = args.depth
    if args.augment:
        config.self_play.augment_symmetries = True

    set_seed(config.seed)
    logger = setup_logger(config)
    self_play = SelfPlay.from_config(config, rng=random.Random(config.seed))

    try:
        logger.logger.info(f"Generating {args.samples} samples with {self_play.strategy.name}"
                           f"{' (augmented)' if self_play.augment else ''}")
        samples = list(tqdm(itertools.islice(self_play, args.samples), total=args.samples,
                            disable=not config.logging.verbose))
        logger.log_metrics({
            'samples': len(samples),
            'games': self_play.games_played,
            'draws_skipped': self_play.draws_skipped,
        }, step=0, prefix='self_play/')
    finally:
        logger.close()


if __name__ == "__main__":
    main()
