"""
Test script for the configuration and logging setup.
"""
import logging
import os
import random

import numpy as np

from othello.config import Config, get_default_config, set_seed
from othello.logger import Logger


def test_config_creation(tmp_path):
    """Test creating, saving and loading a config."""
    config = get_default_config()

    assert config.project_name == "Othello"
    assert config.search.depth == 2
    assert config.self_play.search_depth == 1
    assert config.arena.players == ["random", "minimax-1"]

    config.search.depth = 4
    config.arena.players.append("minimax-0")
    test_path = os.path.join(tmp_path, "nested", "config.json")
    config.save(test_path)

    loaded_config = Config.load(test_path)
    assert loaded_config.to_dict() == config.to_dict(), "Loaded config should match original"
    assert loaded_config.search.depth == 4

    print("Config test completed successfully!")


def test_partial_config_dict():
    config = Config.from_dict({'seed': 7, 'search': {'depth': 1}})

    assert config.seed == 7
    assert config.search.depth == 1
    assert config.logging.log_level == "INFO"


def test_set_seed():
    set_seed(123)
    first = (random.random(), np.random.rand())
    set_seed(123)
    assert (random.random(), np.random.rand()) == first


def test_logger(tmp_path):
    config = get_default_config()
    config.logging.log_level = "DEBUG"
    logger = Logger(config, log_dir=str(tmp_path))
    try:
        assert os.path.exists(os.path.join(logger.run_dir, 'config.json'))
        assert logger.writer is None

        logger.log_metrics({'win_rate': 0.75, 'note': 'ok'}, step=3, prefix='arena/')
        logging.getLogger('othello.arena.arena').debug("from a submodule")
    finally:
        logger.close()

    with open(logger.log_file) as f:
        text = f.read()
    assert "Step 3: arena/win_rate=0.7500 arena/note=ok" in text
    assert "from a submodule" in text
    assert not logging.getLogger('othello').handlers


if __name__ == "__main__":
    test_partial_config_dict()
    test_set_seed()
