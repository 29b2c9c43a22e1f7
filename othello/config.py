"""
Configuration parameters for Othello.
"""
import os
import json
import random
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, List
import numpy as np
import torch

@dataclass
class SearchConfig:
    """Configuration for the minimax search."""
    depth: int = 2  # Plies searched beyond each candidate move

@dataclass
class SelfPlayConfig:
    """Configuration for self-play data generation."""
    search_depth: int = 1
    augment_symmetries: bool = False

@dataclass
class ArenaConfig:
    """Configuration for win-rate matches and tournaments."""
    rounds: int = 10
    num_matches: int = 100
    elo_k: float = 32.0
    initial_rating: float = 1500.0
    players: List[str] = field(default_factory=lambda: ["random", "minimax-1"])

@dataclass
class LoggingConfig:
    """Configuration for logging and visualization."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    use_tensorboard: bool = False
    verbose: bool = True

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    seed: int = 42
    search: SearchConfig = field(default_factory=SearchConfig)
    self_play: SelfPlayConfig = field(default_factory=SelfPlayConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            seed=config_dict.get('seed', 42),
            search=SearchConfig(**config_dict.get('search', {})),
            self_play=SelfPlayConfig(**config_dict.get('self_play', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()

def set_seed(seed: int):
    """Set random seeds for reproducibility."""
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
