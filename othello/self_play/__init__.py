"""
Self-play data generation.
"""
from .self_play import SelfPlay, SelfPlayDataset, TrainingSample, label_match, symmetries

__all__ = ['SelfPlay', 'SelfPlayDataset', 'TrainingSample', 'label_match', 'symmetries']
