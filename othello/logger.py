"""
Logging utilities for Othello.
"""
import os
import logging
from datetime import datetime
from typing import Dict, Any, Optional
import torch
from torch.utils.tensorboard import SummaryWriter

from .config import Config

class Logger:
    """Logger for match results and arena metrics."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)

        os.makedirs(self.run_dir, exist_ok=True)

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)

        self.log_file = os.path.join(self.run_dir, 'run.log')
        self.file_handler = logging.FileHandler(self.log_file)
        self.file_handler.setLevel(level)
        self.file_handler.setFormatter(formatter)

        # Every module logs under the package logger
        self.logger = logging.getLogger('othello')
        self.logger.setLevel(level)
        self.logger.addHandler(self.console)
        self.logger.addHandler(self.file_handler)

        self.writer = None
        if config.logging.use_tensorboard:
            self.writer = SummaryWriter(log_dir=os.path.join(self.run_dir, 'tensorboard'))

        self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics to console and TensorBoard.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step/round
            prefix: Prefix for metric names (e.g., 'arena/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, (int, float)):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

        if self.writer is not None:
            for name, value in metrics.items():
                if isinstance(value, (int, float)):
                    self.writer.add_scalar(f"{prefix}{name}", value, step)
                elif isinstance(value, torch.Tensor):
                    self.writer.add_scalar(f"{prefix}{name}", value.item(), step)

    def log_text(self, tag: str, text: str, step: int = 0):
        """Log text to TensorBoard."""
        if self.writer is not None:
            self.writer.add_text(tag, text, step)

    def close(self):
        """Close the logger and flush all pending logs."""
        if self.writer is not None:
            self.writer.flush()
            self.writer.close()
            self.writer = None

        for handler in (self.console, self.file_handler):
            self.logger.removeHandler(handler)
            handler.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
