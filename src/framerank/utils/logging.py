"""
Centralized logging system for framerank.

This module provides a unified logging interface for the console, an
optional log file and optional TensorBoard scalars for per-frame scores.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from torch.utils.tensorboard import SummaryWriter


class Logger:
    """
    Centralized logger that supports multiple backends.

    Console output is always enabled. File logging is enabled when a log
    directory is given, and TensorBoard when requested.
    """

    def __init__(
        self,
        name: str = "framerank",
        log_level: str = "INFO",
        log_dir: str | Path | None = None,
        use_tensorboard: bool = False,
        experiment_name: str | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files and TensorBoard events
            use_tensorboard: Whether to use TensorBoard logging
            experiment_name: Name for this session
        """
        self.name = name
        self.log_dir = Path(log_dir) if log_dir else None
        self.experiment_name = (
            experiment_name or f"session_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        )

        self._setup_console_logger(log_level)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self._setup_file_logger()

        self.tb_writer = None
        if use_tensorboard:
            self._setup_tensorboard()

    def _setup_console_logger(self, log_level: str) -> None:
        """Setup console logging."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, log_level.upper()))

        # Remove existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, log_level.upper()))

        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(formatter)

        self.logger.addHandler(console_handler)

    def _setup_file_logger(self) -> None:
        """Setup file logging."""
        log_file = self.log_dir / f"{self.experiment_name}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file

        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)

        self.logger.addHandler(file_handler)

        self.info(f"Logging to file: {log_file}")

    def _setup_tensorboard(self) -> None:
        """Setup TensorBoard logging."""
        root = self.log_dir if self.log_dir is not None else Path("logs")
        tb_dir = root / "tensorboard" / self.experiment_name
        self.tb_writer = SummaryWriter(log_dir=str(tb_dir))
        self.info(f"TensorBoard logging to: {tb_dir}")

    # Standard logging methods
    def debug(self, message: str) -> None:
        """Log debug message."""
        self.logger.debug(message)

    def info(self, message: str) -> None:
        """Log info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log error message."""
        self.logger.error(message)

    def log_metrics(self, metrics: dict[str, Any], step: int | None = None) -> None:
        """
        Log metrics to all configured backends.

        Args:
            metrics: Dictionary of metric names and values
            step: Step number (frame index)
        """
        metrics_str = ", ".join(
            [
                f"{k}: {v:.4f}" if isinstance(v, float) else f"{k}: {v}"
                for k, v in metrics.items()
            ]
        )
        step_str = f" (frame {step})" if step is not None else ""
        self.info(f"Metrics{step_str}: {metrics_str}")

        if self.tb_writer and step is not None:
            for name, value in metrics.items():
                if isinstance(value, (int, float)):
                    self.tb_writer.add_scalar(name, value, step)

    def log_hyperparameters(self, hparams: dict[str, Any]) -> None:
        """
        Log the post-processing parameters of a session.

        Args:
            hparams: Dictionary of parameter names and values
        """
        self.info("Parameters:")
        for name, value in hparams.items():
            self.info(f"  {name}: {value}")

        if self.tb_writer:
            tb_hparams = {}
            for k, v in hparams.items():
                if isinstance(v, (int, float, str, bool)):
                    tb_hparams[k] = v
                else:
                    tb_hparams[k] = str(v)

            self.tb_writer.add_hparams(tb_hparams, {})

    def close(self) -> None:
        """Close all logging backends."""
        if self.tb_writer:
            self.tb_writer.close()
            self.tb_writer = None

        self.info("Logger closed")


# Global logger instance
_global_logger: Logger | None = None


def get_logger(name: str = "framerank", **kwargs) -> Logger:
    """
    Get the global logger instance.

    Args:
        name: Logger name
        **kwargs: Additional arguments for Logger initialization

    Returns:
        Logger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = Logger(name=name, **kwargs)

    return _global_logger


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = None,
    use_tensorboard: bool = False,
    experiment_name: str | None = None,
) -> Logger:
    """
    Setup global logging configuration.

    Args:
        log_level: Logging level
        log_dir: Directory for log files
        use_tensorboard: Whether to use TensorBoard
        experiment_name: Session name

    Returns:
        Configured logger instance
    """
    global _global_logger

    if _global_logger is not None:
        _global_logger.close()

    _global_logger = Logger(
        log_level=log_level,
        log_dir=log_dir,
        use_tensorboard=use_tensorboard,
        experiment_name=experiment_name,
    )

    return _global_logger
