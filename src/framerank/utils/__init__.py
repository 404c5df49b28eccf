"""
Utilities module for framerank

Common utilities for configuration, logging, errors and helper functions.
"""

from .config import (
    Config,
    InferenceConfig,
    LabelsConfig,
    LoggingConfig,
    RankingConfig,
    SmoothingConfig,
    get_default_config,
)
from .exceptions import (
    DimensionMismatch,
    InvalidConfiguration,
    InvalidScores,
    PostprocessingError,
)
from .logging import Logger, get_logger, setup_logging


__all__ = [
    "Config",
    "InferenceConfig",
    "LabelsConfig",
    "LoggingConfig",
    "RankingConfig",
    "SmoothingConfig",
    "get_default_config",
    "DimensionMismatch",
    "InvalidConfiguration",
    "InvalidScores",
    "PostprocessingError",
    "Logger",
    "get_logger",
    "setup_logging",
]
