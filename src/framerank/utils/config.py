"""
Configuration management for framerank.

This module provides centralized configuration for the label vocabulary,
the temporal smoothing filter, the top-K ranker, logging and the classifier
adapter.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

import yaml

from .exceptions import InvalidConfiguration
from .helpers import is_integer, is_unit_factor


@dataclass
class LabelsConfig:
    """Configuration for the label vocabulary."""

    # One label per line, in classifier output order
    label_path: str = "labels.txt"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LabelsConfig":
        return _section_from_dict(cls, config_dict)


@dataclass
class SmoothingConfig:
    """Configuration for the cascaded low-pass filter."""

    enabled: bool = True
    stage_count: int = 3
    filter_factor: float = 0.4

    # Seed every stage with the first frame instead of zeros
    warm_start: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SmoothingConfig":
        return _section_from_dict(cls, config_dict)


@dataclass
class RankingConfig:
    """Configuration for top-K label ranking."""

    results_to_show: int = 3

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RankingConfig":
        return _section_from_dict(cls, config_dict)


@dataclass
class LoggingConfig:
    """Configuration for logging and monitoring."""

    log_level: str = "INFO"
    log_dir: str | None = None
    use_tensorboard: bool = False
    experiment_name: str | None = None

    # Log the top score every n frames (0 disables)
    log_every_n_frames: int = 0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LoggingConfig":
        return _section_from_dict(cls, config_dict)


@dataclass
class InferenceConfig:
    """Configuration for the classifier adapter."""

    device: str = "auto"  # auto, cpu, cuda
    apply_softmax: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "InferenceConfig":
        return _section_from_dict(cls, config_dict)


def _section_from_dict(section_cls, config_dict: dict):
    """Build a section from a dict, ignoring unknown keys."""
    known = {f.name for f in fields(section_cls)}
    return section_cls(**{k: v for k, v in config_dict.items() if k in known})


@dataclass
class Config:
    """Main configuration class that combines all sub-configurations."""

    labels: LabelsConfig = field(default_factory=LabelsConfig)
    smoothing: SmoothingConfig = field(default_factory=SmoothingConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    inference: InferenceConfig = field(default_factory=InferenceConfig)

    def validate(self) -> None:
        """
        Check value ranges that do not depend on the vocabulary.

        Raises:
            InvalidConfiguration: If a value is out of range
        """
        smoothing = self.smoothing
        if not is_integer(smoothing.stage_count) or smoothing.stage_count < 1:
            raise InvalidConfiguration(
                f"smoothing.stage_count must be an integer >= 1, got {smoothing.stage_count!r}"
            )
        if not is_unit_factor(smoothing.filter_factor):
            raise InvalidConfiguration(
                f"smoothing.filter_factor must be in (0, 1], got {smoothing.filter_factor!r}"
            )
        if not is_integer(self.ranking.results_to_show) or self.ranking.results_to_show < 1:
            raise InvalidConfiguration(
                f"ranking.results_to_show must be an integer >= 1, got {self.ranking.results_to_show!r}"
            )
        if not is_integer(self.logging.log_every_n_frames) or self.logging.log_every_n_frames < 0:
            raise InvalidConfiguration(
                f"logging.log_every_n_frames must be an integer >= 0, got {self.logging.log_every_n_frames!r}"
            )

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Config instance loaded from YAML
        """
        with open(config_path, encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)

        return cls.from_dict(config_dict or {})

    @classmethod
    def from_json(cls, config_path: str | Path) -> "Config":
        """Load configuration from JSON file."""
        with open(config_path, encoding="utf-8") as f:
            config_dict = json.load(f)

        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """
        Create Config instance from dictionary.

        Unknown sections and keys are ignored.

        Args:
            config_dict: Dictionary containing configuration parameters

        Returns:
            Config instance
        """
        config = cls()

        for section_name, section_data in config_dict.items():
            if hasattr(config, section_name) and isinstance(section_data, dict):
                section_config = getattr(config, section_name)
                for key, value in section_data.items():
                    if hasattr(section_config, key):
                        setattr(section_config, key, value)

        return config

    def to_dict(self) -> dict:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            "labels": self.labels.to_dict(),
            "smoothing": self.smoothing.to_dict(),
            "ranking": self.ranking.to_dict(),
            "logging": self.logging.to_dict(),
            "inference": self.inference.to_dict(),
        }

    def save_yaml(self, config_path: str | Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            config_path: Path where to save the YAML configuration
        """
        config_dict = self.to_dict()

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    to_yaml = save_yaml

    def to_json(self, config_path: str | Path) -> None:
        """Save configuration to JSON file."""
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def update_from_args(self, args: dict) -> None:
        """
        Update configuration from command-line arguments.

        Keys are either dotted ("smoothing.stage_count") or bare, in which
        case every section holding that field is updated. ``None`` values
        are skipped so unset CLI flags keep the configured value.

        Args:
            args: Dictionary of command-line arguments
        """
        sections = [self.labels, self.smoothing, self.ranking, self.logging, self.inference]

        for key, value in args.items():
            if value is None:
                continue
            if "." in key:
                section, param = key.split(".", 1)
                if hasattr(self, section):
                    section_config = getattr(self, section)
                    if hasattr(section_config, param):
                        setattr(section_config, param, value)
            else:
                for section_config in sections:
                    if hasattr(section_config, key):
                        setattr(section_config, key, value)


def get_default_config() -> Config:
    """
    Get the default configuration.

    Three filter stages with a factor of 0.4 and three ranked results.

    Returns:
        Default configuration
    """
    return Config()
