"""
Unit tests for configuration management.

Tests the configuration system including loading, saving,
validation, and command line overrides.
"""

import pytest

from framerank.utils.config import (
    Config,
    LabelsConfig,
    LoggingConfig,
    RankingConfig,
    SmoothingConfig,
    get_default_config,
)
from framerank.utils.exceptions import InvalidConfiguration


class TestSmoothingConfig:
    """Test SmoothingConfig functionality."""

    def test_default_config(self):
        config = SmoothingConfig()

        assert config.enabled is True
        assert config.stage_count == 3
        assert config.filter_factor == 0.4
        assert config.warm_start is False

    def test_from_dict_ignores_unknown_keys(self):
        config = SmoothingConfig.from_dict({"stage_count": 5, "window_size": 9})

        assert config.stage_count == 5
        assert not hasattr(config, "window_size")


class TestConfig:
    """Test main Config class functionality."""

    def test_default_config(self):
        config = get_default_config()

        assert isinstance(config.labels, LabelsConfig)
        assert isinstance(config.smoothing, SmoothingConfig)
        assert isinstance(config.ranking, RankingConfig)
        assert isinstance(config.logging, LoggingConfig)
        assert config.ranking.results_to_show == 3
        config.validate()

    def test_config_to_dict(self):
        config_dict = Config().to_dict()

        assert set(config_dict) == {"labels", "smoothing", "ranking", "logging", "inference"}
        assert config_dict["smoothing"]["filter_factor"] == 0.4

    def test_config_from_dict(self):
        config = Config.from_dict(
            {
                "smoothing": {"stage_count": 2, "filter_factor": 0.25},
                "ranking": {"results_to_show": 5},
                "unknown": {"x": 1},
            }
        )

        assert config.smoothing.stage_count == 2
        assert config.smoothing.filter_factor == 0.25
        assert config.ranking.results_to_show == 5
        assert config.labels.label_path == "labels.txt"

    def test_yaml_save_load(self, temp_dir):
        config = Config()
        config.smoothing.stage_count = 4
        config.ranking.results_to_show = 1

        yaml_path = temp_dir / "config.yaml"
        config.save_yaml(yaml_path)
        loaded = Config.from_yaml(yaml_path)

        assert yaml_path.exists()
        assert loaded.to_dict() == config.to_dict()

    def test_json_save_load(self, temp_dir):
        config = Config()
        config.smoothing.warm_start = True

        json_path = temp_dir / "config.json"
        config.to_json(json_path)
        loaded = Config.from_json(json_path)

        assert loaded.smoothing.warm_start is True

    def test_empty_yaml_gives_defaults(self, temp_dir):
        yaml_path = temp_dir / "empty.yaml"
        yaml_path.write_text("")

        assert Config.from_yaml(yaml_path).to_dict() == Config().to_dict()

    def test_update_from_args(self):
        config = Config()

        config.update_from_args(
            {
                "smoothing.filter_factor": 0.5,
                "results_to_show": 2,
                "label_path": "imagenet.txt",
                "stage_count": None,
            }
        )

        assert config.smoothing.filter_factor == 0.5
        assert config.ranking.results_to_show == 2
        assert config.labels.label_path == "imagenet.txt"
        assert config.smoothing.stage_count == 3

    @pytest.mark.parametrize(
        "section, key, value",
        [
            ("smoothing", "stage_count", 0),
            ("smoothing", "stage_count", "3"),
            ("smoothing", "filter_factor", 0),
            ("smoothing", "filter_factor", 1.01),
            ("ranking", "results_to_show", 0),
            ("logging", "log_every_n_frames", -1),
        ],
    )
    def test_validate_rejects_out_of_range(self, section, key, value):
        config = Config()
        setattr(getattr(config, section), key, value)

        with pytest.raises(InvalidConfiguration):
            config.validate()

    def test_invalid_yaml_file(self, temp_dir):
        yaml_path = temp_dir / "invalid.yaml"
        yaml_path.write_text("invalid: yaml: content:")

        with pytest.raises(Exception):  # Should raise YAML parsing error
            Config.from_yaml(yaml_path)

    def test_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml("nonexistent.yaml")
