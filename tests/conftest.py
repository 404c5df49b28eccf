"""
Pytest configuration and fixtures for framerank tests.

This module provides shared fixtures and configuration for all tests,
including label vocabularies, label files and test configurations.
"""

# Add src to path for imports
import sys
import tempfile
from pathlib import Path

import numpy as np
import pytest
import torch


sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from framerank.data.labels import LabelVocabulary
from framerank.utils.config import Config, RankingConfig, SmoothingConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def animal_labels() -> list[str]:
    return ["cat", "dog", "fox"]


@pytest.fixture
def vocabulary(animal_labels) -> LabelVocabulary:
    """Three-label vocabulary used by the concrete scenarios."""
    return LabelVocabulary(animal_labels)


@pytest.fixture
def label_file(temp_dir, animal_labels) -> Path:
    """Write a label list, one label per line."""
    path = temp_dir / "labels.txt"
    path.write_text("\n".join(animal_labels) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_config(label_file) -> Config:
    """Create a sample configuration for testing."""
    config = Config()
    config.labels.label_path = str(label_file)
    config.smoothing = SmoothingConfig(stage_count=3, filter_factor=0.4)
    config.ranking = RankingConfig(results_to_show=2)
    return config


@pytest.fixture
def raw_config(sample_config) -> Config:
    """Configuration with smoothing disabled."""
    sample_config.smoothing.enabled = False
    return sample_config


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture(autouse=True)
def set_deterministic():
    """Set deterministic behavior for reproducible tests."""
    torch.manual_seed(42)
    np.random.seed(42)


# Test markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
