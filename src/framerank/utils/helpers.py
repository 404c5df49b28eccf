"""
Helper utilities for framerank.

This module provides the conversions shared by the smoothing filter,
the ranker and the classifier adapters.
"""

import json
import math
import numbers
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any

import numpy as np
import torch

from .exceptions import DimensionMismatch, InvalidScores


def get_device(device: str | None = None) -> torch.device:
    """
    Get the appropriate device for computation.

    Args:
        device: Device specification ("auto", "cpu", "cuda", or specific device)

    Returns:
        torch.device: Device object
    """
    if device is None or device == "auto":
        return torch.device("cuda" if torch.cuda.is_available() else "cpu")
    elif device == "cpu":
        return torch.device("cpu")
    elif device == "cuda":
        if not torch.cuda.is_available():
            raise RuntimeError("CUDA requested but not available")
        return torch.device("cuda")
    else:
        # Specific device like "cuda:0"
        return torch.device(device)


def tensor_to_numpy(tensor: torch.Tensor) -> np.ndarray:
    """
    Convert PyTorch tensor to numpy array.

    Args:
        tensor: PyTorch tensor

    Returns:
        Numpy array
    """
    if tensor.requires_grad:
        tensor = tensor.detach()

    if tensor.is_cuda:
        tensor = tensor.cpu()

    return tensor.numpy()


def as_score_vector(scores: Any, expected_length: int) -> np.ndarray:
    """
    Coerce a per-frame score vector into a 1-D float64 array.

    A ``(1, N)`` batch of one, as emitted by most interpreters, is flattened.
    Nothing is mutated if the shape is wrong.

    Args:
        scores: List, tuple, numpy array or torch tensor of scores
        expected_length: Vocabulary size the vector must match

    Returns:
        New float64 array of length ``expected_length``

    Raises:
        DimensionMismatch: If the vector is not of length ``expected_length``
        InvalidScores: If an entry is not a finite real number
    """
    if isinstance(scores, torch.Tensor):
        scores = tensor_to_numpy(scores)

    try:
        array = np.array(scores, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidScores(f"Scores are not a numeric vector: {e}") from e

    if array.ndim == 2 and array.shape[0] == 1:
        array = array[0]

    if array.ndim != 1:
        raise DimensionMismatch(expected_length, tuple(array.shape))
    if array.shape[0] != expected_length:
        raise DimensionMismatch(expected_length, int(array.shape[0]))

    if not np.isfinite(array).all():
        raise InvalidScores(f"Scores must be finite, got {array.tolist()}")

    return array


def is_integer(value: Any) -> bool:
    """Return True for Python or numpy integers, excluding booleans."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_unit_factor(value: Any) -> bool:
    """Return True if ``value`` is a finite real in the interval (0, 1]."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and 0 < value <= 1


def format_percentage(score: float) -> str:
    """Format a score in [0, 1] as a whole percentage, e.g. ``"64%"``; halves round up."""
    percent = Decimal(float(score) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent}%"


def save_dict_to_json(data: dict[str, Any], file_path: str | Path) -> None:
    """
    Save dictionary to JSON file.

    Args:
        data: Dictionary to save
        file_path: Path to save JSON file
    """
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=str)

