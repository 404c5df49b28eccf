"""
Classifier adapters.

The classifier itself is an external collaborator: given a model-ready
frame it returns one score per label. These adapters give every backend
the same narrow interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import numpy as np
import torch
import torch.nn as nn
import torch.nn.functional as F

from ...utils.config import Config
from ...utils.helpers import get_device, tensor_to_numpy
from ...utils.logging import get_logger


class FrameClassifier(ABC):
    """Produce a score vector for one frame."""

    @abstractmethod
    def classify(self, frame: Any) -> Any:
        """
        Classify a frame.

        Args:
            frame: Model-ready input

        Returns:
            Array-like of N scores, or a ``(1, N)`` batch of one
        """
        pass

    def close(self) -> None:
        """Release backend resources."""
        pass

    def __call__(self, frame: Any) -> Any:
        return self.classify(frame)


class CallableClassifier(FrameClassifier):
    """Wrap a plain function as a classifier."""

    def __init__(self, fn: Callable[[Any], Any]):
        self.fn = fn

    def classify(self, frame: Any) -> Any:
        return self.fn(frame)


class ModuleClassifier(FrameClassifier):
    """
    Run a PyTorch module on preprocessed frame tensors.

    Frames must already be normalized tensors of the model's input shape;
    a single unbatched frame gets a batch dimension added. Modules that
    return a dict are read through their ``"logits"`` entry.
    """

    def __init__(
        self, model: nn.Module, device: str = "auto", apply_softmax: bool = False
    ):
        """
        Initialize the adapter.

        Args:
            model: Classification module
            device: Device specification ("auto", "cpu", "cuda", ...)
            apply_softmax: Convert logits to probabilities
        """
        self.device = get_device(device)
        self.model = model.to(self.device)
        self.model.eval()
        self.apply_softmax = apply_softmax

        self.logger = get_logger()
        self.logger.info(
            f"Module classifier {model.__class__.__name__} on device: {self.device}"
        )

    @classmethod
    def from_config(cls, model: nn.Module, config: Config) -> "ModuleClassifier":
        """Create an adapter using the ``inference`` configuration section."""
        return cls(
            model,
            device=config.inference.device,
            apply_softmax=config.inference.apply_softmax,
        )

    def classify(self, frame: Any) -> np.ndarray:
        if self.model is None:
            raise RuntimeError("Classifier has been closed")

        if isinstance(frame, np.ndarray):
            frame = torch.from_numpy(frame)

        if frame.dim() == 3:
            frame = frame.unsqueeze(0)

        with torch.no_grad():
            outputs = self.model(frame.to(self.device))
            logits = outputs["logits"] if isinstance(outputs, dict) else outputs

            if self.apply_softmax:
                logits = F.softmax(logits, dim=-1)

        return tensor_to_numpy(logits.float())

    def close(self) -> None:
        self.model = None

        if self.device.type == "cuda":
            torch.cuda.empty_cache()
