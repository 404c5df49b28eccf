"""
Frame classification pipelines for framerank.

Couple an external classifier with the smoothing filter and the ranker.
"""

from .classifiers import CallableClassifier, FrameClassifier, ModuleClassifier
from .frame_pipeline import FrameClassificationPipeline, InferenceError


__all__ = [
    "CallableClassifier",
    "FrameClassifier",
    "ModuleClassifier",
    "FrameClassificationPipeline",
    "InferenceError",
]
