"""
Per-frame classification pipeline.

This module runs an external classifier on each frame, stabilizes its
scores with the temporal smoother and ranks the top labels for display.
"""

import time
from typing import Any

import numpy as np

from ...data.labels import LabelVocabulary, load_label_list
from ...data.results import RankedResult
from ...utils.config import Config
from ...utils.logging import get_logger
from ..postprocessing.filters import TemporalSmoother
from ..postprocessing.ranking import TopKRanker, format_top_or_default
from .classifiers import CallableClassifier, FrameClassifier, ModuleClassifier


UNINITIALIZED_MESSAGE = "Uninitialized Classifier."


class InferenceError(Exception):
    """Base exception for inference-related errors."""

    pass


class FrameClassificationPipeline:
    """
    Classify frames one at a time and rank the smoothed scores.

    Frames must be fed sequentially; the smoothing state is shared by all
    calls on one instance.
    """

    def __init__(
        self,
        config: Config,
        vocabulary: LabelVocabulary,
        classifier: Any = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Configuration object
            vocabulary: Labels in classifier output order
            classifier: Classifier or plain callable; may be attached later

        Raises:
            InvalidConfiguration: If the configuration is out of range
        """
        config.validate()

        self.config = config
        self.vocabulary = vocabulary
        self.logger = get_logger()

        self.smoother: TemporalSmoother | None = None
        if config.smoothing.enabled:
            self.smoother = TemporalSmoother(
                vocabulary_size=len(vocabulary),
                stage_count=config.smoothing.stage_count,
                filter_factor=config.smoothing.filter_factor,
                warm_start=config.smoothing.warm_start,
            )

        self.ranker = TopKRanker(vocabulary, k=config.ranking.results_to_show)

        self.classifier: FrameClassifier | None = None
        if classifier is not None:
            self.attach_classifier(classifier)

        # Performance tracking
        self.inference_times: list[float] = []
        self.frames_processed = 0

        self.logger.info(
            f"Frame classification pipeline initialized with {len(vocabulary)} labels"
        )

    @classmethod
    def from_config(
        cls, config: Config, classifier: Any = None, model: Any = None
    ) -> "FrameClassificationPipeline":
        """
        Create a pipeline, loading labels from ``config.labels.label_path``.

        A PyTorch ``model`` is wrapped in a ``ModuleClassifier`` set up from
        ``config.inference``; pass either ``classifier`` or ``model``.
        """
        if classifier is not None and model is not None:
            raise ValueError("Pass either a classifier or a model, not both")
        if model is not None:
            classifier = ModuleClassifier.from_config(model, config)

        vocabulary = load_label_list(config.labels.label_path)
        return cls(config, vocabulary, classifier)

    def attach_classifier(self, classifier: Any) -> None:
        """Attach a classifier, wrapping plain callables."""
        if not isinstance(classifier, FrameClassifier):
            classifier = CallableClassifier(classifier)
        self.classifier = classifier

    def process_scores(self, raw: Any) -> RankedResult:
        """
        Smooth (when enabled) and rank one frame of raw scores.

        Args:
            raw: Score vector of length N

        Returns:
            Top-K ranked labels

        Raises:
            DimensionMismatch: If ``raw`` is not of length N
            InvalidScores: If ``raw`` holds NaN, inf or non-numeric entries
        """
        scores = self.smoother.update(raw) if self.smoother is not None else raw
        result = self.ranker.rank(scores)

        self.frames_processed += 1
        self.logger.debug(f"Frame {self.frames_processed}: {result.to_list()}")

        every_n = self.config.logging.log_every_n_frames
        if every_n and self.frames_processed % every_n == 0:
            top = result.top
            self.logger.log_metrics(
                {"top_score": top.score, "top_label": top.label},
                step=self.frames_processed,
            )

        return result

    def predict_frame(self, frame: Any) -> RankedResult:
        """
        Classify a frame and rank its smoothed scores.

        Args:
            frame: Model-ready input for the classifier

        Returns:
            Top-K ranked labels

        Raises:
            InferenceError: If no classifier is attached or it fails
            DimensionMismatch: If the classifier output has the wrong length
        """
        if self.classifier is None:
            raise InferenceError("Classifier not initialized")

        start_time = time.time()
        try:
            raw = self.classifier.classify(frame)
        except Exception as e:
            raise InferenceError(f"Classifier failed on frame: {e}") from e
        self.inference_times.append(time.time() - start_time)

        return self.process_scores(raw)

    def classify_frame(self, frame: Any) -> str:
        """
        Classify a frame and render the best label for display.

        Returns:
            ``"<Label> (<score>%)"``, a notice if no classifier is attached,
            or an empty string for a missing frame
        """
        if self.classifier is None:
            self.logger.error("Image classifier has not been initialized; Skipped.")
            return UNINITIALIZED_MESSAGE
        if frame is None:
            self.logger.warning("Frame missing, skipping...")
            return ""

        return format_top_or_default(self.predict_frame(frame))

    def reset(self) -> None:
        """Reset the smoothing state, e.g. when the camera changes."""
        if self.smoother is not None:
            self.smoother.reset()
        self.frames_processed = 0

    def get_performance_stats(self) -> dict[str, Any]:
        """
        Get inference performance statistics.

        Returns:
            Performance statistics
        """
        if not self.inference_times:
            return {"message": "No inference performed yet"}

        times = np.array(self.inference_times)

        return {
            "total_inferences": len(self.inference_times),
            "avg_time_per_frame": float(np.mean(times)),
            "min_time": float(np.min(times)),
            "max_time": float(np.max(times)),
            "std_time": float(np.std(times)),
            "throughput_fps": 1.0 / float(np.mean(times)) if np.mean(times) > 0 else 0,
        }

    def close(self) -> None:
        """Close the classifier and release its resources."""
        if self.classifier is not None:
            self.classifier.close()
            self.classifier = None
            self.logger.info("Classifier closed")

    def __enter__(self) -> "FrameClassificationPipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
