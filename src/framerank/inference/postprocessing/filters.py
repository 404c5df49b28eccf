"""
Temporal smoothing of per-frame classifier scores.

This module provides a multi-stage low-pass filter that suppresses
frame-to-frame jitter in classifier output.
"""

from typing import Any

import numpy as np

from ...utils.exceptions import InvalidConfiguration
from ...utils.helpers import as_score_vector, is_integer, is_unit_factor
from ...utils.logging import get_logger


class TemporalSmoother:
    """
    Cascaded exponential moving average over score vectors.

    Stage 0 tracks the raw scores and every later stage tracks the stage
    before it, so each additional stage steepens the attenuation of
    high-frequency noise. Stages start at zero, which produces a warm-up
    transient over the first frames unless ``warm_start`` is set.

    Instances are not safe for concurrent ``update`` calls.
    """

    def __init__(
        self,
        vocabulary_size: int,
        stage_count: int = 3,
        filter_factor: float = 0.4,
        warm_start: bool = False,
    ):
        """
        Initialize the filter state.

        Args:
            vocabulary_size: Length N of every score vector
            stage_count: Number S of cascaded stages
            filter_factor: EMA factor in (0, 1]; larger follows input faster
            warm_start: Seed all stages with the first frame instead of zeros

        Raises:
            InvalidConfiguration: If any argument is out of range
        """
        if not is_integer(vocabulary_size) or vocabulary_size <= 0:
            raise InvalidConfiguration(
                f"vocabulary_size must be a positive integer, got {vocabulary_size!r}"
            )
        if not is_integer(stage_count) or stage_count < 1:
            raise InvalidConfiguration(
                f"stage_count must be an integer >= 1, got {stage_count!r}"
            )
        if not is_unit_factor(filter_factor):
            raise InvalidConfiguration(
                f"filter_factor must be in (0, 1], got {filter_factor!r}"
            )

        self.vocabulary_size = int(vocabulary_size)
        self.stage_count = int(stage_count)
        self.filter_factor = float(filter_factor)
        self.warm_start = bool(warm_start)

        self._stages = np.zeros((self.stage_count, self.vocabulary_size), dtype=np.float64)
        self._frames_seen = 0

        self.logger = get_logger()
        self.logger.info(
            f"Temporal smoother initialized: {self.stage_count} stages, "
            f"factor {self.filter_factor}, {self.vocabulary_size} labels"
        )

    def update(self, raw: Any) -> np.ndarray:
        """
        Feed one frame of raw scores through the filter.

        Advances the filter state; calling twice with the same input
        advances it twice.

        Args:
            raw: Score vector of length N

        Returns:
            Copy of the last stage, the smoothed scores

        Raises:
            DimensionMismatch: If ``raw`` is not of length N. The state is
                left unchanged.
            InvalidScores: If ``raw`` holds NaN, inf or non-numeric entries.
                The state is left unchanged.
        """
        scores = as_score_vector(raw, self.vocabulary_size)

        if self.warm_start and self._frames_seen == 0:
            self._stages[:] = scores
        else:
            alpha = self.filter_factor
            self._stages[0] += alpha * (scores - self._stages[0])
            for i in range(1, self.stage_count):
                self._stages[i] += alpha * (self._stages[i - 1] - self._stages[i])

        self._frames_seen += 1

        return self._stages[-1].copy()

    def reset(self) -> None:
        """Zero every stage and re-arm the warm start."""
        self._stages.fill(0.0)
        self._frames_seen = 0
        self.logger.debug("Temporal smoother reset")

    @property
    def state(self) -> np.ndarray:
        """Copy of the ``(stage_count, vocabulary_size)`` filter state."""
        return self._stages.copy()

    @property
    def frames_seen(self) -> int:
        return self._frames_seen

    def get_statistics(self) -> dict[str, Any]:
        """Get filter parameters and progress."""
        return {
            "vocabulary_size": self.vocabulary_size,
            "stage_count": self.stage_count,
            "filter_factor": self.filter_factor,
            "warm_start": self.warm_start,
            "frames_seen": self._frames_seen,
        }
