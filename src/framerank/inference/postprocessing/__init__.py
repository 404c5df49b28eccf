"""
Post-processing of per-frame classifier scores.

Provides the cascaded temporal smoothing filter and the top-K ranker,
together with the errors they raise.
"""

from ...utils.exceptions import (
    DimensionMismatch,
    InvalidConfiguration,
    InvalidScores,
    PostprocessingError,
)
from .filters import TemporalSmoother
from .ranking import TopKRanker, format_top_or_default


__all__ = [
    "TemporalSmoother",
    "TopKRanker",
    "format_top_or_default",
    "DimensionMismatch",
    "InvalidConfiguration",
    "InvalidScores",
    "PostprocessingError",
]
