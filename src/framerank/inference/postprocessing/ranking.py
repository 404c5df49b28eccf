"""
Top-K label ranking.

Selects the K highest-scoring labels of a score vector with a bounded
min-heap, avoiding a full sort of the vocabulary.
"""

import heapq
from collections.abc import Sequence
from typing import Any

from ...data.labels import LabelVocabulary
from ...data.results import RankedLabel, RankedResult
from ...utils.exceptions import InvalidConfiguration
from ...utils.helpers import as_score_vector, format_percentage, is_integer
from ...utils.logging import get_logger


class TopKRanker:
    """Rank the K best labels of a score vector."""

    def __init__(self, vocabulary: LabelVocabulary | Sequence[str], k: int = 3):
        """
        Initialize the ranker.

        Args:
            vocabulary: Label names in classifier output order
            k: Number of results per frame, 0 < k <= len(vocabulary)

        Raises:
            InvalidConfiguration: If the vocabulary is invalid or k out of range
        """
        if not isinstance(vocabulary, LabelVocabulary):
            vocabulary = LabelVocabulary(vocabulary)

        if not is_integer(k) or not 0 < k <= len(vocabulary):
            raise InvalidConfiguration(
                f"k must be an integer in [1, {len(vocabulary)}], got {k!r}"
            )

        self.vocabulary = vocabulary
        self.k = int(k)

        self.logger = get_logger()
        self.logger.info(f"Top-{self.k} ranker initialized over {len(vocabulary)} labels")

    def rank(self, scores: Any) -> RankedResult:
        """
        Select the K highest-scoring labels.

        Ties are broken by ascending label index, so the result is fully
        determined by the input.

        Args:
            scores: Score vector of length N

        Returns:
            Exactly K entries, best first

        Raises:
            DimensionMismatch: If ``scores`` is not of length N
            InvalidScores: If ``scores`` holds NaN, inf or non-numeric entries
        """
        values = as_score_vector(scores, len(self.vocabulary))

        # Min-heap keyed on (score, -index): the root is the weakest entry,
        # and among equal scores the one with the highest index.
        heap: list[tuple[float, int]] = []
        for index, score in enumerate(values.tolist()):
            key = (score, -index)
            if len(heap) < self.k:
                heapq.heappush(heap, key)
            elif key > heap[0]:
                heapq.heapreplace(heap, key)

        ordered = sorted(heap, key=lambda item: (-item[0], -item[1]))

        return RankedResult(
            entries=tuple(
                RankedLabel(self.vocabulary[-neg_index], score)
                for score, neg_index in ordered
            ),
            indices=tuple(-neg_index for _, neg_index in ordered),
        )

    def format_top_or_default(self, scores: Any, default: str = "") -> str:
        """Rank ``scores`` and render the best entry."""
        return format_top_or_default(self.rank(scores), default)


def format_top_or_default(result: RankedResult | None, default: str = "") -> str:
    """
    Render the best entry as ``"<Label> (<score>%)"``.

    Only the first character of the label is upper-cased and the score is
    shown as a whole percentage.

    Args:
        result: Ranked result, may be None
        default: Text returned when there is nothing to show

    Returns:
        Display string
    """
    if result is None or len(result) == 0:
        return default

    label, score = result.top
    return f"{label[:1].upper()}{label[1:]} ({format_percentage(score)})"
