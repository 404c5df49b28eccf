"""
Data types for framerank.

The label vocabulary shared by the smoother and the ranker, and the
ranked results handed to the display layer.
"""

from .labels import LabelVocabulary, load_label_list
from .results import RankedLabel, RankedResult


__all__ = ["LabelVocabulary", "load_label_list", "RankedLabel", "RankedResult"]
