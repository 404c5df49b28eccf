"""
framerank

Per-frame post-processing for image classifiers: cascaded temporal
smoothing of score vectors and deterministic top-K label ranking.
"""

__version__ = "0.1.0"
__author__ = "framerank Team"

from .data import *
from .inference import *
from .utils import *
