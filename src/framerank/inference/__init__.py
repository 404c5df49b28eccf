"""
Inference module for framerank

Handles score post-processing and the per-frame classification pipeline.
"""

from .pipelines import *
from .postprocessing import *
