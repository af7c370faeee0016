"""Seam-Shifted Wake (SSW) estimation for a spinning baseball.

The engine rotates a fixed seam curve through one spin revolution, bins seam
proximity to slice planes inside the separation zone, and reduces the
histograms to an asymmetry index, an SSW effect index and a force direction.
"""

from .params import SSWParams
from .pipeline import SSWPipeline, TrendPoint, compute_ssw, compute_trend
from .ssw.reducer import SSWResult

__all__ = ["SSWParams", "SSWPipeline", "SSWResult", "TrendPoint",
           "compute_ssw", "compute_trend"]
