"""Histogram sampling and index reduction for the SSW estimate."""

from .sampler import HistogramSampler, SampleResult
from .reducer import SSWResult, reduce_sample, angle_to_clock_string

__all__ = ["HistogramSampler", "SampleResult", "SSWResult", "reduce_sample",
           "angle_to_clock_string"]
