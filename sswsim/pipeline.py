"""SSW pipeline: seam points + parameters -> SSWResult.

This module ties the engine components together:
- Seam curve generation (once per pipeline)
- Boundary plane model
- Rotational histogram sampling
- Index reduction
- Gyro-angle trend sweep
"""
import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from sswsim.constants import (R, SEAM_POINTS, SSW_ROTATION_STEPS, SSW_BINS,
                              SSW_SLICE_COUNT, SSW_EPSILON, DEG2RAD,
                              TREND_GYRO_START, TREND_GYRO_STOP, TREND_GYRO_STEP)
from sswsim.params import SSWParams
from sswsim.planes.plane_model import PlaneModel
from sswsim.seams.seam_model import BaseballSeamModel
from sswsim.ssw.reducer import SSWResult, reduce_sample
from sswsim.ssw.sampler import HistogramSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendPoint:
    gyro: float              # degrees
    ssw_effect_index: float
    effect_sum_a: float
    effect_sum_b: float


def compute_ssw(
    seam_points,
    params: SSWParams,
    rotation_steps: int = SSW_ROTATION_STEPS,
    bins: int = SSW_BINS,
    slice_count: int = SSW_SLICE_COUNT,
    epsilon: float = SSW_EPSILON,
    radius: float = R,
) -> SSWResult:
    """Pure function form of the engine: (seam_points, params) -> SSWResult."""
    planes = PlaneModel.from_params(params, radius=radius)
    sampler = HistogramSampler(rotation_steps=rotation_steps, bins=bins,
                               slice_count=slice_count, epsilon=epsilon, radius=radius)
    sample = sampler.sample(seam_points, params, planes)
    return reduce_sample(sample, params.spin_direction, planes.max_contribution())


def gyro_range(start_deg=TREND_GYRO_START, stop_deg=TREND_GYRO_STOP,
               step_deg=TREND_GYRO_STEP) -> List[float]:
    """Gyro angles (degrees) from start to stop inclusive."""
    if step_deg <= 0:
        raise ValueError(f"step_deg must be positive, got {step_deg}")
    count = int(np.floor((stop_deg - start_deg) / step_deg + 1e-9)) + 1
    return [start_deg + i * step_deg for i in range(max(count, 0))]


def compute_trend(
    seam_points,
    params: SSWParams,
    start_deg: float = TREND_GYRO_START,
    stop_deg: float = TREND_GYRO_STOP,
    step_deg: float = TREND_GYRO_STEP,
    **resolution,
) -> List[TrendPoint]:
    """Sweep the gyro angle with every other parameter held fixed.

    Args:
        seam_points: Px3 seam points
        params: Base parameters; their gyro angle is ignored
        start_deg, stop_deg, step_deg: Sweep range in degrees (inclusive)
        **resolution: Passed through to compute_ssw()

    Returns:
        One TrendPoint per gyro angle
    """
    points = []
    for gyro_deg in gyro_range(start_deg, stop_deg, step_deg):
        result = compute_ssw(seam_points, params.with_gyro(gyro_deg * DEG2RAD), **resolution)
        points.append(TrendPoint(
            gyro=gyro_deg,
            ssw_effect_index=result.ssw_effect_index,
            effect_sum_a=result.effect_sum_a,
            effect_sum_b=result.effect_sum_b,
        ))
    return points


class SSWPipeline:
    """Seam model plus engine settings, ready to evaluate parameter sets.

    Example:
        >>> pipeline = SSWPipeline()
        >>> result = pipeline.compute(SSWParams.from_degrees(spin_direction=30))
        >>> result.ssw_effect_index
    """

    def __init__(
        self,
        radius: float = R,
        num_points: int = SEAM_POINTS,
        rotation_steps: int = SSW_ROTATION_STEPS,
        bins: int = SSW_BINS,
        slice_count: int = SSW_SLICE_COUNT,
        epsilon: float = SSW_EPSILON,
    ):
        """Initialize the pipeline.

        Args:
            radius: Ball radius
            num_points: Seam points (P)
            rotation_steps: Spin steps per revolution (N)
            bins: Angular bins (B)
            slice_count: Slice planes (K)
            epsilon: Seam/plane proximity tolerance
        """
        self.radius = radius
        self.seam_model = BaseballSeamModel(radius=radius, num_points=num_points)
        self.seam_points = self.seam_model.get_3d_points()
        self.resolution = dict(rotation_steps=rotation_steps, bins=bins,
                               slice_count=slice_count, epsilon=epsilon, radius=radius)
        logger.info("SSW pipeline ready: %d seam points, N=%d, B=%d, K=%d",
                    len(self.seam_points), rotation_steps, bins, slice_count)

    def compute(self, params: SSWParams) -> SSWResult:
        return compute_ssw(self.seam_points, params, **self.resolution)

    def compute_trend(self, params: SSWParams, start_deg=TREND_GYRO_START,
                      stop_deg=TREND_GYRO_STOP, step_deg=TREND_GYRO_STEP) -> List[TrendPoint]:
        return compute_trend(self.seam_points, params, start_deg, stop_deg, step_deg,
                             **self.resolution)
