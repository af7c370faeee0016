"""Rotational sweep that builds the SSW histograms.

For each of N spin steps the seam is rotated into world space and every
seam point close to one of the K slice planes marks its angular bin:

  - presence: 0/1 per bin per step (several points in one bin count once)
  - contribution: the slice plane's zone weight, once per proximal point

Independently of the slices, every point inside the judgment zone adds its
own zone weight / N to the hemisphere sum of its side of the judgment line.
After the sweep both histograms are divided by N.
"""
import logging
from dataclasses import dataclass

import numpy as np

from sswsim.constants import (R, SSW_ROTATION_STEPS, SSW_BINS, SSW_SLICE_COUNT,
                              SSW_EPSILON)
from sswsim.orientation.composer import (spin_axis_rotation, initial_rotation,
                                         compose_step_rotation, step_angle)
from sswsim.planes.plane_model import PlaneModel
from sswsim.ssw.judgment import judgment_angle, on_side_a, normalize_angle, angle_to_bin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleResult:
    presence: np.ndarray        # (K, B) occupancy fraction per rotation
    contribution: np.ndarray    # (K, B) per-rotation average weight
    z_planes: np.ndarray        # (K,)
    effect_sum_a: float
    effect_sum_b: float
    rotation_steps: int


class HistogramSampler:
    """Pure, deterministic sampler; holds only its resolution settings."""

    def __init__(
        self,
        rotation_steps: int = SSW_ROTATION_STEPS,
        bins: int = SSW_BINS,
        slice_count: int = SSW_SLICE_COUNT,
        epsilon: float = SSW_EPSILON,
        radius: float = R,
    ):
        """Initialize the sampler.

        Args:
            rotation_steps: Spin steps per revolution (N)
            bins: Angular bins around the z axis (B)
            slice_count: Slice planes across the judgment zone (K)
            epsilon: Proximity tolerance between a seam point and a slice plane
            radius: Ball radius used to place the boundary planes
        """
        for name, value in (("rotation_steps", rotation_steps), ("bins", bins),
                            ("slice_count", slice_count)):
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")
        self.rotation_steps = rotation_steps
        self.bins = bins
        self.slice_count = slice_count
        self.epsilon = epsilon
        self.radius = radius

    def sample(self, seam_points, params, planes: PlaneModel = None) -> SampleResult:
        """Run the full rotation sweep.

        Args:
            seam_points: Px3 seam points in the ball's local frame
            params: SSWParams for this computation
            planes: Boundary planes; built from `params` when omitted

        Returns:
            SampleResult with normalized histograms and hemisphere sums
        """
        if planes is None:
            planes = PlaneModel.from_params(params, radius=self.radius)

        # Rotation.apply rejects read-only input such as the shared seam set
        points = np.array(seam_points, dtype=np.float64).reshape(-1, 3)
        n_steps = self.rotation_steps
        bins = self.bins

        z_planes = planes.slice_planes(self.slice_count)
        slice_weights = planes.contribution_weight(z_planes)
        judgment = judgment_angle(params.spin_direction)

        axis_rot = spin_axis_rotation(params.spin_direction, params.gyro_angle)
        init_rot = initial_rotation(params.orient_x, params.orient_y, params.orient_z)

        presence = np.zeros((self.slice_count, bins), dtype=np.float64)
        contribution = np.zeros((self.slice_count, bins), dtype=np.float64)
        present = np.zeros((self.slice_count, bins), dtype=bool)
        effect_sum_a = 0.0
        effect_sum_b = 0.0

        z_low, z_high = planes.judgment_zone_bounds()
        if not z_high > z_low:
            # Collapsed zone: nothing can be inside it, every histogram stays zero
            logger.debug("Judgment zone has zero width at z=%.4f; skipping sweep", z_low)
            n_sweep = 0
        else:
            n_sweep = n_steps

        for step in range(n_sweep):
            rotation = compose_step_rotation(axis_rot, init_rot, step_angle(step, n_steps))
            p = rotation.apply(points)
            pz = p[:, 2]

            angles = normalize_angle(np.arctan2(p[:, 1], p[:, 0]))
            point_bins = angle_to_bin(angles, bins)

            # Slice histograms
            near = np.abs(pz[:, None] - z_planes[None, :]) < self.epsilon
            point_idx, slice_idx = np.nonzero(near)
            hit_bins = point_bins[point_idx]

            present[:] = False
            present[slice_idx, hit_bins] = True
            presence += present
            np.add.at(contribution, (slice_idx, hit_bins), slice_weights[slice_idx])

            # Hemisphere sums at full seam resolution
            in_zone = planes.in_judgment_zone(pz)
            if np.any(in_zone):
                weights = planes.contribution_weight(pz[in_zone]) / n_steps
                side_a = on_side_a(angles[in_zone], judgment)
                effect_sum_a += float(np.sum(weights[side_a]))
                effect_sum_b += float(np.sum(weights[~side_a]))

        presence /= n_steps
        contribution /= n_steps

        logger.debug("Sampled %d points over %d steps, %d slices x %d bins",
                     len(points), n_steps, self.slice_count, bins)

        return SampleResult(
            presence=presence,
            contribution=contribution,
            z_planes=z_planes,
            effect_sum_a=effect_sum_a,
            effect_sum_b=effect_sum_b,
            rotation_steps=n_steps,
        )
