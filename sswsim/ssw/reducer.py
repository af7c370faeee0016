"""Reduce sampled histograms to the SSW indices.

  - combined histograms: mean over the K slices
  - asymmetry index: |sum_A - sum_B| of the combined presence histogram
  - SSW effect index: |effect_sum_A - effect_sum_B| from the sampler
  - force direction: from the side carrying more contribution toward the
    side carrying less, found by pairing each bin with its mirror across
    the judgment line
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict

import numpy as np

from sswsim.constants import ARROW_WIDTH, CLOCK_MIN_ASYMMETRY
from sswsim.ssw.judgment import judgment_angle, on_side_a
from sswsim.ssw.sampler import SampleResult


@dataclass(frozen=True)
class SSWResult:
    histograms: np.ndarray           # (K, B) presence per slice
    combined: np.ndarray             # (B,) mean presence
    contrib_histograms: np.ndarray   # (K, B) contribution per slice
    combined_contrib: np.ndarray     # (B,) mean contribution
    num_slices: int
    z_planes: np.ndarray
    asymmetry_index: float
    ssw_effect_index: float
    arrow_angle: float
    arrow_width: float
    effect_sum_a: float
    effect_sum_b: float
    max_contribution: float

    def __post_init__(self):
        for name in ("histograms", "combined", "contrib_histograms",
                     "combined_contrib", "z_planes"):
            getattr(self, name).setflags(write=False)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly copy (arrays become nested lists)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, np.ndarray):
                data[key] = value.tolist()
        return data


def bin_angles(bins) -> np.ndarray:
    """Angle of each bin, i / B * 2*pi."""
    return np.arange(bins) / bins * 2 * np.pi


def judgment_sides(bins, judgment) -> np.ndarray:
    """Boolean mask of bins on side A of the judgment line."""
    return on_side_a(bin_angles(bins), judgment)


def hemisphere_sums(hist, judgment):
    """(sum_A, sum_B) of a B-bin histogram split by the judgment line."""
    hist = np.asarray(hist, dtype=np.float64)
    side_a = judgment_sides(len(hist), judgment)
    return float(np.sum(hist[side_a])), float(np.sum(hist[~side_a]))


def mirror_bins(bins, judgment) -> np.ndarray:
    """Index of each bin's mirror image across the judgment line.

    Integer arithmetic on the line's bin index L: j = (2L - i) mod B.
    """
    # Round half up, not to even
    line_bin = int(np.floor(judgment / (2 * np.pi) * bins + 0.5))
    return (2 * line_bin - np.arange(bins)) % bins


def force_vector(hist, judgment):
    """(wx, wy) pointing toward the angularly heavier side of `hist`."""
    hist = np.asarray(hist, dtype=np.float64)
    bins = len(hist)
    angles = bin_angles(bins)
    diff = hist - hist[mirror_bins(bins, judgment)]
    return float(np.sum(diff * np.cos(angles))), float(np.sum(diff * np.sin(angles)))


def force_direction(hist, judgment) -> float:
    """Force direction in [0, 2*pi), pointing away from the heavier side."""
    wx, wy = force_vector(hist, judgment)
    angle = np.arctan2(-wy, -wx)
    if angle < 0:
        angle += 2 * np.pi
    return float(angle)


def reduce_sample(sample: SampleResult, spin_direction, max_contribution=0.0) -> SSWResult:
    """Turn a sampler run into an SSWResult.

    Args:
        sample: Output of HistogramSampler.sample()
        spin_direction: Spin direction in radians (sets the judgment line)
        max_contribution: Display-scale bound from PlaneModel.max_contribution()

    Returns:
        SSWResult snapshot
    """
    judgment = judgment_angle(spin_direction)

    combined = sample.presence.mean(axis=0)
    combined_contrib = sample.contribution.mean(axis=0)

    sum_a, sum_b = hemisphere_sums(combined, judgment)

    return SSWResult(
        histograms=sample.presence.copy(),
        combined=combined,
        contrib_histograms=sample.contribution.copy(),
        combined_contrib=combined_contrib,
        num_slices=sample.presence.shape[0],
        z_planes=sample.z_planes.copy(),
        asymmetry_index=abs(sum_a - sum_b),
        ssw_effect_index=abs(sample.effect_sum_a - sample.effect_sum_b),
        arrow_angle=force_direction(combined_contrib, judgment),
        arrow_width=ARROW_WIDTH,
        effect_sum_a=sample.effect_sum_a,
        effect_sum_b=sample.effect_sum_b,
        max_contribution=float(max_contribution),
    )


def angle_to_clock_string(angle) -> str:
    """Math angle (radians, 0 = +X, counter-clockwise) as an "h:mm" clock face.

    An angle of pi reads 12:00 and 0 reads 6:00; each hour spans 30 degrees.
    """
    deg = (180 - angle * (180 / np.pi)) % 360
    total_min = deg / 360 * 720
    hour = int(np.floor(total_min / 60)) or 12
    minute = int(np.floor(total_min % 60))
    return f"{hour}:{minute:02d}"


def force_direction_label(result: SSWResult) -> str:
    if result.asymmetry_index > CLOCK_MIN_ASYMMETRY:
        return angle_to_clock_string(result.arrow_angle)
    return "--"
