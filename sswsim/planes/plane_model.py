import numpy as np

from sswsim.constants import R, DEG2RAD


class PlaneModel:
    """Five separation boundaries as signed z-planes, and the zone weighting.

    Boundaries front to back, each converted with z = R * sin(angle):

        direct_sep_start <= induced_zone <= induced_start <= natural_zone <= induced_end

    The judgment zone is the open interval between direct_sep_start and
    induced_end. Inside it, the direct-separation sub-zone (between
    direct_sep_start and induced_start, inclusive) weighs a point by its
    distance to induced_end; the rest of the zone is the induced-separation
    sub-zone with the flat weight |induced_zone - induced_end|.

    Only min/max pairs are used, so out-of-order boundaries still give a
    best-effort answer.
    """

    def __init__(self, z_direct_sep_start, z_induced_zone, z_induced_start,
                 z_natural_zone, z_induced_end):
        self.z_direct_sep_start = float(z_direct_sep_start)
        self.z_induced_zone = float(z_induced_zone)
        self.z_induced_start = float(z_induced_start)
        self.z_natural_zone = float(z_natural_zone)
        self.z_induced_end = float(z_induced_end)

    @classmethod
    def from_degrees(cls, alpha_front_deg, induced_zone_deg, induced_start_deg,
                     natural_zone_deg, alpha_back_deg, radius=R) -> "PlaneModel":
        angles = np.array([alpha_front_deg, induced_zone_deg, induced_start_deg,
                           natural_zone_deg, alpha_back_deg], dtype=np.float64)
        return cls(*(radius * np.sin(angles * DEG2RAD)))

    @classmethod
    def from_params(cls, params, radius=R) -> "PlaneModel":
        return cls.from_degrees(*params.plane_degrees(), radius=radius)

    def judgment_zone_bounds(self):
        """(z_low, z_high) of the SSW judgment zone."""
        return (min(self.z_direct_sep_start, self.z_induced_end),
                max(self.z_direct_sep_start, self.z_induced_end))

    def direct_zone_bounds(self):
        return (min(self.z_direct_sep_start, self.z_induced_start),
                max(self.z_direct_sep_start, self.z_induced_start))

    def in_judgment_zone(self, z):
        z_low, z_high = self.judgment_zone_bounds()
        return (z > z_low) & (z < z_high)

    def contribution_weight(self, z):
        """Zone weight at height `z` (scalar or array).

        Returns:
            0 outside the judgment zone, |z - induced_end| in the
            direct-separation sub-zone, |induced_zone - induced_end| elsewhere
            in the zone. Same shape as `z`.
        """
        z_arr = np.asarray(z, dtype=np.float64)
        d_low, d_high = self.direct_zone_bounds()

        direct = (z_arr >= d_low) & (z_arr <= d_high)
        induced_weight = abs(self.z_induced_zone - self.z_induced_end)
        weight = np.where(direct, np.abs(z_arr - self.z_induced_end), induced_weight)
        weight = np.where(self.in_judgment_zone(z_arr), weight, 0.0)

        if weight.ndim == 0:
            return float(weight)
        return weight

    def max_contribution(self) -> float:
        """Display-scale upper bound for contribution values."""
        return abs(self.z_direct_sep_start - self.z_natural_zone)

    def slice_planes(self, count) -> np.ndarray:
        """`count` z-planes evenly spaced over the judgment zone.

        A single slice sits at the midpoint of the zone.
        """
        if count < 1:
            raise ValueError(f"slice count must be positive, got {count}")
        z_low, z_high = self.judgment_zone_bounds()
        if count == 1:
            t = np.array([0.5])
        else:
            t = np.arange(count) / (count - 1)
        return z_low + (z_high - z_low) * t
