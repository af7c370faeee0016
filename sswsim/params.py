"""Parameter value object for one SSW computation.

Orientation, spin direction and gyro angle are in radians. The five
separation boundaries are in degrees, ordered front to back:

    alpha_front <= induced_zone <= induced_start <= natural_zone <= alpha_back

The engine never trusts that order; it only uses min/max pairs.
"""
from dataclasses import dataclass, replace, astuple
from typing import Sequence, Tuple

from sswsim.constants import DEG2RAD

PLANE_FIELDS = (
    "alpha_front_deg",
    "induced_zone_deg",
    "induced_start_deg",
    "natural_zone_deg",
    "alpha_back_deg",
)


@dataclass(frozen=True)
class SSWParams:
    orient_x: float = 0.0
    orient_y: float = 0.0
    orient_z: float = 0.0
    spin_direction: float = 0.0
    gyro_angle: float = 0.0
    alpha_front_deg: float = -70.0
    induced_zone_deg: float = -40.0
    induced_start_deg: float = -10.0
    natural_zone_deg: float = 30.0
    alpha_back_deg: float = 70.0

    @classmethod
    def from_degrees(cls, orient_x=0.0, orient_y=0.0, orient_z=0.0,
                     spin_direction=0.0, gyro_angle=0.0, **planes) -> "SSWParams":
        """Build parameters the way the sliders express them (all degrees)."""
        return cls(
            orient_x=orient_x * DEG2RAD,
            orient_y=orient_y * DEG2RAD,
            orient_z=orient_z * DEG2RAD,
            spin_direction=spin_direction * DEG2RAD,
            gyro_angle=gyro_angle * DEG2RAD,
            **planes,
        )

    def with_gyro(self, gyro_angle: float) -> "SSWParams":
        return replace(self, gyro_angle=gyro_angle)

    def plane_degrees(self) -> Tuple[float, float, float, float, float]:
        return tuple(getattr(self, name) for name in PLANE_FIELDS)

    def is_ordered(self) -> bool:
        planes = self.plane_degrees()
        return all(a <= b for a, b in zip(planes, planes[1:]))

    def trend_key(self) -> tuple:
        """Content key over every field except the gyro angle."""
        values = astuple(self)
        return values[:4] + values[5:]


def clamp_plane_value(values: Sequence[float], index: int, value: float) -> float:
    """Clamp boundary `index` between its front and back neighbours.

    Args:
        values: Current five boundary angles (degrees), front to back
        index: Which boundary is being edited (0-4)
        value: Requested new angle

    Returns:
        The value to store, never below the boundary in front of it and
        never above the one behind it.
    """
    if not 0 <= index < len(values):
        raise IndexError(f"boundary index out of range: {index}")
    if index > 0 and value < values[index - 1]:
        value = values[index - 1]
    if index < len(values) - 1 and value > values[index + 1]:
        value = values[index + 1]
    return value
