"""The judgment line splitting the SSW plane into two halves.

The line passes through the ball center perpendicular to the spin
direction projection, at angle spin_direction + pi/2. An angle lies on
side A when sin(angle - judgment) >= 0, on side B otherwise. Angles exactly
on the line (sin == 0) therefore fall on side A.
"""
import numpy as np


def judgment_angle(spin_direction) -> float:
    return spin_direction + np.pi / 2


def on_side_a(angles, judgment):
    """Boolean mask (or bool) of angles on side A of the judgment line."""
    return np.sin(np.asarray(angles) - judgment) >= 0


def normalize_angle(angles):
    """Map atan2 output into [0, 2*pi)."""
    angles = np.asarray(angles)
    return np.where(angles < 0, angles + 2 * np.pi, angles)


def angle_to_bin(angles, bins):
    """Angular bin index of angles in [0, 2*pi).

    Taken modulo `bins` since an angle just below 2*pi can round up to it.
    """
    return np.floor(np.asarray(angles) / (2 * np.pi) * bins).astype(np.int64) % bins
