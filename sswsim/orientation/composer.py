"""Rotation composition for the spinning ball.

Every sampling step uses one composed rotation:

    Q = Q_axis * (Q_step * Q_init)

  - Q_init: initial ball orientation (intrinsic X, Y, Z Euler angles)
  - Q_step: spin about the ball's local X axis by theta_step
  - Q_axis: maps the reference axis (1, 0, 0) onto the spin axis direction

Spin is applied in the ball's local frame before the initial orientation;
spin axis alignment is applied last, in world frame. scipy Rotation objects
are immutable, so nothing here is shared or mutated across steps or threads.
"""

import numpy as np
from scipy.spatial.transform import Rotation

REFERENCE_AXIS = np.array([1.0, 0.0, 0.0])


def spin_axis_direction(spin_direction, gyro_angle) -> np.ndarray:
    """Unit spin axis in world space.

        dir = (cos(gyro)*cos(spinDir), cos(gyro)*sin(spinDir), sin(gyro))

    Args:
        spin_direction: Spin direction in radians
        gyro_angle: Gyro angle in radians

    Returns:
        3D unit vector

    Raises:
        ValueError: If the direction vector degenerates to zero length
    """
    cg, sg = np.cos(gyro_angle), np.sin(gyro_angle)
    cs, ss = np.cos(spin_direction), np.sin(spin_direction)
    direction = np.array([cg * cs, cg * ss, sg])

    norm = np.linalg.norm(direction)
    if norm == 0:
        raise ValueError("Spin axis direction has zero length")
    return direction / norm


def rotation_between(a, b) -> Rotation:
    """Shortest-arc rotation taking unit vector `a` onto unit vector `b`.

    When the vectors are opposite the arc is not unique; the rotation is
    then taken about an axis orthogonal to `a`.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    r = np.dot(a, b) + 1.0

    if r < np.finfo(np.float64).eps:
        # Antiparallel: half turn about any axis orthogonal to a
        if abs(a[0]) > abs(a[2]):
            quat = np.array([-a[1], a[0], 0.0, 0.0])
        else:
            quat = np.array([0.0, -a[2], a[1], 0.0])
    else:
        quat = np.append(np.cross(a, b), r)

    # scipy uses scalar-last [x, y, z, w] and normalizes on construction
    return Rotation.from_quat(quat)


def spin_axis_rotation(spin_direction, gyro_angle) -> Rotation:
    return rotation_between(REFERENCE_AXIS, spin_axis_direction(spin_direction, gyro_angle))


def initial_rotation(orient_x, orient_y, orient_z) -> Rotation:
    # Uppercase sequence = intrinsic rotations, applied X then Y then Z
    return Rotation.from_euler('XYZ', [orient_x, orient_y, orient_z])


def step_rotation(theta) -> Rotation:
    return Rotation.from_rotvec(REFERENCE_AXIS * theta)


def step_angle(step, rotation_steps) -> float:
    """Spin accumulated at sampling step `step` of `rotation_steps`."""
    return step / rotation_steps * 2 * np.pi


def compose_step_rotation(axis_rotation: Rotation, init_rotation: Rotation,
                          theta) -> Rotation:
    """Full per-point transform for one sampling step.

    Args:
        axis_rotation: Q_axis from spin_axis_rotation()
        init_rotation: Q_init from initial_rotation()
        theta: Spin angle for this step in radians

    Returns:
        Q_axis * (Q_step * Q_init)
    """
    return axis_rotation * (step_rotation(theta) * init_rotation)


def ball_orientation(orient_x, orient_y, orient_z, animation_angle) -> Rotation:
    """Local ball orientation at a given animation angle (Q_step * Q_init)."""
    return step_rotation(animation_angle) * initial_rotation(orient_x, orient_y, orient_z)


def advance_spin_angle(angle, spin_rate_rpm, dt) -> float:
    """Advance the animation spin angle by `dt` seconds at `spin_rate_rpm`."""
    rads_per_sec = spin_rate_rpm / 60 * 2 * np.pi
    return angle + rads_per_sec * dt


def rotation_to_quaternion(rotation: Rotation) -> np.ndarray:
    """Convert a Rotation to a quaternion [w, x, y, z].

    We use the scalar-first convention: q = w + xi + yj + zk
    """
    q = rotation.as_quat()  # scipy gives [x, y, z, w]
    return np.array([q[3], q[0], q[1], q[2]])
