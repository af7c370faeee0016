import pytest
import numpy as np
from scipy.spatial.transform import Rotation

from sswsim.orientation.composer import (
    spin_axis_direction, rotation_between, spin_axis_rotation, initial_rotation,
    step_rotation, step_angle, compose_step_rotation, ball_orientation,
    advance_spin_angle, rotation_to_quaternion,
)


def test_spin_axis_direction_reference():
    assert np.allclose(spin_axis_direction(0.0, 0.0), [1, 0, 0])
    assert np.allclose(spin_axis_direction(np.pi / 2, 0.0), [0, 1, 0])
    assert np.allclose(spin_axis_direction(0.0, np.pi / 2), [0, 0, 1])


def test_spin_axis_direction_is_unit():
    for spin, gyro in [(0.3, 0.7), (2.5, -1.2), (-4.0, 0.1)]:
        assert np.linalg.norm(spin_axis_direction(spin, gyro)) == pytest.approx(1.0)


@pytest.mark.parametrize("target", [
    [0, 1, 0],
    [0, 0, 1],
    [1, 0, 0],
    [-1, 0, 0],
    [0.6, -0.8, 0.0],
])
def test_rotation_between_maps_vectors(target):
    a = np.array([1.0, 0.0, 0.0])
    b = np.array(target, dtype=float)
    rot = rotation_between(a, b)
    assert np.allclose(rot.apply(a), b, atol=1e-12)


def test_spin_axis_rotation_identity_for_reference_axis():
    rot = spin_axis_rotation(0.0, 0.0)
    assert np.allclose(rot.as_matrix(), np.eye(3))


def test_initial_rotation_is_intrinsic_xyz():
    ax, ay, az = 0.3, -0.5, 1.1
    expected = (Rotation.from_euler('x', ax).as_matrix()
                @ Rotation.from_euler('y', ay).as_matrix()
                @ Rotation.from_euler('z', az).as_matrix())
    assert np.allclose(initial_rotation(ax, ay, az).as_matrix(), expected)


def test_step_angle():
    assert step_angle(0, 720) == 0.0
    assert step_angle(180, 720) == pytest.approx(np.pi / 2)


def test_compose_order():
    axis_rot = spin_axis_rotation(0.4, 0.2)
    init_rot = initial_rotation(0.1, 0.2, 0.3)
    theta = 0.9
    v = np.array([0.2, -0.5, 0.84])

    composed = compose_step_rotation(axis_rot, init_rot, theta).apply(v)
    by_hand = axis_rot.apply(step_rotation(theta).apply(init_rot.apply(v)))
    assert np.allclose(composed, by_hand)


def test_ball_spins_about_declared_axis():
    # With no initial orientation the local X axis stays on the spin axis
    spin, gyro = 0.8, 0.3
    axis_rot = spin_axis_rotation(spin, gyro)
    init_rot = initial_rotation(0.0, 0.0, 0.0)
    direction = spin_axis_direction(spin, gyro)

    for theta in np.linspace(0, 2 * np.pi, 7):
        moved = compose_step_rotation(axis_rot, init_rot, theta).apply([1.0, 0.0, 0.0])
        assert np.allclose(moved, direction)


def test_ball_orientation():
    theta = 1.3
    rot = ball_orientation(0.0, 0.0, 0.0, theta)
    assert np.allclose(rot.as_matrix(), step_rotation(theta).as_matrix())


def test_advance_spin_angle():
    # 60 RPM = one revolution per second
    assert advance_spin_angle(0.0, 60, 1.0) == pytest.approx(2 * np.pi)
    assert advance_spin_angle(1.0, 0, 5.0) == 1.0


def test_rotation_to_quaternion_scalar_first():
    q = rotation_to_quaternion(Rotation.identity())
    assert np.allclose(q, [1, 0, 0, 0])
