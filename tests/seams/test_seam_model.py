import pytest
import numpy as np
from sswsim.seams.seam_model import BaseballSeamModel


def test_seam_model_shape():
    model = BaseballSeamModel(radius=1.0, num_points=400)
    points = model.get_3d_points()

    assert points.shape == (400, 3)


def test_seam_model_radius():
    model = BaseballSeamModel(radius=37.0)  # ~37mm baseball radius
    points = model.get_3d_points()

    # All points should lie on the sphere
    distances = np.linalg.norm(points, axis=1)
    assert np.allclose(distances, 37.0)


def test_seam_model_is_deterministic():
    a = BaseballSeamModel().get_3d_points()
    b = BaseballSeamModel().get_3d_points()
    assert np.array_equal(a, b)


def test_seam_points_are_read_only():
    points = BaseballSeamModel().get_3d_points()
    with pytest.raises(ValueError):
        points[0, 0] = 5.0


def test_seam_first_point():
    # t = 0: (1 - k + m, 0, h) before projection
    model = BaseballSeamModel(radius=1.0, k=0.28, m=0.06, h=1.8)
    raw = np.array([1 - 0.28 + 0.06, 0.0, 1.8])
    expected = raw / np.linalg.norm(raw)

    assert np.allclose(model.get_3d_points()[0], expected)


def test_seam_curve_crosses_both_hemispheres():
    points = BaseballSeamModel().get_3d_points()
    assert points[:, 2].max() > 0.5
    assert points[:, 2].min() < -0.5


def test_zero_length_harmonics_raise():
    # k = 1, m = 0, h = 0 cancels the vector at t = 0
    model = BaseballSeamModel(num_points=4, k=1.0, m=0.0, h=0.0)
    with pytest.raises(ValueError):
        model.get_3d_points()


def test_invalid_point_count():
    with pytest.raises(ValueError):
        BaseballSeamModel(num_points=0)


def test_embedded_points_sink_inward():
    model = BaseballSeamModel(radius=1.0)
    embedded = model.get_embedded_points(0.01)

    assert embedded.shape == model.get_3d_points().shape
    assert np.allclose(np.linalg.norm(embedded, axis=1), 0.99)
