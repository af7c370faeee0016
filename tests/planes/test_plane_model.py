import pytest
import numpy as np
from sswsim.planes.plane_model import PlaneModel

DEFAULT_PLANES = (-70.0, -40.0, -10.0, 30.0, 70.0)


@pytest.fixture
def planes():
    return PlaneModel.from_degrees(*DEFAULT_PLANES)


def test_from_degrees(planes):
    z = np.sin(np.radians(DEFAULT_PLANES))
    assert planes.z_direct_sep_start == pytest.approx(z[0])
    assert planes.z_induced_zone == pytest.approx(z[1])
    assert planes.z_induced_start == pytest.approx(z[2])
    assert planes.z_natural_zone == pytest.approx(z[3])
    assert planes.z_induced_end == pytest.approx(z[4])


def test_radius_scales_planes():
    planes = PlaneModel.from_degrees(*DEFAULT_PLANES, radius=2.0)
    assert planes.z_induced_end == pytest.approx(2.0 * np.sin(np.radians(70)))


def test_judgment_zone_bounds(planes):
    z_low, z_high = planes.judgment_zone_bounds()
    assert z_low == pytest.approx(-np.sin(np.radians(70)))
    assert z_high == pytest.approx(np.sin(np.radians(70)))


def test_judgment_zone_bounds_out_of_order():
    swapped = PlaneModel.from_degrees(70.0, -40.0, -10.0, 30.0, -70.0)
    z_low, z_high = swapped.judgment_zone_bounds()
    assert z_low < z_high
    assert z_low == pytest.approx(-np.sin(np.radians(70)))


def test_weight_outside_zone_is_zero(planes):
    assert planes.contribution_weight(0.95) == 0.0
    assert planes.contribution_weight(-0.99) == 0.0
    # The zone is open at both ends
    assert planes.contribution_weight(planes.z_induced_end) == 0.0
    assert planes.contribution_weight(planes.z_direct_sep_start) == 0.0


def test_weight_direct_separation(planes):
    # Linear in distance from the back boundary
    for z in (-0.9, -0.5, -0.2):
        assert planes.contribution_weight(z) == pytest.approx(abs(z - planes.z_induced_end))


def test_weight_induced_separation_is_flat(planes):
    expected = abs(planes.z_induced_zone - planes.z_induced_end)
    for z in (0.0, 0.3, 0.9):
        assert planes.contribution_weight(z) == pytest.approx(expected)


def test_weight_accepts_arrays(planes):
    z = np.array([-0.99, -0.5, 0.3, 0.99])
    weights = planes.contribution_weight(z)

    assert weights.shape == z.shape
    assert weights[0] == 0.0
    assert weights[3] == 0.0
    assert weights[1] == pytest.approx(planes.contribution_weight(-0.5))


def test_collapsed_zone_weights_zero():
    planes = PlaneModel.from_degrees(20, 20, 20, 20, 20)
    z_low, z_high = planes.judgment_zone_bounds()
    assert z_low == z_high

    for z in (-1.0, 0.0, z_low, 1.0):
        assert planes.contribution_weight(z) == 0.0
    assert np.all(planes.contribution_weight(np.linspace(-1, 1, 11)) == 0.0)


def test_max_contribution(planes):
    expected = abs(np.sin(np.radians(-70)) - np.sin(np.radians(30)))
    assert planes.max_contribution() == pytest.approx(expected)


def test_slice_planes_even_spacing(planes):
    z = planes.slice_planes(5)
    z_low, z_high = planes.judgment_zone_bounds()

    assert len(z) == 5
    assert z[0] == pytest.approx(z_low)
    assert z[-1] == pytest.approx(z_high)
    assert np.allclose(np.diff(z), (z_high - z_low) / 4)


def test_single_slice_is_midpoint():
    planes = PlaneModel.from_degrees(-30, -10, 0, 10, 50)
    z_low, z_high = planes.judgment_zone_bounds()
    assert planes.slice_planes(1)[0] == pytest.approx((z_low + z_high) / 2)


def test_invalid_slice_count(planes):
    with pytest.raises(ValueError):
        planes.slice_planes(0)
