import pytest

from sswsim.params import SSWParams
from sswsim.pipeline import SSWPipeline
from sswsim.visualization.plots import plot_polar_histogram, plot_trend, plot_seam_3d


@pytest.fixture(scope="module")
def pipeline():
    return SSWPipeline(rotation_steps=12, bins=36, slice_count=3)


@pytest.fixture(scope="module")
def params():
    return SSWParams.from_degrees(orient_x=20, spin_direction=35)


@pytest.mark.parametrize("mode", ["combined", "contribution"])
def test_plot_polar_histogram(tmp_path, pipeline, params, mode):
    result = pipeline.compute(params)
    output = str(tmp_path / f"{mode}.png")

    assert plot_polar_histogram(result, output, params.spin_direction, mode=mode) == output
    assert (tmp_path / f"{mode}.png").stat().st_size > 0


def test_plot_polar_histogram_rejects_mode(tmp_path, pipeline, params):
    result = pipeline.compute(params)
    with pytest.raises(ValueError):
        plot_polar_histogram(result, str(tmp_path / "x.png"), mode="heatmap")


def test_plot_trend(tmp_path, pipeline, params):
    points = pipeline.compute_trend(params, -30, 30, 15)
    output = str(tmp_path / "trend.png")

    assert plot_trend(points, output, current_gyro=10.0) == output
    assert (tmp_path / "trend.png").exists()


def test_plot_trend_empty(tmp_path):
    assert plot_trend([], str(tmp_path / "trend.png")) is None
    assert not (tmp_path / "trend.png").exists()


def test_plot_seam_3d(tmp_path, pipeline):
    output = str(tmp_path / "seam.png")
    assert plot_seam_3d(pipeline.seam_model.get_embedded_points(0.01), output) == output
    assert (tmp_path / "seam.png").exists()
