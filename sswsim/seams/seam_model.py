import numpy as np

from sswsim.constants import R, SEAM_POINTS, SEAM_K, SEAM_M, SEAM_H


class BaseballSeamModel:
    """3D model of baseball seam geometry.

    The seam is a single closed curve built from a harmonic combination
    and projected onto the sphere:

        x0 = cos(t) - k*cos(3t) + m*cos(5t)
        y0 = sin(t) + k*sin(3t) + m*sin(5t)
        z0 = h*cos(2t)
        (x, y, z) = R * (x0, y0, z0) / |(x0, y0, z0)|

    Points are generated once and shared read-only by every computation.
    """

    def __init__(self, radius=R, num_points=SEAM_POINTS, k=SEAM_K, m=SEAM_M, h=SEAM_H):
        """Initialize seam model.

        Args:
            radius: Ball radius (default: 1.0 for normalized)
            num_points: Number of points along the seam curve
            k: 3rd harmonic amplitude
            m: 5th harmonic amplitude
            h: z height amplitude (frequency 2)
        """
        if num_points < 1:
            raise ValueError(f"num_points must be positive, got {num_points}")
        self.radius = radius
        self.num_points = num_points
        self.k = k
        self.m = m
        self.h = h
        self._points = None

    def get_3d_points(self) -> np.ndarray:
        """Generate the seam points.

        Returns:
            Read-only Px3 array of points on the sphere of radius `radius`

        Raises:
            ValueError: If a pre-normalization vector has zero length
        """
        if self._points is None:
            t = np.arange(self.num_points) / self.num_points * 2 * np.pi
            raw = self._harmonic_curve(t)

            lengths = np.linalg.norm(raw, axis=1)
            if np.any(lengths == 0):
                raise ValueError("Seam harmonics produced a zero-length vector")

            points = raw / lengths[:, None] * self.radius
            points.setflags(write=False)
            self._points = points

        return self._points

    def _harmonic_curve(self, t) -> np.ndarray:
        x = np.cos(t) - self.k * np.cos(3 * t) + self.m * np.cos(5 * t)
        y = np.sin(t) + self.k * np.sin(3 * t) + self.m * np.sin(5 * t)
        z = self.h * np.cos(2 * t)
        return np.column_stack([x, y, z])

    def get_embedded_points(self, sink_factor: float) -> np.ndarray:
        """Seam points pulled toward the center by `sink_factor`.

        The stitched seam sits partly below the leather surface, so display
        meshes are built from these rather than the surface points.

        Args:
            sink_factor: Radial distance to move each point inward

        Returns:
            Px3 array of points on the sphere of radius `radius - sink_factor`
        """
        points = self.get_3d_points()
        unit = points / np.linalg.norm(points, axis=1)[:, None]
        return points - unit * sink_factor
