"""Static renderings of SSW results.

Creates three kinds of figures:
  1. Dashboard ring: per-bin histogram around the ball with the judgment
     line and the SSW force arrow
  2. Gyro trend: hemisphere sums A and B and the SSW effect index
  3. Seam curve on the sphere
"""
import logging

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from sswsim.ssw.judgment import judgment_angle
from sswsim.ssw.reducer import angle_to_clock_string

logger = logging.getLogger(__name__)

DISPLAY_MODES = ("combined", "contribution")


def plot_polar_histogram(result, output_path, spin_direction=0.0, mode="combined"):
    """Plot the combined histogram as a ring of bars around the ball.

    Args:
        result: SSWResult
        output_path: PNG path
        spin_direction: Spin direction (radians) used for the judgment line
        mode: "combined" for presence, "contribution" for zone weight

    Returns:
        output_path
    """
    if mode not in DISPLAY_MODES:
        raise ValueError(f"mode must be one of {DISPLAY_MODES}, got {mode!r}")

    values = result.combined if mode == "combined" else result.combined_contrib
    bins = len(values)
    width = 2 * np.pi / bins
    angles = np.arange(bins) * width

    fig = plt.figure(figsize=(7, 7))
    ax = fig.add_subplot(111, projection='polar')

    if mode == "combined":
        scale = max(float(np.max(values)), 1e-9)
        label = 'Seam presence'
        cmap = plt.cm.inferno
    else:
        scale = max(result.max_contribution, float(np.max(values)), 1e-9)
        label = 'SSW contribution'
        cmap = plt.cm.viridis

    ax.bar(angles, values, width=width, bottom=0.0, align='edge',
           color=cmap(values / scale), edgecolor='k', linewidth=0.2)

    # Judgment line through the center
    judgment = judgment_angle(spin_direction)
    r_max = scale * 1.15
    ax.plot([judgment, judgment], [0, r_max], color='#94a3b8', linestyle='--', linewidth=1.2)
    ax.plot([judgment + np.pi, judgment + np.pi], [0, r_max], color='#94a3b8',
            linestyle='--', linewidth=1.2, label='Judgment line')

    # Force arrow with its angular half-width
    ax.annotate('', xy=(result.arrow_angle, r_max), xytext=(0, 0),
                arrowprops=dict(arrowstyle='->', color='#ef4444', linewidth=2.5))
    span = np.linspace(result.arrow_angle - result.arrow_width,
                       result.arrow_angle + result.arrow_width, 32)
    ax.fill_between(span, 0, r_max, color='#ef4444', alpha=0.08)

    ax.set_ylim(0, r_max)
    ax.set_title(
        f'{label} ({result.num_slices} slices)\n'
        f'Asymmetry {result.asymmetry_index:.3f}, '
        f'SSW effect {result.ssw_effect_index:.3f}, '
        f'force {angle_to_clock_string(result.arrow_angle)}',
        fontsize=12, fontweight='bold')
    ax.legend(loc='lower left', fontsize=9)

    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info("Saved %s", output_path)
    return output_path


def plot_trend(points, output_path, current_gyro=None):
    """Plot the gyro sweep as three stacked charts.

    Args:
        points: TrendPoint list from a trend sweep
        output_path: PNG path
        current_gyro: Optional gyro angle (degrees) to mark with a cursor

    Returns:
        output_path, or None when there is nothing to plot
    """
    if not points:
        logger.warning("No trend data to plot")
        return None

    gyro = [p.gyro for p in points]
    series = [
        ('SSW hemisphere index 1', [p.effect_sum_a for p in points], '#ef4444'),
        ('SSW hemisphere index 2', [p.effect_sum_b for p in points], '#3b82f6'),
        ('SSW effect', [p.ssw_effect_index for p in points], '#10b981'),
    ]

    fig, axes = plt.subplots(3, 1, figsize=(8, 7), sharex=True)
    for ax, (title, values, color) in zip(axes, series):
        ax.plot(gyro, values, color=color, linewidth=1.8)
        ax.set_title(title, fontsize=10, loc='left')
        ax.grid(alpha=0.3)
        if current_gyro is not None:
            ax.axvline(current_gyro, color='k', linestyle=':', linewidth=1)
            nearest = min(points, key=lambda p: abs(p.gyro - current_gyro))
            idx = points.index(nearest)
            ax.scatter([nearest.gyro], [values[idx]], color=color,
                       edgecolors='k', zorder=5)

    axes[-1].set_xlabel('Gyro angle (deg)')
    plt.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info("Saved %s", output_path)
    return output_path


def plot_seam_3d(seam_points, output_path, radius=None):
    """Plot the seam curve on a wireframe sphere."""
    seam_points = np.asarray(seam_points)
    if radius is None:
        radius = float(np.mean(np.linalg.norm(seam_points, axis=1)))

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection='3d')

    u, v = np.mgrid[0:2 * np.pi:40j, 0:np.pi:20j]
    ax.plot_wireframe(radius * np.cos(u) * np.sin(v),
                      radius * np.sin(u) * np.sin(v),
                      radius * np.cos(v), color='lightgray', linewidth=0.4)

    closed = np.vstack([seam_points, seam_points[:1]])
    ax.plot(closed[:, 0], closed[:, 1], closed[:, 2], color='#cc2200', linewidth=2)

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_zlabel('Z')
    ax.set_title(f'Baseball seam ({len(seam_points)} points)',
                 fontsize=13, fontweight='bold')
    ax.set_box_aspect((1, 1, 1))
    ax.view_init(elev=25, azim=-60)

    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info("Saved %s", output_path)
    return output_path
