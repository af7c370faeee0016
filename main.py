#!/usr/bin/env python3
"""Seam-Shifted Wake estimate: Main Entry Point

Computes the SSW asymmetry of a spinning baseball from its seam geometry,
orientation and spin parameters, and optionally sweeps the gyro angle.

Spin direction is taken exactly as written in the parameter file (degrees,
no offset applied).

Usage:
    python main.py --params config/ssw_params.json
    python main.py --params config/ssw_params.json --trend --plot
"""
import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

import numpy as np

from sswsim.constants import (SEAM_TUBE_RADIUS, SSW_ROTATION_STEPS, SSW_BINS,
                              SSW_SLICE_COUNT)
from sswsim.logging_config import setup_logging
from sswsim.pipeline import SSWPipeline
from sswsim.ssw.reducer import force_direction_label
from sswsim.utils.config import load_ssw_params

logger = logging.getLogger("sswsim.main")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Baseball Seam-Shifted Wake estimate")
    parser.add_argument("--params", default="config/ssw_params.json",
                        help="SSW parameters JSON (default: config/ssw_params.json)")
    parser.add_argument("--output", default="outputs/ssw",
                        help="Output directory (default: outputs/ssw)")
    parser.add_argument("--trend", action="store_true",
                        help="Also sweep the gyro angle from -90 to 90 degrees")
    parser.add_argument("--plot", action="store_true",
                        help="Save dashboard, trend and seam figures")
    parser.add_argument("--json", action="store_true",
                        help="Write the full result as JSON")
    parser.add_argument("--rotation-steps", type=int, default=SSW_ROTATION_STEPS,
                        help=f"Spin steps per revolution (default: {SSW_ROTATION_STEPS})")
    parser.add_argument("--bins", type=int, default=SSW_BINS,
                        help=f"Angular bins (default: {SSW_BINS})")
    parser.add_argument("--slices", type=int, default=SSW_SLICE_COUNT,
                        help=f"Slice planes (default: {SSW_SLICE_COUNT})")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")

    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        params = load_ssw_params(args.params)
    except Exception as e:
        logger.error("Error loading SSW parameters: %s", e)
        return 1

    output_dir = Path(args.output)
    if args.plot or args.json:
        output_dir.mkdir(parents=True, exist_ok=True)

    try:
        pipeline = SSWPipeline(rotation_steps=args.rotation_steps, bins=args.bins,
                               slice_count=args.slices)
        result = pipeline.compute(params)
    except Exception:
        logger.exception("Error computing SSW")
        return 1

    print("\n=== SSW Result ===")
    print(f"Asymmetry index:   {result.asymmetry_index:.4f}")
    print(f"SSW effect index:  {result.ssw_effect_index:.4f}")
    print(f"Hemisphere sums:   A={result.effect_sum_a:.4f}  B={result.effect_sum_b:.4f}")
    print(f"Force direction:   {force_direction_label(result)}")
    print(f"Max contribution:  {result.max_contribution:.4f}")

    trend = None
    if args.trend:
        trend = pipeline.compute_trend(params)
        peak = max(trend, key=lambda p: p.ssw_effect_index)
        print(f"\nGyro sweep: {len(trend)} angles, "
              f"peak SSW effect {peak.ssw_effect_index:.4f} at {peak.gyro:.0f} deg")

    if args.json:
        json_path = output_dir / "ssw_result.json"
        data = result.to_dict()
        if trend is not None:
            data["trend"] = [asdict(p) for p in trend]
        with open(json_path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info("Saved %s", json_path)

    if args.plot:
        from sswsim.visualization.plots import plot_polar_histogram, plot_trend, plot_seam_3d

        plot_polar_histogram(result, str(output_dir / "ssw_dashboard.png"),
                             spin_direction=params.spin_direction)
        plot_polar_histogram(result, str(output_dir / "ssw_contribution.png"),
                             spin_direction=params.spin_direction, mode="contribution")
        plot_seam_3d(pipeline.seam_model.get_embedded_points(SEAM_TUBE_RADIUS * 0.5),
                     str(output_dir / "seam_3d.png"))
        if trend is not None:
            plot_trend(trend, str(output_dir / "ssw_trend.png"),
                       current_gyro=float(np.degrees(params.gyro_angle)))

    return 0


if __name__ == "__main__":
    exit(main())
