import json
import logging
import os

import numpy as np

from sswsim.params import SSWParams, PLANE_FIELDS

logger = logging.getLogger(__name__)

# Required keys for SSW parameter JSON (all angles in degrees)
_ANGLE_KEYS = ["orient_x", "orient_y", "orient_z", "spin_direction", "gyro_angle"]
_REQUIRED_KEYS = _ANGLE_KEYS + list(PLANE_FIELDS)

ANGLE_LIMIT_DEG = 360.0


def load_ssw_params(path: str) -> SSWParams:
    """Load SSW parameters from a JSON file.

    Orientation, spin direction and gyro angle are stored in degrees, as the
    control panel shows them, and converted to radians here.

    Args:
        path: Path to parameter JSON file

    Returns:
        SSWParams

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If required keys are missing or values are not numbers
        json.JSONDecodeError: If the file is not valid JSON
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"SSW parameters file not found: {path}")

    with open(path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("SSW parameters file must contain a JSON object")

    # Validate required keys
    missing_keys = [key for key in _REQUIRED_KEYS if key not in data]
    if missing_keys:
        raise ValueError(f"Missing required keys in SSW parameters: {missing_keys}")

    values = {}
    for key in _REQUIRED_KEYS:
        value = data[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{key} must be a number, got {value!r}")
        if abs(value) > ANGLE_LIMIT_DEG:
            logger.warning("%s=%s is outside [-360, 360]; using it as given", key, value)
        values[key] = float(value)

    params = SSWParams.from_degrees(**values)
    if not params.is_ordered():
        logger.warning("SSW boundary angles are not front-to-back ordered: %s",
                       params.plane_degrees())
    return params


def save_ssw_params(params: SSWParams, path: str):
    """Write parameters to JSON in the same degree-based layout."""
    data = {key: float(np.degrees(getattr(params, key)))
            for key in _ANGLE_KEYS}
    data.update({key: float(getattr(params, key)) for key in PLANE_FIELDS})

    with open(path, 'w') as f:
        json.dump(data, f, indent=2)
