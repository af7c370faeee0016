"""Fixed constants shared by the seam model, the SSW engine and the display layer."""
import numpy as np

DEG2RAD = np.pi / 180.0
TWO_PI = 2.0 * np.pi

# Ball geometry (normalized units)
R = 1.0
SEAM_POINTS = 400
SEAM_TUBE_RADIUS = 0.02

# Seam curve harmonics
SEAM_K = 0.28   # 3rd harmonic, narrows the base wave
SEAM_M = 0.06   # 5th harmonic, flattens the lobes
SEAM_H = 1.8    # z height at frequency 2

# SSW sampling resolution
SSW_ROTATION_STEPS = 720   # one step per half degree
SSW_BINS = 72              # 5 degree angular bins
SSW_SLICE_COUNT = 50
SSW_EPSILON = SEAM_TUBE_RADIUS * 1.5

ARROW_WIDTH = np.pi / 4

# Gyro trend sweep (degrees)
TREND_GYRO_START = -90
TREND_GYRO_STOP = 90
TREND_GYRO_STEP = 5

# Below this asymmetry the force direction is not labelled
CLOCK_MIN_ASYMMETRY = 0.005
