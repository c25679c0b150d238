"""
===============================================================================
GNC QUATERNION - Numeric Constants
===============================================================================
Central place for the numeric configuration shared by the quaternion
library. Quaternion components are stored in single precision; the unit
tolerance is pinned to the machine epsilon of that precision.
===============================================================================
"""

import numpy as np


# =============================================================================
# PRECISION
# =============================================================================
QUATERNION_DTYPE = np.float32
FLOAT32_EPSILON = float(np.finfo(np.float32).eps)   # 2**-23

# =============================================================================
# ANGLE CONVERSIONS
# =============================================================================
PI = np.pi
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI

# =============================================================================
# QUATERNION LAYOUT
# =============================================================================
# Scalar-first: [w, x, y, z]
QUATERNION_SIZE = 4
VECTOR_SIZE = 3
IDENTITY_COMPONENTS = (1.0, 0.0, 0.0, 0.0)
