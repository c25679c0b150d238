"""
GNC Quaternion - single-precision quaternion algebra for 3D rotations.
"""

from gnc_quat.constants import (
    DEG2RAD,
    FLOAT32_EPSILON,
    IDENTITY_COMPONENTS,
    QUATERNION_DTYPE,
    RAD2DEG,
)
from gnc_quat.quaternion import Quaternion

__all__ = [
    'Quaternion',
    'QUATERNION_DTYPE',
    'FLOAT32_EPSILON',
    'IDENTITY_COMPONENTS',
    'DEG2RAD',
    'RAD2DEG',
]
